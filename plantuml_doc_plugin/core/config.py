"""Configuration file loading.

Raw option values can be kept in a ``.plantuml-doc.yml`` file at the
project root (or ``plantuml-doc.json``). The values are handed to a
settings store untouched; validation happens when the options read them
back.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from ..constants import CONFIG_FILE_NAMES, CONFIG_SECTION

logger = logging.getLogger(__name__)


def find_config(project_path: Path) -> Path | None:
    """Return the first config file present in the project root."""
    for name in CONFIG_FILE_NAMES:
        config_path = project_path / name
        if config_path.is_file():
            return config_path
    return None


def load_config(project_path: Path) -> dict[str, Any] | None:
    """Load the raw option values from the project's config file.

    Options nested under a ``plantuml:`` section are unwrapped.

    Returns:
        Mapping of option key to raw value, or None if there is no usable file
    """
    config_path = find_config(project_path)
    if config_path is None:
        return None

    try:
        # JSON documents are valid YAML; BaseLoader keeps every scalar a string
        with open(config_path, encoding='utf-8') as f:
            data = yaml.load(f, Loader=yaml.BaseLoader)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.warning("Failed to load config from %s: %s", config_path, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a mapping of option keys", config_path)
        return None

    section = data.get(CONFIG_SECTION)
    if isinstance(section, dict):
        return section
    return data
