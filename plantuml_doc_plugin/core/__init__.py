"""Core building blocks of the plugin options.

- errors: InvalidRawValue
- options: Option base class and its enum/boolean/number/string variants
- store: Settings store contract and an in-memory implementation
- config: Config file loading
- logging_config: Logging setup
"""

# Configuration
from .config import find_config, load_config

# Error handling
from .errors import InvalidRawValue

# Logging
from .logging_config import configure_logging

# Options
from .options import (
    BooleanOption,
    EnumOption,
    NumberOption,
    Option,
    StringOption,
)

# Settings stores
from .store import Declaration, MemorySettingsStore, SettingsStore

__all__ = [
    "BooleanOption",
    "Declaration",
    "EnumOption",
    "InvalidRawValue",
    "MemorySettingsStore",
    "NumberOption",
    "Option",
    "SettingsStore",
    "StringOption",
    "configure_logging",
    "find_config",
    "load_config",
]
