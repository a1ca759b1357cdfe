"""Logging setup for hosts embedding the plugin options.

Option fallbacks and config file problems are reported as warnings on the
``plantuml_doc_plugin`` logger. Hosts that configure logging themselves do
not need this module.
"""

import logging

PACKAGE_LOGGER = "plantuml_doc_plugin"
DEFAULT_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def configure_logging(level: int = logging.INFO, fmt: str | None = None) -> logging.Logger:
    """Route the plugin's log records to stderr.

    Installs one stream handler on the package logger; calling again only
    changes the level.

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
