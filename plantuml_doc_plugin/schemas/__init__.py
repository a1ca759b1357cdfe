"""Pydantic schemas of the plugin."""

from .settings import UNSET_SENTINELS, PlantUmlSettings, validate_settings

__all__ = [
    "PlantUmlSettings",
    "UNSET_SENTINELS",
    "validate_settings",
]
