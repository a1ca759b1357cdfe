"""PlantUML documentation plugin options.

Typed, validated configuration of a documentation generator extension that
produces PlantUML diagrams.
"""

from .constants import (
    ClassDiagramMemberVisibilityStyle,
    ClassDiagramPosition,
    ClassDiagramType,
    FontStyle,
    ImageFormat,
    ImageLocation,
    OptionKey,
)
from .core import (
    BooleanOption,
    EnumOption,
    InvalidRawValue,
    MemorySettingsStore,
    NumberOption,
    Option,
    SettingsStore,
    StringOption,
)
from .plugin_options import OptionSetState, PlantUmlPluginOptions
from .schemas import PlantUmlSettings

__version__ = "1.0.0"

__all__ = [
    "BooleanOption",
    "ClassDiagramMemberVisibilityStyle",
    "ClassDiagramPosition",
    "ClassDiagramType",
    "EnumOption",
    "FontStyle",
    "ImageFormat",
    "ImageLocation",
    "InvalidRawValue",
    "MemorySettingsStore",
    "NumberOption",
    "Option",
    "OptionKey",
    "OptionSetState",
    "PlantUmlPluginOptions",
    "PlantUmlSettings",
    "SettingsStore",
    "StringOption",
]
