"""Options of the PlantUML documentation plugin.

The option set is driven in two passes by the host tool:

1. ``register_all`` declares every option to the settings store at startup.
2. ``resolve_all`` reads the raw values back once the store has ingested
   the user's input and returns an immutable ``PlantUmlSettings`` snapshot.

Options are independent of each other; an invalid value for one option
falls back to that option's default and never affects the others.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Any

from .constants import (
    FONT_STYLE_TOKENS,
    ClassDiagramMemberVisibilityStyle,
    ClassDiagramPosition,
    ClassDiagramType,
    FontStyle,
    ImageFormat,
    ImageLocation,
    OptionKey,
)
from .core.config import load_config
from .core.options import BooleanOption, EnumOption, NumberOption, Option, StringOption
from .core.store import MemorySettingsStore, SettingsStore
from .schemas.settings import PlantUmlSettings

logger = logging.getLogger(__name__)


class OptionSetState(str, Enum):
    """Lifecycle of a plugin option set."""
    UNREGISTERED = "unregistered"
    REGISTERED = "registered"
    RESOLVED = "resolved"


class PlantUmlPluginOptions:
    """Class storing the options of the plugin."""

    def __init__(self):
        self.state = OptionSetState.UNREGISTERED

        # Output
        self.output_image_format_option = EnumOption(
            OptionKey.FORMAT.value,
            "png|svg",
            ImageFormat.PNG,
            {"png": ImageFormat.PNG, "svg": ImageFormat.SVG},
        )
        self.output_image_location_option = EnumOption(
            OptionKey.LOCATION.value,
            "local|remote",
            ImageLocation.LOCAL,
            {"local": ImageLocation.LOCAL, "remote": ImageLocation.REMOTE},
        )

        # Automatic class diagrams
        self.auto_class_diagram_type_option = EnumOption(
            OptionKey.CLASS_DIAGRAM_TYPE.value,
            "none|simple|detailed",
            ClassDiagramType.NONE,
            {
                "none": ClassDiagramType.NONE,
                "simple": ClassDiagramType.SIMPLE,
                "detailed": ClassDiagramType.DETAILED,
            },
        )
        self.auto_class_diagram_position_option = EnumOption(
            OptionKey.CLASS_DIAGRAM_POSITION.value,
            "above|below",
            ClassDiagramPosition.BELOW,
            {"above": ClassDiagramPosition.ABOVE, "below": ClassDiagramPosition.BELOW},
        )
        self.auto_class_diagram_hide_empty_members_option = BooleanOption(
            OptionKey.HIDE_EMPTY_MEMBERS.value,
            "true|false",
            True,
        )
        self.auto_class_diagram_top_down_layout_max_siblings_option = NumberOption(
            OptionKey.TOP_DOWN_LAYOUT_MAX_SIBLINGS.value,
            "An integer indicating the max number of siblings to be used with the default top down layout.",
            6,
            min_value=0,
            integer=True,
        )
        self.auto_class_diagram_member_visibility_style_option = EnumOption(
            OptionKey.MEMBER_VISIBILITY_STYLE.value,
            "text|icon",
            ClassDiagramMemberVisibilityStyle.ICON,
            {
                "text": ClassDiagramMemberVisibilityStyle.TEXT,
                "icon": ClassDiagramMemberVisibilityStyle.ICON,
            },
        )
        self.auto_class_diagram_hide_circled_char_option = BooleanOption(
            OptionKey.HIDE_CIRCLED_CHAR.value,
            "true|false",
            False,
        )
        self.auto_class_diagram_hide_shadow_option = BooleanOption(
            OptionKey.HIDE_SHADOW.value,
            "true|false",
            False,
        )

        # Styling
        self.auto_class_diagram_box_background_color_option = StringOption(
            OptionKey.BOX_BACKGROUND_COLOR.value,
            "The background color used for boxes in the class diagram.",
            "",
        )
        self.auto_class_diagram_box_border_color_option = StringOption(
            OptionKey.BOX_BORDER_COLOR.value,
            "The border color used for boxes in the class diagram.",
            "",
        )
        self.auto_class_diagram_box_border_radius_option = NumberOption(
            OptionKey.BOX_BORDER_RADIUS.value,
            "An integer indicating the border radius of boxes in the class diagram.",
            0,
            min_value=0,
            integer=True,
        )
        self.auto_class_diagram_box_border_width_option = NumberOption(
            OptionKey.BOX_BORDER_WIDTH.value,
            "An integer indicating the border width of boxes in the class diagram.",
            -1,
            min_value=0,
            integer=True,
        )
        self.auto_class_diagram_arrow_color_option = StringOption(
            OptionKey.ARROW_COLOR.value,
            "The color used for arrows in the class diagram.",
            "",
        )
        self.auto_class_diagram_class_font_name_option = StringOption(
            OptionKey.CLASS_FONT_NAME.value,
            "The font used for class names in the class diagram.",
            "",
        )
        self.auto_class_diagram_class_font_size_option = NumberOption(
            OptionKey.CLASS_FONT_SIZE.value,
            "An integer indicating the font size of class names in the class diagram.",
            0,
            min_value=0,
            integer=True,
        )
        self.auto_class_diagram_class_font_style_option = EnumOption(
            OptionKey.CLASS_FONT_STYLE.value,
            "normal|plain|italic|bold",
            FontStyle.UNDEFINED,
            FONT_STYLE_TOKENS,
        )
        self.auto_class_diagram_class_font_color_option = StringOption(
            OptionKey.CLASS_FONT_COLOR.value,
            "The font color used for class names in the class diagram.",
            "",
        )
        self.auto_class_diagram_class_attribute_font_name_option = StringOption(
            OptionKey.CLASS_ATTRIBUTE_FONT_NAME.value,
            "The font used for class attributes in the class diagram.",
            "",
        )
        self.auto_class_diagram_class_attribute_font_size_option = NumberOption(
            OptionKey.CLASS_ATTRIBUTE_FONT_SIZE.value,
            "An integer indicating the font size of class attributes in the class diagram.",
            0,
            min_value=0,
            integer=True,
        )
        self.auto_class_diagram_class_attribute_font_style_option = EnumOption(
            OptionKey.CLASS_ATTRIBUTE_FONT_STYLE.value,
            "normal|plain|italic|bold",
            FontStyle.UNDEFINED,
            FONT_STYLE_TOKENS,
        )
        self.auto_class_diagram_class_attribute_font_color_option = StringOption(
            OptionKey.CLASS_ATTRIBUTE_FONT_COLOR.value,
            "The font color used for class attributes in the class diagram.",
            "",
        )

    @classmethod
    def from_config(cls, project_path: Path) -> "PlantUmlPluginOptions":
        """Build an option set resolved from the project's config file.

        Args:
            project_path: Project root holding ``.plantuml-doc.yml``

        Returns:
            A resolved option set (all defaults if no config file exists)
        """
        store = MemorySettingsStore()
        plugin_options = cls()
        plugin_options.register_all(store)

        raw_values = load_config(project_path)
        if raw_values:
            store.update(raw_values)
            for key in store.undeclared_keys():
                logger.warning("Unknown option '%s' in config of %s", key, project_path)

        plugin_options.resolve_all(store)
        return plugin_options

    @property
    def options(self) -> tuple[Option[Any], ...]:
        """All options in declared order."""
        return (
            self.output_image_format_option,
            self.output_image_location_option,
            self.auto_class_diagram_type_option,
            self.auto_class_diagram_position_option,
            self.auto_class_diagram_hide_empty_members_option,
            self.auto_class_diagram_top_down_layout_max_siblings_option,
            self.auto_class_diagram_member_visibility_style_option,
            self.auto_class_diagram_hide_circled_char_option,
            self.auto_class_diagram_hide_shadow_option,
            self.auto_class_diagram_box_background_color_option,
            self.auto_class_diagram_box_border_color_option,
            self.auto_class_diagram_box_border_radius_option,
            self.auto_class_diagram_box_border_width_option,
            self.auto_class_diagram_arrow_color_option,
            self.auto_class_diagram_class_font_name_option,
            self.auto_class_diagram_class_font_size_option,
            self.auto_class_diagram_class_font_style_option,
            self.auto_class_diagram_class_font_color_option,
            self.auto_class_diagram_class_attribute_font_name_option,
            self.auto_class_diagram_class_attribute_font_size_option,
            self.auto_class_diagram_class_attribute_font_style_option,
            self.auto_class_diagram_class_attribute_font_color_option,
        )

    def register_all(self, store: SettingsStore) -> None:
        """Declare every option to the settings store.

        Args:
            store: The host tool's settings store
        """
        for option in self.options:
            option.register(store)
        if self.state != OptionSetState.RESOLVED:
            self.state = OptionSetState.REGISTERED

    def resolve_all(self, store: SettingsStore) -> PlantUmlSettings:
        """Read the values of all options back from the settings store.

        Args:
            store: The settings store after it ingested the user's input

        Returns:
            Snapshot of the resolved values
        """
        for option in self.options:
            option.read_back(store)
        self.state = OptionSetState.RESOLVED
        return self.settings()

    def settings(self) -> PlantUmlSettings:
        """Return a snapshot of the current option values."""
        return PlantUmlSettings(
            output_image_format=self.output_image_format,
            output_image_location=self.output_image_location,
            auto_class_diagram_type=self.auto_class_diagram_type,
            auto_class_diagram_position=self.auto_class_diagram_position,
            auto_class_diagram_hide_empty_members=self.auto_class_diagram_hide_empty_members,
            auto_class_diagram_top_down_layout_max_siblings=self.auto_class_diagram_top_down_layout_max_siblings,
            auto_class_diagram_member_visibility_style=self.auto_class_diagram_member_visibility_style,
            auto_class_diagram_hide_circled_char=self.auto_class_diagram_hide_circled_char,
            auto_class_diagram_hide_shadow=self.auto_class_diagram_hide_shadow,
            auto_class_diagram_box_background_color=self.auto_class_diagram_box_background_color,
            auto_class_diagram_box_border_color=self.auto_class_diagram_box_border_color,
            auto_class_diagram_box_border_radius=self.auto_class_diagram_box_border_radius,
            auto_class_diagram_box_border_width=self.auto_class_diagram_box_border_width,
            auto_class_diagram_arrow_color=self.auto_class_diagram_arrow_color,
            auto_class_diagram_class_font_name=self.auto_class_diagram_class_font_name,
            auto_class_diagram_class_font_size=self.auto_class_diagram_class_font_size,
            auto_class_diagram_class_font_style=self.auto_class_diagram_class_font_style,
            auto_class_diagram_class_font_color=self.auto_class_diagram_class_font_color,
            auto_class_diagram_class_attribute_font_name=self.auto_class_diagram_class_attribute_font_name,
            auto_class_diagram_class_attribute_font_size=self.auto_class_diagram_class_attribute_font_size,
            auto_class_diagram_class_attribute_font_style=self.auto_class_diagram_class_attribute_font_style,
            auto_class_diagram_class_attribute_font_color=self.auto_class_diagram_class_attribute_font_color,
        )

    def help_text(self) -> str:
        """Return one help line per option in declared order."""
        return "\n".join(option.describe() for option in self.options)

    # ------------------------------------------------------------------------
    # Getters
    # ------------------------------------------------------------------------

    @property
    def output_image_format(self) -> ImageFormat:
        """The image format used for generating UML diagrams."""
        return self.output_image_format_option.value

    @property
    def output_image_location(self) -> ImageLocation:
        """The location where the generated UML diagrams should be stored."""
        return self.output_image_location_option.value

    @property
    def auto_class_diagram_type(self) -> ClassDiagramType:
        """Whether UML class diagrams should be created automatically."""
        return self.auto_class_diagram_type_option.value

    @property
    def auto_class_diagram_position(self) -> ClassDiagramPosition:
        """Where on the page the automatically created class diagram should be put."""
        return self.auto_class_diagram_position_option.value

    @property
    def auto_class_diagram_hide_empty_members(self) -> bool:
        """Whether to hide empty properties and methods in the class diagram."""
        return self.auto_class_diagram_hide_empty_members_option.value

    @property
    def auto_class_diagram_top_down_layout_max_siblings(self) -> int:
        """The boundary before switching from top->down to left->right direction."""
        return self.auto_class_diagram_top_down_layout_max_siblings_option.value

    @property
    def auto_class_diagram_member_visibility_style(self) -> ClassDiagramMemberVisibilityStyle:
        """How member visibility is rendered in the class diagram."""
        return self.auto_class_diagram_member_visibility_style_option.value

    @property
    def auto_class_diagram_hide_circled_char(self) -> bool:
        """Whether to hide the circled character in front of class names."""
        return self.auto_class_diagram_hide_circled_char_option.value

    @property
    def auto_class_diagram_hide_shadow(self) -> bool:
        """Whether to hide the shadows in the class diagram."""
        return self.auto_class_diagram_hide_shadow_option.value

    @property
    def auto_class_diagram_box_background_color(self) -> str:
        return self.auto_class_diagram_box_background_color_option.value

    @property
    def auto_class_diagram_box_border_color(self) -> str:
        return self.auto_class_diagram_box_border_color_option.value

    @property
    def auto_class_diagram_box_border_radius(self) -> int:
        return self.auto_class_diagram_box_border_radius_option.value

    @property
    def auto_class_diagram_box_border_width(self) -> int:
        """Border width of boxes; -1 if not set."""
        return self.auto_class_diagram_box_border_width_option.value

    @property
    def auto_class_diagram_arrow_color(self) -> str:
        return self.auto_class_diagram_arrow_color_option.value

    @property
    def auto_class_diagram_class_font_name(self) -> str:
        return self.auto_class_diagram_class_font_name_option.value

    @property
    def auto_class_diagram_class_font_size(self) -> int:
        """Font size of class names; 0 if not set."""
        return self.auto_class_diagram_class_font_size_option.value

    @property
    def auto_class_diagram_class_font_style(self) -> FontStyle:
        return self.auto_class_diagram_class_font_style_option.value

    @property
    def auto_class_diagram_class_font_color(self) -> str:
        return self.auto_class_diagram_class_font_color_option.value

    @property
    def auto_class_diagram_class_attribute_font_name(self) -> str:
        return self.auto_class_diagram_class_attribute_font_name_option.value

    @property
    def auto_class_diagram_class_attribute_font_size(self) -> int:
        """Font size of class attributes; 0 if not set."""
        return self.auto_class_diagram_class_attribute_font_size_option.value

    @property
    def auto_class_diagram_class_attribute_font_style(self) -> FontStyle:
        return self.auto_class_diagram_class_attribute_font_style_option.value

    @property
    def auto_class_diagram_class_attribute_font_color(self) -> str:
        return self.auto_class_diagram_class_attribute_font_color_option.value
