"""Constants and enums for the PlantUML documentation plugin."""

from enum import Enum

# Config files searched in the project root, in order
CONFIG_FILE_NAMES = [".plantuml-doc.yml", ".plantuml-doc.yaml", "plantuml-doc.json"]

# Section name used when the options live inside a shared config file
CONFIG_SECTION = "plantuml"


class ImageFormat(str, Enum):
    """Supported image output formats."""
    PNG = "png"
    SVG = "svg"


class ImageLocation(Enum):
    """Supported image output locations."""
    LOCAL = 1
    REMOTE = 2


class ClassDiagramType(Enum):
    """Supported class diagram types when automatically generating class diagrams."""
    NONE = 1
    SIMPLE = 2
    DETAILED = 3


class ClassDiagramPosition(Enum):
    """Supported class diagram positions when automatically generating class diagrams."""
    ABOVE = 1
    BELOW = 2


class ClassDiagramMemberVisibilityStyle(Enum):
    """How member visibility is rendered in class diagrams."""
    TEXT = 1
    ICON = 2


class FontStyle(str, Enum):
    """Font styles understood by PlantUML.

    UNDEFINED is never produced from user input; it leaves the style to PlantUML.
    """
    UNDEFINED = ""
    NORMAL = "normal"
    PLAIN = "plain"
    ITALIC = "italic"
    BOLD = "bold"


class OptionKey(str, Enum):
    """Keys under which the plugin options are declared."""
    FORMAT = "umlFormat"
    LOCATION = "umlLocation"
    CLASS_DIAGRAM_TYPE = "umlClassDiagramType"
    CLASS_DIAGRAM_POSITION = "umlClassDiagramPosition"
    HIDE_EMPTY_MEMBERS = "umlClassDiagramHideEmptyMembers"
    TOP_DOWN_LAYOUT_MAX_SIBLINGS = "umlClassDiagramTopDownLayoutMaxSiblings"
    MEMBER_VISIBILITY_STYLE = "umlClassDiagramMemberVisibilityStyle"
    HIDE_CIRCLED_CHAR = "umlClassDiagramHideCircledChar"
    HIDE_SHADOW = "umlClassDiagramHideShadow"
    BOX_BACKGROUND_COLOR = "umlClassDiagramBoxBackgroundColor"
    BOX_BORDER_COLOR = "umlClassDiagramBoxBorderColor"
    BOX_BORDER_RADIUS = "umlClassDiagramBoxBorderRadius"
    BOX_BORDER_WIDTH = "umlClassDiagramBoxBorderWidth"
    ARROW_COLOR = "umlClassDiagramArrowColor"
    CLASS_FONT_NAME = "umlClassDiagramClassFontName"
    CLASS_FONT_SIZE = "umlClassDiagramClassFontSize"
    CLASS_FONT_STYLE = "umlClassDiagramClassFontStyle"
    CLASS_FONT_COLOR = "umlClassDiagramClassFontColor"
    CLASS_ATTRIBUTE_FONT_NAME = "umlClassDiagramClassAttributeFontName"
    CLASS_ATTRIBUTE_FONT_SIZE = "umlClassDiagramClassAttributeFontSize"
    CLASS_ATTRIBUTE_FONT_STYLE = "umlClassDiagramClassAttributeFontStyle"
    CLASS_ATTRIBUTE_FONT_COLOR = "umlClassDiagramClassAttributeFontColor"


# Tokens accepted for each font style option, in declared order
FONT_STYLE_TOKENS = {
    "normal": FontStyle.NORMAL,
    "plain": FontStyle.PLAIN,
    "italic": FontStyle.ITALIC,
    "bold": FontStyle.BOLD,
}
