"""Pydantic schema for the resolved plugin settings.

The snapshot is produced once all options have been read back and is
immutable from then on. Styling fields keep the sentinels of the option
declarations ("" for strings, 0 for font sizes, -1 for the border width,
FontStyle.UNDEFINED for font styles) meaning "let PlantUML decide".
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..constants import (
    ClassDiagramMemberVisibilityStyle,
    ClassDiagramPosition,
    ClassDiagramType,
    FontStyle,
    ImageFormat,
    ImageLocation,
)

# Values standing for "not set by the user" per styling field
UNSET_SENTINELS: dict[str, Any] = {
    "auto_class_diagram_box_background_color": "",
    "auto_class_diagram_box_border_color": "",
    "auto_class_diagram_box_border_radius": 0,
    "auto_class_diagram_box_border_width": -1,
    "auto_class_diagram_arrow_color": "",
    "auto_class_diagram_class_font_name": "",
    "auto_class_diagram_class_font_size": 0,
    "auto_class_diagram_class_font_style": FontStyle.UNDEFINED,
    "auto_class_diagram_class_font_color": "",
    "auto_class_diagram_class_attribute_font_name": "",
    "auto_class_diagram_class_attribute_font_size": 0,
    "auto_class_diagram_class_attribute_font_style": FontStyle.UNDEFINED,
    "auto_class_diagram_class_attribute_font_color": "",
}


class PlantUmlSettings(BaseModel):
    """Resolved values of all plugin options."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Output
    output_image_format: ImageFormat = Field(
        default=ImageFormat.PNG,
        description="Image format used for generated UML diagrams"
    )
    output_image_location: ImageLocation = Field(
        default=ImageLocation.LOCAL,
        description="Where generated UML diagrams are stored"
    )

    # Automatic class diagrams
    auto_class_diagram_type: ClassDiagramType = Field(
        default=ClassDiagramType.NONE,
        description="Whether and how class diagrams are created automatically"
    )
    auto_class_diagram_position: ClassDiagramPosition = Field(
        default=ClassDiagramPosition.BELOW,
        description="Where on the page the class diagram is put"
    )
    auto_class_diagram_hide_empty_members: bool = Field(
        default=True,
        description="Hide empty properties and methods"
    )
    auto_class_diagram_top_down_layout_max_siblings: int = Field(
        default=6,
        description="Max number of siblings before switching to left-to-right layout"
    )
    auto_class_diagram_member_visibility_style: ClassDiagramMemberVisibilityStyle = Field(
        default=ClassDiagramMemberVisibilityStyle.ICON,
        description="Render member visibility as text or icons"
    )
    auto_class_diagram_hide_circled_char: bool = False
    auto_class_diagram_hide_shadow: bool = False

    # Styling
    auto_class_diagram_box_background_color: str = ""
    auto_class_diagram_box_border_color: str = ""
    auto_class_diagram_box_border_radius: int = 0
    auto_class_diagram_box_border_width: int = -1
    auto_class_diagram_arrow_color: str = ""
    auto_class_diagram_class_font_name: str = ""
    auto_class_diagram_class_font_size: int = 0
    auto_class_diagram_class_font_style: FontStyle = FontStyle.UNDEFINED
    auto_class_diagram_class_font_color: str = ""
    auto_class_diagram_class_attribute_font_name: str = ""
    auto_class_diagram_class_attribute_font_size: int = 0
    auto_class_diagram_class_attribute_font_style: FontStyle = FontStyle.UNDEFINED
    auto_class_diagram_class_attribute_font_color: str = ""

    def is_unset(self, field: str) -> bool:
        """Return True if a styling field still holds its "not set" sentinel.

        Raises:
            KeyError: If the field has no sentinel
        """
        return getattr(self, field) == UNSET_SENTINELS[field]


def validate_settings(data: dict[str, Any]) -> PlantUmlSettings:
    """Validate a mapping of resolved values.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return PlantUmlSettings.model_validate(data)
