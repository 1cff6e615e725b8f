"""Element tree model for SVG document construction.

Key Components:
    SVGElement: Immutable element node with builder-style operations
    TagName: Closed vocabulary of element tags and their structural rules
    Attribute / CustomAttribute: Attribute keys
    Number, Text, Color, Boolean, RawString, ...: Typed attribute values
    StructuralError: Raised when a childless tag is given children
"""

from .attributes import (
    Attribute,
    AttributeKey,
    CustomAttribute,
    attribute_name,
)
from .element import (
    AppendResult,
    StructuralError,
    SVGElement,
)
from .tags import TagName
from .values import (
    HSL,
    HSLA,
    RGB,
    RGBA,
    AttributeValue,
    Boolean,
    Color,
    ColorSpec,
    Length,
    LengthUnit,
    NamedColor,
    Number,
    Percentage,
    RawString,
    Reference,
    Text,
    ViewBox,
    coerce_value,
    require_xml_text,
)

__all__ = [
    "Attribute",
    "AttributeKey",
    "CustomAttribute",
    "attribute_name",
    "AppendResult",
    "StructuralError",
    "SVGElement",
    "TagName",
    "HSL",
    "HSLA",
    "RGB",
    "RGBA",
    "AttributeValue",
    "Boolean",
    "Color",
    "ColorSpec",
    "Length",
    "LengthUnit",
    "NamedColor",
    "Number",
    "Percentage",
    "RawString",
    "Reference",
    "Text",
    "ViewBox",
    "coerce_value",
    "require_xml_text",
]
