"""SVG Definitions.

Build SVG element trees in memory without string concatenation and render
them to well-formed markup.

Progressive API Disclosure:
- Level 1: Builder chain - SVGElement.new(), set(), append() and serialize()
- Level 2: Configured serializer - SVGSerializer with SerializerConfig/SVGConfig
- Level 3: Path data - PathData for the ``d`` attribute

Example:
    >>> triangle = (
    ...     SVGElement.new(TagName.PATH)
    ...     .set(Attribute.STROKE_WIDTH, 1)
    ...     .set(Attribute.FILL_COLOR, Color.named("transparent"))
    ...     .set(Attribute.PATH_DEFINITION, PathData()
    ...         .move_to((0, 0))
    ...         .line_to((10, 0))
    ...         .line_to((0, 10))
    ...         .line_to((0, 0))
    ...         .close_path())
    ... )
    >>> serialize(SVGElement.new(TagName.G).append(triangle))
    '<g><path stroke-width="1" fill="transparent" d="M 0.00 0.00 L 10.00 0.00 L 0.00 10.00 L 0.00 0.00 Z"/></g>'
"""

__version__ = "0.1.0"
__author__ = "SVG Definitions Team"

# Level 1: element tree model and serialization
from .path import PathData
from .serialization import SVGSerializer, serialize

# Configuration classes for advanced usage
from .shared.config import PathConfig, SerializerConfig, SVGConfig
from .tree import (
    HSL,
    HSLA,
    RGB,
    RGBA,
    AppendResult,
    Attribute,
    Boolean,
    Color,
    CustomAttribute,
    Length,
    LengthUnit,
    NamedColor,
    Number,
    Percentage,
    RawString,
    Reference,
    StructuralError,
    SVGElement,
    TagName,
    Text,
    ViewBox,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Element tree model
    "SVGElement",
    "TagName",
    "Attribute",
    "CustomAttribute",
    "StructuralError",
    "AppendResult",

    # Attribute values
    "Number",
    "Text",
    "Color",
    "Boolean",
    "RawString",
    "Percentage",
    "Length",
    "LengthUnit",
    "ViewBox",
    "Reference",
    "RGB",
    "RGBA",
    "HSL",
    "HSLA",
    "NamedColor",

    # Serialization
    "serialize",
    "SVGSerializer",

    # Level 3: Path data
    "PathData",

    # Configuration classes for advanced usage
    "SerializerConfig",
    "PathConfig",
    "SVGConfig",
]
