"""Attribute keys that can be set on an SVG element.

Keys come from the closed ``Attribute`` enumeration. ``CustomAttribute`` covers
any other well-formed attribute name, such as ``data-*`` attributes.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

# XML Name production restricted to the ASCII range plus namespace prefixes.
_ATTRIBUTE_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_.:-]*$")


class Attribute(Enum):
    """Known SVG attribute names."""

    # Presentation
    STROKE_WIDTH = "stroke-width"
    STROKE_COLOR = "stroke"
    STROKE_OPACITY = "stroke-opacity"
    STROKE_LINECAP = "stroke-linecap"
    STROKE_LINEJOIN = "stroke-linejoin"
    STROKE_DASHARRAY = "stroke-dasharray"
    FILL_COLOR = "fill"
    FILL_OPACITY = "fill-opacity"
    OPACITY = "opacity"
    TRANSFORM = "transform"
    CLIP_PATH = "clip-path"
    CLASS = "class"
    STYLE = "style"

    # Geometry
    CENTER_X = "cx"
    CENTER_Y = "cy"
    POSITION_X = "x"
    POSITION_Y = "y"
    POSITION_X1 = "x1"
    POSITION_X2 = "x2"
    POSITION_Y1 = "y1"
    POSITION_Y2 = "y2"
    RADIUS = "r"
    RADIUS_X = "rx"
    RADIUS_Y = "ry"
    WIDTH = "width"
    HEIGHT = "height"
    POINTS = "points"
    PATH_DEFINITION = "d"
    PATH_LENGTH = "pathLength"

    # Document
    IDENTIFIER = "id"
    VIEW_BOX = "viewBox"
    PRESERVE_ASPECT_RATIO = "preserveAspectRatio"
    REFERENCE = "href"
    XMLNS = "xmlns"
    VERSION = "version"

    # Animation
    ATTRIBUTE_NAME = "attributeName"
    VALUES = "values"
    BEGIN = "begin"
    END = "end"
    MIN = "min"
    MAX = "max"
    REPEAT_COUNT = "repeatCount"
    REPEAT_DURATION = "repeatDur"
    ADDITIVE = "additive"
    ACCUMULATIVE = "accumulate"
    DURATION = "dur"
    ANIMATE_PATH = "path"
    CALCULATION_MODE = "calcMode"
    KEY_TIMES = "keyTimes"
    KEY_SPLINES = "keySplines"
    ANIMATION_FROM = "from"
    ANIMATION_TO = "to"
    ANIMATION_BY = "by"
    ANIMATE_ROTATE = "rotate"

    # Gradients
    GRADIENT_TRANSFORM = "gradientTransform"
    GRADIENT_UNITS = "gradientUnits"
    SPREAD_METHOD = "spreadMethod"
    OFFSET = "offset"
    STOP_COLOR = "stop-color"
    STOP_OPACITY = "stop-opacity"


_KNOWN_ATTRIBUTES = {attribute.value: attribute for attribute in Attribute}


@dataclass(frozen=True)
class CustomAttribute:
    """Attribute key outside the known vocabulary.

    Names already covered by ``Attribute`` are rejected, so every rendered
    name maps to exactly one key.
    """

    name: str

    def __post_init__(self) -> None:
        """Validate the attribute name."""
        if not isinstance(self.name, str):
            raise TypeError("Attribute name must be a string")
        if not _ATTRIBUTE_NAME_PATTERN.match(self.name):
            raise ValueError(f"Invalid attribute name: {self.name!r}")
        known = _KNOWN_ATTRIBUTES.get(self.name)
        if known is not None:
            raise ValueError(
                f"{self.name!r} is a known attribute, use Attribute.{known.name}"
            )


AttributeKey = Union[Attribute, CustomAttribute]


def attribute_name(key: AttributeKey) -> str:
    """Get the name an attribute key renders as."""
    if isinstance(key, Attribute):
        return key.value
    if isinstance(key, CustomAttribute):
        return key.name
    raise TypeError(f"Unsupported attribute key: {type(key).__name__}")
