"""Typed attribute values for SVG elements.

Every value an element attribute can hold is one of the immutable variants
below. Callers state intent ("this is a number", "this is a colour") and the
serializer applies the formatting rule for that variant, so the same value
renders identically wherever it is used.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, Union

_HEX_COLOR_PATTERN = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_.:-]*$")
# Characters outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def _require_real(value: Any, name: str) -> float:
    """Check that ``value`` is a finite real number and return it as float."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{name} must be finite")
    return number


def _require_channel(value: Any, name: str, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if not (0 <= value <= upper):
        raise ValueError(f"{name} must be between 0 and {upper}")


def require_xml_text(value: Any, name: str) -> str:
    """Check that ``value`` is a string that XML 1.0 can represent.

    Raises:
        TypeError: If ``value`` is not a string
        ValueError: If ``value`` contains a character XML forbids
    """
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string")
    invalid = _INVALID_XML_CHARS.search(value)
    if invalid:
        raise ValueError(
            f"{name} contains a character not allowed in XML: "
            f"U+{ord(invalid.group()):04X}"
        )
    return value


def _require_alpha(value: Any) -> float:
    alpha = _require_real(value, "alpha")
    if not (0.0 <= alpha <= 1.0):
        raise ValueError("alpha must be between 0.0 and 1.0")
    return alpha


# Colour specifications


@dataclass(frozen=True)
class RGB:
    """Opaque colour from red, green and blue channels (0-255)."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _require_channel(self.red, "red", 255)
        _require_channel(self.green, "green", 255)
        _require_channel(self.blue, "blue", 255)

    @property
    def hex(self) -> str:
        """Canonical ``#RRGGBB`` form."""
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    @classmethod
    def from_hex(cls, text: str) -> "RGB":
        """Create a colour from ``#rgb`` or ``#rrggbb`` notation.

        Raises:
            ValueError: If ``text`` is not a hexadecimal colour
        """
        match = _HEX_COLOR_PATTERN.match(text)
        if not match:
            raise ValueError(f"Invalid hex colour: {text!r}")
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(digit * 2 for digit in digits)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


@dataclass(frozen=True)
class RGBA:
    """Colour with red, green and blue channels plus an alpha ratio."""

    red: int
    green: int
    blue: int
    alpha: float

    def __post_init__(self) -> None:
        _require_channel(self.red, "red", 255)
        _require_channel(self.green, "green", 255)
        _require_channel(self.blue, "blue", 255)
        object.__setattr__(self, "alpha", _require_alpha(self.alpha))


@dataclass(frozen=True)
class HSL:
    """Colour from hue (degrees) and saturation/lightness percentages."""

    hue: int
    saturation: int
    lightness: int

    def __post_init__(self) -> None:
        _require_channel(self.hue, "hue", 360)
        _require_channel(self.saturation, "saturation", 100)
        _require_channel(self.lightness, "lightness", 100)


@dataclass(frozen=True)
class HSLA:
    """HSL colour plus an alpha ratio."""

    hue: int
    saturation: int
    lightness: int
    alpha: float

    def __post_init__(self) -> None:
        _require_channel(self.hue, "hue", 360)
        _require_channel(self.saturation, "saturation", 100)
        _require_channel(self.lightness, "lightness", 100)
        object.__setattr__(self, "alpha", _require_alpha(self.alpha))


class NamedColor(Enum):
    """Colour keywords."""

    TRANSPARENT = "transparent"
    NONE = "none"
    CURRENT_COLOR = "currentColor"
    BLACK = "black"
    WHITE = "white"


ColorSpec = Union[RGB, RGBA, HSL, HSLA, NamedColor, str]
_COLOR_SPEC_TYPES = (RGB, RGBA, HSL, HSLA, NamedColor, str)


# Attribute value variants


@dataclass(frozen=True)
class Number:
    """Numeric attribute value, rendered as plain decimal text."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _require_real(self.value, "Number value"))


@dataclass(frozen=True)
class Text:
    """Free text attribute value, escaped on output."""

    value: str

    def __post_init__(self) -> None:
        require_xml_text(self.value, "Text value")


@dataclass(frozen=True)
class Color:
    """Colour attribute value.

    Wraps an ``RGB``/``RGBA``/``HSL``/``HSLA`` colour, a ``NamedColor``
    keyword, or a raw colour string.
    """

    value: ColorSpec

    def __post_init__(self) -> None:
        if not isinstance(self.value, _COLOR_SPEC_TYPES):
            raise TypeError(
                f"Unsupported colour specification: {type(self.value).__name__}"
            )
        if isinstance(self.value, str):
            require_xml_text(self.value, "Colour string")

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> "Color":
        """Shorthand for ``Color(RGB(red, green, blue))``."""
        return cls(RGB(red, green, blue))

    @classmethod
    def named(cls, name: Union[NamedColor, str]) -> "Color":
        """Create a colour from a keyword such as ``"transparent"``."""
        if isinstance(name, NamedColor):
            return cls(name)
        try:
            return cls(NamedColor(name))
        except ValueError:
            return cls(name)


@dataclass(frozen=True)
class Boolean:
    """Boolean attribute value, rendered as ``true`` or ``false``."""

    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError("Boolean value must be a bool")


@dataclass(frozen=True)
class RawString:
    """Pre-formatted attribute text emitted without escaping.

    The caller is responsible for keeping the output well-formed.
    """

    value: str

    def __post_init__(self) -> None:
        require_xml_text(self.value, "RawString value")


@dataclass(frozen=True)
class Percentage:
    """Percentage attribute value such as ``50%``."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "value", _require_real(self.value, "Percentage value")
        )


class LengthUnit(Enum):
    """Units a ``Length`` can be expressed in."""

    EM = "em"
    EX = "ex"
    PX = "px"
    IN = "in"
    CM = "cm"
    MM = "mm"
    PT = "pt"
    PC = "pc"
    PERCENTAGE = "%"


@dataclass(frozen=True)
class Length:
    """Length with a unit, such as ``10px`` or ``2.5em``."""

    value: float
    unit: LengthUnit = LengthUnit.PX

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _require_real(self.value, "Length value"))
        if not isinstance(self.unit, LengthUnit):
            raise TypeError("Length unit must be a LengthUnit")


@dataclass(frozen=True)
class ViewBox:
    """Value of the ``viewBox`` attribute."""

    min_x: float
    min_y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        for name in ("min_x", "min_y", "width", "height"):
            object.__setattr__(self, name, _require_real(getattr(self, name), name))
        if self.width < 0 or self.height < 0:
            raise ValueError("ViewBox width and height must be >= 0")


@dataclass(frozen=True)
class Reference:
    """Fragment reference to another element's ``id``, rendered as ``#id``."""

    identifier: str

    def __post_init__(self) -> None:
        if not isinstance(self.identifier, str):
            raise TypeError("Reference identifier must be a string")
        if not _IDENTIFIER_PATTERN.match(self.identifier):
            raise ValueError(f"Invalid identifier: {self.identifier!r}")


AttributeValue = Union[
    Number, Text, Color, Boolean, RawString, Percentage, Length, ViewBox, Reference
]
ATTRIBUTE_VALUE_TYPES = (
    Number, Text, Color, Boolean, RawString, Percentage, Length, ViewBox, Reference
)


def coerce_value(value: Any) -> AttributeValue:
    """Convert a plain Python value into an attribute value.

    Args:
        value: An attribute value, a bool, a number, a string, a colour
            specification, or an object providing ``to_attribute_value()``

    Returns:
        The matching attribute value variant

    Raises:
        TypeError: If the value cannot be represented as an attribute value
    """
    if isinstance(value, ATTRIBUTE_VALUE_TYPES):
        return value
    # bool is an int subclass, so it must be checked first
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, Real):
        return Number(value)
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, (RGB, RGBA, HSL, HSLA, NamedColor)):
        return Color(value)

    converter = getattr(value, "to_attribute_value", None)
    if callable(converter):
        converted = converter()
        if isinstance(converted, ATTRIBUTE_VALUE_TYPES):
            return converted

    raise TypeError(f"Cannot use {type(value).__name__} as an attribute value")
