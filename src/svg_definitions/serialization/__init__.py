"""Serializer rendering element trees to SVG markup."""

from .serializer import (
    SVGSerializer,
    escape_attribute,
    escape_text,
    format_attribute_value,
    serialize,
)

__all__ = [
    "SVGSerializer",
    "escape_attribute",
    "escape_text",
    "format_attribute_value",
    "serialize",
]
