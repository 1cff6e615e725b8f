"""Serializer rendering SVG element trees to markup text.

Rendering is a depth-first, pre-order walk. Attributes are written in
insertion order and every value variant has exactly one formatting rule,
implemented by ``format_attribute_value``. The tree is only read, so the same
element can be serialized repeatedly with identical output.
"""

import html
import logging
from typing import List, Optional, Union

from svg_definitions.shared import (
    SerializerConfig,
    SVGConfig,
    format_number,
    get_logger,
)
from svg_definitions.tree import (
    HSL,
    HSLA,
    RGB,
    RGBA,
    AttributeValue,
    Boolean,
    Color,
    ColorSpec,
    Length,
    NamedColor,
    Number,
    Percentage,
    RawString,
    Reference,
    StructuralError,
    SVGElement,
    Text,
    ViewBox,
    attribute_name,
)


# Parsers normalise literal whitespace in attribute values to spaces
_ATTRIBUTE_WHITESPACE = str.maketrans({"\n": "&#10;", "\r": "&#13;", "\t": "&#9;"})


def escape_attribute(text: str) -> str:
    """Escape text for use inside a double-quoted attribute value.

    Newlines, carriage returns and tabs become character references so the
    value reads back unchanged.
    """
    return html.escape(text, quote=True).translate(_ATTRIBUTE_WHITESPACE)


def escape_text(text: str) -> str:
    """Escape text for use as element content."""
    return html.escape(text, quote=False)


def _format_color(spec: ColorSpec) -> str:
    if isinstance(spec, RGB):
        return spec.hex
    if isinstance(spec, RGBA):
        return (
            f"rgba({spec.red},{spec.green},{spec.blue},"
            f"{format_number(spec.alpha)})"
        )
    if isinstance(spec, HSL):
        return f"hsl({spec.hue},{spec.saturation}%,{spec.lightness}%)"
    if isinstance(spec, HSLA):
        return (
            f"hsla({spec.hue},{spec.saturation}%,{spec.lightness}%,"
            f"{format_number(spec.alpha)})"
        )
    if isinstance(spec, NamedColor):
        return spec.value
    if isinstance(spec, str):
        return escape_attribute(spec)
    raise TypeError(f"Unsupported colour specification: {type(spec).__name__}")


def format_attribute_value(
    value: AttributeValue,
    number_precision: Optional[int] = None
) -> str:
    """Format an attribute value as the text placed between the quotes.

    Args:
        value: Attribute value variant to format
        number_precision: Optional fixed decimal places for numbers

    Returns:
        Attribute text, escaped unless the value is a ``RawString``
    """
    if isinstance(value, Number):
        return format_number(value.value, number_precision)
    if isinstance(value, Text):
        return escape_attribute(value.value)
    if isinstance(value, Color):
        return _format_color(value.value)
    if isinstance(value, Boolean):
        return "true" if value.value else "false"
    if isinstance(value, RawString):
        return value.value
    if isinstance(value, Percentage):
        return f"{format_number(value.value, number_precision)}%"
    if isinstance(value, Length):
        return f"{format_number(value.value, number_precision)}{value.unit.value}"
    if isinstance(value, ViewBox):
        return " ".join(
            format_number(number, number_precision)
            for number in (value.min_x, value.min_y, value.width, value.height)
        )
    if isinstance(value, Reference):
        return f"#{escape_attribute(value.identifier)}"
    raise TypeError(f"Unsupported attribute value: {type(value).__name__}")


class SVGSerializer:
    """Renders ``SVGElement`` trees to SVG markup.

    Output is compact by default. With ``SerializerConfig.indent`` set, each
    element is placed on its own line; elements carrying inner text are kept
    on a single line so their text content is not altered.
    """

    def __init__(
        self,
        config: Optional[Union[SerializerConfig, SVGConfig]] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize serializer.

        Args:
            config: Serializer configuration, or a full SVGConfig
            correlation_id: Optional correlation ID for request tracking
        """
        if isinstance(config, SVGConfig):
            config = config.serializer
        self.config = config or SerializerConfig()
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "svg_serializer")

    def serialize(self, element: SVGElement) -> str:
        """Render ``element`` and its subtree to text.

        Raises:
            TypeError: If ``element`` is not an SVGElement
            StructuralError: If a childless tag carries children or text
        """
        if not isinstance(element, SVGElement):
            raise TypeError("Only SVGElement instances can be serialized")

        output = self._render(element, 0, self.config.pretty)

        if self.logger.is_enabled_for(logging.DEBUG):
            self.logger.debug(
                "Serialized element tree",
                extra={
                    "root_tag": element.tag.value,
                    "element_count": element.element_count,
                    "output_length": len(output),
                    "pretty": self.config.pretty,
                }
            )

        return output

    def _render_attributes(self, element: SVGElement) -> str:
        precision = self.config.number_precision
        return "".join(
            f' {attribute_name(key)}="{format_attribute_value(value, precision)}"'
            for key, value in element.attributes.items()
        )

    def _render(self, element: SVGElement, depth: int, pretty: bool) -> str:
        tag = element.tag.value
        if element.tag.is_childless and (element.children or element.text):
            raise StructuralError(
                f"<{tag}> cannot contain children or text", element.tag
            )

        prefix = self.config.indent * depth if pretty else ""
        open_tag = f"{prefix}<{tag}{self._render_attributes(element)}"

        if not element.children and not element.text:
            if self.config.self_close_empty_containers or element.tag.is_childless:
                return f"{open_tag}/>"
            return f"{open_tag}></{tag}>"

        if element.text or not pretty:
            # Content stays on one line, so nested children are rendered compact
            body: List[str] = []
            if element.text:
                body.append(escape_text(element.text))
            body.extend(self._render(child, 0, False) for child in element.children)
            return f"{open_tag}>{''.join(body)}</{tag}>"

        lines = [f"{open_tag}>"]
        lines.extend(self._render(child, depth + 1, True) for child in element.children)
        lines.append(f"{prefix}</{tag}>")
        return "\n".join(lines)


def serialize(
    element: SVGElement,
    config: Optional[Union[SerializerConfig, SVGConfig]] = None,
    correlation_id: Optional[str] = None
) -> str:
    """Render an element tree to SVG markup.

    Args:
        element: Root of the tree to render
        config: Optional serializer configuration
        correlation_id: Optional correlation ID for request tracking

    Returns:
        Markup text for the tree

    Examples:
        >>> serialize(SVGElement.new(TagName.G))
        '<g/>'
    """
    return SVGSerializer(config, correlation_id).serialize(element)
