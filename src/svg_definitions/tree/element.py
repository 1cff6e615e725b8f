"""Element tree model for SVG documents.

``SVGElement`` is an immutable node: every builder call returns a new element
and leaves the receiver untouched, so a tree can be shared, branched from and
serialized any number of times.

Example:
    >>> triangle = (
    ...     SVGElement.new(TagName.PATH)
    ...     .set(Attribute.STROKE_WIDTH, 1)
    ...     .set(Attribute.FILL_COLOR, Color.named("transparent"))
    ... )
    >>> group = SVGElement.new(TagName.G).append(triangle)
    >>> len(group.children)
    1
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from svg_definitions.shared import (
    DiagnosticEntry,
    DiagnosticSeverity,
    get_logger,
)
from svg_definitions.tree.attributes import (
    Attribute,
    AttributeKey,
    CustomAttribute,
    attribute_name,
)
from svg_definitions.tree.tags import TagName
from svg_definitions.tree.values import (
    AttributeValue,
    coerce_value,
    require_xml_text,
)

logger = get_logger(__name__, component="svg_element")


class StructuralError(Exception):
    """Raised when a tree operation would break the tag's structural rules."""

    def __init__(
        self,
        message: str,
        parent_tag: TagName,
        child_tag: Optional[TagName] = None
    ) -> None:
        super().__init__(message)
        self.parent_tag = parent_tag
        self.child_tag = child_tag


def _check_key(key: Any) -> AttributeKey:
    if not isinstance(key, (Attribute, CustomAttribute)):
        raise TypeError(
            f"Attribute key must be an Attribute or CustomAttribute, "
            f"got {type(key).__name__}"
        )
    return key


@dataclass(frozen=True)
class SVGElement:
    """Single node of an SVG document tree.

    Holds a tag, an insertion-ordered mapping of attributes, an ordered tuple
    of children and optional inner text.
    """

    tag: TagName
    attributes: Mapping[AttributeKey, AttributeValue] = field(default_factory=dict)
    children: Tuple["SVGElement", ...] = ()
    text: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the element and freeze its attribute mapping."""
        if not isinstance(self.tag, TagName):
            raise TypeError("Element tag must be a TagName")

        attributes = {
            _check_key(key): coerce_value(value)
            for key, value in self.attributes.items()
        }
        object.__setattr__(self, "attributes", MappingProxyType(attributes))

        children = tuple(self.children)
        for child in children:
            if not isinstance(child, SVGElement):
                raise TypeError("Child must be an SVGElement instance")
        object.__setattr__(self, "children", children)

        if self.text is not None:
            require_xml_text(self.text, "Element text")

        if self.tag.is_childless and children:
            raise StructuralError(
                f"<{self.tag.value}> cannot contain child elements",
                self.tag,
                children[0].tag,
            )
        if self.tag.is_childless and self.text is not None:
            raise StructuralError(
                f"<{self.tag.value}> cannot contain text", self.tag
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SVGElement):
            return NotImplemented
        return (
            self.tag is other.tag
            and dict(self.attributes) == dict(other.attributes)
            and self.children == other.children
            and self.text == other.text
        )

    def __hash__(self) -> int:
        return hash(
            (self.tag, tuple(self.attributes.items()), self.children, self.text)
        )

    @classmethod
    def new(cls, tag: TagName) -> "SVGElement":
        """Create an element with no attributes and no children."""
        return cls(tag)

    def set(self, key: AttributeKey, value: Any) -> "SVGElement":
        """Return a copy with ``key`` mapped to ``value``.

        An existing mapping for ``key`` is replaced in place, keeping its
        position in the attribute order. Plain Python values are converted
        with ``coerce_value``.
        """
        attributes = dict(self.attributes)
        attributes[_check_key(key)] = coerce_value(value)
        return replace(self, attributes=attributes)

    def append(self, child: "SVGElement") -> "SVGElement":
        """Return a copy with ``child`` added as the last child.

        Raises:
            StructuralError: If this element's tag cannot hold children
            TypeError: If ``child`` is not an SVGElement
        """
        if not isinstance(child, SVGElement):
            raise TypeError("Child must be an SVGElement instance")

        if self.tag.is_childless:
            logger.warning(
                "Rejected child for childless tag",
                extra={"parent_tag": self.tag.value, "child_tag": child.tag.value}
            )
            raise StructuralError(
                f"<{self.tag.value}> cannot contain child elements "
                f"(tried to append <{child.tag.value}>)",
                self.tag,
                child.tag,
            )

        return replace(self, children=self.children + (child,))

    def try_append(self, child: "SVGElement") -> "AppendResult":
        """Append ``child`` and report failure in the result instead of raising.

        On failure the result holds this element unchanged together with the
        ``StructuralError`` and an ERROR diagnostic.
        """
        try:
            return AppendResult(element=self.append(child))
        except StructuralError as e:
            result = AppendResult(element=self, success=False, error=e)
            result.diagnostics.append(
                DiagnosticEntry(
                    severity=DiagnosticSeverity.ERROR,
                    message=str(e),
                    component="svg_element",
                    details={
                        "parent_tag": self.tag.value,
                        "child_tag": child.tag.value,
                    },
                )
            )
            return result

    def set_text(self, text: str) -> "SVGElement":
        """Return a copy with inner text set, trimmed of surrounding whitespace.

        Raises:
            StructuralError: If this element's tag cannot hold content
            ValueError: If ``text`` contains a character XML forbids
        """
        if self.tag.is_childless:
            raise StructuralError(
                f"<{self.tag.value}> cannot contain text", self.tag
            )
        return replace(self, text=require_xml_text(text, "Element text").strip())

    def remove(self, key: AttributeKey) -> "SVGElement":
        """Return a copy without the mapping for ``key``.

        Raises:
            KeyError: If the attribute is not set
        """
        if key not in self.attributes:
            raise KeyError(key)
        attributes = {k: v for k, v in self.attributes.items() if k != key}
        return replace(self, attributes=attributes)

    def remove_child(self, index: int) -> "SVGElement":
        """Return a copy without the child at ``index``; later children shift down.

        Raises:
            IndexError: If ``index`` is out of range
        """
        if not (-len(self.children) <= index < len(self.children)):
            raise IndexError("Child index out of range")
        children = list(self.children)
        del children[index]
        return replace(self, children=tuple(children))

    def get(
        self,
        key: AttributeKey,
        default: Optional[AttributeValue] = None
    ) -> Optional[AttributeValue]:
        """Get attribute value with optional default."""
        return self.attributes.get(key, default)

    def has_attribute(self, key: AttributeKey) -> bool:
        """Check if element has specific attribute."""
        return key in self.attributes

    def iter_elements(self) -> Iterator["SVGElement"]:
        """Iterate over this element and all descendants in document order."""
        yield self
        for child in self.children:
            yield from child.iter_elements()

    def find_all(self, tag: TagName) -> List["SVGElement"]:
        """Find all elements in this subtree with a matching tag."""
        return [element for element in self.iter_elements() if element.tag == tag]

    @property
    def element_count(self) -> int:
        """Number of elements in this subtree, including this one."""
        return sum(1 for _ in self.iter_elements())

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to dictionary representation."""
        result: Dict[str, Any] = {
            "tag": self.tag.value,
            "attributes": {
                attribute_name(key): value for key, value in self.attributes.items()
            },
        }

        if self.text:
            result["text"] = self.text

        if self.children:
            result["children"] = [child.to_dict() for child in self.children]

        return result


@dataclass
class AppendResult:
    """Outcome of ``SVGElement.try_append``."""

    element: SVGElement
    success: bool = True
    error: Optional[StructuralError] = None
    diagnostics: List[DiagnosticEntry] = field(default_factory=list)

    def unwrap(self) -> SVGElement:
        """Get the updated element, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.element
