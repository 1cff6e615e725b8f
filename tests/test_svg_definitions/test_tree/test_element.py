"""Comprehensive tests for the element tree model.

Tests builder semantics, structural rules, copy-on-write behaviour and tree
navigation for SVGElement.
"""

import logging

import pytest

from svg_definitions.shared import DiagnosticSeverity
from svg_definitions.tree import (
    AppendResult,
    Attribute,
    Color,
    CustomAttribute,
    Number,
    StructuralError,
    SVGElement,
    TagName,
    Text,
)


class TestElementCreation:
    """Test constructing elements."""

    def test_new_element_is_empty(self) -> None:
        """Test new() produces no attributes, children or text."""
        element = SVGElement.new(TagName.G)

        assert element.tag is TagName.G
        assert dict(element.attributes) == {}
        assert element.children == ()
        assert element.text is None

    def test_tag_must_be_tag_name(self) -> None:
        """Test plain strings are not accepted as tags."""
        with pytest.raises(TypeError, match="Element tag must be a TagName"):
            SVGElement("g")  # type: ignore[arg-type]

    def test_constructor_enforces_childless_rule(self) -> None:
        """Test direct construction cannot bypass the structural rule."""
        with pytest.raises(StructuralError, match="cannot contain child elements"):
            SVGElement(TagName.PATH, children=(SVGElement(TagName.G),))

    def test_constructor_coerces_attribute_values(self) -> None:
        """Test attribute mappings given to the constructor are normalised."""
        element = SVGElement(TagName.RECT, attributes={Attribute.WIDTH: 10})

        assert element.get(Attribute.WIDTH) == Number(10)

    def test_attributes_are_read_only(self) -> None:
        """Test the attribute mapping cannot be modified in place."""
        element = SVGElement.new(TagName.G).set(Attribute.IDENTIFIER, "a")

        with pytest.raises(TypeError):
            element.attributes[Attribute.IDENTIFIER] = Text("b")  # type: ignore[index]


class TestSet:
    """Test attribute insert-or-replace semantics."""

    def test_set_returns_new_element(self) -> None:
        """Test set leaves the receiver unchanged."""
        original = SVGElement.new(TagName.CIRCLE)
        updated = original.set(Attribute.RADIUS, 5)

        assert dict(original.attributes) == {}
        assert updated.get(Attribute.RADIUS) == Number(5)

    def test_set_replaces_existing_value(self) -> None:
        """Test setting a key twice keeps exactly one entry with the last value."""
        element = (
            SVGElement.new(TagName.PATH)
            .set(Attribute.STROKE_WIDTH, 1)
            .set(Attribute.STROKE_WIDTH, 2)
        )

        assert list(element.attributes) == [Attribute.STROKE_WIDTH]
        assert element.get(Attribute.STROKE_WIDTH) == Number(2)

    def test_replacement_keeps_insertion_position(self) -> None:
        """Test replacing a value does not move the key to the end."""
        element = (
            SVGElement.new(TagName.RECT)
            .set(Attribute.WIDTH, 1)
            .set(Attribute.HEIGHT, 2)
            .set(Attribute.WIDTH, 3)
        )

        assert list(element.attributes) == [Attribute.WIDTH, Attribute.HEIGHT]

    def test_set_accepts_custom_attributes(self) -> None:
        """Test generic-named keys work like known ones."""
        key = CustomAttribute("data-layer")
        element = SVGElement.new(TagName.G).set(key, "background")

        assert element.has_attribute(key)
        assert element.get(key) == Text("background")

    def test_set_rejects_string_keys(self) -> None:
        """Test raw strings are not valid attribute keys."""
        with pytest.raises(TypeError, match="Attribute key must be"):
            SVGElement.new(TagName.G).set("fill", "red")  # type: ignore[arg-type]

    def test_set_does_not_validate_schema(self) -> None:
        """Test any key may be set on any tag."""
        element = SVGElement.new(TagName.G).set(Attribute.RADIUS, 3)

        assert element.has_attribute(Attribute.RADIUS)


class TestAppend:
    """Test child ordering and structural rejection."""

    def test_append_preserves_order(self) -> None:
        """Test children appear in append order."""
        first = SVGElement.new(TagName.RECT)
        second = SVGElement.new(TagName.CIRCLE)

        group = SVGElement.new(TagName.G).append(first).append(second)

        assert group.children == (first, second)

    def test_append_leaves_receiver_unchanged(self) -> None:
        """Test append returns a new element."""
        group = SVGElement.new(TagName.G)
        group.append(SVGElement.new(TagName.RECT))

        assert group.children == ()

    def test_branching_from_shared_base(self) -> None:
        """Test two chains built from one base do not affect each other."""
        base = SVGElement.new(TagName.G).append(SVGElement.new(TagName.RECT))

        left = base.append(SVGElement.new(TagName.CIRCLE))
        right = base.append(SVGElement.new(TagName.LINE))

        assert [child.tag for child in left.children] == [TagName.RECT, TagName.CIRCLE]
        assert [child.tag for child in right.children] == [TagName.RECT, TagName.LINE]
        assert len(base.children) == 1

    @pytest.mark.parametrize("tag", [TagName.PATH, TagName.CIRCLE, TagName.USE])
    def test_append_to_childless_tag_raises(self, tag: TagName) -> None:
        """Test appending to a childless tag raises and mutates nothing."""
        element = SVGElement.new(tag).set(Attribute.IDENTIFIER, "shape")
        child = SVGElement.new(TagName.G)

        with pytest.raises(StructuralError) as exc_info:
            element.append(child)

        assert exc_info.value.parent_tag is tag
        assert exc_info.value.child_tag is TagName.G
        assert element.children == ()
        assert element.get(Attribute.IDENTIFIER) == Text("shape")

    def test_rejected_append_is_logged(self, caplog) -> None:
        """Test rejected appends emit a warning with both tags."""
        with caplog.at_level(logging.WARNING, logger="svg_definitions.tree.element"):
            with pytest.raises(StructuralError):
                SVGElement.new(TagName.PATH).append(SVGElement.new(TagName.G))

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.parent_tag == "path"
        assert record.child_tag == "g"

    def test_append_rejects_non_elements(self) -> None:
        """Test appending a non-element raises TypeError."""
        with pytest.raises(TypeError, match="Child must be an SVGElement instance"):
            SVGElement.new(TagName.G).append("<rect/>")  # type: ignore[arg-type]


class TestTryAppend:
    """Test the result-returning append variant."""

    def test_successful_append(self) -> None:
        """Test success carries the updated element and no diagnostics."""
        child = SVGElement.new(TagName.RECT)
        result = SVGElement.new(TagName.G).try_append(child)

        assert isinstance(result, AppendResult)
        assert result.success is True
        assert result.error is None
        assert result.diagnostics == []
        assert result.unwrap().children == (child,)

    def test_failed_append_reports_error(self) -> None:
        """Test failure keeps the prior element and records the error."""
        path = SVGElement.new(TagName.PATH).set(Attribute.STROKE_WIDTH, 1)

        result = path.try_append(SVGElement.new(TagName.G))

        assert result.success is False
        assert result.element is path
        assert isinstance(result.error, StructuralError)
        assert result.diagnostics[0].severity is DiagnosticSeverity.ERROR
        assert result.diagnostics[0].details == {"parent_tag": "path", "child_tag": "g"}
        with pytest.raises(StructuralError):
            result.unwrap()


class TestTextAndRemoval:
    """Test inner text and removal operations."""

    def test_set_text_trims(self) -> None:
        """Test inner text is stored without surrounding whitespace."""
        title = SVGElement.new(TagName.TITLE).set_text("  Triangle \n")

        assert title.text == "Triangle"

    def test_set_text_on_childless_tag_raises(self) -> None:
        """Test childless tags cannot carry text."""
        with pytest.raises(StructuralError, match="cannot contain text"):
            SVGElement.new(TagName.PATH).set_text("hello")

    def test_set_text_rejects_characters_forbidden_by_xml(self) -> None:
        """Test text that could not be parsed back is refused."""
        title = SVGElement.new(TagName.TITLE)

        with pytest.raises(ValueError, match="Element text contains a character"):
            title.set_text("bell\x07")
        with pytest.raises(ValueError, match="U\\+0001"):
            SVGElement(TagName.TITLE, text="a\x01b")

    def test_remove_attribute(self) -> None:
        """Test removing exactly one mapping."""
        element = (
            SVGElement.new(TagName.RECT)
            .set(Attribute.WIDTH, 1)
            .set(Attribute.HEIGHT, 2)
        )

        trimmed = element.remove(Attribute.WIDTH)

        assert list(trimmed.attributes) == [Attribute.HEIGHT]
        assert element.has_attribute(Attribute.WIDTH)

    def test_remove_missing_attribute_raises(self) -> None:
        """Test removing an unset key raises KeyError."""
        with pytest.raises(KeyError):
            SVGElement.new(TagName.G).remove(Attribute.FILL_COLOR)

    def test_remove_child_shifts_later_children(self) -> None:
        """Test removing a child keeps the rest in order."""
        a, b, c = (SVGElement.new(tag) for tag in (TagName.RECT, TagName.CIRCLE, TagName.LINE))
        group = SVGElement.new(TagName.G).append(a).append(b).append(c)

        assert group.remove_child(1).children == (a, c)
        assert group.remove_child(-1).children == (a, b)

    def test_remove_child_out_of_range(self) -> None:
        """Test invalid indices raise IndexError."""
        with pytest.raises(IndexError, match="Child index out of range"):
            SVGElement.new(TagName.G).remove_child(0)


class TestNavigation:
    """Test traversal helpers and value semantics."""

    def test_iter_elements_is_pre_order(self) -> None:
        """Test traversal visits parents before children, in order."""
        inner = SVGElement.new(TagName.G).append(SVGElement.new(TagName.CIRCLE))
        root = (
            SVGElement.new(TagName.SVG)
            .append(inner)
            .append(SVGElement.new(TagName.RECT))
        )

        tags = [element.tag for element in root.iter_elements()]

        assert tags == [TagName.SVG, TagName.G, TagName.CIRCLE, TagName.RECT]
        assert root.element_count == 4
        assert [e.tag for e in root.find_all(TagName.CIRCLE)] == [TagName.CIRCLE]

    def test_equal_trees_are_equal_and_hash_equal(self) -> None:
        """Test elements compare by value."""
        def build() -> SVGElement:
            return (
                SVGElement.new(TagName.G)
                .set(Attribute.FILL_COLOR, Color.rgb(0, 0, 0))
                .append(SVGElement.new(TagName.RECT).set(Attribute.WIDTH, 2))
            )

        assert build() == build()
        assert hash(build()) == hash(build())
        assert build() != build().set(Attribute.WIDTH, 1)

    def test_to_dict(self) -> None:
        """Test dictionary representation uses rendered names."""
        element = (
            SVGElement.new(TagName.TEXT)
            .set(Attribute.POSITION_X, 1)
            .set_text("hi")
            .append(SVGElement.new(TagName.TSPAN))
        )

        result = element.to_dict()

        assert result["tag"] == "text"
        assert result["attributes"] == {"x": Number(1)}
        assert result["text"] == "hi"
        assert result["children"] == [{"tag": "tspan", "attributes": {}}]
