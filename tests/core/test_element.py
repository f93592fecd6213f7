"""
Tests for the Element tree model.

Focus Areas:
1. Name validation
2. Immutability and attaching children
3. Attribute helpers and markup rendering
"""

import pytest
from pydantic import ValidationError

from tagrun.core.element import Element
from tagrun.parsing.grammar import parse_document


class TestElementConstruction:
    """Test building elements."""

    def test_defaults(self):
        """Attributes and children default to empty tuples."""
        element = Element(name="ls")
        assert element.attributes == ()
        assert element.children == ()
        assert element.is_self_closing

    def test_attribute_list_is_stored_as_tuple(self):
        """Lists are accepted and stored as tuples in the same order."""
        element = Element(name="a", attributes=[("k", "1"), ("k", "2")])
        assert element.attributes == (("k", "1"), ("k", "2"))

    @pytest.mark.parametrize("name", ["ls", "-la", "file.txt", "a&b", "ünïcödé", "42"])
    def test_valid_names(self, name):
        """Names may use letters, digits, '-', '&' and '.'."""
        assert Element(name=name).name == name

    @pytest.mark.parametrize("name", ["", "a b", "a/b", "<a>", 'a"b', "a=b"])
    def test_invalid_names(self, name):
        """Names outside the identifier charset are rejected."""
        with pytest.raises(ValidationError):
            Element(name=name)

    @pytest.mark.parametrize(
        "attributes",
        [
            (("bad key", "x"),),
            (("", "x"),),
            (("k=v", "x"),),
            (("k", 'x"y'),),
            (("ok", "1"), ("k", '"')),
        ],
    )
    def test_invalid_attributes(self, attributes):
        """Keys follow the name rules and values may not contain quotes."""
        with pytest.raises(ValidationError):
            Element(name="a", attributes=attributes)

    def test_valid_element_renders_parsable_markup(self):
        """Any element that validates renders markup that parses back to it."""
        element = Element(
            name="a", attributes=(("x.y&z-1", "any <text> = 'ok'"), ("k", ""))
        )
        assert parse_document(element.to_markup()) == [element]


class TestElementImmutability:
    """Test that elements are never changed in place."""

    def test_fields_are_frozen(self):
        """Assigning to a field raises."""
        element = Element(name="a")
        with pytest.raises(ValidationError):
            element.name = "b"

    def test_with_children_returns_new_element(self):
        """with_children leaves the original element untouched."""
        parent = Element(name="a", attributes=(("k", "v"),))
        child = Element(name="b")

        extended = parent.with_children([child])

        assert parent.children == ()
        assert extended.children == (child,)
        assert extended.name == "a"
        assert extended.attributes == (("k", "v"),)
        assert not extended.is_self_closing

    def test_elements_are_hashable(self):
        """Equal elements hash equally."""
        first = Element(name="a", children=(Element(name="b"),))
        second = Element(name="a").with_children([Element(name="b")])
        assert first == second
        assert hash(first) == hash(second)


class TestElementAttributes:
    """Test attribute helpers."""

    def test_get_attribute_returns_first_match(self):
        """With duplicate keys the first value wins."""
        element = Element(name="a", attributes=(("k", "1"), ("x", "y"), ("k", "2")))
        assert element.get_attribute("k") == "1"
        assert element.get_attribute("x") == "y"

    def test_get_attribute_default(self):
        """Missing keys return the default."""
        element = Element(name="a")
        assert element.get_attribute("missing") is None
        assert element.get_attribute("missing", "fallback") == "fallback"

    def test_attribute_keys_keep_duplicates(self):
        """Keys are listed in source order, duplicates included."""
        element = Element(name="a", attributes=(("k", "1"), ("x", "y"), ("k", "2")))
        assert element.attribute_keys() == ["k", "x", "k"]


class TestElementMarkup:
    """Test rendering elements back to tag text."""

    def test_self_closing(self):
        """Childless elements render in the self-closing form."""
        element = Element(name="div", attributes=(("class", "x"), ("id", "y")))
        assert element.to_markup() == '<div class="x" id="y"/>'

    def test_parent(self):
        """Children are rendered between the opening and closing tags."""
        element = Element(
            name="a",
            attributes=(("k", "v"),),
            children=(Element(name="b"), Element(name="c").with_children([Element(name="d")])),
        )
        assert element.to_markup() == '<a k="v"><b/><c><d/></c></a>'
