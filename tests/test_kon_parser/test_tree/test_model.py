"""Tests for the KON value and element data model."""

from dataclasses import FrozenInstanceError

import pytest

from kon_parser.tree import (
    KON_NONE,
    PURE,
    KonDecimal,
    KonElement,
    KonInteger,
    KonNone,
    KonString,
    KonSymbol,
    NamedUnit,
)


class TestUnits:
    """Test number units."""

    def test_pure_unit_is_singleton_value(self):
        """Test that all pure units compare equal."""
        assert PURE == type(PURE)()
        assert str(PURE) == ""

    def test_named_unit(self):
        """Test named unit equality and validation."""
        assert NamedUnit("px") == NamedUnit("px")
        assert NamedUnit("px") != NamedUnit("em")
        assert NamedUnit("px") != PURE
        with pytest.raises(ValueError, match="Unit name cannot be empty"):
            NamedUnit("")


class TestValues:
    """Test scalar value variants."""

    def test_none_value(self):
        """Test the none value."""
        assert KON_NONE == KonNone()
        assert KON_NONE.to_python() is None
        assert KON_NONE != KonString("")

    def test_string_and_symbol(self):
        """Test string and symbol display and conversion."""
        assert str(KonString("a b")) == '"a b"'
        assert str(KonSymbol("foo")) == "foo"
        assert KonString("foo") != KonSymbol("foo")
        assert KonSymbol("foo").to_python() == "foo"

    def test_number_equality_ignores_representation(self):
        """Test numbers compare by magnitude and unit only."""
        assert KonInteger(1) == KonDecimal(1.0)
        assert hash(KonInteger(1)) == hash(KonDecimal(1.0))
        assert KonInteger(1, NamedUnit("px")) == KonInteger(1, NamedUnit("px"))
        assert KonInteger(1, NamedUnit("px")) != KonInteger(1)
        assert KonInteger(1) != KonInteger(2)
        assert KonInteger(1) != KonString("1")

    def test_number_display(self):
        """Test informal number formatting."""
        assert str(KonInteger(10, NamedUnit("px"))) == "10 px"
        assert str(KonDecimal(-3.5)) == "-3.5"

    def test_number_accessors(self):
        """Test unit name and kind."""
        value = KonDecimal(0.5, NamedUnit("s"))
        assert value.unit_name == "s"
        assert value.kind == "decimal"
        assert KonInteger(3).unit_name is None
        assert KonInteger(3).kind == "integer"
        assert KonInteger(3).to_python() == 3

    def test_to_dict(self):
        """Test tagged dictionary conversion."""
        assert KonString("x").to_dict() == {"type": "string", "value": "x"}
        assert KonSymbol("y").to_dict() == {"type": "symbol", "value": "y"}
        assert KonInteger(4, NamedUnit("em")).to_dict() == {
            "type": "integer", "value": 4, "unit": "em",
        }

    def test_values_are_frozen(self):
        """Test values cannot be mutated."""
        with pytest.raises(FrozenInstanceError):
            KonString("a").value = "b"


def _sample_tree() -> KonElement:
    leaf = KonElement("item", {"id": KonInteger(2)}, value=KonSymbol("b"))
    group = KonElement("group", children=(leaf,))
    return KonElement(
        "root",
        {"x": KonInteger(1)},
        (KonElement("item", {"id": KonInteger(1)}), group),
    )


class TestKonElement:
    """Test element construction and navigation."""

    def test_defaults(self):
        """Test an element with only a name."""
        element = KonElement("a")
        assert dict(element.attributes) == {}
        assert element.children == ()
        assert element.value == KON_NONE
        assert not element.has_value

    def test_empty_name_rejected(self):
        """Test that an empty name raises ValueError."""
        with pytest.raises(ValueError, match="Element name cannot be empty"):
            KonElement("")

    def test_containers_are_read_only(self):
        """Test attributes and children cannot be changed after construction."""
        attributes = {"x": KonInteger(1)}
        element = KonElement("a", attributes, [KonElement("b")])

        attributes["y"] = KonInteger(2)
        assert "y" not in element.attributes
        assert isinstance(element.children, tuple)
        with pytest.raises(TypeError):
            element.attributes["z"] = KonInteger(3)
        with pytest.raises(FrozenInstanceError):
            element.name = "b"

    def test_equality_and_hash(self):
        """Test structurally equal elements are equal and hashable."""
        assert _sample_tree() == _sample_tree()
        assert hash(_sample_tree()) == hash(_sample_tree())
        assert len({_sample_tree(), _sample_tree()}) == 1
        assert KonElement("a", value=KonInteger(1)) != KonElement("a")

    def test_value_and_children_coexist(self):
        """Test an element may have both children and a value."""
        element = KonElement("a", children=(KonElement("b"),), value=KonInteger(3))
        assert element.has_value
        assert len(element.children) == 1

    def test_attribute_access(self):
        """Test attribute helpers."""
        root = _sample_tree()
        assert root.get_attribute("x") == KonInteger(1)
        assert root.get_attribute("missing") is None
        assert root.get_attribute("missing", KON_NONE) == KON_NONE
        assert root.has_attribute("x")
        assert not root.has_attribute("y")

    def test_child_lookup(self):
        """Test direct child lookup."""
        root = _sample_tree()
        assert root.find_child("group").name == "group"
        assert root.find_child("nope") is None
        assert len(root.find_children("item")) == 1

    def test_descendant_lookup(self):
        """Test depth-first descendant search."""
        root = _sample_tree()
        assert root.find("item").get_attribute("id") == KonInteger(1)
        found = root.find_all("item")
        assert [e.get_attribute("id") for e in found] == [KonInteger(1), KonInteger(2)]
        assert root.find("root") is None

    def test_iteration_and_depth(self):
        """Test pre-order iteration and subtree height."""
        root = _sample_tree()
        assert [e.name for e in root.iter_elements()] == ["root", "item", "group", "item"]
        assert root.depth == 3
        assert KonElement("leaf").depth == 1

    def test_display(self):
        """Test informal display formatting with nested indentation."""
        element = KonElement(
            "a",
            {"x": KonInteger(1), "y": KonString("s")},
            (KonElement("b", children=(KonElement("c", value=KonSymbol("foo")),)),),
            KonInteger(10, NamedUnit("px")),
        )
        assert str(element) == 'a(x = 1, y = "s") {\n\tb {\n\t\tc = foo\n\t}\n} = 10 px'

    def test_to_dict(self):
        """Test dictionary conversion."""
        element = KonElement("a", {"x": KonInteger(1)}, (KonElement("b"),), KonSymbol("v"))
        assert element.to_dict() == {
            "name": "a",
            "attributes": {"x": {"type": "integer", "value": 1, "unit": None}},
            "children": [{"name": "b", "attributes": {}, "children": []}],
            "value": {"type": "symbol", "value": "v"},
        }
