"""Tests for typedhtml.attributes module."""

import pytest

from typedhtml.attributes import (
    Attribute,
    ClassAttribute,
    DataAttribute,
    IdAttribute,
)
from typedhtml.config import RenderOptions


class TestAttribute:
    """Test named attribute facts."""

    def test_class_renders(self) -> None:
        """Test rendering of the class attribute."""
        assert ClassAttribute("component").render() == 'class="component"'

    def test_id_renders(self) -> None:
        """Test rendering of the id attribute."""
        assert IdAttribute("foo").render() == 'id="foo"'

    def test_empty_value(self) -> None:
        """Test that an empty value still renders quotes."""
        assert IdAttribute("").render() == 'id=""'

    def test_names_are_class_level(self) -> None:
        """Test that attribute names come from the kind."""
        assert ClassAttribute.name == "class"
        assert IdAttribute.name == "id"
        assert Attribute.registry["class"] is ClassAttribute
        assert Attribute.registry["id"] is IdAttribute

    def test_value_not_escaped(self) -> None:
        """Test that values are emitted verbatim by default."""
        assert IdAttribute('a"b<c>').render() == 'id="a"b<c>"'

    def test_value_escaped_when_enabled(self) -> None:
        """Test that escaping applies when the options ask for it."""
        options = RenderOptions(escape_attributes=True)
        assert IdAttribute('a"b<c>&').render(options) == (
            'id="a&quot;b&lt;c&gt;&amp;"'
        )

    def test_str_matches_render(self) -> None:
        """Test that str() renders the attribute."""
        assert str(ClassAttribute("x")) == 'class="x"'

    def test_is_frozen(self) -> None:
        """Test that attribute values are immutable."""
        attribute = IdAttribute("foo")
        with pytest.raises((AttributeError, TypeError)):
            attribute.value = "bar"

    def test_equality(self) -> None:
        """Test value equality between attributes."""
        assert IdAttribute("foo") == IdAttribute("foo")
        assert IdAttribute("foo") != ClassAttribute("foo")

    def test_base_is_abstract(self) -> None:
        """Test that the unnamed base cannot be instantiated."""
        with pytest.raises(TypeError, match="abstract"):
            Attribute("x")


class TestAttributeRegistration:
    """Test declaring new attribute kinds."""

    def test_custom_name(self) -> None:
        """Test explicitly setting a name."""

        class TitleAttribute(Attribute, name="title-test"):
            """Attribute declared in a test."""

        assert TitleAttribute("Hi").render() == 'title-test="Hi"'

    def test_automatic_name(self) -> None:
        """Test that the name is derived from the class name."""

        class LangtestAttribute(Attribute):
            """Attribute declared in a test."""

        assert LangtestAttribute.name == "langtest"

    def test_name_collision_raises_error(self) -> None:
        """Test that duplicate names fail."""
        with pytest.raises(ValueError, match="already registered"):

            class OtherId(Attribute, name="id"):
                """Clashes with IdAttribute."""


class TestDataAttribute:
    """Test the composite data-* attribute."""

    def test_single_entry(self) -> None:
        """Test one entry renders one data- attribute."""
        assert DataAttribute({"foo": "bar"}).render() == 'data-foo="bar"'

    def test_entries_keep_insertion_order(self) -> None:
        """Test that several entries render space separated, in order."""
        attribute = DataAttribute({"foo": "bar", "count": "3", "x-y": "z"})
        assert attribute.render() == 'data-foo="bar" data-count="3" data-x-y="z"'

    def test_entries_as_set(self) -> None:
        """Test the rendered facts as a set."""
        rendered = DataAttribute({"a": "1", "b": "2"}).render()
        assert set(rendered.split(" ")) == {'data-a="1"', 'data-b="2"'}

    def test_empty(self) -> None:
        """Test that no entries render nothing."""
        assert DataAttribute({}).render() == ""
        assert DataAttribute().render() == ""

    def test_detached_from_source_mapping(self) -> None:
        """Test that mutating the source mapping does not change the attribute."""
        source = {"foo": "bar"}
        attribute = DataAttribute(source)
        source["late"] = "entry"
        assert attribute.render() == 'data-foo="bar"'

    def test_values_escaped_when_enabled(self) -> None:
        """Test escaping of data values."""
        attribute = DataAttribute({"q": '"'})
        assert attribute.render(RenderOptions.escaped()) == 'data-q="&quot;"'

    def test_entries_are_immutable(self) -> None:
        """Test that entries cannot be changed after construction."""
        attribute = DataAttribute({"foo": "bar"})
        assert attribute.entries == (("foo", "bar"),)
        with pytest.raises(TypeError):
            attribute.entries["late"] = "entry"  # type: ignore[index]
        assert attribute.render() == 'data-foo="bar"'

    def test_hashable(self) -> None:
        """Test that equal composites hash equally."""
        assert hash(DataAttribute({"a": "1"})) == hash(DataAttribute({"a": "1"}))
        assert DataAttribute({"a": "1"}) == DataAttribute([("a", "1")])

    @pytest.mark.parametrize("key", ["", "a b", 'q"', "x>", "y=z", "s/", 5])
    def test_invalid_key_raises_error(self, key: object) -> None:
        """Test that keys which would break the markup are rejected."""
        with pytest.raises(ValueError, match="Invalid data attribute key"):
            DataAttribute({key: "v"})

    def test_non_string_value_raises_error(self) -> None:
        """Test that values must be strings."""
        with pytest.raises(TypeError, match="must be a str"):
            DataAttribute({"n": 5})


class TestAttributeValueType:
    """Test value type checks on named attributes."""

    def test_non_string_value_raises_error(self) -> None:
        """Test that values must be strings."""
        with pytest.raises(TypeError, match="id value must be a str, got int"):
            IdAttribute(5)  # type: ignore[arg-type]
