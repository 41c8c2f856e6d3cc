"""Tests for testing.fixtures.type_models module.

These tests verify the FakeTypeModel and its factories, which the compiler
unit tests depend on to script type descriptors.
"""

from __future__ import annotations

from docschema_core.type_model import Member, TypeFlags, TypeModel
from testing.fixtures.type_models import (
    FakeTypeModel,
    array,
    doc,
    enum_like,
    fake_struct,
    literal,
    prop,
    string,
    undefined,
    union,
)


class TestFakeTypeModel:
    """Tests for FakeTypeModel answers."""

    def test_satisfies_type_model_protocol(self) -> None:
        model: TypeModel = FakeTypeModel()
        assert model.type_to_string(string()) == "string"

    def test_literals_render_like_json(self) -> None:
        model = FakeTypeModel()
        assert model.type_to_string(literal(True)) == "true"
        assert model.type_to_string(literal("a")) == '"a"'
        assert model.get_literal_value(literal(3)) == 3

    def test_literal_flags(self) -> None:
        assert literal(True).flags == TypeFlags.BOOLEAN_LITERAL
        assert literal(1.5).flags == TypeFlags.NUMBER_LITERAL
        assert literal("x", TypeFlags.STRING).flags == TypeFlags.STRING_LITERAL | TypeFlags.STRING

    def test_type_identity(self) -> None:
        """Equal-looking fake types are distinct types."""
        model = FakeTypeModel()
        first, second = string(), string()
        assert model.get_type_id(first) != model.get_type_id(second)
        assert model.get_type_id(first) == model.get_type_id(first)

    def test_union_and_enum_members(self) -> None:
        model = FakeTypeModel()
        members = (literal("a"), undefined())
        assert tuple(model.get_union_members(union(*members))) == members
        assert TypeFlags.ENUM_LIKE in enum_like("E", *members).flags

    def test_array_element(self) -> None:
        model = FakeTypeModel()
        element = string()
        assert model.is_array_type(array(element))
        assert model.get_element_type(array(element)) is element
        assert model.get_element_type(array(None)) is None


class TestFactories:
    """Tests for struct and member factories."""

    def test_prop_parses_docstring(self) -> None:
        member = prop("age", string(), optional=True, docstring="Age.\n@minimum 0")
        assert isinstance(member, Member)
        assert member.optional
        assert member.symbol is not None
        assert member.symbol.name == "age"
        assert member.symbol.documentation == ("Age.",)

    def test_prop_without_docstring(self) -> None:
        assert prop("name", string()).symbol is None

    def test_struct_members_can_be_appended(self) -> None:
        node = fake_struct("Node")
        node.members.append(prop("next", node))
        assert FakeTypeModel().get_members(node)[0].type is node

    def test_doc_helper(self) -> None:
        symbol = doc("@format email")
        assert symbol is not None
        assert symbol.tags[0].name == "format"
