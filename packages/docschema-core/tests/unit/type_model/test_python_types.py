"""Unit tests for PythonTypeModel.

Covers flag mapping of Python annotations, member enumeration for each
supported struct flavour and symbol lookup.
"""

from __future__ import annotations

import collections.abc
from typing import Annotated, Any, Literal, Optional, Union

import pytest

from docschema_core.errors import UnsupportedTypeError
from docschema_core.type_model import PythonTypeModel, TypeFlags, Undefined, strip_annotations
from testing.fixtures import sample_types


class TestFlags:
    """Tests for get_flags."""

    @pytest.mark.parametrize(
        ("type_", "expected"),
        [
            (str, TypeFlags.STRING),
            (int, TypeFlags.NUMBER),
            (float, TypeFlags.NUMBER),
            (bool, TypeFlags.BOOLEAN),
            (None, TypeFlags.NULL),
            (type(None), TypeFlags.NULL),
            (Undefined, TypeFlags.UNDEFINED),
            (Literal["a"], TypeFlags.STRING_LITERAL),
            (Literal[1], TypeFlags.NUMBER_LITERAL),
            (Literal[1.5], TypeFlags.NUMBER_LITERAL),
            (Literal[True], TypeFlags.BOOLEAN_LITERAL),
            (Literal["a", "b"], TypeFlags.UNION),
            (Union[str, int], TypeFlags.UNION),
            (Optional[str], TypeFlags.UNION),
            (sample_types.Color, TypeFlags.ENUM_LIKE | TypeFlags.UNION),
            (sample_types.Color.RED, TypeFlags.STRING_LITERAL),
            (sample_types.Priority.LOW, TypeFlags.NUMBER_LITERAL),
            (list[str], TypeFlags.OBJECT),
            (tuple[str, int], TypeFlags.OBJECT),
            (dict[str, int], TypeFlags.NONE),
            (dict, TypeFlags.NONE),
            (sample_types.Person, TypeFlags.OBJECT),
            (sample_types.Address, TypeFlags.OBJECT),
            (sample_types.Settings, TypeFlags.OBJECT),
            (bytes, TypeFlags.NONE),
        ],
    )
    def test_flags(self, python_model: PythonTypeModel, type_: Any, expected: TypeFlags) -> None:
        assert python_model.get_flags(type_) == expected

    def test_pep604_union(self, python_model: PythonTypeModel) -> None:
        assert python_model.get_flags(str | None) == TypeFlags.UNION

    def test_annotated_is_transparent(self, python_model: PythonTypeModel) -> None:
        assert python_model.get_flags(Annotated[int, "meta"]) == TypeFlags.NUMBER
        assert strip_annotations(Annotated[Annotated[str, 1], 2]) is str


class TestLiterals:
    """Tests for literal values and rendering."""

    def test_literal_values(self, python_model: PythonTypeModel) -> None:
        assert python_model.get_literal_value(Literal["a"]) == "a"
        assert python_model.get_literal_value(sample_types.Priority.HIGH) == 2

    def test_multi_value_literal_has_no_single_value(self, python_model: PythonTypeModel) -> None:
        with pytest.raises(TypeError):
            python_model.get_literal_value(Literal["a", "b"])

    def test_type_to_string(self, python_model: PythonTypeModel) -> None:
        assert python_model.type_to_string(Literal[True]) == "True"
        assert python_model.type_to_string(Literal[False]) == "False"
        assert python_model.type_to_string(Literal["a"]) == "'a'"
        assert python_model.type_to_string(sample_types.Person) == "Person"
        assert python_model.type_to_string(None) == "None"
        assert python_model.type_to_string(tuple[str, str]) == "tuple[str, str]"

    def test_union_members_flatten_literals(self, python_model: PythonTypeModel) -> None:
        members = python_model.get_union_members(Union[Literal["a", "b"], Literal[1]])
        assert [python_model.get_literal_value(member) for member in members] == ["a", "b", 1]

    def test_enum_members(self, python_model: PythonTypeModel) -> None:
        members = python_model.get_union_members(sample_types.Color)
        assert members == list(sample_types.Color)


class TestCollections:
    """Tests for array and tuple detection."""

    @pytest.mark.parametrize("type_", [list[int], set[str], frozenset[str], list])
    def test_arrays(self, python_model: PythonTypeModel, type_: Any) -> None:
        assert python_model.is_array_type(type_)
        assert not python_model.is_tuple_type(type_)

    def test_element_type(self, python_model: PythonTypeModel) -> None:
        assert python_model.get_element_type(list[int]) is int
        assert python_model.get_element_type(list) is None

    @pytest.mark.parametrize("type_", [tuple[int, str], tuple[int, ...], tuple])
    def test_tuples(self, python_model: PythonTypeModel, type_: Any) -> None:
        assert python_model.is_tuple_type(type_)
        assert not python_model.is_array_type(type_)


class TestMembers:
    """Tests for get_members."""

    def test_typed_dict_members(self, python_model: PythonTypeModel) -> None:
        members = python_model.get_members(sample_types.Person)
        assert [member.name for member in members] == ["name", "age", "email", "tags"]
        assert [member.optional for member in members] == [False, False, True, False]

    def test_member_symbols_come_from_attribute_docstrings(
        self, python_model: PythonTypeModel
    ) -> None:
        age = python_model.get_members(sample_types.Person)[1]
        assert age.symbol is not None
        assert age.symbol.name == "age"
        assert age.symbol.documentation == ("Age in years.",)
        assert [tag.name for tag in age.symbol.tags] == ["minimum", "maximum", "integer"]

    def test_dataclass_defaults_are_optional(self, python_model: PythonTypeModel) -> None:
        members = python_model.get_members(sample_types.Address)
        assert {member.name: member.optional for member in members} == {
            "street": False,
            "postcode": False,
            "country": True,
            "lines": True,
        }

    def test_undefined_union_becomes_optional(self, python_model: PythonTypeModel) -> None:
        members = {
            member.name: member for member in python_model.get_members(sample_types.Customer)
        }
        assert members["nickname"].optional
        assert members["nickname"].type is str
        assert members["color"].optional
        assert members["color"].type is sample_types.Color
        assert not members["id"].optional

    def test_pydantic_members(self, python_model: PythonTypeModel) -> None:
        members = python_model.get_members(sample_types.Settings)
        assert [member.name for member in members] == ["host", "port", "debugMode", "direction"]
        assert [member.optional for member in members] == [False, True, True, True]

    def test_pydantic_field_description(self, python_model: PythonTypeModel) -> None:
        host = python_model.get_members(sample_types.Settings)[0]
        assert host.symbol is not None
        assert host.symbol.documentation == ("Bind address.",)

    def test_plain_annotated_class(self, python_model: PythonTypeModel) -> None:
        class Plain:
            kind: str
            size: int = 3

        members = python_model.get_members(Plain)
        assert [(member.name, member.optional) for member in members] == [
            ("kind", False),
            ("size", True),
        ]

    def test_dict_has_no_members(self, python_model: PythonTypeModel) -> None:
        assert python_model.get_members(dict[str, int]) == []

    def test_unresolvable_annotation(self, python_model: PythonTypeModel) -> None:
        broken = type("Broken", (), {"__annotations__": {"x": "Missing"}, "__module__": __name__})
        with pytest.raises(UnsupportedTypeError, match="Unsupported type: Broken"):
            python_model.get_members(broken)


class TestSymbols:
    """Tests for get_symbol."""

    def test_class_docstring(self, python_model: PythonTypeModel) -> None:
        symbol = python_model.get_symbol(sample_types.Person)
        assert symbol is not None
        assert symbol.documentation == ("A registered user.",)
        assert [tag.name for tag in symbol.tags] == ["additionalInfo"]

    def test_annotated_doc(self, python_model: PythonTypeModel) -> None:
        symbol = python_model.get_symbol(sample_types.Percentage)
        assert symbol is not None
        assert symbol.documentation == ("Share of a whole.",)

    def test_builtins_have_no_symbol(self, python_model: PythonTypeModel) -> None:
        assert python_model.get_symbol(str) is None
        assert python_model.get_symbol(list[str]) is None

    @pytest.mark.parametrize(
        "type_",
        [
            Undefined,
            collections.abc.Sequence,
            collections.abc.Sequence[str],
            collections.abc.Mapping,
            collections.abc.Iterable[int],
            dict,
        ],
    )
    def test_library_classes_have_no_symbol(
        self, python_model: PythonTypeModel, type_: Any
    ) -> None:
        """Docstrings of the marker and library classes never reach a schema."""
        assert python_model.get_symbol(type_) is None

    def test_enum_class_docstring(self, python_model: PythonTypeModel) -> None:
        symbol = python_model.get_symbol(sample_types.Color)
        assert symbol is not None
        assert symbol.documentation == ("Primary color.",)

    def test_type_ids(self, python_model: PythonTypeModel) -> None:
        assert python_model.get_type_id(Annotated[sample_types.Person, "x"]) is sample_types.Person
