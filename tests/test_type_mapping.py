"""Tests for diagram type token -> C# type mapping."""
from __future__ import annotations

import pytest

from uml_entities.csharp.types import (
    ListType,
    PrimitiveType,
    ReferenceType,
    map_type,
    render_type,
)


def cs(token: str) -> str:
    return render_type(map_type(token))


class TestPrimitives:
    @pytest.mark.parametrize(
        "token, kind, expected",
        [
            ("String", "string", "string?"),
            ("Date", "datetime", "DateTime?"),
            ("int", "int32", "int?"),
            ("float", "single", "float?"),
            ("boolean", "bool", "bool?"),
        ],
    )
    def test_table(self, token: str, kind: str, expected: str):
        assert map_type(token) == PrimitiveType(kind)
        assert cs(token) == expected

    @pytest.mark.parametrize("token", ["string", "STRING", "Int", "bool", "Boolean", "double"])
    def test_matching_is_exact_and_case_sensitive(self, token: str):
        assert map_type(token) == ReferenceType(token)
        assert cs(token) == token + "?"


class TestLists:
    def test_list_of_entity(self):
        assert map_type("List<Tour>") == ListType("Tour")
        assert cs("List<Tour>") == "IList<Tour>"

    def test_list_element_is_copied_verbatim(self):
        assert cs("List<int>") == "IList<int>"

    def test_element_ends_at_the_final_angle_bracket(self):
        assert map_type("List<int>[]") == ListType("int")

    def test_list_is_not_nullable(self):
        assert not cs("List<Tour>").endswith("?")


class TestReferences:
    def test_entity_reference(self):
        assert map_type("Tour") == ReferenceType("Tour")
        assert cs("Tour") == "Tour?"

    @pytest.mark.parametrize("token", ["int[]", "int []", "Set<Tour>", "Map"])
    def test_arrays_and_other_generics_fall_back_to_references(self, token: str):
        assert map_type(token) == ReferenceType(token)
        assert cs(token) == token + "?"
