"""
Shared registry engine (types/base.py)

Tests normalize_name, build_table, TypeValidationRegistry and resolve().
"""

import logging

import pytest

from dbtypes.faults import (
    Found,
    TableDefinitionFault,
    UnknownType,
    UnknownTypeFault,
)
from dbtypes.types.base import TypeValidationRegistry, build_table, normalize_name
from dbtypes.types.field_types import FieldType
from dbtypes.types.validations import Validation


# ============================================================================
# normalize_name
# ============================================================================

class TestNormalizeName:

    @pytest.mark.parametrize("value", [None, "", " ", "\t\n", 0, 1.5, ["String"]])
    def test_absent_inputs(self, value):
        assert normalize_name(value) is None

    def test_keeps_string_unchanged(self):
        assert normalize_name("String") == "String"
        assert normalize_name(" String ") == " String "


# ============================================================================
# build_table
# ============================================================================

class TestBuildTable:

    def test_freezes_validation_sets(self):
        table = build_table("t", {"String": ["required", "required", "pattern"]})
        assert table["String"] == frozenset({"required", "pattern"})
        assert isinstance(table["String"], frozenset)

    def test_table_is_read_only(self):
        table = build_table("t", {"String": ["required"]})
        with pytest.raises(TypeError):
            table["Long"] = frozenset()

    def test_input_mutation_does_not_leak(self):
        source = {"String": {"required"}}
        table = build_table("t", source)
        source["String"].add("pattern")
        source["Long"] = {"min"}
        assert table["String"] == {"required"}
        assert "Long" not in table

    def test_empty_validation_set_allowed(self):
        assert build_table("t", {"Flag": []})["Flag"] == frozenset()

    def test_enum_keys_become_plain_strings(self):
        table = build_table("t", {FieldType.STRING: (Validation.REQUIRED,)})
        key = next(iter(table))
        assert type(key) is str
        assert key == "String"
        assert table[key] == {"required"}

    @pytest.mark.parametrize("name", ["", "  ", None])
    def test_blank_type_name_rejected(self, name):
        with pytest.raises(TableDefinitionFault) as exc_info:
            build_table("t", {name: ["required"]})
        assert exc_info.value.code == "TABLE_INVALID"

    def test_none_validation_set_rejected(self):
        with pytest.raises(TableDefinitionFault, match="no validation set"):
            build_table("t", {"String": None})

    def test_unknown_validation_rejected(self):
        with pytest.raises(TableDefinitionFault, match="bogus"):
            build_table("t", {"String": ["required", "bogus"]})


# ============================================================================
# TypeValidationRegistry
# ============================================================================

class TestTypeValidationRegistry:

    def test_backend(self, tiny_registry):
        assert tiny_registry.backend == "tiny"

    def test_get_types(self, tiny_registry):
        assert tiny_registry.get_types() == {"String", "Flag"}

    def test_empty_set_type_is_valid(self, tiny_registry):
        assert tiny_registry.get_validations_for_type("Flag") == frozenset()
        assert tiny_registry.is_validation_supported_for_type("Flag", "required") is False

    def test_value_name_array_keeps_declaration_order(self, tiny_registry):
        assert tiny_registry.to_value_name_object_array() == [
            {"value": "String", "name": "String"},
            {"value": "Flag", "name": "Flag"},
        ]

    def test_value_name_array_is_a_fresh_list(self, tiny_registry):
        entries = tiny_registry.to_value_name_object_array()
        entries.clear()
        assert len(tiny_registry.to_value_name_object_array()) == 2

    def test_iteration_and_len(self, tiny_registry):
        assert list(tiny_registry) == ["String", "Flag"]
        assert len(tiny_registry) == 2

    def test_repr(self, tiny_registry):
        assert "tiny" in repr(tiny_registry)

    def test_no_attribute_assignment(self, tiny_registry):
        with pytest.raises(AttributeError):
            tiny_registry.extra = 1

    def test_whitespace_padded_name_is_not_a_type(self, tiny_registry):
        assert tiny_registry.contains(" String") is False
        with pytest.raises(UnknownTypeFault):
            tiny_registry.get_validations_for_type("String ")

    def test_rejection_is_logged(self, tiny_registry, caplog):
        with caplog.at_level(logging.DEBUG, logger="dbtypes.types.base"):
            with pytest.raises(UnknownTypeFault):
                tiny_registry.get_validations_for_type("Money")
        assert "Money" in caplog.text


# ============================================================================
# resolve
# ============================================================================

class TestResolve:

    def test_found(self, tiny_registry):
        result = tiny_registry.resolve("String")
        assert result == Found("String", frozenset({"required", "pattern"}))

    @pytest.mark.parametrize("name", [None, "", "Money"])
    def test_unknown_does_not_raise(self, tiny_registry, name):
        result = tiny_registry.resolve(name)
        assert isinstance(result, UnknownType)
        assert isinstance(result.fault, UnknownTypeFault)
        assert result.fault.metadata == {"type_name": name, "backend": "tiny"}

    def test_match_statement(self, tiny_registry):
        match tiny_registry.resolve("String"):
            case Found(validations=validations):
                assert "pattern" in validations
            case UnknownType():
                pytest.fail("String should resolve")
