"""
Tests for JSON Schema Contract Validators

Covers:
- Validity of the packaged schema itself
- Schema loading and caching
- Arity constraints (minItems/maxItems)
- Element constraints (items)
- Integration with the codec
- Contracts derived from tuple types
"""

import json

import pytest
from jsonschema import Draft202012Validator, ValidationError
from pydantic import BaseModel, TypeAdapter

from unordered_tuple import UnorderedNTuple, UnorderedPair, UnorderedTriple
from unordered_tuple.contracts import (
    UNORDERED_NTUPLE_SCHEMA,
    ContractValidator,
    SchemaLoader,
    UnorderedNTupleValidator,
    validate_unordered_ntuple,
)
from unordered_tuple.serialization import encode


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Loading of packaged schemas."""

    def test_packaged_schema_is_valid(self) -> None:
        schema = SchemaLoader().load_schema(UNORDERED_NTUPLE_SCHEMA)
        Draft202012Validator.check_schema(schema)
        assert schema["type"] == "array"

    def test_callers_get_private_copies(self) -> None:
        loader = SchemaLoader()
        first = loader.load_schema(UNORDERED_NTUPLE_SCHEMA)
        first["minItems"] = 5
        second = loader.load_schema(UNORDERED_NTUPLE_SCHEMA)
        assert second is not first
        assert "minItems" not in second

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_invalid_json(self, tmp_path) -> None:
        (tmp_path / "truncated.json").write_text('{"type": "array"', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("truncated")

    def test_schema_must_describe_an_array(self, tmp_path) -> None:
        (tmp_path / "object.json").write_text(json.dumps({"type": "object"}), encoding="utf-8")
        with pytest.raises(ValueError, match="does not describe an array"):
            SchemaLoader(tmp_path).load_schema("object")


# =============================================================================
# UNORDERED N-TUPLE CONTRACT
# =============================================================================


class TestUnorderedNTupleValidator:
    """Wire form of a tuple of arity N."""

    def test_accepts_exactly_n_items(self) -> None:
        validator = UnorderedNTupleValidator(2)
        validator.validate([0, 1])
        assert validator.is_valid(["a", "b"])

    @pytest.mark.parametrize("data", [[], [1], [1, 2, 3]])
    def test_rejects_other_lengths(self, data) -> None:
        with pytest.raises(ValidationError):
            validate_unordered_ntuple(data, 2)

    @pytest.mark.parametrize("data", [{"a": 1, "b": 2}, "ab", 12, None])
    def test_rejects_non_arrays(self, data) -> None:
        assert not UnorderedNTupleValidator(2).is_valid(data)

    def test_items_schema(self) -> None:
        validator = UnorderedNTupleValidator(2, {"type": "integer"})
        assert validator.is_valid([1, 2])
        assert not validator.is_valid([1, "2"])

    def test_iter_errors(self) -> None:
        validator = UnorderedNTupleValidator(2, {"type": "integer"})
        errors = list(validator.iter_errors(["x", "y", "z"]))
        # maxItems plus one type error per item
        assert len(errors) == 4

    def test_schema_specialization_does_not_leak(self) -> None:
        UnorderedNTupleValidator(3, {"type": "string"})
        base = SchemaLoader().load_schema(UNORDERED_NTUPLE_SCHEMA)
        assert "minItems" not in base
        assert "items" not in base

    def test_arity_zero(self) -> None:
        assert UnorderedNTupleValidator(0).is_valid([])
        assert not UnorderedNTupleValidator(0).is_valid([1])

    def test_negative_arity(self) -> None:
        with pytest.raises(ValueError):
            UnorderedNTupleValidator(-1)

    def test_custom_contract(self) -> None:
        validator = ContractValidator({"type": "array", "maxItems": 1})
        assert validator.is_valid([1])
        assert not validator.is_valid([1, 2])


# =============================================================================
# CODEC INTEGRATION
# =============================================================================


class TestCodecIntegration:
    """Encoded tuples satisfy the contract."""

    def test_encoded_pair(self) -> None:
        validate_unordered_ntuple(encode(UnorderedPair((0, 1))), 2, {"type": "integer"})

    def test_encoded_triple_with_duplicates(self) -> None:
        validate_unordered_ntuple(encode(UnorderedTriple(("a", "a", "b"))), 3)


# =============================================================================
# CONTRACTS FROM TUPLE TYPES
# =============================================================================


class Vertex(BaseModel):
    name: str

    model_config = {"frozen": True}


class TestForType:
    """Contracts derived from tuple types through pydantic."""

    def test_pair_of_ints(self) -> None:
        validator = UnorderedNTupleValidator.for_type(UnorderedPair[int])
        assert validator.arity == 2
        assert validator.is_valid([1, 2])
        assert not validator.is_valid([1, "2"])
        assert not validator.is_valid([1, 2, 3])

    def test_of_arity_class(self) -> None:
        validator = UnorderedNTupleValidator.for_type(UnorderedNTuple.of_arity(4)[str])
        assert validator.is_valid(["a", "b", "c", "d"])
        assert not validator.is_valid(["a", "b", "c"])

    def test_unparametrized_accepts_any_elements(self) -> None:
        validator = UnorderedNTupleValidator.for_type(UnorderedTriple)
        assert validator.is_valid([1, "a", None])

    def test_model_elements_use_defs(self) -> None:
        validator = UnorderedNTupleValidator.for_type(UnorderedPair[Vertex])
        pair = UnorderedPair((Vertex(name="a"), Vertex(name="b")))
        data = TypeAdapter(UnorderedPair[Vertex]).dump_python(pair, mode="json")
        assert data == [{"name": "a"}, {"name": "b"}]
        validator.validate(data)
        assert not validator.is_valid([{"name": "a"}, {"label": "b"}])

    def test_generic_class_has_no_fixed_arity(self) -> None:
        with pytest.raises(ValueError, match="no fixed arity"):
            UnorderedNTupleValidator.for_type(UnorderedNTuple[int])

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            UnorderedNTupleValidator.for_type(tuple[int, int])
