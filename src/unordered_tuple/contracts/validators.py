"""
JSON Schema Contract Validators

Validation of wire payloads against the unordered tuple contract, using the
jsonschema library.

Schemas:
- unordered_ntuple.json: array of elements (base schema, arity-free)

UnorderedNTupleValidator specializes the base schema for a given arity N
(minItems = maxItems = N) and, optionally, an element schema.
for_type() derives the element schema from a tuple type through pydantic.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Final, Iterator, Optional, get_origin

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from pydantic import TypeAdapter

from unordered_tuple.domain.ntuple import UnorderedNTuple

logger = logging.getLogger(__name__)

UNORDERED_NTUPLE_SCHEMA: Final[str] = "unordered_ntuple"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader of wire schemas.

    Schemas live in the schema/ directory next to this module. Every wire
    schema describes an array, since every tuple travels as one. Callers get
    a private copy of the cached schema and may specialize it freely.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a wire schema.

        Args:
            schema_name: Schema name without extension (e.g. 'unordered_ntuple')

        Returns:
            Copy of the schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a Draft 2020-12 schema of an array
        """
        if schema_name not in self._schemas:
            self._schemas[schema_name] = self._read(schema_name)
        return copy.deepcopy(self._schemas[schema_name])

    def _read(self, schema_name: str) -> Dict[str, Any]:
        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        try:
            schema = json.loads(schema_path.read_text(encoding="utf-8"))
            Draft202012Validator.check_schema(schema)
        except (json.JSONDecodeError, jsonschema.SchemaError) as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        if schema.get("type") != "array":
            raise ValueError(f"Schema {schema_name}.json does not describe an array")

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps validation of data against a JSON Schema.
    """

    def __init__(self, schema: Dict[str, Any]):
        Draft202012Validator.check_schema(schema)
        self.schema = schema
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: If data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Check data against the schema without raising."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """Iterate over every validation error of data."""
        return self.validator.iter_errors(data)


class UnorderedNTupleValidator(ContractValidator):
    """
    Validator for the wire form of an unordered tuple of arity N.

    Args:
        arity: Required number of elements N
        items_schema: JSON Schema every element must match (default: any)
        defs: Definitions referenced from items_schema ("$defs")
    """

    def __init__(
        self,
        arity: int,
        items_schema: Optional[Dict[str, Any]] = None,
        defs: Optional[Dict[str, Any]] = None,
    ):
        if arity < 0:
            raise ValueError(f"Arity must be non-negative, got {arity}")

        schema = _SCHEMA_LOADER.load_schema(UNORDERED_NTUPLE_SCHEMA)
        schema["minItems"] = arity
        schema["maxItems"] = arity
        if items_schema is not None:
            schema["items"] = items_schema
        if defs:
            schema["$defs"] = defs

        self.arity = arity
        super().__init__(schema)

    @classmethod
    def for_type(cls, tuple_type: Any) -> "UnorderedNTupleValidator":
        """
        Validator for a fixed-arity tuple type, e.g. UnorderedPair[int].

        The element schema is the one pydantic generates for the element
        type, so the contract matches what model_dump(mode="json") emits.

        Raises:
            TypeError: If tuple_type is not an UnorderedNTuple class
            ValueError: If tuple_type has no fixed arity
        """
        origin = get_origin(tuple_type) or tuple_type
        if not (isinstance(origin, type) and issubclass(origin, UnorderedNTuple)):
            raise TypeError(f"Not an unordered tuple type: {tuple_type!r}")
        if origin.ARITY is None:
            raise ValueError(f"{origin.__name__} has no fixed arity")

        generated = TypeAdapter(tuple_type).json_schema()
        return cls(origin.ARITY, generated.get("items"), generated.get("$defs"))


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_unordered_ntuple(
    data: Any, arity: int, items_schema: Optional[Dict[str, Any]] = None
) -> None:
    """
    Validate the wire form of an unordered tuple of arity N.

    Raises:
        ValidationError: If data is not an array of exactly N matching elements
    """
    UnorderedNTupleValidator(arity, items_schema).validate(data)
