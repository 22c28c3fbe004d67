"""
Contract Validation Module

JSON Schema validation of the unordered tuple wire form.
"""

from .validators import (
    UNORDERED_NTUPLE_SCHEMA,
    ContractValidator,
    SchemaLoader,
    UnorderedNTupleValidator,
    validate_unordered_ntuple,
)

__all__ = [
    # Constants
    "UNORDERED_NTUPLE_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "UnorderedNTupleValidator",
    # Functions
    "validate_unordered_ntuple",
]
