"""
Unordered tuples of N homogeneous elements.

Equality, hashing and serialization treat permutations of the elements as
identical. Duplicates are kept and counted (multiset semantics).
"""

from unordered_tuple.domain import (
    UnorderedNTuple,
    UnorderedPair,
    UnorderedTriple,
)
from unordered_tuple.errors import ArityMismatchError, UnorderedTupleError

__version__ = "0.1.0"

__all__ = [
    "UnorderedNTuple",
    "UnorderedPair",
    "UnorderedTriple",
    "UnorderedTupleError",
    "ArityMismatchError",
]
