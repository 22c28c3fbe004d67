"""
Domain value types.

Contains UnorderedNTuple and its fixed-arity specializations.
"""

from unordered_tuple.domain.ntuple import (
    UnorderedNTuple,
    UnorderedPair,
    UnorderedTriple,
    check_arity,
)
from unordered_tuple.domain.protocols import (
    HashableOrderedT,
    OrderedT,
    SupportsEquality,
    SupportsOrder,
    SupportsOrderAndHash,
    T,
)

__all__ = [
    # Tuple types
    "UnorderedNTuple",
    "UnorderedPair",
    "UnorderedTriple",
    "check_arity",
    # Element capabilities
    "SupportsEquality",
    "SupportsOrder",
    "SupportsOrderAndHash",
    "T",
    "OrderedT",
    "HashableOrderedT",
]
