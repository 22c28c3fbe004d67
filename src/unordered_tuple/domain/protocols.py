"""
Capability protocols for element types.

Equality needs only __eq__. Hashing needs strictly more: a total order
(__lt__) and __hash__ on every element.
"""

from typing import Any, Protocol, TypeVar


class SupportsEquality(Protocol):
    def __eq__(self, other: Any) -> bool: ...


class SupportsOrder(Protocol):
    def __lt__(self, other: Any) -> bool: ...

    def __eq__(self, other: Any) -> bool: ...


class SupportsOrderAndHash(Protocol):
    def __lt__(self, other: Any) -> bool: ...

    def __eq__(self, other: Any) -> bool: ...

    def __hash__(self) -> int: ...


T = TypeVar("T")
OrderedT = TypeVar("OrderedT", bound=SupportsOrder)
HashableOrderedT = TypeVar("HashableOrderedT", bound=SupportsOrderAndHash)
