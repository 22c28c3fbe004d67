"""
UnorderedNTuple — Unordered tuple of N homogeneous elements

A fixed-size multiset: two tuples are equal if their elements are equal in
any order, counting duplicates. Intended for embedding in larger structures,
e.g. an undirected edge as an UnorderedPair of vertices.

INVARIANTS:
1. Storage order carries no meaning: equality, hashing and the canonical form
   never distinguish two tuples by storage order alone
2. Arity N is fixed per instance; fixed-arity classes (UnorderedPair,
   UnorderedTriple, of_arity(n)) reject any other length at construction
3. Equality needs only element __eq__; hashing additionally needs a total
   order on the elements (sorting canonicalizes storage order)
4. Equal tuples hash identically

Examples:
    >>> UnorderedNTuple([0, 3, 5]) == UnorderedNTuple([5, 0, 3])
    True
    >>> UnorderedPair.from_pair(("a", "b")) == UnorderedPair.from_pair(("b", "a"))
    True
    >>> UnorderedNTuple([1, 1]) == UnorderedNTuple([1, 2])
    False
"""

import types
from functools import lru_cache, partial
from typing import (
    Any,
    ClassVar,
    Generic,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Sized,
    Tuple,
    Type,
    get_args,
    get_origin,
)

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from unordered_tuple.domain.protocols import T
from unordered_tuple.errors import ArityMismatchError


# =============================================================================
# ARITY CHECK
# =============================================================================


def check_arity(expected: Optional[int], data: Any) -> Any:
    """
    Check that data holds exactly `expected` elements, without reading any.

    Args:
        expected: Target arity N (None accepts any length)
        data: Candidate sequence

    Returns:
        data, unchanged

    Raises:
        ArityMismatchError: If the length of data is unknown or differs from N
    """
    if expected is None:
        return data
    try:
        actual = len(data)
    except TypeError:
        raise ArityMismatchError(expected, None)
    if actual != expected:
        raise ArityMismatchError(expected, actual)
    return data


def _check_sized_arity(expected: Optional[int], data: Any) -> Any:
    # Non-sequences are left to the list schema, which reports the actual
    # type error
    if not isinstance(data, Sized) or isinstance(data, (str, bytes, bytearray, Mapping)):
        return data
    return check_arity(expected, data)


# =============================================================================
# UNORDERED N-TUPLE
# =============================================================================


class UnorderedNTuple(Generic[T]):
    """
    Unordered tuple of N homogeneous elements.

    The generic class takes its arity from the sequence it is built from.
    Subclasses that set ARITY accept only sequences of that length.

    Immutable: elements are stored as a tuple in the order they were given.
    That storage order is exposed by to_array() and iteration, but callers
    must not rely on it meaning anything.

    Raises:
        ArityMismatchError: If ARITY is set and elements has another length
    """

    __slots__ = ("_elements",)

    ARITY: ClassVar[Optional[int]] = None

    def __init__(self, elements: Iterable[T]) -> None:
        items = tuple(elements)
        check_arity(type(self).ARITY, items)
        object.__setattr__(self, "_elements", items)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> Tuple[Any, ...]:
        cls = type(self)
        if cls.__dict__.get("_GENERATED", False):
            # of_arity classes are not bound in this module
            return _rebuild_fixed_arity, (cls.ARITY, self._elements)
        return cls, (self._elements,)

    @classmethod
    def of_arity(cls, arity: int) -> "Type[UnorderedNTuple]":
        """
        Fixed-arity class for `arity` elements.

        Classes are cached, so of_arity(n) is of_arity(n) for every n.
        of_arity(2) is UnorderedPair and of_arity(3) is UnorderedTriple.

        Raises:
            ValueError: If arity is negative
        """
        return _fixed_arity_class(arity)

    @property
    def elements(self) -> Tuple[T, ...]:
        return self._elements

    @property
    def arity(self) -> int:
        return len(self._elements)

    def to_array(self) -> Tuple[T, ...]:
        """Elements in current storage order (not semantically meaningful)."""
        return self.elements

    def __iter__(self) -> Iterator[T]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.elements)!r})"

    # -------------------------------------------------------------------------
    # Equality
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """
        Multiset equality by greedy bipartite matching.

        Each element of self claims the leftmost unclaimed element of other
        that compares equal. A claimed slot is never matched twice, so
        duplicates are counted. O(N^2), needs only element __eq__.

        Tuples of different arity are never equal.
        """
        if not isinstance(other, UnorderedNTuple):
            return NotImplemented
        if len(self.elements) != len(other.elements):
            return False

        used = [False] * len(other.elements)
        for element in self.elements:
            for index, other_element in enumerate(other.elements):
                if used[index]:
                    continue
                if element == other_element:
                    used[index] = True
                    break
            else:
                return False
        return True

    # -------------------------------------------------------------------------
    # Hashing
    # -------------------------------------------------------------------------

    def canonical(self) -> Tuple[T, ...]:
        """
        Elements sorted by their natural order.

        Permutations of the same multiset share one canonical form, which is
        what __hash__ feeds to hash().

        A sort under a partial order (e.g. frozenset subset order) does not
        canonicalize, so every adjacent pair of the result must compare
        as x < y or x == y.

        Raises:
            TypeError: If the elements are not totally ordered
        """
        try:
            ordered = tuple(sorted(self.elements))
        except TypeError as e:
            raise TypeError(
                f"{type(self).__name__} is hashable only if its elements are "
                f"totally ordered: {e}"
            ) from e

        for x, y in zip(ordered, ordered[1:]):
            if not (x < y or x == y):
                raise TypeError(
                    f"{type(self).__name__} is hashable only if its elements are "
                    f"totally ordered: {x!r} and {y!r} are incomparable"
                )
        return ordered

    def __hash__(self) -> int:
        return hash(self.canonical())

    # -------------------------------------------------------------------------
    # pydantic integration
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Core schema for UnorderedNTuple[T] (and subclasses) as a model field.

        Wire form is a list of exactly N items validated and serialized with
        T's own schema. The arity check runs before any item is validated.
        """
        origin = get_origin(source) or source
        args = get_args(source)
        items_schema = handler.generate_schema(args[0]) if args else core_schema.any_schema()
        arity = origin.ARITY

        from_sequence = core_schema.no_info_before_validator_function(
            partial(_check_sized_arity, arity),
            core_schema.no_info_after_validator_function(
                origin,
                core_schema.list_schema(items_schema, min_length=arity, max_length=arity),
            ),
        )

        return core_schema.json_or_python_schema(
            json_schema=from_sequence,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(origin), from_sequence]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: list(value.elements),
                return_schema=core_schema.list_schema(items_schema),
            ),
        )


# =============================================================================
# FIXED-ARITY SPECIALIZATIONS
# =============================================================================


class UnorderedPair(UnorderedNTuple[T]):
    """
    Unordered tuple of exactly 2 elements.

    Convertible to and from a plain pair. to_pair() returns the elements in
    storage order, which is NOT guaranteed to match the order the pair was
    built from: UnorderedPair.from_pair((a, b)) equals
    UnorderedPair.from_pair((b, a)), so callers that need the original order
    must keep it themselves.
    """

    __slots__ = ()

    ARITY: ClassVar[Optional[int]] = 2

    @classmethod
    def from_pair(cls, pair: Tuple[T, T]) -> "UnorderedPair[T]":
        first, second = pair
        return cls((first, second))

    def to_pair(self) -> Tuple[T, T]:
        first, second = self.elements
        return first, second


class UnorderedTriple(UnorderedNTuple[T]):
    """Unordered tuple of exactly 3 elements."""

    __slots__ = ()

    ARITY: ClassVar[Optional[int]] = 3


_SPECIALIZATIONS = {2: UnorderedPair, 3: UnorderedTriple}


@lru_cache(maxsize=None)
def _fixed_arity_class(arity: int) -> Type[UnorderedNTuple]:
    if arity < 0:
        raise ValueError(f"Arity must be non-negative, got {arity}")
    if arity in _SPECIALIZATIONS:
        return _SPECIALIZATIONS[arity]

    name = f"Unordered{arity}Tuple"

    def body(ns: dict) -> None:
        ns["__slots__"] = ()
        ns["ARITY"] = arity
        ns["_GENERATED"] = True
        ns["__module__"] = __name__
        ns["__qualname__"] = name

    return types.new_class(name, (UnorderedNTuple[T],), exec_body=body)


def _rebuild_fixed_arity(arity: int, elements: Tuple[Any, ...]) -> UnorderedNTuple:
    """Unpickle an instance of an of_arity(n) class."""
    return _fixed_arity_class(arity)(elements)
