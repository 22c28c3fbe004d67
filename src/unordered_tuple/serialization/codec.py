"""
Codec — Fixed-length sequence serialization of unordered tuples

Wire form: a homogeneous sequence of exactly N elements, each in the element
type's own encoding, in the tuple's current storage order. No envelope, tag
or metadata is added.

This is an ordered encoding of an unordered value: a round trip preserves
the multiset, not necessarily the storage order, which equality ignores.

Decoding rules:
1. The target arity N comes from the `arity` argument or from cls.ARITY
2. Input whose length is unknown or differs from N is rejected with
   ArityMismatchError BEFORE any element is decoded
3. Element decoder errors propagate unchanged
"""

import json
from typing import Any, Callable, Final, Iterable, Optional, Type, TypeVar

from unordered_tuple.domain.ntuple import UnorderedNTuple, check_arity


# Compact JSON, no whitespace
JSON_SEPARATORS: Final[tuple[str, str]] = (",", ":")

TupleT = TypeVar("TupleT", bound=UnorderedNTuple)

ElementEncoder = Callable[[Any], Any]
ElementDecoder = Callable[[Any], Any]


# =============================================================================
# SEQUENCE CODEC
# =============================================================================


def encode(
    value: UnorderedNTuple, element_encoder: Optional[ElementEncoder] = None
) -> list:
    """
    Encode a tuple as a list of its N elements in storage order.

    Args:
        value: Tuple to encode
        element_encoder: Encoding of a single element (default: identity)

    Returns:
        List of exactly value.arity encoded elements
    """
    if element_encoder is None:
        return list(value.elements)
    return [element_encoder(element) for element in value.elements]


def decode(
    data: Iterable[Any],
    arity: Optional[int] = None,
    element_decoder: Optional[ElementDecoder] = None,
    cls: Type[TupleT] = UnorderedNTuple,
) -> TupleT:
    """
    Decode a sequence of N encoded elements into a tuple.

    Args:
        data: Sequence of encoded elements, with a known length
        arity: Expected number of elements N (default: cls.ARITY; if both are
            None, any length is accepted)
        element_decoder: Decoding of a single element (default: identity)
        cls: Tuple class to build

    Returns:
        Instance of cls holding the N decoded elements in input order

    Raises:
        ArityMismatchError: If len(data) is unknown or differs from N
        ValueError: If arity contradicts cls.ARITY
    """
    if arity is None:
        arity = cls.ARITY
    elif cls.ARITY is not None and cls.ARITY != arity:
        raise ValueError(f"{cls.__name__} has arity {cls.ARITY}, cannot decode {arity}")

    check_arity(arity, data)

    if element_decoder is None:
        return cls(tuple(data))
    return cls(tuple(element_decoder(item) for item in data))


# =============================================================================
# JSON
# =============================================================================


def dumps(
    value: UnorderedNTuple,
    element_encoder: Optional[ElementEncoder] = None,
    **kwargs: Any,
) -> str:
    """
    Serialize a tuple to a JSON array.

    Extra keyword arguments go to json.dumps (compact separators unless
    overridden).
    """
    kwargs.setdefault("separators", JSON_SEPARATORS)
    return json.dumps(encode(value, element_encoder), **kwargs)


def loads(
    text: str,
    arity: Optional[int] = None,
    element_decoder: Optional[ElementDecoder] = None,
    cls: Type[TupleT] = UnorderedNTuple,
) -> TupleT:
    """
    Deserialize a JSON array into a tuple.

    Raises:
        json.JSONDecodeError: If text is not valid JSON
        TypeError: If text is a JSON value other than an array
        ArityMismatchError: If the array does not hold exactly N elements
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise TypeError(f"Expected a JSON array, got {type(data).__name__}")
    return decode(data, arity, element_decoder, cls)
