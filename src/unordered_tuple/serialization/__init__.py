"""
Fixed-length sequence codec for unordered tuples.
"""

from unordered_tuple.serialization.codec import (
    JSON_SEPARATORS,
    decode,
    dumps,
    encode,
    loads,
)

__all__ = [
    "JSON_SEPARATORS",
    "encode",
    "decode",
    "dumps",
    "loads",
]
