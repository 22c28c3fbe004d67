"""
Errors — Exception taxonomy for unordered tuples

Every failure is raised to the caller immediately. Nothing here is retried,
logged or swallowed.

- UnorderedTupleError: base class for all errors of this package
- ArityMismatchError: a sequence holds a number of elements other than
  the arity N of the target tuple (fixed-arity construction, decoding)

Element-level decode failures are NOT wrapped: they propagate unchanged
from the element decoder.
"""

from typing import Final, Optional


# =============================================================================
# MESSAGES
# =============================================================================

WRONG_NUMBER_OF_ELEMENTS: Final[str] = "Wrong number of elements"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnorderedTupleError(Exception):
    """Base class for errors raised by unordered_tuple."""

    pass


class ArityMismatchError(UnorderedTupleError, ValueError):
    """
    Sequence length differs from the arity N of the target tuple.

    Subclasses ValueError so that pydantic reports it as a ValidationError
    when raised from a validator.

    Attributes:
        expected: Arity N of the target tuple
        actual: Observed length, or None if the length is unknown
    """

    def __init__(self, expected: int, actual: Optional[int]):
        self.expected = expected
        self.actual = actual
        if actual is None:
            detail = f"expected {expected}, length unknown"
        else:
            detail = f"expected {expected}, got {actual}"
        super().__init__(f"{WRONG_NUMBER_OF_ELEMENTS}: {detail}")
