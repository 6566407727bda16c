"""
Digit Array Core — the canonical 10-digit representation of an NHS number.

Digits are kept as a plain tuple of ints so that equality, ordering and
hashing all come from tuple semantics (lexicographic, first difference wins).
Values outside 0-9 are not rejected here; the NHSNumber model does that.
"""

from __future__ import annotations

import operator
from typing import Sequence

from nhs_number.exceptions import DigitCountError

DIGIT_COUNT = 10
INFORMATION_DIGIT_COUNT = 9

Digits = tuple[int, ...]


def as_digits(sequence: Sequence[int]) -> Digits:
    """Build the canonical 10-tuple from any sequence of ints. Floats raise TypeError."""
    digits = tuple(operator.index(d) for d in sequence)
    if len(digits) != DIGIT_COUNT:
        raise DigitCountError(
            f"expected {DIGIT_COUNT} digits, got {len(digits)}"
        )
    return digits


def compare_digits(a: Sequence[int], b: Sequence[int]) -> int:
    """Return -1, 0 or 1 comparing two digit sequences lexicographically."""
    for x, y in zip(a, b):
        if x != y:
            return -1 if x < y else 1
    if len(a) == len(b):
        return 0
    return -1 if len(a) < len(b) else 1
