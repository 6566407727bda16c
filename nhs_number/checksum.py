"""
Checksum Engine — Modulus 11 check digit for NHS numbers.

Multiply digits 1-9 by weights 10-2, sum them, take the remainder mod 11
and subtract it from 11:

  - 11 is written as a check digit of 0
  - 10 means no check digit can make the number valid
  - anything else (1-9) is the check digit itself

Worked example, 943 476 5919:
  (9*10)+(4*9)+(3*8)+(4*7)+(7*6)+(6*5)+(5*4)+(9*3)+(1*2) = 299
  299 mod 11 = 2, 11 - 2 = 9 → check digit 9.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from nhs_number.digits import DIGIT_COUNT, INFORMATION_DIGIT_COUNT
from nhs_number.exceptions import DigitCountError

logger = logging.getLogger("nhs_number.checksum")

WEIGHTS = (10, 9, 8, 7, 6, 5, 4, 3, 2)

# Raw checksum values with special meaning
ZERO_CHECKSUM = 11
UNVALIDATABLE_CHECKSUM = 10


@dataclass(frozen=True)
class Checksum:
    """
    Outcome of the checksum calculation for a 9-digit prefix.

    ``raw`` is 11 minus the weighted sum mod 11, so always in 1-11.
    ``check_digit`` is None when the prefix is unvalidatable.
    """
    raw: int

    @property
    def is_validatable(self) -> bool:
        return self.raw != UNVALIDATABLE_CHECKSUM

    @property
    def check_digit(self) -> Optional[int]:
        if self.raw == UNVALIDATABLE_CHECKSUM:
            return None
        if self.raw == ZERO_CHECKSUM:
            return 0
        return self.raw

    def as_int(self) -> int:
        """Integer rendering in 0-10, where 10 stands for unvalidatable."""
        if self.raw == ZERO_CHECKSUM:
            return 0
        return self.raw


def _prefix(digits: Sequence[int]) -> Sequence[int]:
    if len(digits) not in (INFORMATION_DIGIT_COUNT, DIGIT_COUNT):
        raise DigitCountError(
            f"expected {INFORMATION_DIGIT_COUNT} or {DIGIT_COUNT} digits, got {len(digits)}"
        )
    return digits[:INFORMATION_DIGIT_COUNT]


def compute_checksum(digits: Sequence[int]) -> Checksum:
    """Compute the checksum outcome from the first 9 digits."""
    total = sum(d * w for d, w in zip(_prefix(digits), WEIGHTS))
    return Checksum(raw=11 - (total % 11))


def calculate_check_digit(digits: Sequence[int]) -> int:
    """
    Calculate the check digit using the Modulus 11 algorithm.

    Accepts the 9 information digits or a full 10-digit number (the last
    digit is ignored). Returns 0-9, or 10 when the prefix has no valid
    check digit.
    """
    return compute_checksum(digits).as_int()


def check_digit(digits: Sequence[int]) -> int:
    """Return the stored check digit, i.e. the last of the 10 digits."""
    if len(digits) != DIGIT_COUNT:
        raise DigitCountError(f"expected {DIGIT_COUNT} digits, got {len(digits)}")
    return digits[9]


def validate_check_digit(digits: Sequence[int]) -> bool:
    """True when the stored check digit equals the calculated one."""
    stored = check_digit(digits)
    outcome = compute_checksum(digits)
    if not outcome.is_validatable:
        logger.debug("checksum is 10, no check digit is valid")
        return False
    if stored != outcome.check_digit:
        logger.debug(
            "check digit mismatch: stored=%s calculated=%s",
            stored, outcome.check_digit,
        )
        return False
    return True
