"""
NHSNumber — value type wrapping the 10 digits of an NHS number.

The model serialises as ``{"digits": [...]}``, which is the interchange
shape to persist. When validating input it also accepts the grouped or
compact text form, or a bare list of digits, so it can be used directly
as a field type in other pydantic models:

    class PatientRecord(BaseModel):
        nhs_number: NHSNumber

    PatientRecord(nhs_number="943 476 5919")
"""

from __future__ import annotations

from typing import Annotated, Any, Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

from nhs_number import checksum as checksum_engine
from nhs_number.digits import DIGIT_COUNT, as_digits, compare_digits
from nhs_number.formatting import format_compact, format_nhs_number, parse_digits

Digit = Annotated[int, Field(ge=0, le=9)]


class NHSNumber(BaseModel):
    """An NHS number. Immutable, hashable and totally ordered by its digits."""

    digits: Annotated[
        tuple[Digit, ...],
        Field(min_length=DIGIT_COUNT, max_length=DIGIT_COUNT),
    ]

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def coerce_shorthand(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"digits": parse_digits(data)}
        if isinstance(data, (list, tuple)):
            return {"digits": data}
        return data

    # ── Construction ──

    @classmethod
    def new(cls, digits: Sequence[int]) -> NHSNumber:
        return cls(digits=as_digits(digits))

    @classmethod
    def from_str(cls, text: str) -> NHSNumber:
        """Parse grouped or compact text. Raises ParseError."""
        return cls(digits=parse_digits(text))

    @classmethod
    def testable_random_sample(cls) -> NHSNumber:
        """Random number in the never-issued 999 range. See testable.py."""
        from nhs_number.testable import testable_random_sample
        return testable_random_sample()

    # ── Checksum ──

    def check_digit(self) -> int:
        return checksum_engine.check_digit(self.digits)

    def checksum(self) -> checksum_engine.Checksum:
        return checksum_engine.compute_checksum(self.digits)

    def calculate_check_digit(self) -> int:
        return checksum_engine.calculate_check_digit(self.digits)

    def validate_check_digit(self) -> bool:
        return checksum_engine.validate_check_digit(self.digits)

    # ── Text ──

    def compact(self) -> str:
        return format_compact(self.digits)

    def __str__(self) -> str:
        return format_nhs_number(self.digits)

    # ── Equality / ordering (lexicographic over the digits) ──

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NHSNumber):
            return NotImplemented
        return self.digits == other.digits

    def __hash__(self) -> int:
        return hash(self.digits)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NHSNumber):
            return NotImplemented
        return compare_digits(self.digits, other.digits) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, NHSNumber):
            return NotImplemented
        return compare_digits(self.digits, other.digits) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, NHSNumber):
            return NotImplemented
        return compare_digits(self.digits, other.digits) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, NHSNumber):
            return NotImplemented
        return compare_digits(self.digits, other.digits) >= 0


def parse_nhs_number(text: str) -> NHSNumber:
    """Parse ``DDD DDD DDDD`` (separators optional) into an NHSNumber."""
    return NHSNumber.from_str(text)

