"""
Tests for the Modulus 11 checksum engine.

Tests cover:
  - Weighted sum / remainder arithmetic on known numbers
  - Checksum 11 encoded as 0
  - Checksum 10 (unvalidatable) for every possible last digit
  - Property checks over random prefixes
"""

import random

import pytest

from nhs_number.checksum import (
    WEIGHTS,
    Checksum,
    calculate_check_digit,
    check_digit,
    compute_checksum,
    validate_check_digit,
)
from nhs_number.exceptions import DigitCountError


def _random_prefixes(count, seed=7):
    rng = random.Random(seed)
    return [[rng.randint(0, 9) for _ in range(9)] for _ in range(count)]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Known values
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class TestCalculateCheckDigit:

    def test_weights(self):
        assert WEIGHTS == (10, 9, 8, 7, 6, 5, 4, 3, 2)

    def test_sequential_digits(self):
        digits = [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]
        assert calculate_check_digit(digits) == 9
        assert check_digit(digits) == 9
        assert validate_check_digit(digits) is True

    def test_worked_example(self):
        # (9*10)+(4*9)+(3*8)+(4*7)+(7*6)+(6*5)+(5*4)+(9*3)+(1*2) = 299
        assert calculate_check_digit([9, 4, 3, 4, 7, 6, 5, 9, 1]) == 9

    def test_checksum_eleven_is_zero(self):
        outcome = compute_checksum([9, 4, 3, 4, 7, 6, 5, 8, 7])
        assert outcome.raw == 11
        assert outcome.check_digit == 0
        assert calculate_check_digit([9, 4, 3, 4, 7, 6, 5, 8, 7, 0]) == 0

    def test_all_zeros(self):
        assert calculate_check_digit([0] * 9) == 0
        assert validate_check_digit([0] * 10) is True

    def test_ignores_tenth_digit(self):
        assert calculate_check_digit([0, 1, 2, 3, 4, 5, 6, 7, 8, 0]) == 9

    def test_testable_max_is_valid(self):
        assert validate_check_digit([9] * 10) is True

    def test_too_few_digits(self):
        with pytest.raises(DigitCountError):
            calculate_check_digit([1, 2, 3])

    def test_too_many_digits(self):
        with pytest.raises(DigitCountError):
            calculate_check_digit([0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 0])
        with pytest.raises(DigitCountError):
            calculate_check_digit([1] * 20)


class TestUnvalidatable:

    def test_checksum_ten(self):
        outcome = compute_checksum([9, 9, 9, 1, 2, 3, 4, 5, 6])
        assert outcome.raw == 10
        assert outcome.is_validatable is False
        assert outcome.check_digit is None
        assert calculate_check_digit([9, 9, 9, 1, 2, 3, 4, 5, 6]) == 10

    @pytest.mark.parametrize("last", range(10))
    def test_never_valid_for_any_last_digit(self, last):
        assert validate_check_digit([9, 9, 9, 1, 2, 3, 4, 5, 6, last]) is False
        assert validate_check_digit([1, 2, 3, 4, 5, 6, 7, 8, 9, last]) is False


class TestCheckDigit:

    def test_returns_last_digit_verbatim(self):
        assert check_digit([9, 9, 9, 1, 2, 3, 4, 5, 6, 7]) == 7

    def test_wrong_length(self):
        with pytest.raises(DigitCountError):
            check_digit([1, 2, 3, 4, 5, 6, 7, 8, 9])

    def test_mismatch_is_invalid(self):
        assert validate_check_digit([9, 4, 3, 4, 7, 6, 5, 9, 1, 8]) is False


class TestValidateWrongLength:
    """Length is checked before the checksum, whatever the prefix."""

    @pytest.mark.parametrize(
        "digits",
        [
            [9, 9, 9, 1, 2, 3, 4, 5, 6],           # unvalidatable prefix
            [9, 4, 3, 4, 7, 6, 5, 9, 1],           # validatable prefix
            [9, 9, 9, 1, 2, 3, 4, 5, 6, 0, 0],
            [9, 4, 3, 4, 7, 6, 5, 9, 1, 9, 0],
        ],
    )
    def test_raises(self, digits):
        with pytest.raises(DigitCountError):
            validate_check_digit(digits)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Properties
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class TestChecksumProperties:

    def test_range_and_zero_rule(self):
        for prefix in _random_prefixes(2000):
            value = calculate_check_digit(prefix)
            raw = compute_checksum(prefix).raw
            assert 0 <= value <= 10
            assert (value == 0) == (raw == 11)

    def test_unvalidatable_prefixes_reject_every_last_digit(self):
        found = 0
        for prefix in _random_prefixes(2000, seed=11):
            if calculate_check_digit(prefix) != 10:
                continue
            found += 1
            for last in range(10):
                assert validate_check_digit(prefix + [last]) is False
        assert found > 0

    def test_completed_prefixes_validate(self):
        for prefix in _random_prefixes(500, seed=3):
            outcome = compute_checksum(prefix)
            if outcome.is_validatable:
                assert validate_check_digit(prefix + [outcome.check_digit]) is True

    def test_checksum_is_value_object(self):
        assert Checksum(raw=5) == Checksum(raw=5)
        assert Checksum(raw=5).as_int() == 5
