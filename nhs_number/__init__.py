"""
NHS Number — validate, format and generate UK NHS numbers.

The NHS number is a ten-digit identifier in '3 3 4' format whose final
digit is a Modulus 11 check digit, e.g. 943 476 5919.

    >>> from nhs_number import NHSNumber
    >>> n = NHSNumber.from_str("943 476 5919")
    >>> n.validate_check_digit()
    True
    >>> str(n)
    '943 476 5919'

A prefix whose checksum is 10 has no valid check digit at all:

    >>> NHSNumber.from_str("999 123 4560").calculate_check_digit()
    10
    >>> NHSNumber.from_str("999 123 4560").validate_check_digit()
    False
"""

import logging

from nhs_number.checksum import (
    Checksum,
    calculate_check_digit,
    check_digit,
    compute_checksum,
    validate_check_digit,
)
from nhs_number.digits import DIGIT_COUNT, as_digits, compare_digits
from nhs_number.exceptions import DigitCountError, NHSNumberError, ParseError
from nhs_number.formatting import format_compact, format_nhs_number, parse_digits
from nhs_number.models import NHSNumber, parse_nhs_number
from nhs_number.testable import (
    TESTABLE_MAX,
    TESTABLE_MIN,
    TESTABLE_RANGE,
    TestableRange,
    get_testable_range,
    is_testable,
    testable_random_sample,
    testable_valid_random_sample,
)
from nhs_number.validators import is_testable_nhs_number, validate_nhs_number

logging.getLogger("nhs_number").addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "DIGIT_COUNT",
    "TESTABLE_MAX",
    "TESTABLE_MIN",
    "TESTABLE_RANGE",
    "Checksum",
    "DigitCountError",
    "NHSNumber",
    "NHSNumberError",
    "ParseError",
    "TestableRange",
    "as_digits",
    "calculate_check_digit",
    "check_digit",
    "compute_checksum",
    "compare_digits",
    "format_compact",
    "format_nhs_number",
    "get_testable_range",
    "is_testable",
    "is_testable_nhs_number",
    "parse_digits",
    "parse_nhs_number",
    "testable_random_sample",
    "testable_valid_random_sample",
    "validate_check_digit",
    "validate_nhs_number",
]
