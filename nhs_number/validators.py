"""
String-level validators for NHS numbers.

Convenience wrappers for callers holding raw text (form fields, CSV
columns) who only need a yes/no answer.
"""

from __future__ import annotations

from nhs_number.exceptions import ParseError
from nhs_number.models import parse_nhs_number
from nhs_number.testable import is_testable


def validate_nhs_number(nhs: str) -> bool:
    """
    Validate an NHS number using the Modulus 11 checksum algorithm.

    Accepts ``DDD DDD DDDD`` or ``DDDDDDDDDD``. Anything that does not
    parse is invalid.
    """
    try:
        number = parse_nhs_number(nhs)
    except ParseError:
        return False
    return number.validate_check_digit()


def is_testable_nhs_number(nhs: str) -> bool:
    """True if the text parses to a number in the never-issued 999 range."""
    try:
        number = parse_nhs_number(nhs)
    except ParseError:
        return False
    return is_testable(number)
