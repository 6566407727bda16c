"""
Text rendering and parsing of NHS numbers.

The canonical form is '3 3 4' grouped: ``DDD DDD DDDD``. On input the two
separators are optional, so ``DDDDDDDDDD`` is accepted as well, but any
other spacing or separator character is rejected.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

from nhs_number.digits import Digits
from nhs_number.exceptions import ParseError

logger = logging.getLogger("nhs_number.parse")

# ASCII digits only; \d would also match other Unicode digit characters
_NHS_NUMBER_RE = re.compile(r"([0-9]{3}) ?([0-9]{3}) ?([0-9]{4})")


def format_nhs_number(digits: Sequence[int]) -> str:
    """Render 10 digits as ``DDD DDD DDDD``."""
    d = [str(x) for x in digits]
    return f"{''.join(d[0:3])} {''.join(d[3:6])} {''.join(d[6:10])}"


def format_compact(digits: Sequence[int]) -> str:
    """Render 10 digits with no separators."""
    return "".join(str(x) for x in digits)


def parse_digits(text: str) -> Digits:
    """Extract the 10 digits from grouped or compact text, or raise ParseError."""
    match = _NHS_NUMBER_RE.fullmatch(text)
    if match is None:
        logger.debug("Rejected NHS number text %r", text)
        raise ParseError(text)
    return tuple(int(c) for c in "".join(match.groups()))
