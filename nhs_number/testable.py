"""
Testable range — NHS numbers that are guaranteed never to be issued.

999 000 0000 to 999 999 9999 is reserved for testing. Samples drawn from it
are safe to use as fixture data because they cannot collide with a real
patient.

``testable_random_sample`` only guarantees range membership; its check digit
is random too, so roughly 1 in 10 samples passes ``validate_check_digit``.
Use ``testable_valid_random_sample`` when the number must also validate.
"""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from nhs_number import settings
from nhs_number.checksum import compute_checksum
from nhs_number.models import NHSNumber

logger = logging.getLogger("nhs_number.testable")

TESTABLE_PREFIX = (9, 9, 9)


@dataclass(frozen=True)
class TestableRange:
    """Closed interval [minimum, maximum] of NHS numbers."""

    minimum: NHSNumber
    maximum: NHSNumber

    # Not a pytest test class despite the name
    __test__ = False

    def __contains__(self, number: object) -> bool:
        if not isinstance(number, NHSNumber):
            return False
        return self.minimum <= number <= self.maximum

    def sample(self, rng: Optional[random.Random] = None) -> NHSNumber:
        """Uniform draw of the 7 free digits; the check digit is not fixed up."""
        rng = rng or get_rng()
        free = [rng.randint(0, 9) for _ in range(10 - len(TESTABLE_PREFIX))]
        return NHSNumber(digits=TESTABLE_PREFIX + tuple(free))

    def valid_sample(self, rng: Optional[random.Random] = None) -> NHSNumber:
        """Draw until the 9-digit prefix has a check digit, then append it."""
        rng = rng or get_rng()
        while True:
            free = [rng.randint(0, 9) for _ in range(9 - len(TESTABLE_PREFIX))]
            prefix = TESTABLE_PREFIX + tuple(free)
            outcome = compute_checksum(prefix)
            if outcome.is_validatable:
                return NHSNumber(digits=prefix + (outcome.check_digit,))
            logger.debug("Redrawing unvalidatable prefix %s", prefix)


@lru_cache(maxsize=None)
def get_testable_range() -> TestableRange:
    """The reserved range, built once per process."""
    return TestableRange(
        minimum=NHSNumber(digits=(9, 9, 9, 0, 0, 0, 0, 0, 0, 0)),
        maximum=NHSNumber(digits=(9, 9, 9, 9, 9, 9, 9, 9, 9, 9)),
    )


TESTABLE_RANGE = get_testable_range()
TESTABLE_MIN = TESTABLE_RANGE.minimum
TESTABLE_MAX = TESTABLE_RANGE.maximum


_default_rng = random.Random()
_seeded_rng: Optional[random.Random] = None
_seeded_lock = threading.Lock()


def get_rng() -> random.Random:
    """
    Random source for sampling.

    A process-wide unseeded generator unless NHS_NUMBER_RANDOM_SEED is
    set, in which case a single seeded generator is created and reused.
    """
    global _seeded_rng
    if settings.RANDOM_SEED is None:
        return _default_rng
    with _seeded_lock:
        if _seeded_rng is None:
            logger.info("Seeding sample generator with %s", settings.RANDOM_SEED)
            _seeded_rng = random.Random(settings.RANDOM_SEED)
    return _seeded_rng


def testable_random_sample(rng: Optional[random.Random] = None) -> NHSNumber:
    """Random NHS number in the reserved range. Not necessarily valid."""
    return get_testable_range().sample(rng)


def testable_valid_random_sample(rng: Optional[random.Random] = None) -> NHSNumber:
    """Random NHS number in the reserved range that passes the checksum."""
    return get_testable_range().valid_sample(rng)


def is_testable(number: NHSNumber) -> bool:
    return number in get_testable_range()
