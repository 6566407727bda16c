"""
Shared fixtures for the nhs_number test suite.
"""

import random

import pytest

from nhs_number import NHSNumber


@pytest.fixture
def rng():
    """Seeded generator so sampling tests are reproducible."""
    return random.Random(20240101)


@pytest.fixture
def valid_number():
    # Worked example from the NHS data dictionary: checksum 9
    return NHSNumber.new([9, 4, 3, 4, 7, 6, 5, 9, 1, 9])


@pytest.fixture
def zero_check_number():
    # Weighted sum 308 is divisible by 11, so checksum 11 → check digit 0
    return NHSNumber.new([9, 4, 3, 4, 7, 6, 5, 8, 7, 0])


@pytest.fixture
def unvalidatable_number():
    # Weighted sum 320, 320 mod 11 = 1 → checksum 10, never valid
    return NHSNumber.new([9, 9, 9, 1, 2, 3, 4, 5, 6, 0])
