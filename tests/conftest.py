"""Shared fixtures for the sharesplit test suite."""
from __future__ import annotations

import random
from typing import List, Sequence

import pytest

from sharesplit.random_source import CoefficientSource

REFERENCE_BLOB = (
    "0103AAFEBDB7A3F114\n"
    "0203AA1F407C51B784\n"
    "0303AAD9F0B37DB8C3\n"
    "0403AA29CB5B26F4D1\n"
    "0503AA11D2754D6AAE\n"
    "0603AA910400F21B5A\n"
    "0703AAA863FE1307D6\n"
    "0803AA56EE6CB32E20\n"
    "0903AA9CA44CD0903A\n"
    "0A03AA79869E6A2C23\n"
)


class FixedSource(CoefficientSource):
    """Hands out the same coefficients for every byte and counts the draws."""

    def __init__(self, coefficients: Sequence[int]) -> None:
        super().__init__(random.Random(0))
        self._fixed = list(coefficients)
        self.draws = 0

    def coefficients(self, count: int) -> List[int]:
        self.draws += 1
        return self._fixed[:count]


@pytest.fixture
def reference_blob() -> str:
    return REFERENCE_BLOB


@pytest.fixture
def seeded_source() -> CoefficientSource:
    return CoefficientSource(random.Random(1337))


@pytest.fixture
def fixed_source():
    return FixedSource
