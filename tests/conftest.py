"""Shared test fixtures."""

import pytest

from clockduration import ClockDuration


@pytest.fixture
def hms():
    return ClockDuration(1, 23, 45)


@pytest.fixture
def zero():
    return ClockDuration(0, 0, 0)
