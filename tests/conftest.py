"""Pytest configuration and fixtures."""

import pytest

from herokit.dice import DiceRoller
from herokit.models import Inventory, Vitality


@pytest.fixture
def roller():
    """Seeded roller for deterministic rolls."""
    return DiceRoller(seed=1234)


@pytest.fixture
def vitality():
    """Fresh health bar at full health."""
    return Vitality.create()


@pytest.fixture
def inventory():
    """Fresh empty inventory."""
    return Inventory.create()


@pytest.fixture
def no_sleep():
    """Sleep replacement that records requested delays."""
    delays = []

    def _sleep(seconds):
        delays.append(seconds)

    _sleep.delays = delays
    return _sleep
