"""
Pytest fixtures for sleep cycle calculator tests.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sleepcycle.calculator import ScheduleCalculator
from sleepcycle.range_advisor import RangeAdvisor
from sleepcycle.types import CycleRange, Settings


# ============================================================================
# Test Doubles
# ============================================================================


class CountingAdvisor(RangeAdvisor):
    """RangeAdvisor that records how often it was consulted."""

    def __init__(self):
        self.calls = 0

    def recommended_range(self, settings: Settings) -> CycleRange:
        self.calls += 1
        return super().recommended_range(settings)


class StaticTipProvider:
    """TipProvider returning a fixed tip and counting calls."""

    def __init__(self, tip: str = "Keep your wake time consistent, even on weekends."):
        self.tip = tip
        self.calls = 0

    def next_tip(self) -> str:
        self.calls += 1
        return self.tip


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def calculator():
    """ScheduleCalculator instance."""
    return ScheduleCalculator()


@pytest.fixture
def counting_advisor():
    return CountingAdvisor()


@pytest.fixture
def tip_provider():
    return StaticTipProvider()


@pytest.fixture
def default_settings():
    """90 min cycles, 15 min latency, 10 options, age 30, moderate."""
    return Settings()


@pytest.fixture
def wake_anchor():
    """07:00 on 2026-10-19."""
    return datetime(2026, 10, 19, 7, 0)


@pytest.fixture
def bedtime_anchor():
    """23:00 on 2026-10-19."""
    return datetime(2026, 10, 19, 23, 0)


@pytest.fixture(autouse=True)
def clean_rimrod_env(monkeypatch):
    """Keep RIMROD_* variables from the developer's shell out of tests."""
    for name in (
        "RIMROD_CYCLE_LENGTH",
        "RIMROD_SLEEP_LATENCY",
        "RIMROD_NUM_OPTIONS",
        "RIMROD_AGE",
        "RIMROD_ACTIVITY_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
