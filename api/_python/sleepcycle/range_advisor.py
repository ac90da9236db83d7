"""
Recommended cycle-count window from a user profile.

Rules, applied in order (later rules override earlier ones):
- Baseline: 5-6 cycles (7.5-9h at 90 min/cycle)
- High activity: 6-7 cycles (more recovery sleep)
- Low activity: 4-6 cycles
- Age 65+: lower bound drops by one cycle (floor 4), upper bound capped at 6
- Clamp to [1, num_options]

The clamp is not repaired: with a small num_options the window can end up
with max below min, in which case no candidate is recommended.
"""

import logging

from .types import ActivityLevel, CycleRange, Settings

logger = logging.getLogger(__name__)

BASELINE_RANGE = (5, 6)

ACTIVITY_RANGES: dict[ActivityLevel, tuple[int, int]] = {
    "high": (6, 7),
    "low": (4, 6),
}

SENIOR_AGE = 65
SENIOR_MIN_FLOOR = 4
SENIOR_MAX_CAP = 6

MIN_CYCLES = 1


class RangeAdvisor:
    """Map a profile (age, activity level, num_options) to a CycleRange."""

    def recommended_range(self, settings: Settings) -> CycleRange:
        """
        Compute the inclusive recommended window for these settings.

        Args:
            settings: Normalized settings snapshot

        Returns:
            CycleRange, possibly degenerate (max_cycles < min_cycles)
        """
        min_cycles, max_cycles = BASELINE_RANGE

        if settings.activity_level == "high":
            min_cycles, max_cycles = ACTIVITY_RANGES["high"]
        elif settings.activity_level == "low":
            min_cycles, max_cycles = ACTIVITY_RANGES["low"]

        # Independent of activity level
        if settings.age >= SENIOR_AGE:
            min_cycles = max(SENIOR_MIN_FLOOR, min_cycles - 1)
            max_cycles = min(SENIOR_MAX_CAP, max_cycles)

        min_cycles = max(MIN_CYCLES, min_cycles)
        max_cycles = min(settings.num_options, max_cycles)

        window = CycleRange(min_cycles=min_cycles, max_cycles=max_cycles)
        if window.is_degenerate:
            logger.warning(
                "Recommended window [%d, %d] is empty for num_options=%d",
                min_cycles,
                max_cycles,
                settings.num_options,
            )
        else:
            logger.debug("Recommended window [%d, %d]", min_cycles, max_cycles)
        return window


def recommended_range(settings: Settings) -> CycleRange:
    """Convenience function using a default RangeAdvisor."""
    return RangeAdvisor().recommended_range(settings)
