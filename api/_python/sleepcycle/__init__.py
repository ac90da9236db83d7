"""
Rimrod Sleep Cycle Calculator

Suggests bedtimes for a target wake time (or wake times for a bedtime) built
from whole sleep cycles plus the time it takes to fall asleep, and flags the
cycle counts recommended for the user's age and activity level.

Main calculator: ScheduleCalculator
"""

from .calculator import (
    ScheduleCalculator,
    compute_bedtimes,
    compute_wake_times,
    generate_schedule,
)
from .range_advisor import RangeAdvisor, recommended_range
from .settings import (
    InMemorySettingsProvider,
    merge_settings,
    normalize_settings,
    settings_from_env,
)
from .types import (
    ActivityLevel,
    CalculationMode,
    Candidate,
    CycleRange,
    ScheduleRequest,
    ScheduleResponse,
    Settings,
)

__all__ = [
    # Types
    "ActivityLevel",
    "CalculationMode",
    "Settings",
    "CycleRange",
    "Candidate",
    "ScheduleRequest",
    "ScheduleResponse",
    # Calculator
    "RangeAdvisor",
    "recommended_range",
    "ScheduleCalculator",
    "compute_bedtimes",
    "compute_wake_times",
    "generate_schedule",
    # Settings
    "InMemorySettingsProvider",
    "normalize_settings",
    "merge_settings",
    "settings_from_env",
]
