"""
Data structures for sleep cycle calculations.

Settings is the per-call input snapshot; CycleRange and Candidate are derived
values produced fresh for every calculation.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

ActivityLevel = Literal["low", "moderate", "high"]

ACTIVITY_LEVELS: tuple[ActivityLevel, ...] = ("low", "moderate", "high")

# "wake": anchor is the target wake time, derive bedtimes
# "sleep": anchor is the bedtime, derive wake times
CalculationMode = Literal["wake", "sleep"]

CALCULATION_MODES: tuple[CalculationMode, ...] = ("wake", "sleep")


@dataclass(frozen=True)
class Settings:
    """User settings and profile for one calculation."""

    cycle_length: int = 90  # Minutes per sleep cycle
    sleep_latency: int = 15  # Minutes to fall asleep
    num_options: int = 10  # Number of candidates to generate
    age: int = 30
    activity_level: ActivityLevel = "moderate"


@dataclass(frozen=True)
class CycleRange:
    """
    Inclusive window of recommended cycle counts.

    Clamping can leave max_cycles below min_cycles when num_options is small.
    Such a window is kept as-is and simply recommends nothing.
    """

    min_cycles: int
    max_cycles: int

    @property
    def is_degenerate(self) -> bool:
        """True if no cycle count can fall inside the window."""
        return self.max_cycles < self.min_cycles

    def contains(self, cycles: int) -> bool:
        return self.min_cycles <= cycles <= self.max_cycles


@dataclass(frozen=True)
class Candidate:
    """A suggested bedtime or wake time."""

    time: datetime  # Full timestamp, so midnight crossings keep the right date
    cycles: int
    recommended: bool

    @property
    def display_time(self) -> str:
        """Time as "HH:MM" (24-hour, zero-padded)."""
        return f"{self.time.hour:02d}:{self.time.minute:02d}"


@dataclass
class ScheduleRequest:
    """Input from the calculator form."""

    anchor_time: str  # "07:00" format
    mode: CalculationMode = "wake"
    settings: Settings = field(default_factory=Settings)
    anchor_date: str | None = None  # "2026-10-19", defaults to today
    timezone: str | None = None  # IANA timezone used to decide "today"


@dataclass
class ScheduleResponse:
    """Output to the renderer."""

    mode: CalculationMode
    anchor: datetime
    recommended_range: CycleRange
    candidates: list[Candidate] = field(default_factory=list)
    tip: str | None = None

    @property
    def recommended(self) -> list[Candidate]:
        """Candidates inside the recommended window, in output order."""
        return [c for c in self.candidates if c.recommended]
