"""
Bedtime and wake-time candidate generation.

Given an anchor time, walks the cycle counts 1..num_options and offsets the
anchor by whole cycles plus the fall-asleep latency:

    offset(cycles) = cycles * cycle_length + sleep_latency

- "wake" mode: anchor is the wake time, bedtime = anchor - offset,
  emitted from num_options down to 1 (earliest bedtime first)
- "sleep" mode: anchor is the bedtime, wake time = anchor + offset,
  emitted from 1 up to num_options (earliest wake time first)

Each candidate is flagged recommended when its cycle count falls inside the
RangeAdvisor window. Arithmetic is done on full datetimes, so a bedtime before
midnight lands on the previous calendar day.
"""

import logging
from datetime import datetime

from .cycle_math import (
    anchor_datetime,
    get_current_datetime_in_tz,
    offset_minutes,
    parse_date,
    parse_time,
    shift_minutes,
)
from .interfaces import TipProvider
from .range_advisor import RangeAdvisor
from .types import (
    CalculationMode,
    Candidate,
    CycleRange,
    ScheduleRequest,
    ScheduleResponse,
    Settings,
)

logger = logging.getLogger(__name__)


class ScheduleCalculator:
    """
    Produces ordered bedtime/wake-time candidates for one anchor.

    Holds no state between calls; the advisor is injectable for tests.
    """

    def __init__(self, advisor: RangeAdvisor | None = None):
        self.advisor = advisor or RangeAdvisor()

    def compute_bedtimes(self, wake_time: datetime, settings: Settings) -> list[Candidate]:
        """
        Bedtimes that end a whole number of cycles at wake_time.

        Args:
            wake_time: Target wake time as a full datetime
            settings: Normalized settings snapshot

        Returns:
            Candidates ordered by cycle count, descending
        """
        window = self.advisor.recommended_range(settings)
        return self._bedtimes(wake_time, settings, window)

    def compute_wake_times(self, bedtime: datetime, settings: Settings) -> list[Candidate]:
        """
        Wake times after a whole number of cycles from bedtime.

        Args:
            bedtime: Time of lying down as a full datetime
            settings: Normalized settings snapshot

        Returns:
            Candidates ordered by cycle count, ascending
        """
        window = self.advisor.recommended_range(settings)
        return self._wake_times(bedtime, settings, window)

    def calculate(
        self, anchor: datetime, mode: CalculationMode, settings: Settings
    ) -> list[Candidate]:
        """Dispatch on mode: "wake" derives bedtimes, "sleep" derives wake times."""
        window = self.advisor.recommended_range(settings)
        return self._calculate(anchor, mode, settings, window)

    def _calculate(
        self, anchor: datetime, mode: CalculationMode, settings: Settings, window: CycleRange
    ) -> list[Candidate]:
        if mode == "wake":
            return self._bedtimes(anchor, settings, window)
        return self._wake_times(anchor, settings, window)

    def _bedtimes(
        self, wake_time: datetime, settings: Settings, window: CycleRange
    ) -> list[Candidate]:
        results = []

        for cycles in range(settings.num_options, 0, -1):
            bedtime = shift_minutes(wake_time, -offset_minutes(cycles, settings))
            results.append(
                Candidate(time=bedtime, cycles=cycles, recommended=window.contains(cycles))
            )

        return results

    def _wake_times(
        self, bedtime: datetime, settings: Settings, window: CycleRange
    ) -> list[Candidate]:
        results = []

        for cycles in range(1, settings.num_options + 1):
            wake_time = shift_minutes(bedtime, offset_minutes(cycles, settings))
            results.append(
                Candidate(time=wake_time, cycles=cycles, recommended=window.contains(cycles))
            )

        return results

    def generate_schedule(
        self,
        request: ScheduleRequest,
        current_datetime: datetime | None = None,
        tip_provider: TipProvider | None = None,
    ) -> ScheduleResponse:
        """
        Generate the full response for a calculator request.

        The anchor date is taken from request.anchor_date when given, else from
        current_datetime, else "today" in request.timezone (or the local clock).

        Args:
            request: ScheduleRequest with anchor time, mode and settings
            current_datetime: Current time used to pick the anchor date
            tip_provider: Optional collaborator invoked once for a tip

        Returns:
            ScheduleResponse with candidates in display order
        """
        if request.anchor_date is not None:
            on_date = parse_date(request.anchor_date)
        else:
            if current_datetime is None:
                if request.timezone:
                    current_datetime = get_current_datetime_in_tz(request.timezone)
                else:
                    current_datetime = datetime.now()
            on_date = current_datetime.date()

        anchor = anchor_datetime(parse_time(request.anchor_time), on_date)
        settings = request.settings
        window = self.advisor.recommended_range(settings)

        candidates = self._calculate(anchor, request.mode, settings, window)
        logger.debug(
            "Computed %d candidates for %s anchor %s",
            len(candidates),
            request.mode,
            anchor.isoformat(),
        )

        tip = tip_provider.next_tip() if tip_provider is not None else None

        return ScheduleResponse(
            mode=request.mode,
            anchor=anchor,
            recommended_range=window,
            candidates=candidates,
            tip=tip,
        )


def compute_bedtimes(wake_time: datetime, settings: Settings) -> list[Candidate]:
    """Convenience function using a default ScheduleCalculator."""
    return ScheduleCalculator().compute_bedtimes(wake_time, settings)


def compute_wake_times(bedtime: datetime, settings: Settings) -> list[Candidate]:
    """Convenience function using a default ScheduleCalculator."""
    return ScheduleCalculator().compute_wake_times(bedtime, settings)


def generate_schedule(
    request: ScheduleRequest,
    current_datetime: datetime | None = None,
    tip_provider: TipProvider | None = None,
) -> ScheduleResponse:
    """
    Convenience function to generate a schedule.

    Args:
        request: ScheduleRequest with anchor time, mode and settings
        current_datetime: Current time used to pick the anchor date
        tip_provider: Optional collaborator invoked once for a tip

    Returns:
        ScheduleResponse with candidates in display order
    """
    calculator = ScheduleCalculator()
    return calculator.generate_schedule(request, current_datetime, tip_provider)
