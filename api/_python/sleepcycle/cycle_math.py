"""
Time arithmetic for sleep cycle calculations.

Parses and formats "HH:MM" wall-clock times and anchors them to a calendar
date so that offsets crossing midnight land on the correct day.
"""

from datetime import date, datetime, time, timedelta

import pytz

from .types import Settings


def parse_time(time_str: str) -> time:
    """Parse "HH:MM" string to time object."""
    parts = time_str.split(":")
    if len(parts) != 2:
        raise ValueError(f"Time '{time_str}' must be in HH:MM format")
    return time(int(parts[0]), int(parts[1]))


def parse_date(date_str: str) -> date:
    """Parse "YYYY-MM-DD" string to date object."""
    return date.fromisoformat(date_str)


def format_time(t: time | datetime) -> str:
    """Format time as "HH:MM" (24-hour format)."""
    return f"{t.hour:02d}:{t.minute:02d}"


def get_current_datetime_in_tz(tz_name: str) -> datetime:
    """
    Get current datetime in the specified timezone.

    The server clock may run in UTC while the user enters a local wall-clock
    time, so "today" has to be taken in the user's timezone.

    Args:
        tz_name: IANA timezone name (e.g., "Europe/Paris")

    Returns:
        Current datetime in the specified timezone (naive, for local arithmetic)
    """
    tz = pytz.timezone(tz_name)
    now_utc = datetime.now(pytz.UTC)
    now_local = now_utc.astimezone(tz)
    return now_local.replace(tzinfo=None)


def anchor_datetime(anchor: time, on_date: date) -> datetime:
    """
    Combine an "HH:MM" anchor with a calendar date.

    Seconds and microseconds are always zero, matching a form time input.
    """
    return datetime.combine(on_date, time(anchor.hour, anchor.minute))


def offset_minutes(cycles: int, settings: Settings) -> int:
    """
    Minutes between lying down and waking after the given number of cycles.

    offset = cycles * cycle_length + sleep_latency
    """
    return cycles * settings.cycle_length + settings.sleep_latency


def shift_minutes(moment: datetime, minutes: int) -> datetime:
    """
    Shift a datetime by a number of minutes.

    Args:
        moment: Starting datetime
        minutes: Minutes to shift (positive = later, negative = earlier)

    Returns:
        Shifted datetime (the date rolls over at midnight)
    """
    return moment + timedelta(minutes=minutes)
