"""
Request validation for the CLI and HTTP surfaces.

Validators return an error message, or None when the input is usable. The
calculator itself assumes a valid anchor, so malformed input has to be caught
here before a ScheduleRequest is built.
"""

from datetime import date
from typing import Any

import pytz

from .settings import merge_settings, normalize_settings
from .types import CALCULATION_MODES, ScheduleRequest, Settings

# Inclusive limits for settings accepted from requests and the environment
SETTINGS_BOUNDS = {
    "cycle_length": (1, 240),  # minutes
    "sleep_latency": (0, 240),  # minutes
    "num_options": (0, 48),
    "age": (0, 130),
}


def validate_time(t: str) -> bool:
    """Validate time format like '07:00'."""
    if not isinstance(t, str) or len(t) != 5:
        return False
    try:
        parts = t.split(":")
        if len(parts) != 2:
            return False
        # int() alone accepts signs and whitespace
        if not all(p.isascii() and p.isdigit() for p in parts):
            return False
        hour = int(parts[0])
        minute = int(parts[1])
        return 0 <= hour <= 23 and 0 <= minute <= 59
    except (ValueError, IndexError):
        return False


def validate_date(d: str) -> bool:
    """Validate ISO date format like '2026-10-19'."""
    if not isinstance(d, str) or len(d) != 10:
        return False
    try:
        date.fromisoformat(d)
        return True
    except ValueError:
        return False


def validate_mode(mode: str) -> bool:
    return mode in CALCULATION_MODES


def validate_timezone(tz: str) -> bool:
    """Validate IANA timezone name like 'Europe/Paris'."""
    return isinstance(tz, str) and tz in pytz.all_timezones_set


def validate_settings(settings: Settings) -> str | None:
    """Check normalized settings against SETTINGS_BOUNDS, return error message or None."""
    for name, (low, high) in SETTINGS_BOUNDS.items():
        value = getattr(settings, name)
        if not low <= value <= high:
            return f"{name} must be a number between {low} and {high}"
    return None


def validate_request(data: Any) -> str | None:
    """Validate request data, return error message or None if valid."""
    if not isinstance(data, dict):
        return "Request body must be a JSON object"

    if "anchor_time" not in data:
        return "Missing required field: anchor_time"
    if not validate_time(data["anchor_time"]):
        return f"Invalid anchor time format: {data['anchor_time']}"

    mode = data.get("mode", "wake")
    if not validate_mode(mode):
        return f"Invalid mode: {mode} (expected 'wake' or 'sleep')"

    anchor_date = data.get("anchor_date")
    if anchor_date is not None and not validate_date(anchor_date):
        return f"Invalid anchor date format: {anchor_date}"

    timezone = data.get("timezone")
    if timezone is not None and not validate_timezone(timezone):
        return f"Unknown timezone: {timezone}"

    settings = data.get("settings")
    if settings is not None:
        if not isinstance(settings, dict):
            return "settings must be an object"
        return validate_settings(normalize_settings(settings))

    return None


def request_from_dict(data: dict[str, Any], base: Settings | None = None) -> ScheduleRequest:
    """
    Build a ScheduleRequest from validated request data.

    Args:
        data: Request data that passed validate_request
        base: Settings the request's settings are merged over; without it,
            missing or invalid values use the defaults

    Returns:
        ScheduleRequest with normalized settings
    """
    if base is None:
        settings = normalize_settings(data.get("settings"))
    else:
        settings = merge_settings(base, data.get("settings") or {})

    return ScheduleRequest(
        anchor_time=data["anchor_time"],
        mode=data.get("mode", "wake"),
        settings=settings,
        anchor_date=data.get("anchor_date"),
        timezone=data.get("timezone"),
    )
