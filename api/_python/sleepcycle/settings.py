"""
Settings normalization and providers.

Raw settings arrive from JSON payloads, form fields or the environment and may
be missing, empty, non-numeric or non-finite. Everything is normalized here so
the calculator only ever sees finite integers and a known activity level.

Environment variables (all optional):
- RIMROD_CYCLE_LENGTH: minutes per cycle (default 90)
- RIMROD_SLEEP_LATENCY: minutes to fall asleep (default 15)
- RIMROD_NUM_OPTIONS: candidates to show (default 10)
- RIMROD_AGE: user age (default 30)
- RIMROD_ACTIVITY_LEVEL: low / moderate / high (default moderate)
"""

import logging
import math
import os
import re
from collections.abc import Mapping
from dataclasses import asdict
from typing import Any

from .types import ACTIVITY_LEVELS, ActivityLevel, Settings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = Settings()

NUMERIC_FIELDS = ("cycle_length", "sleep_latency", "num_options", "age")

ENV_PREFIX = "RIMROD_"

LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _coerce_int(value: Any, default: int | None) -> int | None:
    """Return value as an int, or default if it is missing or not a finite number."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return default
        return int(value)
    if isinstance(value, str):
        # Leading integer, so "7.5" -> 7 and "20min" -> 20
        match = LEADING_INT.match(value)
        if match is None:
            return default
        return int(match.group(1))
    return default


def _coerce_activity_level(value: Any, default: ActivityLevel) -> ActivityLevel:
    if isinstance(value, str) and value.strip().lower() in ACTIVITY_LEVELS:
        return value.strip().lower()
    return default


def normalize_settings(raw: Mapping[str, Any] | None) -> Settings:
    """
    Build a Settings value from a loose mapping.

    Unknown keys (e.g. a UI theme) are ignored. Invalid values fall back to
    the defaults field by field.

    Args:
        raw: Mapping of field name to raw value, or None

    Returns:
        Settings with finite integer fields and a valid activity level
    """
    raw = raw or {}
    values: dict[str, Any] = {}

    for name in NUMERIC_FIELDS:
        default = getattr(DEFAULT_SETTINGS, name)
        value = _coerce_int(raw.get(name), None)
        if value is None:
            if name in raw:
                logger.debug("Setting %s=%r replaced by default %d", name, raw[name], default)
            value = default
        values[name] = value

    values["activity_level"] = _coerce_activity_level(
        raw.get("activity_level"), DEFAULT_SETTINGS.activity_level
    )

    return Settings(**values)


def merge_settings(current: Settings, changes: Mapping[str, Any]) -> Settings:
    """Apply changes over current settings and normalize the result."""
    merged = asdict(current)
    merged.update(changes)
    return normalize_settings(merged)


def settings_from_env(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Load settings from RIMROD_* environment variables.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Normalized Settings
    """
    if environ is None:
        environ = os.environ

    raw = {}
    for name in (*NUMERIC_FIELDS, "activity_level"):
        key = ENV_PREFIX + name.upper()
        if key in environ:
            raw[name] = environ[key]

    return normalize_settings(raw)


class InMemorySettingsProvider:
    """SettingsProvider keeping the current settings in memory."""

    def __init__(self, initial: Settings | Mapping[str, Any] | None = None):
        if isinstance(initial, Settings):
            self._settings = initial
        else:
            self._settings = normalize_settings(initial)

    def load(self) -> Settings:
        return self._settings

    def save(self, changes: Mapping[str, Any]) -> Settings:
        self._settings = merge_settings(self._settings, changes)
        return self._settings
