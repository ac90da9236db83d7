"""
Collaborator interfaces.

The calculator never touches storage, display or tip selection directly; it
is handed objects satisfying these protocols so tests can substitute them.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from .types import ScheduleResponse, Settings


@runtime_checkable
class SettingsProvider(Protocol):
    """Supplies normalized settings and persists updates."""

    def load(self) -> Settings: ...

    def save(self, changes: Mapping[str, Any]) -> Settings:
        """Merge changes over the current settings, persist, return the result."""
        ...


@runtime_checkable
class Renderer(Protocol):
    """Displays candidates in the order the calculator produced them."""

    def render(self, response: ScheduleResponse) -> str: ...


@runtime_checkable
class TipProvider(Protocol):
    """Picks a textual tip, avoiding an immediate repeat of the last one."""

    def next_tip(self) -> str: ...
