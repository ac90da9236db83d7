"""
Presentation of calculator output.

TextRenderer produces a plain-text timeline for the CLI; response_to_dict
produces the JSON shape returned by the CLI and the HTTP endpoint. Both keep
candidates in exactly the order the calculator emitted them.
"""

from typing import Any

from .cycle_math import format_time
from .types import Candidate, ScheduleResponse

RECOMMENDED_BADGE = "RECOMMENDED"

TITLES = {
    "wake": "Ideal bedtimes",
    "sleep": "Ideal wake times",
}


def format_cycles(cycles: int) -> str:
    """Pluralize a cycle count: "1 cycle", "5 cycles"."""
    return f"{cycles} cycle" if cycles == 1 else f"{cycles} cycles"


def format_candidate(candidate: Candidate) -> str:
    """Single timeline line: time, cycle count, badge if recommended."""
    line = f"{candidate.display_time}  {format_cycles(candidate.cycles)} of sleep"
    if candidate.recommended:
        line += f"  [{RECOMMENDED_BADGE}]"
    return line


class TextRenderer:
    """Renderer producing a plain-text timeline."""

    def render(self, response: ScheduleResponse) -> str:
        lines = [f"{TITLES[response.mode]} for {format_time(response.anchor)}"]
        lines.extend(format_candidate(c) for c in response.candidates)
        if response.tip:
            lines.append("")
            lines.append(f"Tip: {response.tip}")
        return "\n".join(lines)


def candidate_to_dict(candidate: Candidate) -> dict[str, Any]:
    return {
        "time": candidate.display_time,
        "date": candidate.time.date().isoformat(),
        "cycles": candidate.cycles,
        "recommended": candidate.recommended,
    }


def response_to_dict(response: ScheduleResponse) -> dict[str, Any]:
    """Convert a ScheduleResponse to JSON-serializable data."""
    return {
        "mode": response.mode,
        "anchor": response.anchor.isoformat(timespec="minutes"),
        "recommended_range": {
            "min_cycles": response.recommended_range.min_cycles,
            "max_cycles": response.recommended_range.max_cycles,
        },
        "candidates": [candidate_to_dict(c) for c in response.candidates],
        "tip": response.tip,
    }
