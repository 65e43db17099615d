"""Plain-text rendering of a statistics summary."""
from __future__ import annotations

from typing import Mapping, Optional

__all__: list[str] = [
    "format_report",
]


def _fixed(value: Optional[float]) -> str:
    # Undefined statistics (e.g. harmonic mean over a zero) are shown as text
    return "undefined" if value is None else f"{value:.3f}"


def format_report(summary: Mapping[str, float | int | None]) -> str:
    """Render the output of ``summarize`` as the fixed-point results block."""
    lines = [
        "Results:",
        "--------",
        f"Num values: {summary['count']}",
        f"Mean: {_fixed(summary['mean'])}",
        f"Median: {_fixed(summary['median'])}",
        f"Mode: {_fixed(summary['mode'])}",
        f"Standard Deviation: {_fixed(summary['stddev'])}",
        f"Harmonic Mean: {_fixed(summary['harmonic_mean'])}",
        f"Unused array capacity: {summary['unused_capacity']}",
    ]
    return "\n".join(lines) + "\n"
