# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Terminal-friendly visualizations using Unicode characters.

These functions return Rich-markup strings that render as bars and score
gauges in the terminal via the Rich library.
"""

from __future__ import annotations

from lca_audit.scoring.thresholds import score_to_color, score_to_grade


def _bar(fraction: float, width: int) -> str:
    filled = int(max(0.0, min(1.0, fraction)) * width)
    return "█" * filled + "░" * (width - filled)


def horizontal_bar(
    label: str,
    value: float,
    max_value: float,
    width: int = 40,
    color: str = "cyan",
) -> str:
    """Render a horizontal bar chart line using Unicode block characters.

    Returns a Rich-markup string like:
        Energy Consumption.... [cyan]████████████░░░░░░░░[/]  45%
    """
    if max_value <= 0:
        return f"  {label:.<30} [dim]no data[/]"
    bar = _bar(value / max_value, width)
    return f"  {label:.<30} [{color}]{bar}[/] {value:>4.0f}%"


def score_gauge(score: float, width: int = 20) -> str:
    """Large visual gauge with color coding and the letter grade.

    Returns something like: [yellow]██████████░░░░░░░░░░[/] 52/100 [yellow]C[/]
    """
    clamped = max(0.0, min(100.0, score))
    color = score_to_color(clamped)
    grade = score_to_grade(clamped).value
    return f"[{color}]{_bar(clamped / 100, width)}[/] {clamped:.0f}/100 [{color}]{grade}[/]"


def mini_gauge(score: float, width: int = 10) -> str:
    """Compact gauge for inline use in tables."""
    clamped = max(0.0, min(100.0, score))
    color = score_to_color(clamped)
    return f"[{color}]{_bar(clamped / 100, width)}[/] {clamped:.0f}"
