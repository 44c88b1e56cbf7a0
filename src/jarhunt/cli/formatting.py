"""Shared formatting helpers for the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text


if TYPE_CHECKING:
    from jarhunt.core.models import HuntSummary


OUTCOME_COLORS = {
    "resolved": "green",
    "unresolved": "yellow",
    "unreadable": "red",
}


def outcome_to_color(label: str) -> str:
    """Return the Rich color for a summary row label, or "" for none."""
    return OUTCOME_COLORS.get(label, "")


def _format_label_with_color(label: str) -> Text:
    """Format a summary label with color coding.

    Args:
        label: Summary row label.

    Returns:
        Rich Text object, colored for outcome labels and plain otherwise.
    """
    color = outcome_to_color(label)
    return Text(label, style=color) if color else Text(label)


def _summary_rows(summary: HuntSummary) -> list[tuple[str, int]]:
    """Return (label, count) rows for a summary, skipping empty diagnostics."""
    rows = [
        ("discovered", summary.discovered),
        ("resolved", summary.resolved),
        ("unresolved", summary.unresolved),
        ("unreadable", summary.unreadable),
        ("ignored", summary.ignored),
    ]
    if summary.skipped_entries:
        rows.append(("skipped entries", summary.skipped_entries))
    if summary.unlisted_directories:
        rows.append(("unlisted directories", summary.unlisted_directories))
    return rows


def render_summary(summary: HuntSummary) -> Table:
    """Build a Rich table of run counters."""
    table = Table(title="jarhunt summary")
    table.add_column("Outcome")
    table.add_column("Count", justify="right")

    for label, count in _summary_rows(summary):
        table.add_row(_format_label_with_color(label), str(count))

    return table
