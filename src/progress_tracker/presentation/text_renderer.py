"""
Text Dashboard Renderer.

Draws a DashboardSnapshot as plain text: header, stat cards, the active
controls, the records table and the "Showing N of M" footer. Absent
values are printed with the configured placeholder.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from progress_tracker.config.models import DisplayConfig
from progress_tracker.domain.entities import Record, StatusFilter
from progress_tracker.presentation.session import DashboardSnapshot

LOADING_MESSAGE = "Loading data..."
EMPTY_MESSAGE = "No students found matching your criteria"
SEARCH_PLACEHOLDER = "Search by name or email..."
COMPLETED_LABEL = "✓ Completed"
PENDING_LABEL = "⏳ In Progress"

STAT_LABELS = ("Total Students", "Completed", "In Progress")
TABLE_HEADERS = ("Name", "Badges", "Games", "Status", "Profile")


def status_label(record: Record) -> str:
    return COMPLETED_LABEL if record.is_completed else PENDING_LABEL


class TextDashboardRenderer:
    """Render dashboard snapshots as text."""

    def __init__(self, config: Optional[DisplayConfig] = None) -> None:
        self.config = config or DisplayConfig()

    def render(self, snapshot: DashboardSnapshot) -> str:
        if snapshot.is_loading:
            return LOADING_MESSAGE

        sections = [
            self._render_header(),
            self._render_stats(snapshot),
            self._render_controls(snapshot),
            self._render_table(snapshot.view.records),
            f"Showing {snapshot.view.shown} of {snapshot.view.total} students",
        ]
        return "\n\n".join(sections)

    def _render_header(self) -> str:
        return f"{self.config.title}\n{self.config.subtitle}"

    def _render_stats(self, snapshot: DashboardSnapshot) -> str:
        stats = snapshot.stats
        values = (stats.total, stats.completed, stats.pending)
        return "  ".join(f"[{label}: {value}]" for label, value in zip(STAT_LABELS, values))

    def _render_controls(self, snapshot: DashboardSnapshot) -> str:
        state = snapshot.state
        search = state.search_text or SEARCH_PLACEHOLDER
        buttons = " ".join(
            f"({s.label})" if s is state.status_filter else s.label for s in StatusFilter
        )
        return f"Search: {search}\nFilter: {buttons}\nSort: {state.sort_option.label}"

    def _render_table(self, records: Sequence[Record]) -> str:
        if not records:
            return EMPTY_MESSAGE

        headers = list(TABLE_HEADERS)
        if not self.config.show_profile_urls:
            headers = headers[:-1]
        rows = [self._row(r)[: len(headers)] for r in records]
        widths = [
            max(len(line) for cell in column for line in cell.split("\n"))
            for column in zip(headers, *rows)
        ]

        lines = [self._format_line(headers, widths)]
        lines.append("  ".join("-" * w for w in widths))
        for row in rows:
            # Name cell spans two lines: name, then email
            cells = [cell.split("\n") for cell in row]
            height = max(len(c) for c in cells)
            for i in range(height):
                lines.append(
                    self._format_line([c[i] if i < len(c) else "" for c in cells], widths)
                )
        return "\n".join(lines)

    def _row(self, record: Record) -> List[str]:
        name = f"{self._display(record.name)}\n{self._display(record.email)}"
        return [
            name,
            self._display(record.badge_count),
            self._display(record.game_count),
            status_label(record),
            self._display(record.profile_url),
        ]

    def _display(self, value: Any) -> str:
        if value is None:
            return self.config.missing_value
        return str(value)

    @staticmethod
    def _format_line(cells: Sequence[str], widths: Sequence[int]) -> str:
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()
