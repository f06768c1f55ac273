"""
Completion Status Filter Implementation.

Classifies records by exact equality of the completion flag with "Yes".
`completed` and `pending` partition any dataset.
"""

from __future__ import annotations

from typing import Iterable, List, Union

from progress_tracker.domain.entities import Record, StatusFilter


class CompletionStatusFilter:
    """Filter records by completion status."""

    def __init__(self, status: Union[StatusFilter, str] = StatusFilter.ALL) -> None:
        """
        Args:
            status: StatusFilter or its value ("all", "completed", "pending")

        Raises:
            ValueError: For an unknown status value
        """
        self.status = StatusFilter(status)

    @property
    def name(self) -> str:
        return "status_filter"

    def matches(self, record: Record) -> bool:
        if self.status is StatusFilter.COMPLETED:
            return record.is_completed
        if self.status is StatusFilter.PENDING:
            return not record.is_completed
        return True

    def apply(self, records: Iterable[Record]) -> List[Record]:
        if self.status is StatusFilter.ALL:
            return list(records)
        return [r for r in records if self.matches(r)]
