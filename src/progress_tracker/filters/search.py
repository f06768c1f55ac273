"""
Search Filter Implementation.

A record matches when the search text is a substring of its full name
or of its email address, ignoring case. The search text is used as
typed (no trimming). Empty search text matches every record. A missing
name or email never matches non-empty text.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from progress_tracker.domain.entities import Record


class SearchFilter:
    """Filter records by free-text search on name and email."""

    def __init__(self, search_text: str = "") -> None:
        self.search_text = search_text
        self._needle = search_text.lower()

    @property
    def name(self) -> str:
        return "search_filter"

    def matches(self, record: Record) -> bool:
        if not self._needle:
            return True
        return _contains(record.name, self._needle) or _contains(
            record.email, self._needle
        )

    def apply(self, records: Iterable[Record]) -> List[Record]:
        return [r for r in records if self.matches(r)]


def _contains(value: Optional[str], needle: str) -> bool:
    return value is not None and needle in value.lower()
