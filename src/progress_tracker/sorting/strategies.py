"""
Sort Strategies - Primary Keys per Sort Option.

Provides Strategy Pattern implementations for the supported orderings:
    - NameSortStrategy: Collated full name
    - CountSortStrategy: Badge or game count (non-numeric counts as 0)
    - StatusSortStrategy: Completed bucket before or after pending

Design Notes:
    - Strategies compare, they do not sort
    - Direction is a strategy property, so the name tie-break always
      stays ascending regardless of the primary direction
    - The explicit tie-break makes the order total without relying on
      sort stability
"""

from __future__ import annotations

import functools
from typing import Callable, Dict, Iterable, List, Protocol, Union

from progress_tracker.domain.entities import Record, SortOption
from progress_tracker.sorting.collation import compare_names


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


class SortStrategy(Protocol):
    """Strategy protocol for primary-key comparison."""

    def compare(self, a: Record, b: Record) -> int:
        """
        Compare two records on the primary key.

        Returns:
            Negative if a sorts first, positive if b sorts first, 0 on a tie
        """
        ...


class NameSortStrategy:
    """Order by collated full name."""

    def __init__(self, descending: bool = False) -> None:
        self.descending = descending

    def compare(self, a: Record, b: Record) -> int:
        result = compare_names(a.name, b.name)
        return -result if self.descending else result


class CountSortStrategy:
    """Order by a numeric count read from the record."""

    def __init__(self, count: Callable[[Record], float], descending: bool = True) -> None:
        """
        Args:
            count: Extracts the (already coerced) count from a record
            descending: Highest count first when True
        """
        self._count = count
        self.descending = descending

    def compare(self, a: Record, b: Record) -> int:
        result = _cmp(self._count(a), self._count(b))
        return -result if self.descending else result


class StatusSortStrategy:
    """Two buckets: completed and pending."""

    def __init__(self, completed_first: bool = True) -> None:
        self.completed_first = completed_first

    def _bucket(self, record: Record) -> int:
        first = record.is_completed if self.completed_first else not record.is_completed
        return 0 if first else 1

    def compare(self, a: Record, b: Record) -> int:
        return _cmp(self._bucket(a), self._bucket(b))


def create_sort_strategies() -> Dict[SortOption, SortStrategy]:
    """Strategy for every SortOption."""
    return {
        SortOption.NAME_ASC: NameSortStrategy(descending=False),
        SortOption.NAME_DESC: NameSortStrategy(descending=True),
        SortOption.BADGES_ASC: CountSortStrategy(lambda r: r.badges, descending=False),
        SortOption.BADGES_DESC: CountSortStrategy(lambda r: r.badges, descending=True),
        SortOption.GAMES_ASC: CountSortStrategy(lambda r: r.games, descending=False),
        SortOption.GAMES_DESC: CountSortStrategy(lambda r: r.games, descending=True),
        SortOption.STATUS_COMPLETED_FIRST: StatusSortStrategy(completed_first=True),
        SortOption.STATUS_PENDING_FIRST: StatusSortStrategy(completed_first=False),
    }


_STRATEGIES = create_sort_strategies()


def sort_records(
    records: Iterable[Record],
    sort_option: Union[SortOption, str] = SortOption.BADGES_DESC,
) -> List[Record]:
    """
    Return a new list ordered by the sort option, ties by name ascending.

    Raises:
        ValueError: For an unknown sort option value
    """
    strategy = _STRATEGIES[SortOption(sort_option)]

    def compare(a: Record, b: Record) -> int:
        return strategy.compare(a, b) or compare_names(a.name, b.name)

    return sorted(records, key=functools.cmp_to_key(compare))
