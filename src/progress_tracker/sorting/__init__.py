"""
Sorting Package - Orderings for the View.

Each SortOption maps to a strategy comparing two records on a primary
key. Ties on the primary key are always broken by full name ascending,
so the result does not depend on input order.

Components:
    - SortStrategy: Protocol for primary-key comparisons
    - NameSortStrategy, CountSortStrategy, StatusSortStrategy
    - collation_key / compare_names: Locale-style name comparison
    - sort_records: Apply a SortOption to a sequence of records
"""

from progress_tracker.sorting.collation import collation_key, compare_names
from progress_tracker.sorting.strategies import (
    CountSortStrategy,
    NameSortStrategy,
    SortStrategy,
    StatusSortStrategy,
    create_sort_strategies,
    sort_records,
)

__all__ = [
    "collation_key",
    "compare_names",
    "CountSortStrategy",
    "NameSortStrategy",
    "SortStrategy",
    "StatusSortStrategy",
    "create_sort_strategies",
    "sort_records",
]
