"""
Domain Layer - Participant Records, Controls and Value Objects.

Entities:
    - Record: One participant's progress entry, loaded verbatim
    - StatusFilter: all / completed / pending
    - SortOption: Supported orderings for the view
    - LoadState: Dataset lifecycle (loading, ready)

Value Objects:
    - ViewState: Current search text, status filter and sort option
    - ViewResult: Ordered records produced by the view pipeline
    - DashboardStats: Whole-dataset summary counts

Design Principles:
    - Immutable (frozen pydantic models, tuples for sequences)
    - No infrastructure dependencies
"""

from progress_tracker.domain.entities import (
    COMPLETED_FLAG,
    Dataset,
    LoadState,
    Record,
    SortOption,
    StatusFilter,
    count_value,
)
from progress_tracker.domain.value_objects import DashboardStats, ViewResult, ViewState

__all__ = [
    "COMPLETED_FLAG",
    "Dataset",
    "LoadState",
    "Record",
    "SortOption",
    "StatusFilter",
    "count_value",
    "DashboardStats",
    "ViewResult",
    "ViewState",
]
