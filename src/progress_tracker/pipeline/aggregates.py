"""
Aggregate Computer - Whole-Dataset Summary Counts.

Counts always cover the full dataset, independent of any active
search, filter or sort.
"""

from __future__ import annotations

from typing import Sequence

from progress_tracker.domain.entities import Record
from progress_tracker.domain.value_objects import DashboardStats


def compute_stats(dataset: Sequence[Record]) -> DashboardStats:
    """Count all, completed and pending records."""
    total = len(dataset)
    completed = sum(1 for r in dataset if r.is_completed)
    return DashboardStats(total=total, completed=completed, pending=total - completed)
