"""
Pipeline Package - Derived View and Aggregates.

Components:
    - ViewPipeline / derive_view: (dataset, search, status, sort) -> records
    - compute_stats: dataset -> total / completed / pending

Both are pure: no state carried between calls, the dataset is never
mutated, every call recomputes from scratch.
"""

from progress_tracker.pipeline.aggregates import compute_stats
from progress_tracker.pipeline.view_pipeline import ViewPipeline, derive_view

__all__ = ["compute_stats", "ViewPipeline", "derive_view"]
