"""
Loading Package - One-Shot Dataset Loader.

The loader reads the record collection exactly once. Any failure is
logged and degrades to an empty dataset; there is no retry.
"""

from progress_tracker.loading.dataset_loader import (
    DatasetLoadError,
    DatasetLoader,
    parse_records,
)

__all__ = ["DatasetLoadError", "DatasetLoader", "parse_records"]
