"""
View Pipeline - Filter then Sort.

Step 1 keeps records passing both the search and the status filter,
step 2 orders them with the selected sort option. The result is a fresh
tuple; the input dataset is left untouched.
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional, Sequence, Union

from progress_tracker.domain.entities import Record, SortOption, StatusFilter
from progress_tracker.domain.value_objects import ViewResult, ViewState
from progress_tracker.filters.search import SearchFilter
from progress_tracker.filters.status import CompletionStatusFilter
from progress_tracker.sorting.strategies import sort_records

logger = logging.getLogger(__name__)


class ViewPipeline:
    """Derives the displayed records from the dataset and controls."""

    def derive(self, dataset: Sequence[Record], state: Optional[ViewState] = None) -> ViewResult:
        """
        Apply search, status filter and sort.

        Args:
            dataset: Full record collection
            state: Current controls (defaults: no search, all, badges desc)

        Returns:
            ViewResult with ordered records and the dataset size
        """
        state = state or ViewState()
        start = time.perf_counter()

        stages = [
            SearchFilter(state.search_text),
            CompletionStatusFilter(state.status_filter),
        ]
        current: List[Record] = list(dataset)
        for stage in stages:
            current = stage.apply(current)

        ordered = sort_records(current, state.sort_option)

        logger.debug(
            f"Derived view: {len(ordered)}/{len(dataset)} records "
            f"(search={state.search_text!r}, status={state.status_filter.value}, "
            f"sort={state.sort_option.value}) in {time.perf_counter() - start:.4f}s"
        )
        return ViewResult(records=tuple(ordered), total=len(dataset))


def derive_view(
    dataset: Sequence[Record],
    search_text: str = "",
    status_filter: Union[StatusFilter, str] = StatusFilter.ALL,
    sort_option: Union[SortOption, str] = SortOption.BADGES_DESC,
) -> ViewResult:
    """
    Functional entry point to the view pipeline.

    Raises:
        ValueError: For an unknown status filter or sort option value
    """
    state = ViewState(
        search_text=search_text,
        status_filter=StatusFilter(status_filter),
        sort_option=SortOption(sort_option),
    )
    return ViewPipeline().derive(dataset, state)
