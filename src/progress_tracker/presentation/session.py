"""
Dashboard Session.

Holds the dataset loader and the current ViewState. Every control change
replaces the state; snapshot() recomputes the view and the stats in full
from the loaded dataset. Nothing is cached between snapshots.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from pydantic import BaseModel

from progress_tracker.config.models import TrackerConfig
from progress_tracker.domain.entities import SortOption, StatusFilter
from progress_tracker.domain.value_objects import DashboardStats, ViewResult, ViewState
from progress_tracker.interfaces.record_source import RecordSourceProtocol
from progress_tracker.loading.dataset_loader import DatasetLoader
from progress_tracker.pipeline.aggregates import compute_stats
from progress_tracker.pipeline.view_pipeline import ViewPipeline

logger = logging.getLogger(__name__)


class DashboardSnapshot(BaseModel):
    """One derived frame of the dashboard."""

    is_loading: bool
    state: ViewState
    view: ViewResult
    stats: DashboardStats

    model_config = {"frozen": True}


class DashboardSession:
    """Owner of the view controls for one dashboard session."""

    def __init__(
        self,
        loader: DatasetLoader,
        initial_state: Optional[ViewState] = None,
        pipeline: Optional[ViewPipeline] = None,
    ) -> None:
        """
        Args:
            loader: Dataset loader (load() may be called later via start())
            initial_state: Starting controls
            pipeline: View pipeline (default instance if omitted)
        """
        self._loader = loader
        self._initial_state = initial_state or ViewState()
        self._state = self._initial_state
        self._pipeline = pipeline or ViewPipeline()

    @classmethod
    def from_source(
        cls,
        source: RecordSourceProtocol,
        config: Optional[TrackerConfig] = None,
        autoload: bool = True,
    ) -> "DashboardSession":
        """Build a session over a source, loading it unless autoload is False."""
        config = config or TrackerConfig()
        session = cls(DatasetLoader(source), initial_state=config.view.to_view_state())
        if autoload:
            session.start()
        return session

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def loader(self) -> DatasetLoader:
        return self._loader

    def start(self) -> None:
        """Perform the one dataset fetch."""
        self._loader.load()

    def set_search_text(self, text: str) -> None:
        self._update(search_text=text)

    def set_status_filter(self, status: Union[StatusFilter, str]) -> None:
        self._update(status_filter=StatusFilter(status))

    def set_sort_option(self, option: Union[SortOption, str]) -> None:
        self._update(sort_option=SortOption(option))

    def reset(self) -> None:
        """Restore the controls the session started with."""
        self._state = self._initial_state

    def snapshot(self) -> DashboardSnapshot:
        """Recompute view and stats for the current controls."""
        dataset = self._loader.dataset
        return DashboardSnapshot(
            is_loading=self._loader.is_loading,
            state=self._state,
            view=self._pipeline.derive(dataset, self._state),
            stats=compute_stats(dataset),
        )

    def _update(self, **changes) -> None:
        self._state = self._state.model_copy(update=changes)
        logger.debug(f"View state changed: {changes}")
