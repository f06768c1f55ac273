"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from progress_tracker.domain.entities import SortOption, StatusFilter
from progress_tracker.domain.value_objects import ViewState


class DataSourceConfig(BaseModel):
    """Location of the record collection."""

    # Local path, or an http(s) base URL that serves `path`.
    location: str = Field(default="data.json")
    path: str = Field(default="/data.json")
    timeout_seconds: float = Field(default=10.0, gt=0)


class ViewDefaultsConfig(BaseModel):
    """Initial view controls."""

    search_text: str = ""
    status_filter: StatusFilter = StatusFilter.ALL
    sort_option: SortOption = SortOption.BADGES_DESC

    def to_view_state(self) -> ViewState:
        return ViewState(
            search_text=self.search_text,
            status_filter=self.status_filter,
            sort_option=self.sort_option,
        )


class DisplayConfig(BaseModel):
    """Rendering options for the text dashboard."""

    title: str = "GCS Study Jam 2025"
    subtitle: str = "GDG SOIT Progress Tracker"
    missing_value: str = Field(default="-", description="Shown for absent fields")
    show_profile_urls: bool = True


class TrackerConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    data_source: DataSourceConfig = Field(default_factory=DataSourceConfig)
    view: ViewDefaultsConfig = Field(default_factory=ViewDefaultsConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    model_config = {"populate_by_name": True}
