"""
Value Objects for Domain Layer.

Immutable descriptions of the current controls and of what the
pipeline derived from them.
"""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, Field

from progress_tracker.domain.entities import Record, SortOption, StatusFilter


class ViewState(BaseModel):
    """Controls owned by the presentation layer."""

    search_text: str = ""
    status_filter: StatusFilter = StatusFilter.ALL
    sort_option: SortOption = SortOption.BADGES_DESC

    model_config = {"frozen": True}


class DashboardStats(BaseModel):
    """Summary counts over the whole dataset."""

    total: int = Field(default=0, ge=0)
    completed: int = Field(default=0, ge=0)
    pending: int = Field(default=0, ge=0)

    model_config = {"frozen": True}


class ViewResult(BaseModel):
    """Ordered records for display."""

    records: Tuple[Record, ...] = ()
    total: int = Field(default=0, ge=0, description="Size of the unfiltered dataset")

    model_config = {"frozen": True}

    @property
    def shown(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def names(self) -> Tuple[Optional[str], ...]:
        return tuple(r.name for r in self.records)
