"""
Core Domain Entities.

A Record mirrors one object of the backing JSON array. Field aliases are
the literal keys of that document. Individual records are not validated:
any field may be missing, and count fields keep whatever scalar the
document holds.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

# Exact marker for a fully completed participant. No normalization.
COMPLETED_FLAG = "Yes"

# Counts keep the raw JSON value; see count_value.
RawCount = Any


class StatusFilter(str, Enum):
    """Completion status filter for the view."""

    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class SortOption(str, Enum):
    """Ordering applied to the filtered view."""

    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"
    BADGES_ASC = "badges-asc"
    BADGES_DESC = "badges-desc"
    GAMES_ASC = "games-asc"
    GAMES_DESC = "games-desc"
    STATUS_COMPLETED_FIRST = "status-completed"
    STATUS_PENDING_FIRST = "status-pending"

    @property
    def label(self) -> str:
        """Human label for the sort selector."""
        return _SORT_LABELS[self]


_SORT_LABELS = {
    SortOption.NAME_ASC: "Name (A-Z)",
    SortOption.NAME_DESC: "Name (Z-A)",
    SortOption.BADGES_ASC: "Badges (Low to High)",
    SortOption.BADGES_DESC: "Badges (High to Low)",
    SortOption.GAMES_ASC: "Games (Low to High)",
    SortOption.GAMES_DESC: "Games (High to Low)",
    SortOption.STATUS_COMPLETED_FIRST: "Status (Completed First)",
    SortOption.STATUS_PENDING_FIRST: "Status (In Progress First)",
}


class LoadState(str, Enum):
    """Lifecycle of the dataset."""

    LOADING = "loading"
    READY = "ready"


class Record(BaseModel):
    """One participant's progress entry."""

    name: Optional[str] = Field(default=None, alias="User Name")
    email: Optional[str] = Field(default=None, alias="User Email")
    profile_url: Optional[str] = Field(
        default=None, alias="Google Cloud Skills Boost Profile URL"
    )
    profile_url_status: Optional[str] = Field(default=None, alias="Profile URL Status")
    redemption_status: Optional[str] = Field(
        default=None, alias="Access Code Redemption Status"
    )
    completion_flag: Optional[str] = Field(
        default=None, alias="All Skill Badges & Games Completed"
    )
    badge_count: RawCount = Field(default=None, alias="# of Skill Badges Completed")
    badge_names: Optional[str] = Field(
        default=None, alias="Names of Completed Skill Badges"
    )
    game_count: RawCount = Field(default=None, alias="# of Arcade Games Completed")
    game_names: Optional[str] = Field(
        default=None, alias="Names of Completed Arcade Games"
    )

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    @field_validator(
        "name",
        "email",
        "profile_url",
        "profile_url_status",
        "redemption_status",
        "completion_flag",
        "badge_names",
        "game_names",
        mode="before",
    )
    @classmethod
    def _stringify_scalars(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @property
    def is_completed(self) -> bool:
        return self.completion_flag == COMPLETED_FLAG

    @property
    def badges(self) -> float:
        """Badge count as a number, 0 when missing or non-numeric."""
        return count_value(self.badge_count)

    @property
    def games(self) -> float:
        """Game count as a number, 0 when missing or non-numeric."""
        return count_value(self.game_count)


# Records in load order. Positional index is the only identity.
Dataset = Tuple[Record, ...]


def count_value(raw: Any) -> float:
    """
    Coerce a raw count to a number for sorting.

    Ints and finite floats are returned as-is, numeric strings are parsed,
    anything else (missing, bool, non-numeric, NaN) becomes 0.
    """
    if isinstance(raw, bool):
        return 0
    if isinstance(raw, (int, float)):
        return raw if not (isinstance(raw, float) and math.isnan(raw)) else 0
    if isinstance(raw, str):
        try:
            parsed = float(raw.strip())
        except ValueError:
            return 0
        return 0 if math.isnan(parsed) else parsed
    return 0
