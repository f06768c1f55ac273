"""
Filters Package - Record Filter Stages.

Filters:
    - SearchFilter: Case-insensitive substring match on name or email
    - CompletionStatusFilter: all / completed / pending

Both stages keep record order and never mutate their input. A record
is shown only if every stage passes it.
"""

from progress_tracker.filters.search import SearchFilter
from progress_tracker.filters.status import CompletionStatusFilter

__all__ = ["SearchFilter", "CompletionStatusFilter"]
