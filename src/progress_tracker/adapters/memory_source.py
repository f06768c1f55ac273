"""
In-Memory Record Source.

Serves a fixed payload. Used in tests and demos in place of a file or
server. Counts fetches so callers can check the single-fetch contract.
"""

from __future__ import annotations

import copy
from typing import Any, List, Optional


class InMemoryRecordSource:
    """Fake record source backed by a Python object."""

    def __init__(self, payload: Any = None, error: Optional[Exception] = None) -> None:
        """
        Args:
            payload: Decoded JSON document to return (default: empty list)
            error: If given, raised from fetch() instead
        """
        self._payload: Any = [] if payload is None else payload
        self._error = error
        self.fetch_count = 0

    @classmethod
    def from_records(cls, records: List[dict]) -> "InMemoryRecordSource":
        return cls(payload=list(records))

    @property
    def description(self) -> str:
        return "in-memory payload"

    def fetch(self) -> Any:
        self.fetch_count += 1
        if self._error is not None:
            raise self._error
        return copy.deepcopy(self._payload)
