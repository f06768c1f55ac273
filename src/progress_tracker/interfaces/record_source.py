"""
Record Source Protocol.

A record source performs one read of the backing collection and returns
the decoded JSON document. It does not interpret the document; the
dataset loader turns it into Records.

Implementations may raise any I/O or decoding error. The loader is the
single place where those are caught.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RecordSourceProtocol(Protocol):
    """Abstract interface for reading the record collection."""

    @property
    def description(self) -> str:
        """Where the records come from, for log messages."""
        ...

    def fetch(self) -> Any:
        """
        Read and decode the record collection.

        Returns:
            Decoded JSON document (expected: list of objects)

        Raises:
            OSError, requests.RequestException, ValueError: On read or
            decode failure
        """
        ...
