"""
Dataset Loader - Single Fetch with Empty-on-Error Fallback.

Lifecycle:
    LOADING (constructed) -> load() -> READY

On success the parsed records are stored as an immutable tuple. On any
failure (unreachable source, non-2xx response, invalid JSON, payload
that is not an array of objects) the error is logged, kept on
`last_error`, and the dataset is empty. The payload is one atomic unit:
there is no partial load.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import ValidationError

from progress_tracker.domain.entities import Dataset, LoadState, Record
from progress_tracker.interfaces.record_source import RecordSourceProtocol

logger = logging.getLogger(__name__)


class DatasetLoadError(Exception):
    """Raised when the record collection cannot be fetched or parsed."""

    pass


def parse_records(payload: Any) -> Dataset:
    """
    Turn a decoded JSON document into Records.

    Args:
        payload: Decoded JSON (must be a list of objects)

    Returns:
        Tuple of Records in document order

    Raises:
        DatasetLoadError: If the document does not have that shape
    """
    if not isinstance(payload, list):
        raise DatasetLoadError(
            f"expected a JSON array of records, got {type(payload).__name__}"
        )

    records = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise DatasetLoadError(
                f"record #{index} is {type(item).__name__}, expected an object"
            )
        try:
            records.append(Record.model_validate(item))
        except ValidationError as e:
            raise DatasetLoadError(f"record #{index} could not be read: {e}") from e
    return tuple(records)


class DatasetLoader:
    """Fetches the record collection once and holds it for the session."""

    def __init__(self, source: RecordSourceProtocol) -> None:
        self._source = source
        self._state = LoadState.LOADING
        self._dataset: Dataset = ()
        self._last_error: Optional[DatasetLoadError] = None

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._state is LoadState.LOADING

    @property
    def dataset(self) -> Dataset:
        """Loaded records; empty while loading or after a failed load."""
        return self._dataset

    @property
    def last_error(self) -> Optional[DatasetLoadError]:
        return self._last_error

    def load(self) -> Dataset:
        """
        Fetch and parse the collection, once.

        Subsequent calls return the stored dataset without fetching.
        Never raises for source or parse failures.
        """
        if self._state is LoadState.READY:
            return self._dataset

        logger.info(f"Loading records from {self._source.description}")
        try:
            self._dataset = self._fetch()
            logger.info(f"Loaded {len(self._dataset)} records")
        except DatasetLoadError as e:
            self._last_error = e
            self._dataset = ()
            logger.error(
                f"Error loading data from {self._source.description}: {e}",
                exc_info=e.__cause__ or e,
            )
        finally:
            self._state = LoadState.READY

        return self._dataset

    def _fetch(self) -> Dataset:
        try:
            return parse_records(self._source.fetch())
        except DatasetLoadError:
            raise
        except Exception as e:
            # Any source or decode failure, including RecursionError on deep nesting
            raise DatasetLoadError(f"{type(e).__name__}: {e}") from e
