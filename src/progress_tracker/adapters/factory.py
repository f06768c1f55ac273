"""Build a record source from configuration."""

from __future__ import annotations

from progress_tracker.adapters.file_source import JsonFileRecordSource
from progress_tracker.adapters.http_source import HttpRecordSource
from progress_tracker.config.models import DataSourceConfig
from progress_tracker.interfaces.record_source import RecordSourceProtocol


def create_record_source(config: DataSourceConfig) -> RecordSourceProtocol:
    """HTTP source for http(s) locations, file source otherwise."""
    if config.location.startswith(("http://", "https://")):
        return HttpRecordSource(
            base_url=config.location,
            path=config.path,
            timeout_seconds=config.timeout_seconds,
        )
    return JsonFileRecordSource(config.location)
