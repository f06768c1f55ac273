"""
Adapters Package - Record Source Implementations.

Sources:
    - JsonFileRecordSource: Local JSON file
    - HttpRecordSource: Static JSON document served over HTTP
    - InMemoryRecordSource: Fixed payload for development/testing

Factory:
    - create_record_source: Picks a source from DataSourceConfig
"""

from progress_tracker.adapters.file_source import JsonFileRecordSource
from progress_tracker.adapters.http_source import HttpRecordSource
from progress_tracker.adapters.memory_source import InMemoryRecordSource
from progress_tracker.adapters.factory import create_record_source

__all__ = [
    "JsonFileRecordSource",
    "HttpRecordSource",
    "InMemoryRecordSource",
    "create_record_source",
]
