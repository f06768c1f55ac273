"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from progress_tracker.adapters.memory_source import InMemoryRecordSource
from progress_tracker.config.models import TrackerConfig
from progress_tracker.loading.dataset_loader import parse_records
from tests.fixtures.records import make_record

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_data_path() -> Path:
    """Path to sample participant data."""
    return FIXTURES_DIR / "sample_data.json"


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return FIXTURES_DIR / "sample_config.yaml"


@pytest.fixture
def sample_payload(sample_data_path: Path) -> List[Dict[str, Any]]:
    """Decoded sample data document."""
    return json.loads(sample_data_path.read_text(encoding="utf-8"))


@pytest.fixture
def sample_dataset(sample_payload: List[Dict[str, Any]]):
    """Sample data parsed into Records."""
    return parse_records(sample_payload)


@pytest.fixture
def memory_source(sample_payload: List[Dict[str, Any]]) -> InMemoryRecordSource:
    """In-memory source serving the sample data."""
    return InMemoryRecordSource(payload=sample_payload)


@pytest.fixture
def default_config() -> TrackerConfig:
    """Create default tracker configuration."""
    return TrackerConfig()


@pytest.fixture
def alice_bob_dataset():
    """Two-record dataset: Bob pending, Alice completed."""
    return (
        make_record(name="Bob", email="b@x.com", completed="No", badges=2, games=1),
        make_record(name="Alice", email="a@x.com", completed="Yes", badges=5, games=3),
    )
