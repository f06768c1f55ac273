"""
Unit Tests for record sources and the source factory.

Test Aspects Covered:
    ✅ Business Logic: File read, HTTP GET of /data.json
    ✅ Error Handling: Missing file, non-2xx response, invalid JSON
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import requests

from progress_tracker.adapters.factory import create_record_source
from progress_tracker.adapters.file_source import JsonFileRecordSource
from progress_tracker.adapters.http_source import HttpRecordSource
from progress_tracker.adapters.memory_source import InMemoryRecordSource
from progress_tracker.config.models import DataSourceConfig
from progress_tracker.interfaces.record_source import RecordSourceProtocol


def _response(status_code: int = 200, payload=None, text: str = "") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = (json.dumps(payload) if payload is not None else text).encode()
    response.url = "http://tracker.test/data.json"
    return response


class TestJsonFileRecordSource:
    """Test cases for JsonFileRecordSource."""

    def test_reads_json_array(self, sample_data_path: Path) -> None:
        source = JsonFileRecordSource(sample_data_path)

        payload = source.fetch()

        assert isinstance(payload, list)
        assert payload[1]["User Name"] == "Ana Gomez"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        source = JsonFileRecordSource(tmp_path / "absent.json")

        with pytest.raises(FileNotFoundError):
            source.fetch()

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_text("[{oops", encoding="utf-8")

        with pytest.raises(ValueError):
            JsonFileRecordSource(path).fetch()

    def test_conforms_to_protocol(self, sample_data_path: Path) -> None:
        assert isinstance(JsonFileRecordSource(sample_data_path), RecordSourceProtocol)


class TestHttpRecordSource:
    """Test cases for HttpRecordSource."""

    def test_builds_well_known_url(self) -> None:
        source = HttpRecordSource("http://tracker.test/")

        assert source.url == "http://tracker.test/data.json"

    def test_single_get_returns_decoded_body(self) -> None:
        """
        SCENARIO: Server answers 200 with a JSON array
        EXPECTED: One GET with timeout, decoded array returned
        """
        # Arrange
        source = HttpRecordSource("http://tracker.test", timeout_seconds=3)
        body = [{"User Name": "Ana"}]

        # Act
        with patch(
            "progress_tracker.adapters.http_source.requests.get",
            return_value=_response(payload=body),
        ) as mock_get:
            payload = source.fetch()

        # Assert
        assert payload == body
        mock_get.assert_called_once()
        args, kwargs = mock_get.call_args
        assert args[0] == "http://tracker.test/data.json"
        assert kwargs["timeout"] == 3

    def test_uses_given_session(self) -> None:
        session = Mock(spec=requests.Session)
        session.get.return_value = _response(payload=[])
        source = HttpRecordSource("http://tracker.test", session=session)

        assert source.fetch() == []
        session.get.assert_called_once()

    def test_error_status_raises(self) -> None:
        source = HttpRecordSource("http://tracker.test")

        with patch(
            "progress_tracker.adapters.http_source.requests.get",
            return_value=_response(status_code=404, text="not found"),
        ):
            with pytest.raises(requests.HTTPError):
                source.fetch()

    def test_non_json_body_raises_value_error(self) -> None:
        source = HttpRecordSource("http://tracker.test")

        with patch(
            "progress_tracker.adapters.http_source.requests.get",
            return_value=_response(text="<html>"),
        ):
            with pytest.raises(ValueError):
                source.fetch()


class TestInMemoryRecordSource:
    """Test cases for InMemoryRecordSource."""

    def test_returns_copy_of_payload(self) -> None:
        payload = [{"User Name": "Ana"}]
        source = InMemoryRecordSource.from_records(payload)

        fetched = source.fetch()
        fetched[0]["User Name"] = "Changed"

        assert source.fetch()[0]["User Name"] == "Ana"
        assert source.fetch_count == 2


class TestCreateRecordSource:
    """Test cases for create_record_source."""

    def test_http_location(self) -> None:
        config = DataSourceConfig(location="https://tracker.test", timeout_seconds=2)

        source = create_record_source(config)

        assert isinstance(source, HttpRecordSource)
        assert source.url == "https://tracker.test/data.json"

    def test_file_location(self, sample_data_path: Path) -> None:
        config = DataSourceConfig(location=str(sample_data_path))

        source = create_record_source(config)

        assert isinstance(source, JsonFileRecordSource)
        assert len(source.fetch()) == 4
