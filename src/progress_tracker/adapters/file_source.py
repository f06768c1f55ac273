"""
JSON File Record Source.

Reads the record collection from a local JSON file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union


class JsonFileRecordSource:
    """Reads records from a JSON file on disk."""

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)

    @property
    def description(self) -> str:
        return f"file {self._path}"

    def fetch(self) -> Any:
        with open(self._path, encoding="utf-8") as f:
            return json.load(f)
