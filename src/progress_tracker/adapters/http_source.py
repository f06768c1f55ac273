"""
HTTP Record Source.

Fetches the static JSON document from a web server with a single GET.
No pagination, query parameters or authentication.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_PATH = "/data.json"


class HttpRecordSource:
    """Reads records from `<base_url><path>` over HTTP."""

    def __init__(
        self,
        base_url: str,
        path: str = DEFAULT_PATH,
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Args:
            base_url: Scheme and host the dashboard is served from
            path: Well-known path of the document
            timeout_seconds: Request timeout
            session: Optional requests session (defaults to module-level get)
        """
        self._url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
        self._timeout = timeout_seconds
        self._session = session

    @property
    def url(self) -> str:
        return self._url

    @property
    def description(self) -> str:
        return f"url {self._url}"

    def fetch(self) -> Any:
        """
        GET the document and decode it as JSON.

        Raises:
            requests.RequestException: On connection errors or non-2xx status
            ValueError: If the body is not valid JSON
        """
        getter = self._session.get if self._session is not None else requests.get
        response = getter(
            self._url,
            headers={"Accept": "application/json"},
            timeout=self._timeout,
        )
        response.raise_for_status()
        logger.debug(f"GET {self._url} -> {response.status_code}")
        return response.json()
