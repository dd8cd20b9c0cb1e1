"""Retrying JSON client used for CocktailDB calls."""
from __future__ import annotations

from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

DEFAULT_HEADERS = {
    "User-Agent": "barcraft-proxy/1.0",
    "Accept": "application/json",
}
RETRY_STATUSES = (429, 500, 502, 503, 504)


def build_session(
    max_retries: int,
    backoff_factor: float,
    headers: Optional[Dict[str, str]] = None,
) -> requests.Session:
    """Return a session that retries idempotent calls on transient failures."""

    session = requests.Session()
    session.headers.update(DEFAULT_HEADERS)
    session.headers.update(headers or {})
    adapter = HTTPAdapter(
        max_retries=Retry(
            total=max_retries,
            backoff_factor=backoff_factor,
            status_forcelist=RETRY_STATUSES,
            allowed_methods=("GET", "HEAD"),
            raise_on_status=False,
        )
    )
    for scheme in ("http://", "https://"):
        session.mount(scheme, adapter)
    return session


class HttpClient:
    """GETs JSON documents, raising :class:`requests.HTTPError` on error statuses."""

    def __init__(
        self,
        timeout: int = 10,
        max_retries: int = 3,
        backoff_factor: float = 0.3,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self._timeout = timeout
        self._session = build_session(max_retries, backoff_factor, headers)

    def get_json(self, url: str, **kwargs: Any) -> Any:
        """Decode the body of ``GET url``; an empty body yields ``None``."""

        kwargs.setdefault("timeout", self._timeout)
        response = self._session.get(url, **kwargs)
        response.raise_for_status()
        if not response.content:
            return None
        return response.json()

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
