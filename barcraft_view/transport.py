"""Asynchronous JSON GETs against the cocktail proxy."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping, Optional, Protocol

import requests

from .errors import FetchFailed

logger = logging.getLogger(__name__)


class JsonTransport(Protocol):
    """Anything able to GET a URL and return its decoded JSON body."""

    async def get_json(
        self, url: str, params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        ...


class RequestsTransport:
    """Runs blocking :mod:`requests` calls in worker threads.

    No retries are configured; a failed call surfaces once as
    :class:`FetchFailed`.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.setdefault("Accept", "application/json")

    async def get_json(
        self, url: str, params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        return await asyncio.to_thread(self._get_json, url, params)

    def _get_json(self, url: str, params: Optional[Mapping[str, Any]]) -> Any:
        try:
            response = self._session.get(
                url, params=dict(params or {}), timeout=self._timeout
            )
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise FetchFailed(f"Request to {url} failed: {exc}", url=url) from exc

        if not response.ok:
            logger.warning("Request to %s answered %s", response.url, response.status_code)
            raise FetchFailed(
                f"Request to {response.url} failed: {response.reason}",
                status=response.status_code,
                url=response.url,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise FetchFailed(
                f"Response from {response.url} is not valid JSON",
                status=response.status_code,
                url=response.url,
            ) from exc

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
