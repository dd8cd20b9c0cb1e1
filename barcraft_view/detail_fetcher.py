"""Single-cocktail lookups for the detail page."""
from __future__ import annotations

import asyncio
import logging
from typing import List, Mapping, Sequence

from .config import ViewerConfig
from .errors import FetchFailed, NotFound
from .models import PageResult, Record
from .transport import JsonTransport, RequestsTransport

logger = logging.getLogger(__name__)

FEATURED_IDS: tuple[int, ...] = (11007, 11000, 11001, 11008)


class DetailFetcher:
    """Fetches complete cocktail records from the proxy."""

    def __init__(self, transport: JsonTransport, base_url: str) -> None:
        self._transport = transport
        self._base_url = base_url.rstrip("/")

    @classmethod
    def from_config(cls, config: ViewerConfig) -> "DetailFetcher":
        return cls(RequestsTransport(timeout=config.timeout), config.api_base_url)

    async def fetch(self, cocktail_id: int | str) -> Record:
        """Return the cocktail *cocktail_id*.

        Raises :class:`NotFound` when the proxy has no such cocktail, either as
        ``{"drink": null}`` or as a 404, and :class:`FetchFailed` otherwise.
        """

        url = f"{self._base_url}/cocktail/{cocktail_id}"
        try:
            payload = await self._transport.get_json(url)
        except FetchFailed as exc:
            if exc.status == 404:
                raise NotFound(cocktail_id) from exc
            raise

        drink = payload.get("drink") if isinstance(payload, Mapping) else None
        if not isinstance(drink, Mapping):
            raise NotFound(cocktail_id)
        return Record.from_payload(drink)

    async def featured(self, cocktail_ids: Sequence[int] = FEATURED_IDS) -> PageResult:
        """Look up a fixed set of cocktails in parallel, keeping their order.

        Ids the proxy does not know are left out; any other failure propagates.
        """

        outcomes = await asyncio.gather(
            *(self.fetch(cocktail_id) for cocktail_id in cocktail_ids),
            return_exceptions=True,
        )
        records: List[Record] = []
        for cocktail_id, outcome in zip(cocktail_ids, outcomes):
            if isinstance(outcome, NotFound):
                logger.info("Featured cocktail %s is no longer available", cocktail_id)
                continue
            if isinstance(outcome, BaseException):
                raise outcome
            records.append(outcome)
        return PageResult(items=tuple(records), total_count=len(records), has_more=False)
