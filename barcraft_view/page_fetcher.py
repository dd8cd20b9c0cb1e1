"""Resolve a :class:`ViewQuery` into one page of cocktails."""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Awaitable, Dict, Mapping, Optional, Tuple, Union
from urllib.parse import quote

from .config import ViewerConfig
from .errors import ValidationError
from .models import Discriminator, PageResult, Record, ViewQuery, fold_letter
from .transport import JsonTransport, RequestsTransport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlatEnvelope:
    """``drinks`` without a pagination block; ``has_more`` must be inferred."""

    items: Tuple[Record, ...]
    total_count: Optional[int] = None


@dataclass(frozen=True)
class HasMoreEnvelope:
    """Pagination block carrying ``hasMore`` but no total."""

    items: Tuple[Record, ...]
    has_more: bool


@dataclass(frozen=True)
class CountedEnvelope:
    """Pagination block with ``hasMore`` plus a ``totalCount``."""

    items: Tuple[Record, ...]
    has_more: bool
    total_count: int


Envelope = Union[FlatEnvelope, HasMoreEnvelope, CountedEnvelope]


def classify_envelope(payload: Any) -> Envelope:
    """Identify which of the proxy's response shapes *payload* has."""

    if isinstance(payload, list):
        return FlatEnvelope(items=_records(payload))
    if not isinstance(payload, Mapping):
        return FlatEnvelope(items=())

    items = _records(payload.get("drinks"))
    pagination = payload.get("pagination")
    total_count = _count(payload.get("totalCount"))

    has_more = pagination.get("hasMore") if isinstance(pagination, Mapping) else None
    if not isinstance(has_more, bool):
        return FlatEnvelope(items=items, total_count=total_count)
    if total_count is None:
        total_count = _count(pagination.get("totalCount"))
    if total_count is None:
        return HasMoreEnvelope(items=items, has_more=has_more)
    return CountedEnvelope(items=items, has_more=has_more, total_count=total_count)


def to_page_result(envelope: Envelope, page_size: int) -> PageResult:
    if isinstance(envelope, CountedEnvelope):
        return PageResult(
            items=envelope.items,
            total_count=envelope.total_count,
            has_more=envelope.has_more,
        )
    if isinstance(envelope, HasMoreEnvelope):
        return PageResult(items=envelope.items, total_count=None, has_more=envelope.has_more)
    # A full page cannot be told apart from "exactly the last page" here.
    return PageResult(
        items=envelope.items,
        total_count=envelope.total_count,
        has_more=len(envelope.items) == page_size,
    )


class PageFetcher:
    """Chooses the proxy endpoint for a query and normalizes its answer."""

    def __init__(self, transport: JsonTransport, base_url: str) -> None:
        self._transport = transport
        self._base_url = base_url.rstrip("/")

    @classmethod
    def from_config(cls, config: ViewerConfig) -> "PageFetcher":
        return cls(RequestsTransport(timeout=config.timeout), config.api_base_url)

    def resolve(self, query: ViewQuery) -> Awaitable[PageResult]:
        """Validate *query* immediately and return the pending fetch.

        :class:`ValidationError` is raised by this call itself, before any
        request exists.
        """

        url, params = self.request_for(query)
        return self._fetch(url, params, query.page_size)

    def request_for(self, query: ViewQuery) -> Tuple[str, Dict[str, Any]]:
        """Return the endpoint URL and parameters for *query*."""

        if query.offset < 0:
            raise ValidationError(f"Offset must not be negative, got {query.offset}")
        if query.page_size <= 0:
            raise ValidationError(f"Page size must be positive, got {query.page_size}")
        if query.is_malformed:
            logger.warning(
                "Query sets several filters %s; using %s",
                [item.value for item in query.active_discriminators],
                query.discriminator.value,
            )

        params: Dict[str, Any] = {}
        discriminator = query.discriminator
        if discriminator is Discriminator.LETTER:
            letter = query.letter or ""
            if len(letter) != 1 or not letter.strip():
                raise ValidationError("Letter parameter must be a single character")
            url = f"{self._base_url}/search/letter"
            params["firstLetter"] = fold_letter(letter)
        elif discriminator is Discriminator.CATEGORY:
            category = (query.category or "").strip()
            if not category:
                raise ValidationError("Category filter must not be empty")
            url = f"{self._base_url}/filter/{quote(category, safe='')}"
        elif discriminator is Discriminator.FREE_TEXT:
            url = f"{self._base_url}/search"
            params["query"] = query.free_text
        else:
            url = f"{self._base_url}/search"

        params["index"] = query.offset
        params["limit"] = query.page_size
        return url, params

    async def _fetch(self, url: str, params: Dict[str, Any], page_size: int) -> PageResult:
        payload = await self._transport.get_json(url, params)
        envelope = classify_envelope(payload)
        result = to_page_result(envelope, page_size)
        logger.debug(
            "Fetched %d items from %s (%s, has_more=%s)",
            len(result.items),
            url,
            type(envelope).__name__,
            result.has_more,
        )
        return result


def _records(value: Any) -> Tuple[Record, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(Record.from_payload(item) for item in value if isinstance(item, Mapping))


def _count(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 0 else None
