"""Thin client for the public CocktailDB JSON API."""
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Protocol

from .config import UpstreamConfig
from .http_client import HttpClient

logger = logging.getLogger(__name__)


class JsonGetter(Protocol):
    def get_json(self, url: str, **kwargs: Any) -> Any:
        ...


class CocktailDbClient:
    """Issues lookups against CocktailDB and returns its raw drink mappings."""

    def __init__(self, http_client: JsonGetter, base_url: str) -> None:
        self._http_client = http_client
        self._base_url = base_url.rstrip("/")

    @classmethod
    def from_config(cls, config: UpstreamConfig) -> "CocktailDbClient":
        http_client = HttpClient(
            timeout=config.timeout,
            max_retries=config.max_retries,
            backoff_factor=config.backoff_factor,
        )
        return cls(http_client, config.base_url)

    def search_by_name(self, name: str) -> List[Mapping[str, Any]]:
        return self._drinks("search.php", {"s": name})

    def search_by_letter(self, letter: str) -> List[Mapping[str, Any]]:
        return self._drinks("search.php", {"f": letter})

    def filter_by_category(self, category: str) -> List[Mapping[str, Any]]:
        return self._drinks("filter.php", {"c": category})

    def filter_by_alcoholic(self, value: str) -> List[Mapping[str, Any]]:
        return self._drinks("filter.php", {"a": value})

    def lookup(self, drink_id: int) -> Optional[Mapping[str, Any]]:
        drinks = self._drinks("lookup.php", {"i": drink_id})
        return drinks[0] if drinks else None

    def _drinks(self, path: str, params: Mapping[str, Any]) -> List[Mapping[str, Any]]:
        url = f"{self._base_url}/{path}"
        logger.debug("Requesting CocktailDB %s with %s", url, dict(params))
        payload = self._http_client.get_json(url, params=dict(params))
        if not isinstance(payload, Mapping):
            return []
        # CocktailDB answers "no data found" strings or null for empty filters.
        drinks = payload.get("drinks")
        if not isinstance(drinks, list):
            return []
        return [drink for drink in drinks if isinstance(drink, Mapping)]
