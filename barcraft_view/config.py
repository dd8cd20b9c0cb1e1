"""Configuration for the cocktail list view client."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_PAGE_SIZE = 10


def _optional_float(value: Optional[str], default: Optional[float]) -> Optional[float]:
    if value is None:
        return default
    if value.strip().lower() in {"", "none", "off"}:
        return None
    return float(value)


@dataclass(frozen=True)
class ViewerConfig:
    """Where the proxy lives and how pages are sized."""

    api_base_url: str = "http://localhost:4000/api"
    page_size: int = DEFAULT_PAGE_SIZE
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls, prefix: str = "BARCRAFT_") -> "ViewerConfig":
        """Create the configuration from environment variables."""

        api_base_url = os.getenv(f"{prefix}API_URL", cls.api_base_url).rstrip("/")
        page_size = int(os.getenv(f"{prefix}PAGE_SIZE", cls.page_size))
        if page_size <= 0:
            raise ValueError(f"{prefix}PAGE_SIZE must be positive, got {page_size}")
        timeout = _optional_float(os.getenv(f"{prefix}TIMEOUT"), cls.timeout)
        return cls(api_base_url=api_base_url, page_size=page_size, timeout=timeout)
