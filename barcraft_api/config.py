"""Configuration objects for the cocktail proxy service."""
from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class UpstreamConfig:
    """Connection details for the public CocktailDB API."""

    base_url: str = "https://www.thecocktaildb.com/api/json/v1/1"
    timeout: int = 10
    max_retries: int = 3
    backoff_factor: float = 0.3

    @classmethod
    def from_env(cls, prefix: str = "COCKTAILDB_") -> "UpstreamConfig":
        """Create a configuration from environment variables."""

        return cls(
            base_url=os.getenv(f"{prefix}URL", cls.base_url).rstrip("/"),
            timeout=int(os.getenv(f"{prefix}TIMEOUT", cls.timeout)),
            max_retries=int(os.getenv(f"{prefix}MAX_RETRIES", cls.max_retries)),
            backoff_factor=float(
                os.getenv(f"{prefix}BACKOFF_FACTOR", cls.backoff_factor)
            ),
        )


@dataclass(frozen=True)
class AppConfig:
    """Top level application configuration."""

    upstream: UpstreamConfig = UpstreamConfig()
    page_size: int = 10
    port: int = 4000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create the configuration from environment variables."""

        upstream = UpstreamConfig.from_env()
        page_size = int(os.getenv("PAGE_SIZE", cls.page_size))
        port = int(os.getenv("PORT", cls.port))
        log_level = os.getenv("LOG_LEVEL", cls.log_level)
        return cls(
            upstream=upstream,
            page_size=page_size,
            port=port,
            log_level=log_level,
        )
