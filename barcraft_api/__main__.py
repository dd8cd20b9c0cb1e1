"""Entry point for running the cocktail proxy API."""
from __future__ import annotations

import logging

from . import create_app
from .config import AppConfig
from .env import load_environment


def configure_logging(level: str) -> None:
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )


def main() -> None:
    load_environment()
    config = AppConfig.from_env()
    configure_logging(config.log_level)
    app = create_app(config)
    logging.getLogger(__name__).info(
        "API server running at http://localhost:%d", config.port
    )
    app.run(host="0.0.0.0", port=config.port)


if __name__ == "__main__":
    main()
