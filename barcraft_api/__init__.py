"""Flask application factory for the cocktail proxy API."""
from __future__ import annotations

from flask import Flask

from .config import AppConfig
from .service import CocktailService
from .upstream import CocktailDbClient
from .views import register_routes


def create_app(
    config: AppConfig | None = None,
    client: CocktailDbClient | None = None,
) -> Flask:
    """Create and configure the Flask application."""

    resolved_config = config or AppConfig.from_env()
    app = Flask(__name__)
    upstream = client or CocktailDbClient.from_config(resolved_config.upstream)
    service = CocktailService(upstream, resolved_config.page_size)
    register_routes(app, service)
    app.json.sort_keys = False
    app.config["APP_CONFIG"] = resolved_config
    app.config["COCKTAIL_SERVICE"] = service
    return app
