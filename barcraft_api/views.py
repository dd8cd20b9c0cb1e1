"""Flask views exposing the cocktail proxy API."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from flask import Blueprint, jsonify, request
from requests import RequestException

from .filter_options import FILTER_TYPES, resolve_filter
from .models import DrinkDetail, DrinkPage, DrinkSummary
from .service import CocktailService

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = (
    "This cocktail ID is not available in the CocktailDB database. "
    "Try IDs between 11000 and 15000 for best results."
)
NOT_FOUND_SUGGESTION = (
    "Popular cocktails have IDs like: 11007 (Margarita), 11000 (Mojito), "
    "11001 (Old Fashioned)"
)


def register_routes(app: Any, service: CocktailService) -> None:
    """Register the HTTP routes on *app* using the provided service."""

    blueprint = Blueprint("cocktails", __name__)
    api_blueprint = Blueprint("cocktails_api", __name__, url_prefix="/api")

    @blueprint.route("/")
    def index() -> Any:
        return jsonify({"message": "BarCraft API Server"})

    @api_blueprint.route("/search")
    def search() -> Any:
        query = request.args.get("query", "")
        index, limit = _parse_window(service.page_size)
        try:
            page = service.search(query, index, limit)
        except RequestException:
            logger.exception("Error searching cocktails for %r", query)
            return jsonify({"error": "Failed to search cocktails"}), 500
        return jsonify(_serialize_page(page))

    @api_blueprint.route("/search/letter")
    def search_by_letter() -> Any:
        letter = request.args.get("firstLetter", "")
        if len(letter) != 1:
            return (
                jsonify(
                    {
                        "error": "Invalid letter",
                        "message": "Letter parameter must be a single character",
                    }
                ),
                400,
            )
        index, limit = _parse_window(service.page_size)
        try:
            page = service.search_by_letter(letter, index, limit)
        except RequestException:
            logger.exception("Error searching cocktails by letter %r", letter)
            return jsonify({"error": "Failed to search cocktails"}), 500
        return jsonify(_serialize_page(page))

    @api_blueprint.route("/filter")
    def filter_drinks() -> Any:
        filter_type = request.args.get("type", "")
        value = request.args.get("value", "")
        if filter_type not in FILTER_TYPES:
            return (
                jsonify(
                    {
                        "error": "Invalid filter type",
                        "message": "Filter type must be either 'category' or 'alcoholic'",
                    }
                ),
                400,
            )
        return _filter_response(filter_type, value)

    @api_blueprint.route("/filter/<slug>")
    def filter_shortcut(slug: str) -> Any:
        option = resolve_filter(slug)
        if option is None:
            return jsonify({"error": "Unknown filter", "filter": slug}), 404
        return _filter_response(option.type, option.value)

    @api_blueprint.route("/cocktail/<drink_id>")
    def cocktail_detail(drink_id: str) -> Any:
        if not drink_id.isdigit():
            logger.info("Invalid cocktail id received: %r", drink_id)
            return (
                jsonify(
                    {
                        "id": drink_id,
                        "error": "Invalid cocktail ID",
                        "message": "The ID must be a valid number",
                    }
                ),
                400,
            )
        try:
            drink = service.get(int(drink_id))
        except RequestException:
            logger.exception("Error fetching cocktail %s", drink_id)
            return (
                jsonify({"id": drink_id, "error": "Failed to fetch cocktail details"}),
                500,
            )
        if drink is None:
            return (
                jsonify(
                    {
                        "drink": None,
                        "id": drink_id,
                        "error": "Cocktail not found",
                        "message": NOT_FOUND_MESSAGE,
                        "suggestion": NOT_FOUND_SUGGESTION,
                    }
                ),
                404,
            )
        return jsonify({"drink": serialize_drink(drink)})

    def _filter_response(filter_type: str, value: str) -> Any:
        index, limit = _parse_window(service.page_size)
        try:
            page = service.filter(filter_type, value, index, limit)
        except RequestException:
            logger.exception("Error filtering drinks by %s=%s", filter_type, value)
            return jsonify({"error": "Failed to filter drinks"}), 500
        return jsonify(_serialize_page(page))

    @blueprint.app_errorhandler(404)
    def not_found(_: Exception) -> tuple[Any, int]:
        return jsonify({"error": "Route not found"}), 404

    @app.before_request
    def log_request() -> None:
        logger.info("%s %s", request.method, request.full_path.rstrip("?"))

    @app.after_request
    def allow_cross_origin(response: Any) -> Any:
        response.headers.setdefault("Access-Control-Allow-Origin", "*")
        return response

    app.register_blueprint(blueprint)
    app.register_blueprint(api_blueprint)


def _parse_window(default_limit: int) -> tuple[int, int]:
    index = _parse_int(request.args.get("index"), 0)
    limit = _parse_int(request.args.get("limit"), default_limit)
    return max(index, 0), limit if limit > 0 else default_limit


def _parse_int(raw_value: Optional[str], default: int) -> int:
    try:
        return int(raw_value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default


def _serialize_page(page: DrinkPage) -> Dict[str, Any]:
    return {
        "drinks": [serialize_drink(item) for item in page.items],
        "totalCount": page.total,
        "pagination": page.pagination(),
    }


def serialize_drink(drink: DrinkSummary) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "id": drink.id,
        "name": drink.name,
        "category": drink.category,
        "image": drink.image,
    }
    if drink.alcoholic is not None:
        payload["alcoholic"] = drink.alcoholic
    if isinstance(drink, DrinkDetail):
        payload.update(
            {
                "instructions": drink.instructions,
                "ingredients": list(drink.ingredients),
                "measures": list(drink.measures),
                "tags": drink.tags,
                "video": drink.video,
                "iba": drink.iba,
                "alcoholic": drink.alcoholic,
                "glass": drink.glass,
            }
        )
    return payload
