"""Tests for the cocktail proxy HTTP API."""
from __future__ import annotations

from typing import Any, Mapping, Optional

import pytest
from flask import Flask
from requests import ConnectionError as RequestsConnectionError

from barcraft_api import create_app
from barcraft_api.config import AppConfig


def raw_drink(drink_id: int, name: str, **extra: Any) -> dict:
    drink = {
        "idDrink": str(drink_id),
        "strDrink": name,
        "strDrinkThumb": f"https://example.com/{drink_id}.jpg",
    }
    drink.update(extra)
    return drink


MARGARITA = raw_drink(
    11007,
    "Margarita",
    strCategory="Ordinary Drink",
    strAlcoholic="Alcoholic",
    strGlass="Cocktail glass",
    strInstructions="Shake with ice.",
    strIngredient1="Tequila",
    strIngredient2="Triple sec",
    strIngredient3="Lime juice",
    strIngredient4="",
    strIngredient5=None,
    strMeasure1="1 1/2 oz ",
    strMeasure2=" 1/2 oz",
    strMeasure3="1 oz",
    strMeasure4=None,
    strTags="IBA,ContemporaryClassic",
    strIBA="Contemporary Classics",
    strVideo=None,
)


class StubCocktailDb:
    def __init__(self, drinks: Optional[list] = None) -> None:
        self.drinks = drinks if drinks is not None else []
        self.calls: list[tuple[str, Any]] = []
        self.error: Optional[Exception] = None

    def _answer(self, name: str, argument: Any) -> list:
        self.calls.append((name, argument))
        if self.error:
            raise self.error
        return self.drinks

    def search_by_name(self, name: str) -> list:
        return self._answer("search_by_name", name)

    def search_by_letter(self, letter: str) -> list:
        return self._answer("search_by_letter", letter)

    def filter_by_category(self, category: str) -> list:
        return self._answer("filter_by_category", category)

    def filter_by_alcoholic(self, value: str) -> list:
        return self._answer("filter_by_alcoholic", value)

    def lookup(self, drink_id: int) -> Optional[Mapping[str, Any]]:
        drinks = self._answer("lookup", drink_id)
        return drinks[0] if drinks else None


def build_app(drinks: Optional[list] = None) -> tuple[Flask, StubCocktailDb]:
    upstream = StubCocktailDb(drinks)
    app = create_app(AppConfig(page_size=10), client=upstream)  # type: ignore[arg-type]
    return app, upstream


def listing(count: int) -> list:
    return [raw_drink(1000 + index, f"Drink {index}") for index in range(count)]


def test_root_identifies_the_server():
    app, _ = build_app()
    response = app.test_client().get("/")
    assert response.get_json() == {"message": "BarCraft API Server"}


def test_search_reshapes_full_records():
    app, upstream = build_app([MARGARITA])
    response = app.test_client().get("/api/search?query=margarita")

    assert response.status_code == 200
    payload = response.get_json()
    assert upstream.calls == [("search_by_name", "margarita")]
    assert payload["totalCount"] == 1
    drink = payload["drinks"][0]
    assert drink["id"] == 11007
    assert drink["ingredients"] == ["Tequila", "Triple sec", "Lime juice"]
    assert drink["measures"] == ["1 1/2 oz", "1/2 oz", "1 oz"]
    assert drink["glass"] == "Cocktail glass"
    assert payload["pagination"]["hasMore"] is False


def test_search_without_query_lists_cocktail_category():
    app, upstream = build_app(listing(3))
    payload = app.test_client().get("/api/search").get_json()

    assert upstream.calls == [("filter_by_category", "Cocktail")]
    assert payload["drinks"][0] == {
        "id": 1000,
        "name": "Drink 0",
        "category": "Cocktail",
        "image": "https://example.com/1000.jpg",
    }


def test_search_slices_and_reports_pagination():
    app, _ = build_app(listing(25))
    payload = app.test_client().get("/api/search?index=20&limit=10").get_json()

    assert [drink["id"] for drink in payload["drinks"]] == list(range(1020, 1025))
    assert payload["totalCount"] == 25
    assert payload["pagination"] == {
        "currentPage": 2,
        "totalPages": 3,
        "pageSize": 10,
        "startIndex": 20,
        "endIndex": 30,
        "hasMore": False,
    }


def test_search_falls_back_to_default_window_on_bad_numbers():
    app, _ = build_app(listing(25))
    payload = app.test_client().get("/api/search?index=abc&limit=-4").get_json()

    assert payload["pagination"]["startIndex"] == 0
    assert payload["pagination"]["pageSize"] == 10
    assert payload["pagination"]["hasMore"] is True


def test_empty_upstream_answer_has_empty_pagination():
    app, _ = build_app([])
    payload = app.test_client().get("/api/search?query=zzz&index=10").get_json()

    assert payload["drinks"] == []
    assert payload["totalCount"] == 0
    assert payload["pagination"]["currentPage"] == 0
    assert payload["pagination"]["totalPages"] == 0
    assert payload["pagination"]["endIndex"] == 10
    assert payload["pagination"]["hasMore"] is False


@pytest.mark.parametrize("letter", ["", "ab"])
def test_letter_search_requires_one_character(letter):
    app, upstream = build_app(listing(3))
    response = app.test_client().get(f"/api/search/letter?firstLetter={letter}")

    assert response.status_code == 400
    assert upstream.calls == []


def test_letter_search_is_lower_cased():
    app, upstream = build_app([MARGARITA])
    response = app.test_client().get("/api/search/letter?firstLetter=M")

    assert response.status_code == 200
    assert upstream.calls == [("search_by_letter", "m")]


@pytest.mark.parametrize(
    "slug, expected_call, category, alcoholic",
    [
        ("alcoholic", ("filter_by_alcoholic", "Alcoholic"), None, "Alcoholic"),
        ("non-alcoholic", ("filter_by_alcoholic", "Non_Alcoholic"), None, "Non_Alcoholic"),
        ("ordinary-drink", ("filter_by_category", "Ordinary_Drink"), "Ordinary_Drink", None),
        ("cocktails", ("filter_by_category", "Cocktail"), "Cocktail", None),
    ],
)
def test_filter_shortcuts(slug, expected_call, category, alcoholic):
    app, upstream = build_app(listing(12))
    payload = app.test_client().get(f"/api/filter/{slug}?limit=5").get_json()

    assert upstream.calls == [expected_call]
    assert len(payload["drinks"]) == 5
    assert payload["drinks"][0]["category"] == category
    assert payload["drinks"][0].get("alcoholic") == alcoholic
    assert payload["pagination"]["hasMore"] is True


def test_unknown_filter_shortcut_is_404():
    app, upstream = build_app(listing(3))
    response = app.test_client().get("/api/filter/mocktails")

    assert response.status_code == 404
    assert upstream.calls == []


def test_generic_filter_validates_type():
    app, _ = build_app(listing(3))
    response = app.test_client().get("/api/filter?type=glass&value=Highball")

    assert response.status_code == 400
    assert response.get_json()["error"] == "Invalid filter type"


def test_generic_filter_by_category():
    app, upstream = build_app(listing(3))
    response = app.test_client().get("/api/filter?type=category&value=Shot")

    assert response.status_code == 200
    assert upstream.calls == [("filter_by_category", "Shot")]


def test_detail_returns_full_record():
    app, upstream = build_app([MARGARITA])
    response = app.test_client().get("/api/cocktail/11007")

    assert response.status_code == 200
    assert upstream.calls == [("lookup", 11007)]
    drink = response.get_json()["drink"]
    assert drink["name"] == "Margarita"
    assert drink["iba"] == "Contemporary Classics"
    assert drink["tags"] == "IBA,ContemporaryClassic"


def test_detail_rejects_non_numeric_id():
    app, upstream = build_app([MARGARITA])
    response = app.test_client().get("/api/cocktail/margarita")

    assert response.status_code == 400
    assert upstream.calls == []


def test_detail_for_unknown_id_is_404_with_null_drink():
    app, _ = build_app([])
    response = app.test_client().get("/api/cocktail/99999")

    assert response.status_code == 404
    payload = response.get_json()
    assert payload["drink"] is None
    assert payload["id"] == "99999"
    assert "11007" in payload["suggestion"]


def test_upstream_failures_become_500():
    app, upstream = build_app()
    upstream.error = RequestsConnectionError("down")
    client = app.test_client()

    assert client.get("/api/search?query=gin").status_code == 500
    assert client.get("/api/filter/alcoholic").status_code == 500
    assert client.get("/api/cocktail/11007").status_code == 500


def test_unknown_route_is_json_404():
    app, _ = build_app()
    response = app.test_client().get("/api/nothing-here")

    assert response.status_code == 404
    assert response.get_json() == {"error": "Route not found"}


def test_responses_allow_cross_origin_requests():
    app, _ = build_app()
    response = app.test_client().get("/api/search")

    assert response.headers["Access-Control-Allow-Origin"] == "*"
