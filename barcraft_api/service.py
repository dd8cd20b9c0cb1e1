"""Application services for the cocktail proxy."""
from __future__ import annotations

from functools import partial
import logging
from typing import Any, Callable, List, Mapping, Optional, Sequence

from .models import DrinkDetail, DrinkPage, DrinkSummary
from .upstream import CocktailDbClient

logger = logging.getLogger(__name__)

MAX_NUMBERED_FIELDS = 15
DEFAULT_CATEGORY = "Cocktail"


class CocktailService:
    """Coordinates read-only cocktail use cases and reshapes upstream data."""

    def __init__(self, client: CocktailDbClient, page_size: int) -> None:
        self._client = client
        self._page_size = page_size

    @property
    def page_size(self) -> int:
        return self._page_size

    def search(self, query: Optional[str], index: int, limit: Optional[int]) -> DrinkPage:
        """Search by name, or list the default category when *query* is empty."""

        normalized_query = query.strip() if query else None
        if normalized_query:
            drinks = self._client.search_by_name(normalized_query)
            return self._paginate(drinks, index, limit, _to_detail)

        drinks = self._client.filter_by_category(DEFAULT_CATEGORY)
        return self._paginate(
            drinks, index, limit, partial(_to_summary, category=DEFAULT_CATEGORY)
        )

    def search_by_letter(self, letter: str, index: int, limit: Optional[int]) -> DrinkPage:
        if len(letter) != 1:
            raise ValueError("Letter parameter must be a single character")
        drinks = self._client.search_by_letter(letter.lower())
        return self._paginate(drinks, index, limit, _to_detail)

    def filter(
        self, filter_type: str, value: str, index: int, limit: Optional[int]
    ) -> DrinkPage:
        if filter_type == "category":
            drinks = self._client.filter_by_category(value)
            mapper = partial(_to_summary, category=value)
        elif filter_type == "alcoholic":
            drinks = self._client.filter_by_alcoholic(value)
            mapper = partial(_to_summary, alcoholic=value)
        else:
            raise ValueError("Filter type must be either 'category' or 'alcoholic'")
        return self._paginate(drinks, index, limit, mapper)

    def get(self, drink_id: int) -> Optional[DrinkDetail]:
        drink = self._client.lookup(drink_id)
        if drink is None:
            logger.info("No drink found for id %s", drink_id)
            return None
        return _to_detail(drink)

    def _paginate(
        self,
        drinks: Sequence[Mapping[str, Any]],
        index: int,
        limit: Optional[int],
        mapper: Callable[[Mapping[str, Any]], DrinkSummary],
    ) -> DrinkPage:
        effective_limit = limit if limit and limit > 0 else self._page_size
        start = max(index, 0)
        window = drinks[start : start + effective_limit]
        return DrinkPage(
            items=[mapper(drink) for drink in window],
            total=len(drinks),
            index=start,
            limit=effective_limit,
        )


def extract_ingredients(drink: Mapping[str, Any]) -> List[str]:
    """Collect the non-empty ``strIngredientN`` values in order."""

    ingredients: List[str] = []
    for position in range(1, MAX_NUMBERED_FIELDS + 1):
        value = drink.get(f"strIngredient{position}")
        if isinstance(value, str) and value.strip():
            ingredients.append(value)
    return ingredients


def extract_measures(drink: Mapping[str, Any]) -> List[str]:
    """Collect the non-empty ``strMeasureN`` values, trimmed."""

    measures: List[str] = []
    for position in range(1, MAX_NUMBERED_FIELDS + 1):
        value = drink.get(f"strMeasure{position}")
        if isinstance(value, str) and value.strip():
            measures.append(value.strip())
    return measures


def _to_summary(
    drink: Mapping[str, Any],
    category: Optional[str] = None,
    alcoholic: Optional[str] = None,
) -> DrinkSummary:
    return DrinkSummary(
        id=_safe_int(drink.get("idDrink")),
        name=_safe_str(drink.get("strDrink")),
        image=_safe_str(drink.get("strDrinkThumb")),
        category=category or _safe_str(drink.get("strCategory")),
        alcoholic=alcoholic or _safe_str(drink.get("strAlcoholic")),
    )


def _to_detail(drink: Mapping[str, Any]) -> DrinkDetail:
    return DrinkDetail(
        id=_safe_int(drink.get("idDrink")),
        name=_safe_str(drink.get("strDrink")),
        image=_safe_str(drink.get("strDrinkThumb")),
        category=_safe_str(drink.get("strCategory")),
        alcoholic=_safe_str(drink.get("strAlcoholic")),
        instructions=_safe_str(drink.get("strInstructions")),
        ingredients=tuple(extract_ingredients(drink)),
        measures=tuple(extract_measures(drink)),
        tags=_safe_str(drink.get("strTags")),
        video=_safe_str(drink.get("strVideo")),
        iba=_safe_str(drink.get("strIBA")),
        glass=_safe_str(drink.get("strGlass")),
    )


def _safe_str(value: object) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _safe_int(value: object) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return 0
