"""Filter choices offered above the cocktail list."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class FilterCategory:
    label: str
    filter_id: Optional[str]


FILTER_CATEGORIES: Tuple[FilterCategory, ...] = (
    FilterCategory("All Drinks", None),
    FilterCategory("Alcoholic", "alcoholic"),
    FilterCategory("Non-Alcoholic", "non-alcoholic"),
    FilterCategory("Ordinary Drinks", "ordinary-drink"),
    FilterCategory("Cocktails", "cocktail"),
)


def label_for(filter_id: Optional[str]) -> str:
    """Return the heading for *filter_id*, falling back to the raw identifier."""

    for category in FILTER_CATEGORIES:
        if category.filter_id == filter_id:
            return category.label
    return filter_id or FILTER_CATEGORIES[0].label
