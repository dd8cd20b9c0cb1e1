"""Filter option definitions for cocktail listings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, MutableMapping, Optional, Sequence, Tuple

FILTER_TYPES: Tuple[str, ...] = ("category", "alcoholic")


@dataclass(frozen=True)
class FilterOption:
    """A named shortcut onto one of the upstream filter lookups."""

    slug: str
    label: str
    type: str
    value: str


def _option(slug: str, label: str, type_: str, value: str) -> FilterOption:
    return FilterOption(slug=slug, label=label, type=type_, value=value)


def build_lookup(options: Sequence[FilterOption]) -> MutableMapping[str, FilterOption]:
    """Create a mapping of option slugs to their definitions."""

    return {option.slug: option for option in options}


FILTER_OPTIONS: Tuple[FilterOption, ...] = (
    _option("alcoholic", "Alcoholic", "alcoholic", "Alcoholic"),
    _option("non-alcoholic", "Non-Alcoholic", "alcoholic", "Non_Alcoholic"),
    _option("ordinary-drink", "Ordinary Drinks", "category", "Ordinary_Drink"),
    _option("cocktail", "Cocktails", "category", "Cocktail"),
)

FILTER_LOOKUP: Mapping[str, FilterOption] = {
    **build_lookup(FILTER_OPTIONS),
    "cocktails": FILTER_OPTIONS[-1],
}


def resolve_filter(slug: Optional[str]) -> Optional[FilterOption]:
    """Return the option registered under *slug*, ignoring case."""

    if not slug:
        return None
    return FILTER_LOOKUP.get(slug.strip().lower())
