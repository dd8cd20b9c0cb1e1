"""Domain models for the cocktail proxy service."""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class DrinkSummary:
    """Light-weight representation used on listing pages."""

    id: int
    name: Optional[str]
    image: Optional[str]
    category: Optional[str] = None
    alcoholic: Optional[str] = None


@dataclass(frozen=True)
class DrinkDetail(DrinkSummary):
    """Complete cocktail representation."""

    instructions: Optional[str] = None
    ingredients: tuple[str, ...] = ()
    measures: tuple[str, ...] = ()
    tags: Optional[str] = None
    video: Optional[str] = None
    iba: Optional[str] = None
    glass: Optional[str] = None


@dataclass(frozen=True)
class DrinkPage:
    """One slice of a drink listing together with the size of the full list."""

    items: List[DrinkSummary]
    total: int
    index: int
    limit: int

    @property
    def end_index(self) -> int:
        return self.index + self.limit

    @property
    def has_more(self) -> bool:
        return self.end_index < self.total

    @property
    def total_pages(self) -> int:
        if self.total == 0:
            return 0
        return math.ceil(self.total / self.limit)

    @property
    def current_page(self) -> int:
        """Zero-based page number, as the listing endpoints report it."""

        if self.total == 0:
            return 0
        return self.index // self.limit

    def pagination(self) -> Dict[str, Any]:
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "pageSize": self.limit,
            "startIndex": self.index,
            "endIndex": self.end_index if self.total else self.index,
            "hasMore": self.has_more,
        }
