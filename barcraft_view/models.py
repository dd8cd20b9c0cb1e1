"""Value objects describing what the list view shows."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from itertools import zip_longest
from typing import Any, List, Mapping, Optional, Tuple

from .config import DEFAULT_PAGE_SIZE


class Discriminator(str, Enum):
    """The filtering mode that decides which endpoint a query resolves against."""

    LETTER = "letter"
    CATEGORY = "category"
    FREE_TEXT = "free_text"
    DEFAULT = "default"


@dataclass(frozen=True)
class ViewQuery:
    """Canonical description of the list the user wants to see."""

    free_text: str = ""
    letter: Optional[str] = None
    category: Optional[str] = None
    offset: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def active_discriminators(self) -> Tuple[Discriminator, ...]:
        active: List[Discriminator] = []
        if self.letter is not None:
            active.append(Discriminator.LETTER)
        if self.category is not None:
            active.append(Discriminator.CATEGORY)
        if self.free_text:
            active.append(Discriminator.FREE_TEXT)
        return tuple(active)

    @property
    def discriminator(self) -> Discriminator:
        """Highest priority active mode: letter, category, free text, default."""

        active = self.active_discriminators
        return active[0] if active else Discriminator.DEFAULT

    @property
    def is_malformed(self) -> bool:
        return len(self.active_discriminators) > 1

    @property
    def is_searching(self) -> bool:
        return self.discriminator is Discriminator.FREE_TEXT

    @property
    def is_default_view(self) -> bool:
        return self.discriminator is Discriminator.DEFAULT

    def at_offset(self, offset: int) -> "ViewQuery":
        return replace(self, offset=offset)


@dataclass(frozen=True)
class Record:
    """A cocktail as exposed by the proxy; list views fill only the first fields."""

    id: int
    name: Optional[str]
    category: Optional[str] = None
    image: Optional[str] = None
    alcoholic: Optional[str] = None
    instructions: Optional[str] = None
    ingredients: Tuple[str, ...] = ()
    measures: Tuple[str, ...] = ()
    tags: Optional[str] = None
    glass: Optional[str] = None
    iba: Optional[str] = None
    video: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Record":
        return cls(
            id=_safe_int(payload.get("id")),
            name=_safe_str(payload.get("name")),
            category=_safe_str(payload.get("category")),
            image=_safe_str(payload.get("image")),
            alcoholic=_safe_str(payload.get("alcoholic")),
            instructions=_safe_str(payload.get("instructions")),
            ingredients=_str_tuple(payload.get("ingredients")),
            measures=_str_tuple(payload.get("measures")),
            tags=_safe_str(payload.get("tags")),
            glass=_safe_str(payload.get("glass")),
            iba=_safe_str(payload.get("iba")),
            video=_safe_str(payload.get("video")),
        )

    @property
    def tag_list(self) -> List[str]:
        if not self.tags:
            return []
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]

    def ingredient_lines(self) -> List[str]:
        """Pair each ingredient with its measure; trailing ingredients may lack one."""

        lines: List[str] = []
        for ingredient, measure in zip_longest(self.ingredients, self.measures):
            if ingredient is None:
                break
            lines.append(f"{measure} {ingredient}" if measure else ingredient)
        return lines


@dataclass(frozen=True)
class PageResult:
    """Outcome of resolving one :class:`ViewQuery`."""

    items: Tuple[Record, ...]
    total_count: Optional[int]
    has_more: bool
    generation: int = 0

    def tagged(self, generation: int) -> "PageResult":
        return replace(self, generation=generation)


def _safe_str(value: object) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _safe_int(value: object) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return 0


def _str_tuple(value: object) -> Tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(str(item) for item in value if item is not None)


def fold_letter(letter: str) -> str:
    """Lower-case *letter* unless that would turn it into several characters."""

    lowered = letter.lower()
    return lowered if len(lowered) == len(letter) else letter
