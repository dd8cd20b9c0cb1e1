"""Mapping between :class:`ViewQuery` objects and URL query strings."""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple
from urllib.parse import parse_qsl, urlencode

from .config import DEFAULT_PAGE_SIZE
from .models import ViewQuery, fold_letter

QUERY_PARAM = "q"
LETTER_PARAM = "letter"
CATEGORY_PARAM = "category"
OFFSET_PARAM = "offset"
LIMIT_PARAM = "limit"


def encode(query: ViewQuery, default_page_size: int = DEFAULT_PAGE_SIZE) -> str:
    """Return the query string for *query* without a leading ``?``.

    Only non-default values are emitted, so the default view encodes to ``""``.
    """

    params: List[Tuple[str, str]] = []
    if query.free_text:
        params.append((QUERY_PARAM, query.free_text))
    if query.letter is not None:
        params.append((LETTER_PARAM, query.letter))
    if query.category is not None:
        params.append((CATEGORY_PARAM, query.category))
    if query.offset != 0:
        params.append((OFFSET_PARAM, str(query.offset)))
    if query.page_size != default_page_size:
        params.append((LIMIT_PARAM, str(query.page_size)))
    return urlencode(params)


def decode(raw: Optional[str], default_page_size: int = DEFAULT_PAGE_SIZE) -> ViewQuery:
    """Build a valid :class:`ViewQuery` from any query string or URL.

    Unknown parameters are ignored, invalid numbers fall back to defaults,
    negative offsets clamp to zero and only the highest-priority filter among
    letter, category and free text is kept.
    """

    params = _first_values(raw or "")

    free_text = params.get(QUERY_PARAM, "").strip()
    letter = _parse_letter(params.get(LETTER_PARAM))
    category = params.get(CATEGORY_PARAM, "").strip() or None
    offset = max(_parse_int(params.get(OFFSET_PARAM), 0), 0)
    page_size = _parse_int(params.get(LIMIT_PARAM), default_page_size)
    if page_size <= 0:
        page_size = default_page_size

    if letter is not None:
        category = None
        free_text = ""
    elif category is not None:
        free_text = ""

    return ViewQuery(
        free_text=free_text,
        letter=letter,
        category=category,
        offset=offset,
        page_size=page_size,
    )


def _first_values(raw: str) -> Dict[str, str]:
    raw = raw.split("#", 1)[0]
    if "?" in raw:
        raw = raw.split("?", 1)[1]
    values: Dict[str, str] = {}
    for key, value in parse_qsl(raw, keep_blank_values=True):
        values.setdefault(key, value)
    return values


def _parse_letter(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    stripped = value.strip()
    if len(stripped) != 1:
        return None
    return fold_letter(stripped)


def _parse_int(value: Optional[str], default: int) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
