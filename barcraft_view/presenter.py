"""Display-only pagination facts for the current page."""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable, Optional

from .models import PageResult, ViewQuery


@dataclass(frozen=True)
class PaginationView:
    """What the pagination controls render; ``total_pages`` is ``None`` when unknown."""

    current_page: int
    total_pages: Optional[int]
    is_first_page: bool
    is_last_page: bool
    show_controls: bool

    def iter_pages(self) -> Iterable[int]:
        """Iterate over page numbers with an initial block then a sliding window."""

        total_pages = self.total_pages
        if not total_pages:
            return range(0)

        if total_pages <= 10:
            return range(1, total_pages + 1)

        if self.current_page < 10:
            return range(1, 11)

        start = max(1, self.current_page - 5)
        end = min(total_pages, self.current_page + 5)

        if end - start < 10 and start > 1:
            start = max(1, end - 10)

        return range(start, end + 1)


def derive(query: ViewQuery, result: PageResult) -> PaginationView:
    total_count = result.total_count
    total_pages = (
        math.ceil(total_count / query.page_size) if total_count is not None else None
    )
    if total_count is not None:
        fits_one_page = total_count <= query.page_size
    else:
        # Nothing before and nothing after: the whole list is on screen.
        fits_one_page = query.offset == 0 and not result.has_more
    return PaginationView(
        current_page=query.offset // query.page_size + 1,
        total_pages=total_pages,
        is_first_page=query.offset == 0,
        is_last_page=not result.has_more,
        show_controls=bool(result.items) and not fits_one_page,
    )
