"""State machine reconciling user input, URL state and page fetches."""
from __future__ import annotations

import asyncio
from dataclasses import replace
from enum import Enum
import logging
from typing import Awaitable, Callable, Optional, Set, Union

from . import query_codec
from .config import DEFAULT_PAGE_SIZE
from .errors import FetchFailed, ValidationError
from .models import PageResult, Record, ViewQuery, fold_letter
from .page_fetcher import PageFetcher
from .presenter import PaginationView, derive

logger = logging.getLogger(__name__)

UrlListener = Callable[[str], None]
Outcome = Union[PageResult, FetchFailed]


class ViewState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"


class ViewController:
    """Owns the current :class:`ViewQuery` and the page shown for it.

    Every accepted user action produces a new query and a new generation.
    A fetch outcome is admitted only while its generation is still the
    latest, so a slow response can never replace a newer one.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        page_size: int = DEFAULT_PAGE_SIZE,
        initial_url: Optional[str] = None,
        url_listener: Optional[UrlListener] = None,
    ) -> None:
        self._fetcher = fetcher
        self._default_page_size = page_size
        self._query = query_codec.decode(initial_url, page_size)
        self._url_listener = url_listener
        self._generation = 0
        self._state = ViewState.LOADING
        self._result: Optional[PageResult] = None
        self._displayed_query: Optional[ViewQuery] = None
        self._error: Optional[FetchFailed] = None
        self._inflight: Set["asyncio.Task[None]"] = set()

    @classmethod
    def open(
        cls,
        fetcher: PageFetcher,
        page_size: int = DEFAULT_PAGE_SIZE,
        initial_url: Optional[str] = None,
        url_listener: Optional[UrlListener] = None,
    ) -> "ViewController":
        """Create a controller and issue the fetch for its initial view."""

        controller = cls(fetcher, page_size, initial_url, url_listener)
        controller.start()
        return controller

    @property
    def query(self) -> ViewQuery:
        return self._query

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def result(self) -> Optional[PageResult]:
        """Last committed page; kept on screen while loading or after an error."""

        return self._result

    @property
    def displayed_query(self) -> Optional[ViewQuery]:
        return self._displayed_query

    @property
    def error(self) -> Optional[FetchFailed]:
        return self._error

    @property
    def items(self) -> tuple[Record, ...]:
        return self._result.items if self._result else ()

    @property
    def url(self) -> str:
        return query_codec.encode(self._query, self._default_page_size)

    @property
    def pagination(self) -> Optional[PaginationView]:
        if self._result is None or self._displayed_query is None:
            return None
        return derive(self._displayed_query, self._result)

    def start(self) -> "asyncio.Task[None]":
        """Fetch the current query without touching the URL."""

        return self._issue(self._query, mirror_url=False)

    def on_search_submit(self, text: Optional[str]) -> "asyncio.Task[None]":
        """Search by name; an empty search goes back to the default listing."""

        query = ViewQuery(
            free_text=(text or "").strip(), page_size=self._query.page_size
        )
        return self._issue(query)

    def on_letter_select(self, letter: str) -> "asyncio.Task[None]":
        query = ViewQuery(letter=fold_letter(letter), page_size=self._query.page_size)
        return self._issue(query)

    def on_filter_select(self, filter_id: Optional[str]) -> "asyncio.Task[None]":
        category = filter_id.strip() if filter_id else None
        query = ViewQuery(category=category or None, page_size=self._query.page_size)
        return self._issue(query)

    def on_page_next(self) -> Optional["asyncio.Task[None]"]:
        """Advance one page; ``None`` when the shown page says nothing follows."""

        if self._result is None or not self._result.has_more:
            return None
        if self._state is not ViewState.ERROR and not self._shows_current_view():
            return None
        base = self._navigation_base()
        return self._issue(base.at_offset(base.offset + base.page_size))

    def on_page_previous(self) -> Optional["asyncio.Task[None]"]:
        base = self._navigation_base()
        if base.offset <= 0:
            return None
        return self._issue(base.at_offset(max(0, base.offset - base.page_size)))

    def on_fetch_settled(self, outcome: Outcome, generation: int) -> bool:
        """Admit *outcome* if *generation* is current; return whether it was."""

        if generation != self._generation:
            logger.debug(
                "Discarding outcome of generation %d; current is %d",
                generation,
                self._generation,
            )
            return False

        if isinstance(outcome, FetchFailed):
            logger.warning("Fetch for generation %d failed: %s", generation, outcome)
            self._state = ViewState.ERROR
            self._error = outcome
            return True

        self._result = outcome.tagged(generation)
        self._displayed_query = self._query
        self._state = ViewState.IDLE
        self._error = None
        return True

    async def settle(self) -> None:
        """Wait until no fetch is in flight."""

        while self._inflight:
            await asyncio.gather(*list(self._inflight))

    def _issue(self, query: ViewQuery, mirror_url: bool = True) -> "asyncio.Task[None]":
        loop = asyncio.get_running_loop()
        try:
            url = query_codec.encode(query, self._default_page_size)
        except UnicodeEncodeError as exc:
            raise ValidationError(f"Query cannot be written to a URL: {exc}") from exc
        pending = self._fetcher.resolve(query)

        self._query = query
        self._generation += 1
        generation = self._generation
        self._state = ViewState.LOADING
        self._error = None
        logger.debug("Generation %d requests %r", generation, url)

        task = loop.create_task(self._run(pending, generation))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)
        # Listener runs last; if it raises, the fetch is already scheduled.
        if mirror_url and self._url_listener is not None:
            self._url_listener(url)
        return task

    async def _run(self, pending: Awaitable[PageResult], generation: int) -> None:
        try:
            outcome: Outcome = await pending
        except FetchFailed as exc:
            outcome = exc
        except Exception as exc:
            logger.exception("Unexpected error in fetch for generation %d", generation)
            outcome = FetchFailed(f"Unexpected error while loading cocktails: {exc!r}")
        self.on_fetch_settled(outcome, generation)

    def _navigation_base(self) -> ViewQuery:
        # After a failed fetch, move relative to the page still on screen.
        if self._state is ViewState.ERROR and self._displayed_query is not None:
            return self._displayed_query
        return self._query

    def _shows_current_view(self) -> bool:
        displayed = self._displayed_query
        if displayed is None:
            return False
        return replace(displayed, offset=0) == replace(self._query, offset=0)
