"""Cursor-based continuation.

Architecture:
    ``CursorPaginator`` is the mode-agnostic state machine::

        START -> HAS_CURSOR -> {HAS_CURSOR, EXHAUSTED}
        START -> EXHAUSTED

    ``next_request()`` says what to issue next (or ``None``), ``advance()``
    records the response that came back. ``SyncPager`` and ``AsyncPager``
    drive it with a blocking or an awaitable ``send`` and are otherwise
    identical.

    Pagers are lazy, forward-only and non-restartable: each pulled page is
    exactly one call, nothing is prefetched, and page N+1 is requested only
    after page N's response (which carries its cursor) has been observed.
    Abandoning iteration issues no further calls.

Loop detection:
    A cursor equal to one already consumed in the same traversal raises
    ``PaginationError`` instead of issuing the request.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Iterator
from typing import Any

from ..core.enums import CursorState
from ..core.exceptions import PaginationError
from .request import SlackRequest
from .response import SlackResponse
from .telemetry import log_page_fetched, log_pagination_complete


class CursorPaginator:
    """Pagination state machine for one logical request.

    Args:
        request: The original request; its params are reused for every page
        max_pages: Stop after this many pages even if a cursor remains
    """

    def __init__(self, request: SlackRequest, *, max_pages: int | None = None) -> None:
        if max_pages is not None and max_pages < 1:
            raise ValueError("max_pages must be at least 1")
        self._request = request
        self._max_pages = max_pages
        self._cursor: str | None = None
        self._seen: set[str] = set()
        self._repeated: str | None = None
        self.state = CursorState.START
        self.pages = 0
        if request.cursor:
            self._seen.add(request.cursor)

    @property
    def request(self) -> SlackRequest:
        return self._request

    @property
    def cursor(self) -> str | None:
        return self._cursor

    def next_request(self) -> SlackRequest | None:
        """Request for the next page, or ``None`` once exhausted.

        Raises:
            PaginationError: The last response repeated an earlier cursor
        """
        if self.state is CursorState.EXHAUSTED:
            return None
        if self._repeated is not None:
            self.state = CursorState.EXHAUSTED
            raise PaginationError(
                f"{self._request.api_method} returned cursor {self._repeated!r} twice; "
                "stopping to avoid an infinite loop"
            )
        if self._max_pages is not None and self.pages >= self._max_pages:
            self.state = CursorState.EXHAUSTED
            return None
        if self.state is CursorState.START:
            return self._request
        return self._request.with_cursor(self._cursor)  # type: ignore[arg-type]

    def advance(self, response: SlackResponse) -> None:
        """Record a page and transition on its ``next_cursor``."""
        if self.state is CursorState.EXHAUSTED:
            raise PaginationError("pagination is already exhausted")
        self.pages += 1
        cursor = response.next_cursor
        if cursor is None:
            self.state = CursorState.EXHAUSTED
            self._cursor = None
            return
        if cursor in self._seen:
            self._repeated = cursor
        self._seen.add(cursor)
        self._cursor = cursor
        self.state = CursorState.HAS_CURSOR


class SyncPager(Iterator[SlackResponse]):
    """Blocking page iterator.

    Example:
        >>> for page in client.paginate("users.list", {"limit": 200}, http_verb="GET"):
        ...     for member in page["members"]:
        ...         ...
    """

    def __init__(
        self,
        send: Callable[[SlackRequest], SlackResponse],
        request: SlackRequest,
        *,
        max_pages: int | None = None,
    ) -> None:
        self._send = send
        self._paginator = CursorPaginator(request, max_pages=max_pages)
        self._finished = False

    @property
    def state(self) -> CursorState:
        return self._paginator.state

    @property
    def pages(self) -> int:
        return self._paginator.pages

    def __iter__(self) -> SyncPager:
        return self

    def __next__(self) -> SlackResponse:
        request = self._paginator.next_request()
        if request is None:
            self._finish()
            raise StopIteration
        response = self._send(request)
        self._paginator.advance(response)
        log_page_fetched(
            api_method=request.api_method,
            page=self._paginator.pages,
            has_next=response.has_next_cursor(),
        )
        return response

    def items(self, key: str) -> Iterator[Any]:
        """Flatten ``page[key]`` across pages (e.g. ``"members"``, ``"channels"``)."""
        for page in self:
            yield from page.get(key) or ()

    def _finish(self) -> None:
        if not self._finished:
            self._finished = True
            log_pagination_complete(
                api_method=self._paginator.request.api_method, pages=self._paginator.pages
            )


class AsyncPager(AsyncIterator[SlackResponse]):
    """Non-blocking page iterator; same semantics as ``SyncPager``.

    Example:
        >>> async for page in client.paginate("conversations.list", http_verb="GET"):
        ...     channels.extend(page["channels"])
    """

    def __init__(
        self,
        send: Callable[[SlackRequest], Awaitable[SlackResponse]],
        request: SlackRequest,
        *,
        max_pages: int | None = None,
    ) -> None:
        self._send = send
        self._paginator = CursorPaginator(request, max_pages=max_pages)
        self._finished = False

    @property
    def state(self) -> CursorState:
        return self._paginator.state

    @property
    def pages(self) -> int:
        return self._paginator.pages

    def __aiter__(self) -> AsyncPager:
        return self

    async def __anext__(self) -> SlackResponse:
        request = self._paginator.next_request()
        if request is None:
            self._finish()
            raise StopAsyncIteration
        response = await self._send(request)
        self._paginator.advance(response)
        log_page_fetched(
            api_method=request.api_method,
            page=self._paginator.pages,
            has_next=response.has_next_cursor(),
        )
        return response

    async def items(self, key: str) -> AsyncIterator[Any]:
        async for page in self:
            for item in page.get(key) or ():
                yield item

    def _finish(self) -> None:
        if not self._finished:
            self._finished = True
            log_pagination_complete(
                api_method=self._paginator.request.api_method, pages=self._paginator.pages
            )
