"""Response wrapper around a decoded API payload.

Architecture:
    ``SlackResponse`` is created once per call and never changes. It extracts
    the envelope fields every method shares (``ok``, ``error``, warnings,
    rate-limit hint, continuation cursor) and keeps the untouched payload in
    ``data`` for everything else.

    A response with ``ok: false`` is data, not an exception. ``validate()``
    and ``raise_for_status()`` turn it into a ``CallError`` when the caller
    (or the client's retry layer) decides it is a failure.

See Also:
    - SlackRequest: the request a response (and its next page) derives from
    - CursorPaginator: consumes ``next_cursor`` to drive continuation
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..core import constants as c
from ..core.exceptions import (
    AuthError,
    PaginationError,
    RateLimitedError,
    ServerError,
    SlackApiError,
    SlackError,
)

if TYPE_CHECKING:
    from .request import SlackRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SlackResponse:
    """Immutable view over one API response.

    Args:
        data: Decoded JSON payload
        status_code: HTTP status code
        headers: Response headers (looked up case-insensitively)
        request: The request that produced this response
        client: Client used to fetch continuation pages via ``next()``
    """

    __slots__ = ("_data", "_status_code", "_headers", "_request", "_client")

    def __init__(
        self,
        data: Mapping[str, Any] | None,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        request: SlackRequest | None = None,
        client: Any = None,
    ) -> None:
        self._data: dict[str, Any] = dict(data or {})
        self._status_code = status_code
        self._headers = {k.lower(): v for k, v in (headers or {}).items()}
        self._request = request
        self._client = client

    # -- envelope -----------------------------------------------------------

    @property
    def data(self) -> dict[str, Any]:
        """The raw decoded payload."""
        return self._data

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    @property
    def request(self) -> SlackRequest | None:
        return self._request

    @property
    def ok(self) -> bool:
        return self._data.get("ok") is True

    @property
    def error(self) -> str | None:
        error = self._data.get("error")
        return error if isinstance(error, str) and error else None

    @property
    def warnings(self) -> tuple[str, ...]:
        """Warnings from the ``warning`` field and ``response_metadata.warnings``."""
        found: list[str] = []
        top = self._data.get("warning")
        if isinstance(top, str):
            found.extend(part.strip() for part in top.split(",") if part.strip())
        meta_warnings = self.response_metadata.get("warnings")
        if isinstance(meta_warnings, list):
            found.extend(str(w) for w in meta_warnings if str(w) not in found)
        return tuple(found)

    @property
    def response_metadata(self) -> dict[str, Any]:
        meta = self._data.get("response_metadata")
        return meta if isinstance(meta, dict) else {}

    @property
    def retry_after(self) -> float | None:
        """Seconds the server asked us to wait, if it said so."""
        for raw in (self._headers.get(c.HEADER_RETRY_AFTER.lower()), self._data.get("retry_after")):
            if raw is None or isinstance(raw, bool):
                continue
            try:
                seconds = float(raw)
            except (TypeError, ValueError):
                continue
            if seconds >= 0:
                return seconds
        return None

    @property
    def next_cursor(self) -> str | None:
        """Continuation cursor; empty strings count as absent."""
        cursor = self.response_metadata.get("next_cursor")
        if isinstance(cursor, str) and cursor:
            return cursor
        cursor = self._data.get("next_cursor")
        if isinstance(cursor, str) and cursor:
            return cursor
        return None

    def has_next_cursor(self) -> bool:
        return self.next_cursor is not None

    # -- raw access ---------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def typed(self, model: type[T] | Any, key: str | None = None) -> T | None:
        """Best-effort decode of the payload (or ``data[key]``) into ``model``.

        ``model`` may be a pydantic model class or any type a ``TypeAdapter``
        accepts (including the ``AnyBlock`` / ``AnyView`` unions). Returns
        ``None`` when the key is absent or the shape does not match; the raw
        ``data`` stays authoritative.
        """
        payload = self._data if key is None else self._data.get(key)
        if payload is None:
            return None
        try:
            if isinstance(model, type) and issubclass(model, BaseModel):
                return model.model_validate(payload)  # type: ignore[return-value]
            return TypeAdapter(model).validate_python(payload)
        except (PydanticValidationError, SlackError) as exc:
            logger.debug(
                "typed_access_mismatch",
                extra={"model": getattr(model, "__name__", repr(model)), "key": key, "error": str(exc)},
            )
            return None

    # -- failure interpretation ---------------------------------------------

    def raise_for_status(self) -> SlackResponse:
        """Raise for HTTP-level failures (429, 5xx, any other non-200)."""
        status = self._status_code
        if status == 200:
            return self
        message = self._failure_message(self.error or f"http_{status}")
        if status == 429:
            raise RateLimitedError(message, retry_after=self.retry_after, response=self)
        if status >= 500:
            raise ServerError(message, error_code=self.error, response=self, status_code=status)
        if status in (401, 403) or self.error in c.AUTH_ERROR_CODES:
            raise AuthError(message, error_code=self.error, response=self, status_code=status)
        raise SlackApiError(message, error_code=self.error, response=self, status_code=status)

    def validate(self) -> SlackResponse:
        """Return self when the call succeeded, raise a ``CallError`` otherwise.

        Raises:
            RateLimitedError: HTTP 429
            ServerError: HTTP 5xx
            AuthError: 401/403 or an authentication error code
            SlackApiError: any other non-200 status or ``ok: false``
        """
        self.raise_for_status()
        if self._data.get("ok", True) is False:
            error = self.error or "unknown_error"
            message = self._failure_message(error)
            if error in c.AUTH_ERROR_CODES:
                raise AuthError(message, error_code=error, response=self, status_code=self._status_code)
            raise SlackApiError(message, error_code=error, response=self, status_code=self._status_code)
        return self

    def _failure_message(self, error: str) -> str:
        url = self._request.url if self._request is not None else "unknown"
        return f"The request to the Slack API failed: {error} (url: {url})"

    # -- continuation -------------------------------------------------------

    def next(self) -> Any:
        """Fetch the next page through the owning client.

        Returns a ``SlackResponse`` for ``WebClient`` and an awaitable of one
        for ``AsyncWebClient``.

        Raises:
            PaginationError: No cursor, or the response is not bound to a client
        """
        cursor = self.next_cursor
        if cursor is None:
            raise PaginationError("no next_cursor present")
        if self._client is None or self._request is None:
            raise PaginationError("response is not bound to a client and request")
        return self._client.send(self._request.with_cursor(cursor))

    async def anext(self) -> SlackResponse:
        """Await the next page from an ``AsyncWebClient``."""
        return await self.next()

    def __repr__(self) -> str:
        method = self._request.api_method if self._request is not None else "?"
        return (
            f"SlackResponse(method={method!r}, status_code={self._status_code}, "
            f"ok={self.ok}, error={self.error!r}, next_cursor={self.next_cursor!r})"
        )
