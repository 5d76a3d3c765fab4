"""Blocking Web API client."""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any

from ..core.exceptions import TransportError
from .base_client import BaseClient
from .endpoints import EndpointsMixin
from .pagination import SyncPager
from .request import SlackRequest
from .response import SlackResponse
from .telemetry import log_api_call_failed
from .transport import RequestsTransport


class WebClient(EndpointsMixin, BaseClient):
    """Web API client backed by ``requests``.

    Example:
        >>> with WebClient(token="xoxb-...") as client:
        ...     client.chat_post_message(channel="C123", text="hello")
        ...     for page in client.paginate("users.list", http_verb="GET"):
        ...         print(len(page["members"]))

    Args:
        token: Bearer token
        transport: Custom transport (defaults to ``RequestsTransport``)
        **kwargs: See ``BaseClient``
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        transport: RequestsTransport | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(token, **kwargs)
        self.transport = transport or RequestsTransport(timeout=self.timeout)

    def send(self, request: SlackRequest) -> SlackResponse:
        """Issue ``request`` under the retry policy.

        Raises:
            CallError: Non-transient failure, or ``RetriesExhaustedError``
        """
        return self.retry_policy.call(lambda: self._send_once(request), label=request.api_method)

    def _send_once(self, request: SlackRequest) -> SlackResponse:
        started = time.perf_counter()
        try:
            raw = self.transport.perform(request.http_verb, request.url, **self._perform_kwargs(request))
        except TransportError as exc:
            log_api_call_failed(
                api_method=request.api_method,
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            raise
        return self._to_response(request, raw, (time.perf_counter() - started) * 1000)

    def api_call(
        self,
        api_method: str,
        params: Mapping[str, Any] | None = None,
        *,
        http_verb: str = "POST",
        headers: Mapping[str, str] | None = None,
    ) -> SlackResponse:
        """Call any Web API method by name (e.g. ``"chat.postMessage"``)."""
        return self.send(self.build_request(api_method, params, http_verb=http_verb, headers=headers))

    def paginate(
        self,
        api_method: str,
        params: Mapping[str, Any] | None = None,
        *,
        http_verb: str = "POST",
        max_pages: int | None = None,
    ) -> SyncPager:
        """Lazily iterate every page of a cursor-paginated method."""
        request = self.build_request(api_method, params, http_verb=http_verb)
        return SyncPager(self.send, request, max_pages=max_pages)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> WebClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
