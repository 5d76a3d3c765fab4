"""Non-blocking Web API client."""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any

from ..core.exceptions import TransportError
from .base_client import BaseClient
from .endpoints import EndpointsMixin
from .pagination import AsyncPager
from .request import SlackRequest
from .response import SlackResponse
from .telemetry import log_api_call_failed
from .transport import AiohttpTransport


class AsyncWebClient(EndpointsMixin, BaseClient):
    """Web API client backed by ``aiohttp``.

    Shares request building, response interpretation, pagination and retry
    decisions with ``WebClient``; waits between attempts use
    ``asyncio.sleep`` and are cancellable.

    Example:
        >>> async with AsyncWebClient(token="xoxb-...") as client:
        ...     await client.chat_post_message(channel="C123", text="hello")
        ...     async for page in client.paginate("conversations.list", http_verb="GET"):
        ...         print(len(page["channels"]))
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        transport: AiohttpTransport | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(token, **kwargs)
        self.transport = transport or AiohttpTransport(timeout=self.timeout)

    async def send(self, request: SlackRequest) -> SlackResponse:
        """Issue ``request`` under the retry policy.

        Raises:
            CallError: Non-transient failure, or ``RetriesExhaustedError``
            asyncio.CancelledError: The task was cancelled (never wrapped)
        """
        return await self.retry_policy.acall(lambda: self._send_once(request), label=request.api_method)

    async def _send_once(self, request: SlackRequest) -> SlackResponse:
        started = time.perf_counter()
        try:
            raw = await self.transport.perform(request.http_verb, request.url, **self._perform_kwargs(request))
        except TransportError as exc:
            log_api_call_failed(
                api_method=request.api_method,
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            raise
        return self._to_response(request, raw, (time.perf_counter() - started) * 1000)

    async def api_call(
        self,
        api_method: str,
        params: Mapping[str, Any] | None = None,
        *,
        http_verb: str = "POST",
        headers: Mapping[str, str] | None = None,
    ) -> SlackResponse:
        return await self.send(self.build_request(api_method, params, http_verb=http_verb, headers=headers))

    def paginate(
        self,
        api_method: str,
        params: Mapping[str, Any] | None = None,
        *,
        http_verb: str = "POST",
        max_pages: int | None = None,
    ) -> AsyncPager:
        request = self.build_request(api_method, params, http_verb=http_verb)
        return AsyncPager(self.send, request, max_pages=max_pages)

    async def close(self) -> None:
        await self.transport.close()

    async def __aenter__(self) -> AsyncWebClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
