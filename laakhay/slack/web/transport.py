"""HTTP transports.

A transport performs one HTTP round trip and hands back status, headers and
raw body. It never interprets the payload and never retries; failures to get
any response at all are raised as ``TransportError``.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import aiohttp
import requests

from ..core import constants as c
from ..core.exceptions import TransportError


@dataclass(frozen=True)
class TransportResponse:
    """Raw outcome of one HTTP round trip."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", {k.lower(): v for k, v in self.headers.items()})

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            ValueError: Body is not valid JSON
        """
        if not self.body:
            return {}
        return json.loads(self.body.decode("utf-8"))


class RequestsTransport:
    """Blocking transport backed by a ``requests.Session``."""

    def __init__(self, timeout: float = c.DEFAULT_TIMEOUT, session: requests.Session | None = None) -> None:
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None

    @property
    def session(self) -> requests.Session:
        """Get or create session."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def perform(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
        json_body: Any = None,
    ) -> TransportResponse:
        try:
            response = self.session.request(
                method,
                url,
                headers=dict(headers or {}),
                params=dict(params) if params else None,
                data=None if json_body is None else json.dumps(json_body),
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as exc:
            raise TransportError(f"Request to {url} timed out after {self.timeout}s") from exc
        except requests.exceptions.RequestException as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc
        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    def close(self) -> None:
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None

    def __enter__(self) -> RequestsTransport:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AiohttpTransport:
    """Async transport backed by a lazily created ``aiohttp.ClientSession``."""

    def __init__(
        self,
        timeout: float = c.DEFAULT_TIMEOUT,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session
        self._owns_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True
        return self._session

    async def perform(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
        json_body: Any = None,
    ) -> TransportResponse:
        try:
            async with self.session.request(
                method,
                url,
                headers=dict(headers or {}),
                params=dict(params) if params else None,
                data=None if json_body is None else json.dumps(json_body),
            ) as response:
                body = await response.read()
                return TransportResponse(
                    status_code=response.status,
                    headers=dict(response.headers),
                    body=body,
                )
        except asyncio.TimeoutError as exc:
            raise TransportError(f"Request to {url} timed out after {self.timeout.total}s") from exc
        except aiohttp.ClientError as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed and self._owns_session:
            await self._session.close()

    async def __aenter__(self) -> AiohttpTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
