"""Incoming-webhook clients.

A webhook URL accepts a JSON message and answers with a short plain-text
body (``ok`` or an error code). Non-2xx answers are returned, not raised;
only a failure to get any answer raises ``TransportError``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .core import constants as c
from .web.base_client import serialize
from .web.internal_utils import get_user_agent, remove_none_values
from .web.transport import AiohttpTransport, RequestsTransport, TransportResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WebhookResponse:
    url: str
    status_code: int
    body: str
    headers: Mapping[str, str] = field(default_factory=dict)

    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def is_rate_limited(self) -> bool:
        return self.status_code == 429


def message_body(
    text: str | None = None,
    blocks: Iterable[Any] | None = None,
    *,
    attachments: Iterable[Any] | None = None,
    response_type: str | None = None,
    replace_original: bool | None = None,
    delete_original: bool | None = None,
    unfurl_links: bool | None = None,
    unfurl_media: bool | None = None,
    metadata: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """JSON body for a webhook message; blocks may be models or builders."""
    return serialize(
        remove_none_values(
            {
                "text": text,
                "blocks": None if blocks is None else list(blocks),
                "attachments": None if attachments is None else list(attachments),
                "response_type": response_type,
                "replace_original": replace_original,
                "delete_original": delete_original,
                "unfurl_links": unfurl_links,
                "unfurl_media": unfurl_media,
                "metadata": metadata,
            }
        )
    )


class _WebhookBase:
    def __init__(
        self,
        url: str,
        *,
        timeout: float = c.DEFAULT_TIMEOUT,
        default_headers: Mapping[str, str] | None = None,
        user_agent_prefix: str | None = None,
        user_agent_suffix: str | None = None,
    ) -> None:
        if not url:
            raise ValueError("url must not be empty")
        self.url = url
        self.timeout = timeout
        self.default_headers = {
            c.HEADER_CONTENT_TYPE: c.JSON_CONTENT_TYPE,
            c.HEADER_USER_AGENT: get_user_agent(user_agent_prefix, user_agent_suffix),
            **(default_headers or {}),
        }

    def _headers(self, headers: Mapping[str, str] | None) -> dict[str, str]:
        return {**self.default_headers, **(headers or {})}

    def _to_response(self, raw: TransportResponse) -> WebhookResponse:
        response = WebhookResponse(
            url=self.url,
            status_code=raw.status_code,
            body=raw.body.decode("utf-8", errors="replace"),
            headers=raw.headers,
        )
        if not response.is_success():
            logger.warning(
                "webhook_rejected",
                extra={"status_code": response.status_code, "body": response.body},
            )
        return response


class WebhookClient(_WebhookBase):
    """Blocking webhook client.

    Example:
        >>> webhook = WebhookClient("https://hooks.slack.com/services/T000/B000/XXX")
        >>> webhook.send(text="Deploy finished", blocks=[section("*v2.3* is live")]).is_success()
        True
    """

    def __init__(self, url: str, *, transport: RequestsTransport | None = None, **kwargs: Any) -> None:
        super().__init__(url, **kwargs)
        self.transport = transport or RequestsTransport(timeout=self.timeout)

    def send(
        self,
        text: str | None = None,
        blocks: Iterable[Any] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        **options: Any,
    ) -> WebhookResponse:
        return self.send_dict(message_body(text, blocks, **options), headers=headers)

    def send_dict(self, body: Mapping[str, Any], headers: Mapping[str, str] | None = None) -> WebhookResponse:
        """Post an already-shaped JSON body."""
        raw = self.transport.perform("POST", self.url, headers=self._headers(headers), json_body=serialize(body))
        return self._to_response(raw)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> WebhookClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AsyncWebhookClient(_WebhookBase):
    """Async webhook client; same surface as ``WebhookClient``."""

    def __init__(self, url: str, *, transport: AiohttpTransport | None = None, **kwargs: Any) -> None:
        super().__init__(url, **kwargs)
        self.transport = transport or AiohttpTransport(timeout=self.timeout)

    async def send(
        self,
        text: str | None = None,
        blocks: Iterable[Any] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        **options: Any,
    ) -> WebhookResponse:
        return await self.send_dict(message_body(text, blocks, **options), headers=headers)

    async def send_dict(self, body: Mapping[str, Any], headers: Mapping[str, str] | None = None) -> WebhookResponse:
        raw = await self.transport.perform(
            "POST", self.url, headers=self._headers(headers), json_body=serialize(body)
        )
        return self._to_response(raw)

    async def close(self) -> None:
        await self.transport.close()

    async def __aenter__(self) -> AsyncWebhookClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
