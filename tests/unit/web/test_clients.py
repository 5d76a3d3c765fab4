"""Unit tests for WebClient and AsyncWebClient with fake transports."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from laakhay.slack.builders import button, home, section
from laakhay.slack.core.config import ClientConfig
from laakhay.slack.core.exceptions import (
    AuthError,
    RetriesExhaustedError,
    SlackApiError,
    TransportError,
)
from laakhay.slack.models import DividerBlock
from laakhay.slack.web.async_client import AsyncWebClient
from laakhay.slack.web.client import WebClient
from laakhay.slack.web.retry import RetryPolicy
from laakhay.slack.web.transport import TransportResponse


def raw(payload=None, status=200, headers=None):
    return TransportResponse(status, headers or {}, json.dumps(payload or {"ok": True}).encode())


def sync_client(*responses, max_attempts=3, token="xoxb-test", **kwargs):
    transport = MagicMock()
    transport.perform.side_effect = list(responses)
    sleeps: list[float] = []
    client = WebClient(
        token,
        transport=transport,
        retry_policy=RetryPolicy(max_attempts=max_attempts, sleep=sleeps.append),
        **kwargs,
    )
    return client, transport, sleeps


def async_client(*responses, max_attempts=3, token="xoxb-test", **kwargs):
    transport = MagicMock()
    transport.perform = AsyncMock(side_effect=list(responses))
    transport.close = AsyncMock()
    sleeps: list[float] = []

    async def record(seconds):
        sleeps.append(seconds)

    client = AsyncWebClient(
        token,
        transport=transport,
        retry_policy=RetryPolicy(max_attempts=max_attempts, async_sleep=record),
        **kwargs,
    )
    return client, transport, sleeps


class TestRequestBuilding:
    def test_post_is_json_with_bearer_token(self):
        client, transport, _ = sync_client(raw({"ok": True, "ts": "1.2"}))

        response = client.api_call("chat.postMessage", {"channel": "C1", "text": "hi", "thread_ts": None})

        assert response["ts"] == "1.2"
        args = transport.perform.call_args
        assert args.args == ("POST", "https://slack.com/api/chat.postMessage")
        headers = args.kwargs["headers"]
        assert headers["Authorization"] == "Bearer xoxb-test"
        assert headers["Content-Type"] == "application/json;charset=utf-8"
        assert headers["User-Agent"].startswith("laakhay-slack/")
        assert args.kwargs["json_body"] == {"channel": "C1", "text": "hi"}

    def test_get_uses_query_string(self):
        client, transport, _ = sync_client(raw())
        client.api_call("users.list", {"limit": 10, "include_locale": True}, http_verb="get")
        args = transport.perform.call_args
        assert args.args[0] == "GET"
        assert args.kwargs["params"] == {"limit": 10, "include_locale": 1}
        assert "json_body" not in args.kwargs

    def test_models_and_builders_are_serialized(self):
        client, transport, _ = sync_client(raw())
        client.chat_post_message(
            channel="C1",
            text="fallback",
            blocks=[section("*hi*").accessory(button("Go", "go")), DividerBlock()],
        )
        blocks = transport.perform.call_args.kwargs["json_body"]["blocks"]
        assert blocks == [
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": "*hi*"},
                "accessory": {
                    "type": "button",
                    "text": {"type": "plain_text", "text": "Go"},
                    "action_id": "go",
                },
            },
            {"type": "divider"},
        ]

    def test_config_overrides(self):
        config = ClientConfig(token="xoxb-config", base_url="https://example.test/api", headers={"X-Team": "T1"})
        client, transport, _ = sync_client(raw(), config=config, token=None)
        client.auth_test()
        args = transport.perform.call_args
        assert args.args[1] == "https://example.test/api/auth.test"
        assert args.kwargs["headers"]["X-Team"] == "T1"


class TestFailures:
    def test_ok_false_raises_without_retry(self):
        client, transport, sleeps = sync_client(raw({"ok": False, "error": "channel_not_found"}))
        with pytest.raises(SlackApiError) as exc_info:
            client.api_call("chat.postMessage", {"channel": "nope"})
        assert exc_info.value.error_code == "channel_not_found"
        assert transport.perform.call_count == 1
        assert sleeps == []

    def test_ok_false_returned_when_not_raising(self):
        client, _, _ = sync_client(raw({"ok": False, "error": "not_in_channel"}), raise_on_error=False)
        response = client.api_call("chat.postMessage", {"channel": "C1"})
        assert response.error == "not_in_channel"

    def test_auth_error(self):
        client, _, _ = sync_client(raw({"ok": False, "error": "invalid_auth"}))
        with pytest.raises(AuthError):
            client.auth_test()

    def test_rate_limit_then_success(self):
        limited = raw({"ok": False, "error": "ratelimited"}, status=429, headers={"Retry-After": "1"})
        client, transport, sleeps = sync_client(limited, limited, raw({"ok": True}))
        assert client.auth_test().ok
        assert transport.perform.call_count == 3
        assert sleeps == [1.0, 1.0]

    def test_rate_limit_exhausted(self):
        limited = raw({"ok": False, "error": "ratelimited"}, status=429, headers={"Retry-After": "1"})
        client, transport, _ = sync_client(limited, limited, max_attempts=2)
        with pytest.raises(RetriesExhaustedError) as exc_info:
            client.auth_test()
        assert transport.perform.call_count == 2
        assert exc_info.value.last_error.status_code == 429

    def test_rate_limit_without_header_backs_off_exponentially(self):
        limited = raw({"ok": False, "error": "ratelimited"}, status=429)
        client, transport, sleeps = sync_client(limited, limited, limited, limited, max_attempts=4)
        with pytest.raises(RetriesExhaustedError):
            client.auth_test()
        assert transport.perform.call_count == 4
        assert sleeps == [1.0, 2.0, 4.0]

    def test_transport_error_retried(self):
        client, transport, sleeps = sync_client(TransportError("reset"), raw())
        assert client.auth_test().ok
        assert transport.perform.call_count == 2
        assert sleeps == [1.0]

    def test_non_json_success_body(self):
        html = TransportResponse(200, {}, b"<html>oops</html>")
        client, _, _ = sync_client(html, max_attempts=1)
        with pytest.raises(RetriesExhaustedError) as exc_info:
            client.auth_test()
        assert isinstance(exc_info.value.last_error, TransportError)

    def test_views_update_needs_one_address(self):
        client, transport, _ = sync_client()
        with pytest.raises(ValueError):
            client.views_update(view=home(section("hi")))
        transport.perform.assert_not_called()


class TestSyncPagination:
    def test_paginate_three_pages(self):
        client, transport, _ = sync_client(
            raw({"ok": True, "members": [1], "response_metadata": {"next_cursor": "c1"}}),
            raw({"ok": True, "members": [2], "response_metadata": {"next_cursor": "c2"}}),
            raw({"ok": True, "members": [3], "response_metadata": {"next_cursor": ""}}),
        )
        members = list(client.paginate("users.list", {"limit": 1}, http_verb="GET").items("members"))
        assert members == [1, 2, 3]
        assert transport.perform.call_count == 3
        cursors = [call.kwargs["params"].get("cursor") for call in transport.perform.call_args_list]
        assert cursors == [None, "c1", "c2"]

    def test_response_next(self):
        client, _, _ = sync_client(
            raw({"ok": True, "response_metadata": {"next_cursor": "c1"}}),
            raw({"ok": True, "channels": ["general"]}),
        )
        first = client.conversations_list(types=["public_channel", "private_channel"], limit=1)
        assert first.request.params["types"] == "public_channel,private_channel"
        second = first.next()
        assert second["channels"] == ["general"]
        assert second.request.params["cursor"] == "c1"

    def test_context_manager_closes_transport(self):
        client, transport, _ = sync_client()
        with client:
            pass
        transport.close.assert_called_once()


class TestAsyncWebClient:
    @pytest.mark.asyncio
    async def test_api_call(self):
        client, transport, _ = async_client(raw({"ok": True, "user_id": "U1"}))
        response = await client.auth_test()
        assert response["user_id"] == "U1"
        assert transport.perform.await_args.args == ("POST", "https://slack.com/api/auth.test")

    @pytest.mark.asyncio
    async def test_retry_then_success(self):
        limited = raw({"ok": False, "error": "ratelimited"}, status=429, headers={"Retry-After": "1"})
        client, transport, sleeps = async_client(limited, limited, raw())
        response = await client.chat_post_message(channel="C1", text="hi")
        assert response.ok
        assert transport.perform.await_count == 3
        assert sum(sleeps) >= 2

    @pytest.mark.asyncio
    async def test_non_transient_single_attempt(self):
        client, transport, _ = async_client(raw({"ok": False, "error": "channel_not_found"}))
        with pytest.raises(SlackApiError):
            await client.conversations_history(channel="C404")
        assert transport.perform.await_count == 1

    @pytest.mark.asyncio
    async def test_paginate(self):
        client, transport, _ = async_client(
            raw({"ok": True, "channels": ["a"], "response_metadata": {"next_cursor": "c1"}}),
            raw({"ok": True, "channels": ["b"]}),
        )
        pages = [page async for page in client.paginate("conversations.list", http_verb="GET")]
        assert [page["channels"] for page in pages] == [["a"], ["b"]]
        assert transport.perform.await_count == 2

    @pytest.mark.asyncio
    async def test_response_anext(self):
        client, _, _ = async_client(
            raw({"ok": True, "response_metadata": {"next_cursor": "c1"}}),
            raw({"ok": True, "members": ["U2"]}),
        )
        first = await client.users_list(limit=1)
        second = await first.anext()
        assert second["members"] == ["U2"]

    @pytest.mark.asyncio
    async def test_async_context_manager(self):
        client, transport, _ = async_client()
        async with client:
            pass
        transport.close.assert_awaited_once()
