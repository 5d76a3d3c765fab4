"""Unit tests for the HTTP transports."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest
import requests

from laakhay.slack.core.exceptions import TransportError
from laakhay.slack.web.transport import AiohttpTransport, RequestsTransport, TransportResponse


class TestTransportResponse:
    def test_headers_lowercased(self):
        raw = TransportResponse(200, {"Retry-After": "3"}, b"{}")
        assert raw.headers == {"retry-after": "3"}

    def test_json(self):
        assert TransportResponse(200, body=b'{"ok": true}').json() == {"ok": True}
        assert TransportResponse(200, body=b"").json() == {}

    def test_invalid_json(self):
        with pytest.raises(ValueError):
            TransportResponse(200, body=b"<html>").json()


class TestRequestsTransport:
    def _session(self, status=200, body=b'{"ok": true}'):
        session = MagicMock(spec=requests.Session)
        session.request.return_value = MagicMock(status_code=status, headers={"X-Id": "1"}, content=body)
        return session

    def test_json_post(self):
        session = self._session()
        transport = RequestsTransport(timeout=5, session=session)

        raw = transport.perform(
            "POST",
            "https://slack.com/api/chat.postMessage",
            headers={"Authorization": "Bearer xoxb"},
            json_body={"channel": "C1", "text": "hi"},
        )

        assert raw.status_code == 200
        assert raw.headers == {"x-id": "1"}
        assert raw.json() == {"ok": True}
        kwargs = session.request.call_args.kwargs
        assert kwargs["data"] == '{"channel": "C1", "text": "hi"}'
        assert kwargs["params"] is None
        assert kwargs["timeout"] == 5

    def test_get_with_params(self):
        session = self._session()
        RequestsTransport(session=session).perform("GET", "https://x", params={"limit": 1})
        kwargs = session.request.call_args.kwargs
        assert kwargs["params"] == {"limit": 1}
        assert kwargs["data"] is None

    @pytest.mark.parametrize(
        "error",
        [requests.exceptions.ConnectionError("refused"), requests.exceptions.Timeout("slow")],
    )
    def test_failures_become_transport_errors(self, error):
        session = MagicMock(spec=requests.Session)
        session.request.side_effect = error
        with pytest.raises(TransportError) as exc_info:
            RequestsTransport(session=session).perform("GET", "https://x")
        assert exc_info.value.transient
        assert exc_info.value.__cause__ is error

    def test_close_only_owned_session(self):
        session = self._session()
        with RequestsTransport(session=session):
            pass
        session.close.assert_not_called()

    def test_lazy_session(self):
        transport = RequestsTransport()
        assert transport._session is None
        assert isinstance(transport.session, requests.Session)
        transport.close()
        assert transport._session is None


def _aiohttp_session(status=200, body=b'{"ok": true}'):
    response = MagicMock()
    response.status = status
    response.headers = {"Content-Type": "application/json"}
    response.read = AsyncMock(return_value=body)
    context = MagicMock()
    context.__aenter__.return_value = response
    context.__aexit__.return_value = False
    session = MagicMock()
    session.closed = False
    session.request.return_value = context
    session.close = AsyncMock()
    return session


class TestAiohttpTransport:
    @pytest.mark.asyncio
    async def test_json_post(self):
        session = _aiohttp_session()
        transport = AiohttpTransport(session=session)

        raw = await transport.perform("POST", "https://x", headers={"A": "b"}, json_body={"k": 1})

        assert raw.status_code == 200
        assert raw.headers["content-type"] == "application/json"
        assert raw.json() == {"ok": True}
        args = session.request.call_args
        assert args.args == ("POST", "https://x")
        assert args.kwargs["data"] == '{"k": 1}'

    @pytest.mark.asyncio
    async def test_client_error(self):
        session = _aiohttp_session()
        session.request.side_effect = aiohttp.ClientConnectionError("refused")
        with pytest.raises(TransportError):
            await AiohttpTransport(session=session).perform("GET", "https://x")

    @pytest.mark.asyncio
    async def test_timeout(self):
        session = _aiohttp_session()
        session.request.side_effect = asyncio.TimeoutError()
        with pytest.raises(TransportError) as exc_info:
            await AiohttpTransport(timeout=2, session=session).perform("GET", "https://x")
        assert "timed out" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_close_only_owned_session(self):
        session = _aiohttp_session()
        async with AiohttpTransport(session=session):
            pass
        session.close.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_lazy_session_is_closed(self):
        transport = AiohttpTransport()
        session = transport.session
        assert isinstance(session, aiohttp.ClientSession)
        await transport.close()
        assert session.closed
