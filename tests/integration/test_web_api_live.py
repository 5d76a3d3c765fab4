"""Live Web API checks.

Run with:
    RUN_LAAKHAY_NETWORK_TESTS=1 SLACK_BOT_TOKEN=xoxb-... pytest tests/integration
"""

import os

import pytest

from laakhay.slack import AsyncWebClient, WebClient
from laakhay.slack.builders import actions, button, context, divider, section
from laakhay.slack.core.exceptions import SlackApiError

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_LAAKHAY_NETWORK_TESTS") != "1" or not os.environ.get("SLACK_BOT_TOKEN"),
    reason="Requires network access. Set RUN_LAAKHAY_NETWORK_TESTS=1 and SLACK_BOT_TOKEN to run",
)


def test_auth_test(slack_config):
    with WebClient(config=slack_config) as client:
        response = client.auth_test()
    assert response.ok
    assert response["user_id"]


def test_unknown_channel_is_remote_error(slack_config):
    with WebClient(config=slack_config) as client:
        with pytest.raises(SlackApiError) as exc_info:
            client.conversations_history(channel="C00000000")
    assert exc_info.value.error_code in {"channel_not_found", "missing_scope", "not_in_channel"}


def test_paginate_users(slack_config):
    with WebClient(config=slack_config) as client:
        pager = client.paginate("users.list", {"limit": 2}, http_verb="GET", max_pages=3)
        pages = list(pager)
    assert 1 <= len(pages) <= 3
    assert all(page.ok for page in pages)


def test_post_blocks(slack_config, test_channel):
    blocks = [
        section("*laakhay-slack* integration check"),
        divider(),
        actions(button("Ack", "ack").value("1")),
        context("posted by the test suite"),
    ]
    with WebClient(config=slack_config) as client:
        response = client.chat_post_message(channel=test_channel, text="integration check", blocks=blocks)
    assert response.ok
    assert response["message"]["blocks"][0]["type"] == "section"


@pytest.mark.asyncio
async def test_async_auth_test(slack_config):
    async with AsyncWebClient(config=slack_config) as client:
        response = await client.auth_test()
    assert response.ok
