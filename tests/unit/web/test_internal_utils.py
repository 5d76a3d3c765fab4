"""Unit tests for request-building helpers."""

import pytest

from laakhay.slack.web.base_client import serialize
from laakhay.slack.web.internal_utils import (
    convert_bool_to_0_or_1,
    get_headers,
    get_url,
    get_user_agent,
    join_values,
    remove_none_values,
)
from laakhay.slack.web.request import SlackRequest


@pytest.mark.parametrize(
    ("base", "method"),
    [
        ("https://slack.com/api/", "chat.postMessage"),
        ("https://slack.com/api", "chat.postMessage"),
        ("https://slack.com/api/", "/chat.postMessage"),
    ],
)
def test_get_url_single_slash(base, method):
    assert get_url(base, method) == "https://slack.com/api/chat.postMessage"


def test_get_url_absolute():
    assert get_url("https://slack.com/api/", "https://other.test/x") == "https://other.test/x"


def test_user_agent_prefix_and_suffix():
    agent = get_user_agent("bolt/1.0", "ci")
    assert agent.startswith("bolt/1.0 laakhay-slack/")
    assert agent.endswith(" ci")
    assert "Python/" in agent


def test_headers():
    headers = get_headers(token="xoxb", has_json=False, extra={"X-Trace": "1"})
    assert headers["Authorization"] == "Bearer xoxb"
    assert headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert headers["X-Trace"] == "1"
    assert "Authorization" not in get_headers()


def test_param_helpers():
    assert convert_bool_to_0_or_1({"a": True, "b": False, "c": "x"}) == {"a": 1, "b": 0, "c": "x"}
    assert remove_none_values({"a": None, "b": 0}) == {"b": 0}
    assert join_values(["im", "mpim"]) == "im,mpim"
    assert join_values("im") == "im"
    assert join_values(None) is None


def test_serialize_nested_values():
    assert serialize({"a": [{"b": None, "c": (1, 2)}], "d": "text"}) == {"a": [{"c": [1, 2]}], "d": "text"}


def test_request_with_cursor_keeps_everything_else():
    request = SlackRequest("users.list", "https://slack.com/api/users.list", "get", {"limit": 5}, {"A": "b"})
    paged = request.with_cursor("abc")
    assert paged.params == {"limit": 5, "cursor": "abc"}
    assert paged.headers == {"A": "b"}
    assert paged.http_verb == "GET"
    assert request.cursor is None
    assert paged.cursor == "abc"
