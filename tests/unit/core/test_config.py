"""Unit tests for ClientConfig."""

import pytest

from laakhay.slack.core.config import ClientConfig
from laakhay.slack.core.constants import BASE_URL, DEFAULT_MAX_ATTEMPTS, DEFAULT_TIMEOUT


def test_defaults():
    config = ClientConfig()
    assert config.token is None
    assert config.base_url == BASE_URL
    assert config.timeout == DEFAULT_TIMEOUT
    assert config.max_attempts == DEFAULT_MAX_ATTEMPTS


@pytest.mark.parametrize(
    "kwargs",
    [
        {"base_url": ""},
        {"timeout": 0},
        {"max_attempts": 0},
        {"backoff_base": -1},
        {"backoff_multiplier": 0.5},
        {"jitter": 1.5},
    ],
)
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        ClientConfig(**kwargs)


def test_from_env():
    config = ClientConfig.from_env(
        environ={
            "SLACK_BOT_TOKEN": "xoxb-env",
            "SLACK_API_URL": "https://example.test/api/",
            "SLACK_TIMEOUT": "12.5",
            "SLACK_MAX_ATTEMPTS": "5",
        }
    )
    assert config.token == "xoxb-env"
    assert config.base_url == "https://example.test/api/"
    assert config.timeout == 12.5
    assert config.max_attempts == 5


def test_from_env_custom_prefix_and_fallback_token():
    config = ClientConfig.from_env(prefix="APP_", environ={"APP_TOKEN": "xoxp-user"})
    assert config.token == "xoxp-user"
    assert config.base_url == BASE_URL


def test_from_env_rejects_bad_numbers():
    with pytest.raises(ValueError, match="SLACK_MAX_ATTEMPTS"):
        ClientConfig.from_env(environ={"SLACK_MAX_ATTEMPTS": "many"})


def test_retry_policy_follows_config():
    policy = ClientConfig(max_attempts=4, backoff_base=0.25, backoff_multiplier=3.0, backoff_max=1.0).retry_policy()
    assert policy.max_attempts == 4
    assert policy.backoff.interval(1) == 0.25
    assert policy.backoff.interval(2) == 0.75
    assert policy.backoff.interval(3) == 1.0


def test_frozen():
    config = ClientConfig()
    with pytest.raises(AttributeError):
        config.token = "changed"
