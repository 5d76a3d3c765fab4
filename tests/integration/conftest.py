"""Shared fixtures for integration tests.

Test modules skip themselves unless RUN_LAAKHAY_NETWORK_TESTS=1 and
SLACK_BOT_TOKEN are set.
"""

import os

import pytest

from laakhay.slack.core.config import ClientConfig


@pytest.fixture
def slack_config():
    return ClientConfig.from_env()


@pytest.fixture
def test_channel():
    channel = os.environ.get("SLACK_TEST_CHANNEL")
    if not channel:
        pytest.skip("Set SLACK_TEST_CHANNEL to run posting tests")
    return channel
