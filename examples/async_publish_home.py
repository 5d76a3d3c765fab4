#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.slack import AsyncWebClient, ClientConfig
from laakhay.slack.builders import actions, button, divider, header, home, section


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Publish an App Home tab for a user")
    p.add_argument("user_id")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    view = home(
        header("Welcome"),
        section("Pick a shortcut below to get started."),
        divider(),
        actions(button("Open dashboard", "home_dashboard").url("https://example.com/dashboard")),
    ).callback_id("home_v1")

    async with AsyncWebClient(config=ClientConfig.from_env()) as client:
        response = await client.views_publish(user_id=args.user_id, view=view)
    print(f"Published view {response['view']['id']} (hash {response['view']['hash']})")


if __name__ == "__main__":
    asyncio.run(main())
