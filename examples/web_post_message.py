#!/usr/bin/env python3
from __future__ import annotations

import argparse

from laakhay.slack import ClientConfig, WebClient, configure_logging
from laakhay.slack.builders import actions, button, context, divider, header, section


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Post a Block Kit message (token from SLACK_BOT_TOKEN)")
    p.add_argument("channel")
    p.add_argument("version", nargs="?", default="v1.0.0")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    if args.verbose:
        configure_logging("DEBUG")

    blocks = [
        header(f"Release {args.version}"),
        section(f"Ready to ship *{args.version}* to production?"),
        divider(),
        actions(
            button("Ship it", "release_ship").value(args.version).style("primary"),
            button("Hold", "release_hold").value(args.version),
        ),
        context("Sent from examples/web_post_message.py"),
    ]

    with WebClient(config=ClientConfig.from_env()) as client:
        response = client.chat_post_message(
            channel=args.channel,
            text=f"Release {args.version}",
            blocks=blocks,
        )
    print("=" * 50)
    print(f"Channel : {response['channel']}")
    print(f"ts      : {response['ts']}")
    print("=" * 50)


if __name__ == "__main__":
    main()
