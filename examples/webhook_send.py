#!/usr/bin/env python3
from __future__ import annotations

import argparse

from laakhay.slack import WebhookClient
from laakhay.slack.builders import context, section


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Send a message to an incoming webhook")
    p.add_argument("url")
    p.add_argument("text", nargs="?", default="Nightly build passed :white_check_mark:")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    with WebhookClient(args.url) as client:
        response = client.send(
            text=args.text,
            blocks=[section(args.text), context("via examples/webhook_send.py")],
            unfurl_links=False,
        )
    if response.is_success():
        print("Delivered")
    elif response.is_rate_limited():
        print(f"Rate limited, retry after {response.headers.get('retry-after', '?')}s")
    else:
        print(f"Rejected: {response.status_code} {response.body}")


if __name__ == "__main__":
    main()
