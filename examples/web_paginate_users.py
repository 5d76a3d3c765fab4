#!/usr/bin/env python3
from __future__ import annotations

import argparse

from laakhay.slack import ClientConfig, WebClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List workspace members page by page")
    p.add_argument("limit", nargs="?", type=int, default=100)
    p.add_argument("max_pages", nargs="?", type=int, default=None)
    return p.parse_args()


def main() -> None:
    args = parse_args()
    with WebClient(config=ClientConfig.from_env()) as client:
        pager = client.paginate(
            "users.list",
            {"limit": args.limit},
            http_verb="GET",
            max_pages=args.max_pages,
        )
        print(f"{'ID':12} | {'Name':25} | Bot")
        print("-" * 46)
        for member in pager.items("members"):
            print(f"{member['id']:12} | {member.get('name', ''):25} | {member.get('is_bot', False)}")
        print("-" * 46)
        print(f"Pages fetched: {pager.pages} ({pager.state.value})")


if __name__ == "__main__":
    main()
