#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from graphcommunity.sharepoint import HTTPClient, SharePointClient, StaticTokenAuth


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Page through the items of a SharePoint list")
    p.add_argument("site_url")
    p.add_argument("list", help="List id or title")
    p.add_argument("--page-size", type=int, default=100)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    transport = HTTPClient(auth=StaticTokenAuth(os.environ["SHAREPOINT_ACCESS_TOKEN"]))

    async with SharePointClient(transport) as client:
        items = client.api(args.site_url).web.lists[args.list].items.request()
        items.select("Id", "Title").top(args.page_size)
        async for item in items.iterate():
            print(f"{item.id:>6} | {item.title or ''}")


if __name__ == "__main__":
    asyncio.run(main())
