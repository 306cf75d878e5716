#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from graphcommunity.sharepoint import ChangeQuery, HTTPClient, SharePointClient, StaticTokenAuth


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print the change log of a SharePoint list")
    p.add_argument("site_url")
    p.add_argument("list", help="List id or title")
    p.add_argument("--limit", type=int, default=50)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    transport = HTTPClient(auth=StaticTokenAuth(os.environ["SHAREPOINT_ACCESS_TOKEN"]))

    async with SharePointClient(transport) as client:
        target = client.api(args.site_url).web.lists[args.list]
        query = ChangeQuery(add=True, update=True, delete_object=True, item=True)

        print("=" * 72)
        print(f"{'Time':25} | {'Type':15} | {'Kind':12} | {'Item':>6}")
        print("-" * 72)
        count = 0
        async for change in target.request().get_changes(query):
            when = change.time.isoformat() if change.time else "-"
            print(f"{when:25} | {change.change_type.name:15} | {change.kind:12} | {change.item_id or '':>6}")
            count += 1
            if count >= args.limit:
                break
        print("=" * 72)


if __name__ == "__main__":
    asyncio.run(main())
