#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from gitlab_pager.connectors.gitlab import GitLabRESTConnector
from gitlab_pager.core import ProjectOrderBy
from gitlab_pager.runtime.pagination import Pagination


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List GitLab projects via paginated REST")
    p.add_argument("limit", nargs="?", type=int, default=50)
    p.add_argument(
        "order_by", nargs="?", default="ID", choices=[o.name for o in ProjectOrderBy]
    )
    p.add_argument("--search", default=None)
    p.add_argument("--owned", action="store_true")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    order_by = ProjectOrderBy[args.order_by]

    async with GitLabRESTConnector.from_env() as rest:
        projects = await rest.fetch_all(
            "projects",
            {"order_by": order_by, "search": args.search, "owned": args.owned or None},
            pagination=Pagination.limited(args.limit),
        )
    mode = "keyset" if order_by.supports_keyset else "offset"
    print(f"Projects ordered by {order_by.value} ({mode} paging), showing {len(projects)}:")
    print(f"{'ID':>8} | {'Path':50} | {'Last activity':25}")
    print("-" * 90)
    for p in projects:
        print(
            f"{p['id']:>8} | {p['path_with_namespace']:50} | {p.get('last_activity_at') or '':25}"
        )


if __name__ == "__main__":
    asyncio.run(main())
