#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from pydantic import BaseModel

from gitlab_pager.connectors.gitlab import GitLabRESTConnector
from gitlab_pager.core import IssueState
from gitlab_pager.runtime.pagination import Pagination


class Issue(BaseModel):
    iid: int
    title: str
    state: IssueState


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List issues of a GitLab project via REST")
    p.add_argument("project", help="Project id or full path, e.g. gitlab-org/gitlab")
    p.add_argument("limit", nargs="?", type=int, default=0, help="0 fetches every issue")
    p.add_argument("state", nargs="?", default="OPENED", choices=["OPENED", "CLOSED"])
    p.add_argument("--label", action="append", default=[])
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    pagination = Pagination.limited(args.limit) if args.limit else Pagination.all()

    async with GitLabRESTConnector.from_env() as rest:
        issues = await rest.fetch_all(
            "issues",
            {"project": args.project, "state": IssueState[args.state], "labels": args.label},
            pagination=pagination,
            item_type=Issue,
        )
    print(f"Issues for {args.project} ({args.state}), showing {len(issues)}:")
    for issue in issues:
        print(f"#{issue.iid:<6} {issue.title}")


if __name__ == "__main__":
    asyncio.run(main())
