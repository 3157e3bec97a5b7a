"""Command-line access to the read endpoints.

Usage:
    qiita-client tag python
    qiita-client tags --page 2 --per-page 50 --sort name
    qiita-client --token $QIITA_ACCESS_TOKEN whoami
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

import httpx
from pydantic import BaseModel

from qiita_client.client import QiitaClient
from qiita_client.config import Settings
from qiita_client.core.exceptions import QiitaClientError
from qiita_client.core.logging import get_logger, setup_logging
from qiita_client.core.types import TagSort
from qiita_client.schemas.common import CollectionResponse

log = get_logger(__name__)

Command = Callable[[QiitaClient, argparse.Namespace], Awaitable[Any]]


# ── Commands ─────────────────────────────────────────────────────────

_COMMANDS: dict[str, Command] = {
    "user": lambda c, a: c.users.get(a.id),
    "users": lambda c, a: c.users.list(a.page, a.per_page),
    "followees": lambda c, a: c.users.followees(a.id, a.page, a.per_page),
    "followers": lambda c, a: c.users.followers(a.id, a.page, a.per_page),
    "following-tags": lambda c, a: c.users.following_tags(a.id, a.page, a.per_page),
    "is-following-user": lambda c, a: c.users.is_following(a.id),
    "whoami": lambda c, a: c.users.authenticated(),
    "item": lambda c, a: c.items.get(a.id),
    "items": lambda c, a: c.items.list(a.page, a.per_page, a.query),
    "user-items": lambda c, a: c.items.by_user(a.id, a.page, a.per_page),
    "user-stocks": lambda c, a: c.items.stocked_by(a.id, a.page, a.per_page),
    "tag": lambda c, a: c.tags.get(a.id),
    "tags": lambda c, a: c.tags.list(a.page, a.per_page, a.sort),
    "tag-items": lambda c, a: c.tags.items(a.id, a.page, a.per_page),
    "is-following-tag": lambda c, a: c.tags.is_following(a.id),
    "comment": lambda c, a: c.comments.get(a.id),
    "item-comments": lambda c, a: c.comments.for_item(a.id),
}

_WITH_ID = {
    "user", "followees", "followers", "following-tags", "is-following-user",
    "item", "user-items", "user-stocks", "tag", "tag-items", "is-following-tag",
    "comment", "item-comments",
}
_PAGINATED = {
    "users", "followees", "followers", "following-tags", "items",
    "user-items", "user-stocks", "tags", "tag-items",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="qiita-client", description=__doc__.splitlines()[0])
    parser.add_argument("--config", default="qiita.yaml", help="YAML settings file")
    parser.add_argument("--token", default=None, help="access token (overrides QIITA_ACCESS_TOKEN)")
    parser.add_argument("--base-url", default=None, help="API base URL")
    parser.add_argument("--verbose", action="store_true", help="log each request to stderr")

    subparsers = parser.add_subparsers(dest="command", required=True)
    for name in _COMMANDS:
        sub = subparsers.add_parser(name)
        if name in _WITH_ID:
            sub.add_argument("id")
        if name in _PAGINATED:
            sub.add_argument("--page", type=int, default=1)
            sub.add_argument("--per-page", type=int, default=20)
        if name == "items":
            sub.add_argument("--query", default=None)
        if name == "tags":
            sub.add_argument("--sort", type=TagSort, choices=list(TagSort), default=TagSort.COUNT)
    return parser


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, CollectionResponse):
        return result.as_dict()
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True)
    if isinstance(result, list):
        return [_to_jsonable(entry) for entry in result]
    return result


async def main(
    argv: Sequence[str] | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    args = build_parser().parse_args(argv)

    settings = Settings.from_yaml(args.config, access_token=args.token, base_url=args.base_url)
    setup_logging("DEBUG" if args.verbose else settings.log_level)

    async with QiitaClient(
        settings,
        transport=transport,
        logger=log if args.verbose else None,
    ) as client:
        try:
            result = await _COMMANDS[args.command](client, args)
        except QiitaClientError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

    print(json.dumps(_to_jsonable(result), ensure_ascii=False, indent=2))
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
