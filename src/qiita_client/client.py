from __future__ import annotations

from types import TracebackType

import httpx
import structlog

from qiita_client.config import Settings
from qiita_client.pipeline.executor import Executor
from qiita_client.resources import CommentsResource, ItemsResource, TagsResource, UsersResource


class QiitaClient:
    """Async client for the Qiita v2 API.

    Configuration is fixed at construction. One instance can be shared by
    many concurrent tasks; each call is an independent exchange.

        async with QiitaClient(Settings(access_token="...")) as client:
            tag = await client.tags.get("python")
            page = await client.users.followers("muiscript", page=1, per_page=50)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._http = httpx.AsyncClient(transport=transport, timeout=self._settings.timeout)
        executor = Executor(self._http, self._settings, logger)

        self._users = UsersResource(executor)
        self._items = ItemsResource(executor)
        self._tags = TagsResource(executor)
        self._comments = CommentsResource(executor)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def users(self) -> UsersResource:
        return self._users

    @property
    def items(self) -> ItemsResource:
        return self._items

    @property
    def tags(self) -> TagsResource:
        return self._tags

    @property
    def comments(self) -> CommentsResource:
        return self._comments

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    async def close(self) -> None:
        """Close the underlying httpx client."""
        await self._http.aclose()

    async def __aenter__(self) -> QiitaClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
