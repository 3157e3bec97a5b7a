from __future__ import annotations

from qiita_client.core.types import ResourceKind
from qiita_client.pipeline.request import resource_path
from qiita_client.resources.base import Resource
from qiita_client.schemas.common import ItemsResponse
from qiita_client.schemas.item import Item


class ItemsResource(Resource):
    kind = ResourceKind.ITEM

    async def get(self, item_id: str) -> Item:
        """GET /api/v2/items/:item_id"""
        return await self._get(
            resource_path("items", item_id), Item, resource=self._ref(item_id)
        )

    async def list(
        self, page: int = 1, per_page: int = 20, query: str | None = None
    ) -> ItemsResponse:
        """Fetch one page of items, optionally filtered by a search *query*.

        GET /api/v2/items
        """
        return await self._get_page("items", Item, page, per_page, params={"query": query})

    async def by_user(self, user_id: str, page: int = 1, per_page: int = 20) -> ItemsResponse:
        """GET /api/v2/users/:user_id/items"""
        return await self._get_page(
            resource_path("users", user_id, "items"),
            Item,
            page,
            per_page,
            resource=self._ref(user_id, ResourceKind.USER),
        )

    async def stocked_by(self, user_id: str, page: int = 1, per_page: int = 20) -> ItemsResponse:
        """GET /api/v2/users/:user_id/stocks"""
        return await self._get_page(
            resource_path("users", user_id, "stocks"),
            Item,
            page,
            per_page,
            resource=self._ref(user_id, ResourceKind.USER),
        )
