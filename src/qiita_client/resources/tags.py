from __future__ import annotations

from qiita_client.core.exceptions import InvalidParameterError
from qiita_client.core.types import ResourceKind, TagSort
from qiita_client.pipeline.request import resource_path
from qiita_client.resources.base import Resource
from qiita_client.schemas.common import ItemsResponse, TagsResponse
from qiita_client.schemas.item import Item
from qiita_client.schemas.tag import Tag


class TagsResource(Resource):
    kind = ResourceKind.TAG

    async def get(self, tag_id: str) -> Tag:
        """Fetch the tag having *tag_id*.

        GET /api/v2/tags/:tag_id
        """
        return await self._get(resource_path("tags", tag_id), Tag, resource=self._ref(tag_id))

    async def list(
        self, page: int = 1, per_page: int = 20, sort: TagSort = TagSort.COUNT
    ) -> TagsResponse:
        """Fetch one page of all tags ordered by *sort*.

        GET /api/v2/tags
        """
        try:
            sort = TagSort(sort)
        except ValueError:
            raise InvalidParameterError(
                f"sort parameter should be one of {', '.join(TagSort)} (got {sort!r})"
            ) from None
        return await self._get_page("tags", Tag, page, per_page, params={"sort": sort})

    async def items(self, tag_id: str, page: int = 1, per_page: int = 20) -> ItemsResponse:
        """Items the tag *tag_id* is attached to.

        GET /api/v2/tags/:tag_id/items
        """
        return await self._get_page(
            resource_path("tags", tag_id, "items"),
            Item,
            page,
            per_page,
            resource=self._ref(tag_id),
        )

    async def is_following(self, tag_id: str) -> bool:
        """Whether the authenticated user follows *tag_id*. Requires an access token.

        GET /api/v2/tags/:tag_id/following
        """
        return await self._is_following(
            resource_path("tags", tag_id, "following"), self._ref(tag_id)
        )
