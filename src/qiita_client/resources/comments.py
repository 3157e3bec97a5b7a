from __future__ import annotations

from qiita_client.core.types import ResourceKind
from qiita_client.pipeline.request import resource_path
from qiita_client.resources.base import Resource
from qiita_client.schemas.comment import Comment


class CommentsResource(Resource):
    kind = ResourceKind.COMMENT

    async def get(self, comment_id: str) -> Comment:
        """GET /api/v2/comments/:comment_id"""
        return await self._get(
            resource_path("comments", comment_id), Comment, resource=self._ref(comment_id)
        )

    async def for_item(self, item_id: str) -> list[Comment]:
        """All comments on *item_id*, oldest first. Not paginated.

        GET /api/v2/items/:item_id/comments
        """
        return await self._get(
            resource_path("items", item_id, "comments"),
            list[Comment],
            resource=self._ref(item_id, ResourceKind.ITEM),
        )
