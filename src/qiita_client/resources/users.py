from __future__ import annotations

from qiita_client.core.types import ResourceKind
from qiita_client.pipeline.request import resource_path
from qiita_client.resources.base import Resource
from qiita_client.schemas.common import TagsResponse, UsersResponse
from qiita_client.schemas.tag import Tag
from qiita_client.schemas.user import User


class UsersResource(Resource):
    kind = ResourceKind.USER

    async def get(self, user_id: str) -> User:
        """Fetch the user having *user_id*.

        GET /api/v2/users/:user_id
        """
        return await self._get(
            resource_path("users", user_id), User, resource=self._ref(user_id)
        )

    async def list(self, page: int = 1, per_page: int = 20) -> UsersResponse:
        """Fetch one page of all users, newest first.

        GET /api/v2/users
        """
        return await self._get_page("users", User, page, per_page)

    async def followees(self, user_id: str, page: int = 1, per_page: int = 20) -> UsersResponse:
        """Users followed by *user_id*.

        GET /api/v2/users/:user_id/followees
        """
        return await self._get_page(
            resource_path("users", user_id, "followees"),
            User,
            page,
            per_page,
            resource=self._ref(user_id),
        )

    async def followers(self, user_id: str, page: int = 1, per_page: int = 20) -> UsersResponse:
        """Users following *user_id*.

        GET /api/v2/users/:user_id/followers
        """
        return await self._get_page(
            resource_path("users", user_id, "followers"),
            User,
            page,
            per_page,
            resource=self._ref(user_id),
        )

    async def following_tags(
        self, user_id: str, page: int = 1, per_page: int = 20
    ) -> TagsResponse:
        """Tags followed by *user_id*.

        GET /api/v2/users/:user_id/following_tags
        """
        return await self._get_page(
            resource_path("users", user_id, "following_tags"),
            Tag,
            page,
            per_page,
            resource=self._ref(user_id),
        )

    async def is_following(self, user_id: str) -> bool:
        """Whether the authenticated user follows *user_id*. Requires an access token.

        GET /api/v2/users/:user_id/following
        """
        return await self._is_following(
            resource_path("users", user_id, "following"), self._ref(user_id)
        )

    async def authenticated(self) -> User:
        """The user owning the access token.

        GET /api/v2/authenticated_user
        """
        return await self._get("authenticated_user", User)
