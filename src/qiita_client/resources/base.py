"""Shared plumbing for the per-resource accessors."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from qiita_client.core.types import ResourceKind, ResourceRef
from qiita_client.pipeline.executor import Executor
from qiita_client.pipeline.pagination import validate_pagination_limit
from qiita_client.pipeline.request import QueryValue, RequestDescriptor
from qiita_client.schemas.common import CollectionResponse

M = TypeVar("M", bound=BaseModel)


class Resource:
    """Base for accessors: each public method supplies a path, query and target type."""

    kind: ResourceKind

    def __init__(self, executor: Executor) -> None:
        self._executor = executor

    def _ref(self, identifier: str, kind: ResourceKind | None = None) -> ResourceRef:
        return ResourceRef(kind=kind or self.kind, identifier=identifier)

    async def _get(
        self,
        path: str,
        target: Any,
        *,
        resource: ResourceRef | None = None,
    ) -> Any:
        return await self._executor.fetch(
            RequestDescriptor(method="GET", path=path), target, resource=resource
        )

    async def _get_page(
        self,
        path: str,
        item_type: type[M],
        page: int,
        per_page: int,
        *,
        resource: ResourceRef | None = None,
        params: Mapping[str, QueryValue] | None = None,
    ) -> CollectionResponse[M]:
        validate_pagination_limit(page, per_page)

        query: dict[str, QueryValue] = {"page": page, "per_page": per_page}
        if params:
            query.update({k: v for k, v in params.items() if v is not None})

        return await self._executor.fetch_page(
            RequestDescriptor(method="GET", path=path, params=query),
            item_type,
            page=page,
            per_page=per_page,
            resource=resource,
        )

    async def _is_following(self, path: str, resource: ResourceRef) -> bool:
        return await self._executor.probe(
            RequestDescriptor(method="GET", path=path), resource=resource
        )
