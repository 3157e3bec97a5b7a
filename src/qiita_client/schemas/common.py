from __future__ import annotations

from collections.abc import Iterator
from dataclasses import asdict, dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from qiita_client.schemas.item import Item
from qiita_client.schemas.tag import Tag
from qiita_client.schemas.user import User

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True, slots=True)
class PaginationInfo:
    """Pagination metadata derived from the Total-Count and Link headers."""

    per_page: int
    page: int
    first_page: int
    last_page: int
    total_count: int


@dataclass(frozen=True, slots=True)
class CollectionResponse(Generic[T]):
    """One page of a collection endpoint together with its pagination."""

    entries: tuple[T, ...]
    pagination: PaginationInfo

    @property
    def page(self) -> int:
        return self.pagination.page

    @property
    def per_page(self) -> int:
        return self.pagination.per_page

    @property
    def first_page(self) -> int:
        return self.pagination.first_page

    @property
    def last_page(self) -> int:
        return self.pagination.last_page

    @property
    def total_count(self) -> int:
        return self.pagination.total_count

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[T]:
        return iter(self.entries)

    def as_dict(self) -> dict[str, Any]:
        return {
            "pagination": asdict(self.pagination),
            "entries": [e.model_dump(mode="json", by_alias=True) for e in self.entries],
        }


UsersResponse = CollectionResponse[User]
TagsResponse = CollectionResponse[Tag]
ItemsResponse = CollectionResponse[Item]
