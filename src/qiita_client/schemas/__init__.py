from qiita_client.schemas.comment import Comment, CommentDraft
from qiita_client.schemas.common import (
    CollectionResponse,
    ItemsResponse,
    PaginationInfo,
    TagsResponse,
    UsersResponse,
)
from qiita_client.schemas.item import Item, ItemTag
from qiita_client.schemas.tag import Tag
from qiita_client.schemas.user import User

__all__ = [
    "CollectionResponse",
    "Comment",
    "CommentDraft",
    "Item",
    "ItemTag",
    "ItemsResponse",
    "PaginationInfo",
    "Tag",
    "TagsResponse",
    "User",
    "UsersResponse",
]
