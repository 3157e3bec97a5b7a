"""Async client for the Qiita v2 REST API.

    from qiita_client import QiitaClient

    async with QiitaClient() as client:
        user = await client.users.get("muiscript")
"""

__version__ = "0.1.0"

from qiita_client.client import QiitaClient  # noqa: E402
from qiita_client.config import Settings  # noqa: E402
from qiita_client.core.exceptions import (  # noqa: E402
    AuthenticationError,
    DecodeError,
    InvalidParameterError,
    InvalidRequestError,
    MalformedPaginationError,
    NotFoundError,
    QiitaClientError,
    TransportFailure,
    UnknownStatusError,
)
from qiita_client.core.types import ErrorKind, ResourceKind, ResourceRef, TagSort  # noqa: E402
from qiita_client.schemas import (  # noqa: E402
    CollectionResponse,
    Comment,
    CommentDraft,
    Item,
    ItemTag,
    ItemsResponse,
    PaginationInfo,
    Tag,
    TagsResponse,
    User,
    UsersResponse,
)

__all__ = [
    "AuthenticationError",
    "CollectionResponse",
    "Comment",
    "CommentDraft",
    "DecodeError",
    "ErrorKind",
    "InvalidParameterError",
    "InvalidRequestError",
    "Item",
    "ItemTag",
    "ItemsResponse",
    "MalformedPaginationError",
    "NotFoundError",
    "PaginationInfo",
    "QiitaClient",
    "QiitaClientError",
    "ResourceKind",
    "ResourceRef",
    "Settings",
    "Tag",
    "TagSort",
    "TagsResponse",
    "TransportFailure",
    "UnknownStatusError",
    "User",
    "UsersResponse",
]
