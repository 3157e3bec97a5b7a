from qiita_client.resources.base import Resource
from qiita_client.resources.comments import CommentsResource
from qiita_client.resources.items import ItemsResource
from qiita_client.resources.tags import TagsResource
from qiita_client.resources.users import UsersResource

__all__ = [
    "CommentsResource",
    "ItemsResource",
    "Resource",
    "TagsResource",
    "UsersResource",
]
