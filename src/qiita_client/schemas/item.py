from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from qiita_client.schemas.user import User


class ItemTag(BaseModel):
    """Tag reference embedded in an item, with optional version labels."""

    model_config = {"frozen": True}

    name: str
    versions: tuple[str, ...] = ()


class Item(BaseModel):
    """A post published on the platform."""

    model_config = {"frozen": True}

    id: str
    title: str = ""
    body: str = ""
    rendered_body: str = ""
    url: str = ""
    private: bool = False
    coediting: bool = False
    likes_count: int = 0
    comments_count: int = 0
    reactions_count: int = 0
    page_views_count: int | None = None
    tags: tuple[ItemTag, ...] = ()
    user: User | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
