from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from qiita_client.schemas.user import User


class Comment(BaseModel):
    """A comment on an item."""

    model_config = {"frozen": True}

    id: str
    body: str = ""
    rendered_body: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    user: User | None = None


class CommentDraft(BaseModel):
    """A comment to be posted on an item."""

    body: str
