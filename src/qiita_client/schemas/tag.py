from __future__ import annotations

from pydantic import BaseModel


class Tag(BaseModel):
    """A tag which can be attached to an item."""

    model_config = {"frozen": True}

    id: str
    icon_url: str | None = None
    items_count: int = 0
    followers_count: int = 0
