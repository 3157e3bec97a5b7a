from __future__ import annotations

from pydantic import BaseModel, Field


class User(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    id: str
    permanent_id: int = 0
    image_url: str | None = Field(default=None, alias="profile_image_url")
    name: str | None = None
    location: str | None = None
    description: str | None = None
    website_url: str | None = None
    organization: str | None = None
    team_only: bool = False

    posts_count: int = Field(default=0, alias="items_count")
    followees_count: int = 0
    followers_count: int = 0

    github_id: str | None = Field(default=None, alias="github_login_name")
    linkedin_id: str | None = None
    twitter_id: str | None = Field(default=None, alias="twitter_screen_name")
