"""Projections embedded in blog and user responses."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class UserSummary(BaseModel):
    """User fields shown inside a blog."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None


class BlogSummary(BaseModel):
    """Blog fields shown inside a user."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str
    url: str | None = None
