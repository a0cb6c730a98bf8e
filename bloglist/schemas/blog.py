"""
Blog schemas for the Bloglist API.

Request payloads keep every field optional: presence of the required ones is
checked by the handlers so that a missing title or author is reported as
"content missing" rather than as a schema error.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from bloglist.configs import MAX_LIKES, MIN_LIKES
from bloglist.schemas.common import UserSummary


class BlogUpdate(BaseModel):
    """Blog update payload (PUT body)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str | None = Field(
        default=None,
        description="Blog title (required, non-empty)",
        examples=["React patterns"],
    )
    author: str | None = Field(
        default=None,
        description="Blog author (required, non-empty)",
        examples=["Michael Chan"],
    )
    url: str | None = Field(
        default=None,
        description="Blog URL",
        examples=["https://reactpatterns.com/"],
    )
    likes: int | None = Field(
        default=None,
        ge=MIN_LIKES,
        le=MAX_LIKES,
        description="Number of likes (defaults to 0)",
        examples=[7],
    )

    @property
    def has_content(self) -> bool:
        """Whether both title and author are present and non-empty."""
        return bool(self.title) and bool(self.author)


class BlogCreate(BlogUpdate):
    """Blog creation payload (POST body)."""

    user_id: str | None = Field(
        default=None,
        alias="userId",
        description="ID of the user creating the blog",
        examples=["123e4567-e89b-12d3-a456-426614174000"],
    )


class BlogResponse(BaseModel):
    """Blog as stored, with the creating user's id."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str
    url: str | None = None
    likes: int = 0
    user: UUID | None = None


class BlogDetailResponse(BaseModel):
    """Blog with the creating user expanded to id, username and name."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str
    url: str | None = None
    likes: int = 0
    user: UserSummary | None = None
