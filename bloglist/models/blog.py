"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    This model represents the blogs table in the database. The optional
    `user_id` points at the user who created the blog and is set only once,
    at creation.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    # Required fields
    title: str = Field(
        sa_column=Column(String(300), nullable=False),
        description="Blog title",
    )
    author: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Blog author",
    )

    # Optional fields
    url: str | None = Field(
        default=None,
        sa_column=Column(String(2048)),
        description="Blog URL",
    )
    likes: int = Field(
        default=0,
        nullable=False,
        description="Number of likes",
    )

    # Foreign key to User
    user_id: UUID | None = Field(
        default=None,
        sa_column=Column(
            "user_id",
            Uuid,
            ForeignKey("users.id"),
            nullable=True,
            index=True,
        ),
        description="ID of the user who created the blog",
    )

    # Timestamps (timezone-aware)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "React patterns",
                "author": "Michael Chan",
                "url": "https://reactpatterns.com/",
                "likes": 7,
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
            },
        },
    )
