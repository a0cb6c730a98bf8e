"""
User schemas for the Bloglist API.

The password only ever travels inward, as a `SecretStr` on `UserCreate`;
no response model carries it or its hash.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from bloglist.configs import MAX_USERNAME_LENGTH, MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH
from bloglist.schemas.common import BlogSummary


class UserCreate(BaseModel):
    """User creation payload (POST body)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    username: str | None = Field(
        default=None,
        description=(
            f"Username ({MIN_USERNAME_LENGTH} to {MAX_USERNAME_LENGTH} characters, unique)"
        ),
        examples=["cat0"],
    )
    name: str | None = Field(
        default=None,
        description="Full name",
        examples=["Chencho Perez"],
    )
    password: SecretStr | None = Field(
        default=None,
        description=f"Password (at least {MIN_PASSWORD_LENGTH} characters)",
        examples=["miauuuuu"],
    )

    @property
    def is_well_formed(self) -> bool:
        """Whether username and password satisfy the length policy."""
        if self.username is None or self.password is None:
            return False
        return (
            MIN_USERNAME_LENGTH <= len(self.username) <= MAX_USERNAME_LENGTH
            and len(self.password.get_secret_value()) >= MIN_PASSWORD_LENGTH
        )


class UserResponse(BaseModel):
    """User as stored, with the ids of its blogs."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None
    blogs: list[UUID] = Field(default_factory=list)


class UserDetailResponse(BaseModel):
    """User with its blogs expanded to id, title, author and url."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None
    blogs: list[BlogSummary] = Field(default_factory=list)
