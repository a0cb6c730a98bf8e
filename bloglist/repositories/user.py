"""User repository for database operations."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from bloglist.errors.database import DatabaseError, DuplicateEntryError
from bloglist.managers import hash_password
from bloglist.models import UserDB
from bloglist.repositories.base import BaseRepository
from bloglist.schemas import UserCreate


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    This class implements the repository pattern for User entities,
    providing creation, lookups and maintenance of the user's blog list.
    """

    model = UserDB

    async def create(self, user: UserCreate) -> UserDB:
        """
        Create a new user in the database.

        The password is hashed before anything is written; only the hash
        is stored.

        Args:
            user: Well-formed user payload

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If the username already exists
            DatabaseError: For other database errors
        """
        if user.username is None or user.password is None:
            msg = "username and password are required"
            raise ValueError(msg)

        password_hash = await hash_password(user.password.get_secret_value())

        db_user = UserDB(
            username=user.username,
            name=user.name,
            password_hash=password_hash,
            blogs=[],
        )

        try:
            self.session.add(db_user)
            await self.session.flush()
            await self.session.refresh(db_user)
            return db_user
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "username" in error_msg.lower() or "unique" in error_msg.lower():
                raise DuplicateEntryError(
                    detail=f"Username '{user.username}' already exists",
                ) from e
            raise DatabaseError(detail="Database integrity error") from e

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Args:
            username: Username to look up (exact match)

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(select(UserDB).where(UserDB.username == username))
        return result.scalar_one_or_none()

    async def append_blog(self, user: UserDB, blog_id: UUID) -> UserDB:
        """
        Record a blog as created by the user.

        The id is appended once; appending an id already present is a no-op.

        Args:
            user: User that created the blog
            blog_id: ID of the new blog

        Returns:
            UserDB: Updated user
        """
        blog_ref = str(blog_id)
        if blog_ref in user.blogs:
            return user
        user.blogs = [*user.blogs, blog_ref]
        return await self._add_and_refresh(user)
