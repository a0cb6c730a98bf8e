"""Blog repository for database operations."""

from uuid import UUID

from sqlalchemy import select

from bloglist.models import BlogDB, UserDB
from bloglist.repositories.base import BaseRepository
from bloglist.schemas import BlogCreate, BlogUpdate

type BlogWithUser = tuple[BlogDB, UserDB | None]


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Reads that expose the creating user join on the users table in a single
    query. A blog whose `user_id` points at nothing comes back with `None`.
    """

    model = BlogDB

    async def create(self, blog: BlogCreate, user_id: UUID | None = None) -> BlogDB:
        """
        Create a new blog in the database.

        Args:
            blog: Blog payload; title and author must already be checked
            user_id: ID of the creating user, if any

        Returns:
            BlogDB: Created blog database model
        """
        db_blog = BlogDB(
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes or 0,
            user_id=user_id,
        )
        return await self._add_and_refresh(db_blog)

    async def get_all_with_users(self) -> list[BlogWithUser]:
        """
        Get every blog paired with its creating user, in creation order.

        Returns:
            list[BlogWithUser]: (blog, user) pairs
        """
        statement = (
            select(BlogDB, UserDB)
            .outerjoin(UserDB, BlogDB.user_id == UserDB.id)
            .order_by(BlogDB.created_at)
        )
        result = await self.session.execute(statement)
        return [(blog, user) for blog, user in result.all()]

    async def get_with_user(self, blog_id: UUID) -> BlogWithUser | None:
        """
        Get a blog paired with its creating user.

        Args:
            blog_id: Blog UUID

        Returns:
            BlogWithUser | None: (blog, user) pair if the blog exists
        """
        statement = (
            select(BlogDB, UserDB)
            .outerjoin(UserDB, BlogDB.user_id == UserDB.id)
            .where(BlogDB.id == blog_id)
        )
        result = await self.session.execute(statement)
        row = result.first()
        if row is None:
            return None
        blog, user = row
        return blog, user

    async def replace(self, blog_id: UUID, blog: BlogUpdate) -> BlogDB | None:
        """
        Replace the editable fields of a blog.

        Title, author, url and likes are all overwritten: an absent url
        becomes null and absent likes become 0. The creating user is kept.

        Args:
            blog_id: Blog UUID
            blog: Replacement payload

        Returns:
            BlogDB | None: Updated blog, or None if no blog has this id
        """
        db_blog = await self.get_by_id(blog_id)
        if db_blog is None:
            return None

        db_blog.title = blog.title
        db_blog.author = blog.author
        db_blog.url = blog.url
        db_blog.likes = blog.likes or 0

        return await self._add_and_refresh(db_blog)
