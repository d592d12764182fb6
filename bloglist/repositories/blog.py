"""Blog repository for database operations."""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from bloglist.models.blog import BlogDB
from bloglist.monitoring import get_logger
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.blog import BlogUpdate, NewBlog

logger = get_logger(__name__)


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Creation stamps the owner on the row; the owner's blog list is the set of
    rows pointing at them, so both sides land in the same flush.
    """

    model = BlogDB
    resource_name = "Blog"

    async def create(self, blog: NewBlog, user_id: UUID) -> BlogDB:
        """
        Create a new blog owned by `user_id`.

        Args:
            blog: Validated blog fields
            user_id: Owner's user id

        Returns:
            BlogDB: Created blog database model
        """
        db_blog = BlogDB(
            user_id=user_id,
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
        )
        db_blog = await self._add_and_refresh(db_blog)
        logger.info(f"Blog {db_blog.id} created for user {user_id}")
        return db_blog

    async def get_all_with_owner(self) -> list[BlogDB]:
        """
        Get all blogs with the owning user loaded.

        Returns:
            list[BlogDB]: Blogs in creation order
        """
        query = (
            select(BlogDB)
            .options(selectinload(BlogDB.user))
            .order_by(BlogDB.created_at)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def update(self, blog_id: UUID, blog_update: BlogUpdate) -> BlogDB | None:
        """
        Replace the supplied fields of a blog.

        The owner is not part of `BlogUpdate`, so it cannot change here.

        Returns:
            BlogDB | None: Updated blog if found, None otherwise
        """
        db_blog = await self.get_by_id(blog_id)
        if db_blog is None:
            return None

        update_data = blog_update.model_dump(exclude_unset=True, exclude_none=True)
        for key, value in update_data.items():
            setattr(db_blog, key, value)
        db_blog.updated_at = datetime.now(tz=UTC)

        return await self._add_and_refresh(db_blog)
