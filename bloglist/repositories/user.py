"""User repository for database operations."""

from sqlalchemy import select

from bloglist.errors.database import DuplicateEntryError
from bloglist.managers import hash_password, verify_password
from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.user import UserCreate


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    Users load their blog list eagerly (see `UserDB.blogs`).
    """

    model = UserDB
    resource_name = "User"

    async def create(self, user: UserCreate) -> UserDB:
        """
        Create a new user with a hashed password.

        Raises:
            DuplicateEntryError: If the username is taken
        """
        if await self.get_by_username(user.username):
            raise DuplicateEntryError(detail="expected `username` to be unique")

        password_hash = await hash_password(user.password.get_secret_value())
        db_user = UserDB(
            username=user.username,
            name=user.name,
            password_hash=password_hash,
        )
        return await self._add_and_refresh(db_user)

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(UserDB.username == username),
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> list[UserDB]:
        """Get all users, each with their blogs loaded."""
        result = await self.session.execute(select(UserDB).order_by(UserDB.created_at))
        return list(result.scalars().all())

    async def do_password_verify(self, username: str, password: str) -> UserDB | None:
        """
        Verify user credentials.

        Returns:
            UserDB | None: User if credentials are valid, None otherwise
        """
        db_user = await self.get_by_username(username)
        password_hash = db_user.password_hash if db_user else None

        if not await verify_password(password, password_hash):
            return None

        return db_user
