"""Base repository for database operations."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    RecordNotFoundError,
)


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing common CRUD operations.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    resource_name: str = "Record"
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column == record_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_or_raise(self, record_id: UUID) -> ModelT:
        """
        Get a record by ID or raise if not found.

        Raises:
            RecordNotFoundError: If record is not found
        """
        record = await self.get_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(
                detail=f"{self.resource_name} with ID {record_id} not found",
            )
        return record

    async def delete(self, record_id: UUID) -> bool:
        """
        Delete a record by ID.

        Returns:
            bool: True if record was deleted, False if not found
        """
        record = await self.get_by_id(record_id)
        if record is None:
            return False

        await self.session.delete(record)
        await self.session.flush()
        return True

    async def count(self) -> int:
        """Count total records."""
        statement = select(func.count()).select_from(self.model)
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other integrity errors
            DatabaseConnectionError: For any other database failure
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError(detail=error_msg) from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(detail=f"Failed to save record: {e}") from e
        return record
