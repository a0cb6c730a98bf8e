"""Base repository for database operations."""

from collections.abc import Sequence
from logging import getLogger
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
)
from bloglist.utils.helpers import file_logger

logger = file_logger(getLogger(__name__))


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing common CRUD operations.

    This class provides a generic implementation of database operations
    that can be extended by specific entity repositories. Every operation
    runs in the caller's session; committing is left to the session owner.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
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

    async def get_by_ids(self, record_ids: Sequence[UUID]) -> dict[UUID, ModelT]:
        """
        Get the records matching a set of IDs, keyed by ID.

        IDs without a matching record are absent from the result.
        """
        if not record_ids:
            return {}
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column.in_(list(record_ids)))
        result = await self.session.execute(statement)
        return {getattr(record, self.id_field): record for record in result.scalars().all()}

    async def get_all(self) -> list[ModelT]:
        """
        Get all records in creation order.

        Returns:
            list[ModelT]: List of records
        """
        statement = select(self.model).order_by(self.model.created_at)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def delete(self, record_id: UUID) -> bool:
        """
        Delete a record by ID without loading it first.

        Args:
            record_id: Record UUID

        Returns:
            bool: True if a record was deleted, False if none matched
        """
        id_column = getattr(self.model, self.id_field)
        result = await self.session.execute(delete(self.model).where(id_column == record_id))
        return bool(result.rowcount)

    async def count(self) -> int:
        """
        Count total records.

        Returns:
            int: Total number of records
        """
        statement = select(func.count()).select_from(self.model)
        result = await self.session.execute(statement)
        count = result.scalar()
        return count if count is not None else 0

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other integrity errors
            DatabaseConnectionError: For any other database failure
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
            return record
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            logger.warning(f"Integrity error saving {self.model.__name__}: {error_msg}")
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError from e
            raise DatabaseError(detail="Database integrity error") from e
        except Exception as e:
            await self.session.rollback()
            logger.exception(f"Failed to save {self.model.__name__}")
            raise DatabaseConnectionError(detail="Failed to save record") from e
