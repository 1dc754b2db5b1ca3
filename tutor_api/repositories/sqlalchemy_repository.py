"""
Tutor API — SQLAlchemy Repository
==================================

What:  Generic Repository implementation over an async SQLAlchemy session.
Why:   One implementation serves every mapped model; entity repositories only
       bind the model class.
How:   Operates on the request's session and flushes, but never commits.
       The commit belongs to the unit of work in `get_db_session`.

Error Handling:
    SQLAlchemyError is logged with its statement context and re-raised as
    DatabaseError, which the global handler answers with a generic 500.
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tutor_api.database import Base
from tutor_api.exceptions import DatabaseError
from tutor_api.repositories.base import Repository

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class SQLAlchemyRepository(Repository[ModelT, int], Generic[ModelT]):
    """
    CRUD over one mapped model with an integer `id` primary key.

    Subclasses set `model`.
    """

    model: Type[ModelT]

    # Signed 64-bit key space (BIGINT; SQLite INTEGER). Keys outside it cannot
    # be stored, so lookups and deletes treat them as absent.
    min_id = -(2 ** 63)
    max_id = 2 ** 63 - 1

    def __init__(self, session: AsyncSession):
        self.session = session

    def _storable_id(self, id: int) -> bool:
        return self.min_id <= id <= self.max_id

    @property
    def _entity_name(self) -> str:
        return self.model.__tablename__

    def _database_error(self, operation: str, exc: Exception) -> DatabaseError:
        logger.error(
            "Database error during %s on %s: %s",
            operation,
            self._entity_name,
            str(exc),
            exc_info=True,
        )
        return DatabaseError(
            context={
                "operation": operation,
                "entity": self._entity_name,
                "error_type": type(exc).__name__,
            },
        )

    async def save(self, entity: ModelT) -> ModelT:
        """
        Insert or replace.

        Without an id the entity is added and the flush assigns one. With an
        id, merge copies its state onto the stored row (or inserts a row with
        that id if none exists). An instance loaded by this session merges onto
        itself, so modifying it in place and saving only ever updates.
        Returns the persistent instance.
        """
        try:
            if entity.id is None:
                self.session.add(entity)
            else:
                entity = await self.session.merge(entity)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise self._database_error("save", e) from e
        return entity

    async def find_by_id(self, id: int) -> Optional[ModelT]:
        if not self._storable_id(id):
            return None
        try:
            return await self.session.get(self.model, id)
        except SQLAlchemyError as e:
            raise self._database_error("find_by_id", e) from e

    async def find_all(self) -> List[ModelT]:
        try:
            result = await self.session.execute(
                select(self.model).order_by(self.model.id)
            )
        except SQLAlchemyError as e:
            raise self._database_error("find_all", e) from e
        return list(result.scalars().all())

    async def delete_by_id(self, id: int) -> None:
        if not self._storable_id(id):
            return
        try:
            await self.session.execute(
                delete(self.model).where(self.model.id == id)
            )
        except SQLAlchemyError as e:
            raise self._database_error("delete_by_id", e) from e

    async def exists_by_id(self, id: int) -> bool:
        if not self._storable_id(id):
            return False
        try:
            result = await self.session.execute(
                select(func.count()).select_from(self.model).where(self.model.id == id)
            )
        except SQLAlchemyError as e:
            raise self._database_error("exists_by_id", e) from e
        return (result.scalar() or 0) > 0

    async def count(self) -> int:
        try:
            result = await self.session.execute(
                select(func.count()).select_from(self.model)
            )
        except SQLAlchemyError as e:
            raise self._database_error("count", e) from e
        return result.scalar() or 0
