"""
Repository

Generic persistence access for one ORM model. This is the only place that
talks to the database; services and resolvers go through its four
operations: get_by_id, find_many, create and update.

GraphQL resolves sibling fields concurrently and an AsyncSession does not
support concurrent operations, so every call opens its own short-lived
session from the factory.
"""

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.exceptions import DatabaseError, UniqueConstraintError, not_found_error

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

SessionFactory = Callable[[], AsyncSession]


class Repository(Generic[ModelT]):
    """Find, create and update rows of a single model."""

    def __init__(self, session_factory: SessionFactory, model: type[ModelT]):
        self.session_factory = session_factory
        self.model = model

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def _operation(self, name: str) -> str:
        return f"{self.entity_name}.{name}"

    def _integrity_error(self, error: IntegrityError, name: str) -> DatabaseError:
        operation = self._operation(name)
        # SQLite: "UNIQUE constraint failed", PostgreSQL: "violates unique constraint"
        if "unique constraint" in str(error.orig).lower():
            logger.warning(f"{operation} hit a unique constraint: {error.orig}")
            return UniqueConstraintError(str(error.orig), operation=operation)
        logger.error(f"{operation} failed: {error}")
        return DatabaseError(str(error), operation=operation)

    async def get_by_id(self, id: str) -> ModelT | None:
        """Return the row with this id, or None when it does not exist."""
        try:
            async with self.session_factory() as session:
                return await session.get(self.model, id)
        except SQLAlchemyError as e:
            logger.error(f"{self._operation('get_by_id')} failed: {e}")
            raise DatabaseError(str(e), operation=self._operation("get_by_id")) from e

    async def find_many(self, **filters: Any) -> list[ModelT]:
        """
        Return every row whose columns equal the given filters.

        Rows come back in insertion order: creation time, then the
        time-ordered id. With no filters the whole table is returned.
        """
        query = select(self.model)
        for column, value in filters.items():
            query = query.where(getattr(self.model, column) == value)
        query = query.order_by(self.model.created_at.asc(), self.model.id.asc())

        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"{self._operation('find_many')} failed: {e}")
            raise DatabaseError(str(e), operation=self._operation("find_many")) from e

    async def create(self, **fields: Any) -> ModelT:
        """Insert a new row; id and timestamps are assigned here."""
        instance = self.model(**fields)
        try:
            async with self.session_factory() as session:
                session.add(instance)
                try:
                    await session.commit()
                except SQLAlchemyError:
                    await session.rollback()
                    raise
                await session.refresh(instance)
        except IntegrityError as e:
            raise self._integrity_error(e, "create") from e
        except SQLAlchemyError as e:
            logger.error(f"{self._operation('create')} failed: {e}")
            raise DatabaseError(str(e), operation=self._operation("create")) from e

        logger.debug(f"{self.entity_name} created: id={instance.id}")
        return instance

    async def update(self, id: str, **fields: Any) -> ModelT:
        """
        Merge ``fields`` onto the stored row and return it.

        Raises:
            ResourceNotFoundError: no row has this id
        """
        try:
            async with self.session_factory() as session:
                instance = await session.get(self.model, id)
                if instance is None:
                    raise not_found_error(self.entity_name, id)

                for column, value in fields.items():
                    setattr(instance, column, value)

                try:
                    await session.commit()
                except SQLAlchemyError:
                    await session.rollback()
                    raise
                await session.refresh(instance)
        except IntegrityError as e:
            raise self._integrity_error(e, "update") from e
        except SQLAlchemyError as e:
            logger.error(f"{self._operation('update')} failed: {e}")
            raise DatabaseError(str(e), operation=self._operation("update")) from e

        logger.debug(f"{self.entity_name} updated: id={instance.id}, fields={sorted(fields)}")
        return instance
