"""Generic SQLAlchemy repository.

SqlRepository[T] implements the whole Repository[T] contract once, against an
AsyncSession, for any entity described by an EntityMapping.  Entity-specific
repositories hold one and delegate to it rather than subclassing it.

Commit policy:
  - autocommit=True (default): every write commits before returning.
  - autocommit=False: writes are only flushed (ids are still assigned); the
    owning unit of work decides when to commit.

Store failures (any SQLAlchemyError) are re-raised as RepositoryError.
asyncio.CancelledError is left alone; the session owner discards the
interrupted transaction when it closes or rolls back the session.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.exceptions import EntityNotFoundError, RepositoryError
from src.domain.models.enums import Comparator
from src.domain.repositories.base import Repository
from src.domain.repositories.filters import Filter

logger = logging.getLogger(__name__)

T = TypeVar("T")

_BINARY_COMPARISONS = {
    Comparator.EQ: operator.eq,
    Comparator.NE: operator.ne,
    Comparator.LT: operator.lt,
    Comparator.LE: operator.le,
    Comparator.GT: operator.gt,
    Comparator.GE: operator.ge,
}


@dataclass(frozen=True)
class EntityMapping(Generic[T]):
    """How one domain entity type maps onto one ORM model.

    Domain field names are expected to match ORM attribute names; id_attribute
    names the integer primary key on both sides.  to_values returns the mutable
    columns only (never the primary key).
    """

    name: str
    orm_model: type
    id_attribute: str
    to_domain: Callable[[Any], T]
    to_values: Callable[[T], dict[str, Any]]

    @property
    def id_column(self) -> Any:
        return getattr(self.orm_model, self.id_attribute)

    def column(self, field: str) -> Any:
        """Return the mapped column attribute for a domain field name."""
        if field not in inspect(self.orm_model).columns.keys():
            raise ValueError(f"{self.name} has no field {field!r}")
        return getattr(self.orm_model, field)

    def id_of(self, entity: T) -> int | None:
        return getattr(entity, self.id_attribute)


class SqlRepository(Repository[T]):
    def __init__(
        self,
        session: AsyncSession,
        mapping: EntityMapping[T],
        autocommit: bool = True,
    ) -> None:
        self._session = session
        self._mapping = mapping
        self._autocommit = autocommit

    # ------------------------------------------------------------------ #
    # Reads                                                                #
    # ------------------------------------------------------------------ #

    async def get_by_id(self, id: int) -> T | None:
        async with self._store_call("get_by_id"):
            row = await self._get_row(id)
        return self._mapping.to_domain(row) if row is not None else None

    async def get_all(self) -> list[T]:
        return await self.fetch(select(self._mapping.orm_model), "get_all")

    async def get_list(self, *filters: Filter, order_by: str | None = None) -> list[T]:
        stmt = select(self._mapping.orm_model)
        for f in filters:
            stmt = stmt.where(self._criterion(f))
        if order_by is not None:
            descending = order_by.startswith("-")
            column = self._mapping.column(order_by[1:] if descending else order_by)
            stmt = stmt.order_by(column.desc() if descending else column.asc())
        return await self.fetch(stmt, "get_list")

    async def fetch(self, stmt: Select[Any], action: str) -> list[T]:
        """Run a select over the mapped model and return detached domain objects.

        Entity-specific queries go through here so they share the store-error
        handling of the generic operations.
        """
        stmt = stmt.execution_options(populate_existing=True)
        async with self._store_call(action):
            result = await self._session.execute(stmt)
            rows = list(result.scalars())
        return [self._mapping.to_domain(row) for row in rows]

    # ------------------------------------------------------------------ #
    # Writes                                                               #
    # ------------------------------------------------------------------ #

    async def add(self, entity: T) -> T:
        row = self._mapping.orm_model(**self._mapping.to_values(entity))
        async with self._store_call("add"):
            self._session.add(row)
            await self._session.flush()
            created = self._mapping.to_domain(row)
            await self._save()
        logger.debug("Added %s %s", self._mapping.name, self._mapping.id_of(created))
        return created

    async def update(self, entity: T) -> T:
        entity_id = self._mapping.id_of(entity)
        if entity_id is None:
            raise EntityNotFoundError(self._mapping.name, None)
        async with self._store_call("update"):
            row = await self._get_row(entity_id)
            if row is None:
                logger.warning("Update skipped: %s %s does not exist", self._mapping.name, entity_id)
                raise EntityNotFoundError(self._mapping.name, entity_id)
            for key, value in self._mapping.to_values(entity).items():
                setattr(row, key, value)
            await self._save()
        logger.debug("Updated %s %s", self._mapping.name, entity_id)
        return entity

    async def delete(self, id: int) -> None:
        async with self._store_call("delete"):
            row = await self._get_row(id)
            if row is None:
                return
            await self._session.delete(row)
            await self._save()
        logger.debug("Deleted %s %s", self._mapping.name, id)

    # ------------------------------------------------------------------ #
    # Helpers                                                              #
    # ------------------------------------------------------------------ #

    async def _get_row(self, id: int) -> Any:
        stmt = (
            select(self._mapping.orm_model)
            .where(self._mapping.id_column == id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _save(self) -> None:
        if self._autocommit:
            await self._session.commit()
        else:
            await self._session.flush()

    def _criterion(self, f: Filter) -> Any:
        column = self._mapping.column(f.field)
        op = f.comparator
        if op in _BINARY_COMPARISONS:
            return _BINARY_COMPARISONS[op](column, f.value)
        if op is Comparator.IN:
            return column.in_(list(f.value))
        if op is Comparator.BETWEEN:
            low, high = f.value
            return column.between(low, high)
        if op is Comparator.CONTAINS:
            return column.icontains(f.value, autoescape=True)
        # IS_NULL
        return column.is_(None) if f.value else column.is_not(None)

    @asynccontextmanager
    async def _store_call(self, action: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            if self._autocommit:
                await self._session.rollback()
            raise RepositoryError(f"{self._mapping.name} {action} failed: {exc}") from exc
