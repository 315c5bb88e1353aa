"""SQLAlchemy implementation of UnitOfWork.

    async with SqlUnitOfWork() as uow:
        await uow.products.add(keyboard)
        await uow.products.add(mouse)
    # both rows committed together; an exception inside the block commits neither
"""

from __future__ import annotations

import logging
from types import TracebackType

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.domain.exceptions import RepositoryError
from src.domain.repositories.unit_of_work import UnitOfWork
from src.infrastructure.database import AsyncSessionLocal
from src.infrastructure.persistence.repositories.products import SqlProductRepository

logger = logging.getLogger(__name__)


class SqlUnitOfWork(UnitOfWork):
    """One AsyncSession shared by every repository for the life of the context."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] = AsyncSessionLocal) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("SqlUnitOfWork used outside 'async with'")
        return self._session

    async def __aenter__(self) -> SqlUnitOfWork:
        self._session = self._session_factory()
        self.products = SqlProductRepository(self._session, autocommit=False)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            await super().__aexit__(exc_type, exc, tb)
        finally:
            await self.session.close()
            self._session = None

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            raise RepositoryError(f"Unit of work commit failed: {exc}") from exc

    async def rollback(self) -> None:
        logger.debug("Rolling back unit of work")
        await self.session.rollback()
