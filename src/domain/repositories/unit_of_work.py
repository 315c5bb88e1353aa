"""Unit-of-work interface: an explicit transaction boundary around repositories.

Repositories obtained from a unit of work defer their writes to it; nothing is
committed until commit() is called or the async context exits cleanly.
Leaving the context with an exception (cancellation included) rolls back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from .products import ProductRepository


class UnitOfWork(ABC):
    """Abstract transactional scope exposing the repositories it coordinates."""

    products: ProductRepository

    @abstractmethod
    async def commit(self) -> None:
        """Persist every pending change made through this unit of work."""

    @abstractmethod
    async def rollback(self) -> None:
        """Discard every pending change made through this unit of work."""

    async def __aenter__(self) -> UnitOfWork:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            await self.commit()
        else:
            await self.rollback()
