"""Concrete SQLAlchemy repository implementations.

Exports all SqlRepository classes and the get_repositories() factory function
for wiring at the application boundary (FastAPI dependency injection).
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .base import EntityMapping, SqlRepository
from .products import PRODUCT_MAPPING, SqlProductRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession."""

    products: SqlProductRepository


def get_repositories(session: AsyncSession, autocommit: bool = True) -> Repositories:
    """Construct all repositories bound to the given session.

    Intended for use as a FastAPI dependency:

        async def handler(
            session: AsyncSession = Depends(get_session),
        ) -> ...:
            repos = get_repositories(session)
            product = await repos.products.get_by_id(product_id)

    Pass autocommit=False when the caller commits the session itself.
    """
    return Repositories(
        products=SqlProductRepository(session, autocommit=autocommit),
    )


__all__ = [
    "EntityMapping",
    "SqlRepository",
    "SqlProductRepository",
    "PRODUCT_MAPPING",
    "Repositories",
    "get_repositories",
]
