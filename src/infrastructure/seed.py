"""Demo catalog seed data.

seed_products() fills an empty products table with a small starter catalog.
It is a no-op when any product already exists, so it is safe to run on every
application start.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.products import Product
from src.infrastructure.persistence.repositories.products import SqlProductRepository

logger = logging.getLogger(__name__)

SEED_PRODUCTS: tuple[Product, ...] = (
    Product.create(
        name="Mechanical Keyboard",
        price=Decimal("149.99"),
        stock=12,
        description="Hot-swappable switches, RGB lighting.",
    ),
    Product.create(
        name="Noise Cancelling Headphones",
        price=Decimal("249.50"),
        stock=6,
        description="Wireless over-ear headphones with ANC.",
    ),
    Product.create(
        name="Ergonomic Mouse",
        price=Decimal("59.90"),
        stock=18,
        description="Vertical mouse for better wrist posture.",
    ),
)


async def seed_products(session: AsyncSession) -> int:
    """Insert SEED_PRODUCTS into an empty catalog in one commit.

    Returns the number of products inserted (0 when the catalog was not empty).
    """
    repo = SqlProductRepository(session, autocommit=False)
    if await repo.get_all():
        logger.info("Catalog already populated; skipping seed")
        return 0
    for product in SEED_PRODUCTS:
        await repo.add(product)
    await session.commit()
    logger.info("Seeded %d products", len(SEED_PRODUCTS))
    return len(SEED_PRODUCTS)
