"""Product catalog service.

Thin orchestration over a ProductRepository for the presentation layer.
The service holds no state of its own beyond the repository it was given
and the default low-stock threshold; errors from the repository propagate
unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.domain.models.products import Product
from src.domain.repositories.products import ProductRepository

logger = logging.getLogger(__name__)

DEFAULT_LOW_STOCK_THRESHOLD = 5


@dataclass(frozen=True)
class ProductListing:
    """Catalog overview: every product plus the ones running low."""

    products: list[Product]
    low_stock: list[Product]
    threshold: int


class ProductService:
    def __init__(
        self,
        products: ProductRepository,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._products = products
        self._low_stock_threshold = low_stock_threshold

    async def list_products(self) -> list[Product]:
        return await self._products.get_all()

    async def low_stock(self, threshold: int) -> list[Product]:
        return await self._products.get_low_stock(threshold)

    async def get(self, product_id: int) -> Product | None:
        return await self._products.get_by_id(product_id)

    async def create(self, product: Product) -> Product:
        return await self._products.add(product)

    async def update(self, product: Product) -> Product:
        return await self._products.update(product)

    async def delete(self, product_id: int) -> None:
        await self._products.delete(product_id)

    async def catalog(self, threshold: int | None = None) -> ProductListing:
        """Return all products together with those at or below the threshold.

        threshold falls back to the service default (5 unless configured).
        """
        if threshold is None:
            threshold = self._low_stock_threshold
        products = await self._products.get_all()
        low_stock = await self._products.get_low_stock(threshold)
        logger.debug(
            "Catalog listing: %d products, %d at or below stock %d",
            len(products),
            len(low_stock),
            threshold,
        )
        return ProductListing(products=products, low_stock=low_stock, threshold=threshold)
