"""Product repository interface."""

from __future__ import annotations

from abc import abstractmethod

from src.domain.models.products import Product

from .base import Repository


class ProductRepository(Repository[Product]):
    """Read/write interface for Product entities.

    Inherits the generic CRUD contract unchanged and adds the low-stock query.
    """

    @abstractmethod
    async def get_low_stock(self, threshold: int) -> list[Product]:
        """Return products with stock <= threshold, ordered by stock ascending.

        No bound is enforced on threshold: 0 returns only depleted products and
        a negative threshold normally returns an empty list.
        """
