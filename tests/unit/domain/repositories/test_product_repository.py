"""Tests for src/domain/repositories/products.py."""

import pytest

from src.domain.repositories.products import ProductRepository


class _Generic:
    async def get_by_id(self, id): return None
    async def get_all(self): return []
    async def get_list(self, *filters, order_by=None): return []
    async def add(self, entity): return entity
    async def update(self, entity): return entity
    async def delete(self, id): return None


def test_product_repository_requires_get_low_stock():
    class _NoLowStock(_Generic, ProductRepository):
        pass

    with pytest.raises(TypeError):
        _NoLowStock()  # type: ignore[abstract]


def test_product_repository_full_subclass_instantiates():
    class _Full(_Generic, ProductRepository):
        async def get_low_stock(self, threshold): return []

    assert _Full() is not None
