"""Behavioural tests for SqlProductRepository.get_low_stock against in-memory SQLite."""

from src.domain.models.products import Product
from src.infrastructure.persistence.repositories.products import SqlProductRepository


async def _catalog(session):
    repo = SqlProductRepository(session)
    await repo.add(Product.create("Keyboard", "149.99", stock=12))
    await repo.add(Product.create("Headphones", "249.50", stock=6))
    await repo.add(Product.create("Mouse", "59.90", stock=18))
    return repo


async def test_threshold_below_every_stock_returns_empty(session):
    repo = await _catalog(session)
    assert await repo.get_low_stock(5) == []


async def test_threshold_is_inclusive(session):
    repo = await _catalog(session)
    result = await repo.get_low_stock(6)
    assert [(p.name, p.stock) for p in result] == [("Headphones", 6)]


async def test_results_are_ordered_by_stock_ascending(session):
    repo = await _catalog(session)
    depleted = await repo.add(Product.create("Webcam", "89.00", stock=0))
    result = await repo.get_low_stock(10)
    assert [p.name for p in result] == ["Webcam", "Headphones"]
    assert result[0].product_id == depleted.product_id


async def test_high_threshold_returns_everything_sorted(session):
    repo = await _catalog(session)
    result = await repo.get_low_stock(100)
    assert [p.stock for p in result] == [6, 12, 18]


async def test_zero_threshold_returns_only_depleted(session):
    repo = await _catalog(session)
    await repo.add(Product.create("Webcam", "89.00", stock=0))
    assert [p.name for p in await repo.get_low_stock(0)] == ["Webcam"]


async def test_negative_threshold_returns_empty(session):
    repo = await _catalog(session)
    assert await repo.get_low_stock(-1) == []


async def test_result_is_exact_subset(session):
    repo = await _catalog(session)
    everything = await repo.get_all()
    for threshold in (0, 6, 11, 12, 17, 18):
        expected = sorted(
            (p for p in everything if p.stock <= threshold), key=lambda p: p.stock
        )
        assert await repo.get_low_stock(threshold) == expected


async def test_equal_stock_ties_ordered_by_identity(session):
    repo = SqlProductRepository(session)
    first = await repo.add(Product.create("Cable", "9.99", stock=2))
    second = await repo.add(Product.create("Adapter", "14.99", stock=2))
    result = await repo.get_low_stock(2)
    assert [p.product_id for p in result] == [first.product_id, second.product_id]


async def test_empty_catalog_returns_empty(session):
    assert await SqlProductRepository(session).get_low_stock(10) == []
