"""Tests for SqlUnitOfWork against in-memory SQLite."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.domain.exceptions import RepositoryError
from src.domain.models.products import Product
from src.infrastructure.persistence.repositories.products import SqlProductRepository
from src.infrastructure.persistence.unit_of_work import SqlUnitOfWork


async def _count(session_factory):
    async with session_factory() as session:
        return len(await SqlProductRepository(session).get_all())


async def test_writes_commit_together_on_clean_exit(session_factory):
    async with SqlUnitOfWork(session_factory) as uow:
        await uow.products.add(Product.create("Keyboard", "149.99", stock=12))
        await uow.products.add(Product.create("Mouse", "59.90", stock=18))
    assert await _count(session_factory) == 2


async def test_ids_are_assigned_before_commit(session_factory):
    async with SqlUnitOfWork(session_factory) as uow:
        created = await uow.products.add(Product.create("Keyboard", "149.99"))
        assert created.product_id is not None


async def test_exception_discards_every_write(session_factory):
    with pytest.raises(RuntimeError):
        async with SqlUnitOfWork(session_factory) as uow:
            await uow.products.add(Product.create("Keyboard", "149.99"))
            await uow.products.add(Product.create("Mouse", "59.90"))
            raise RuntimeError("abort batch")
    assert await _count(session_factory) == 0


async def test_explicit_rollback_discards_pending_writes(session_factory):
    async with SqlUnitOfWork(session_factory) as uow:
        await uow.products.add(Product.create("Keyboard", "149.99"))
        await uow.rollback()
    assert await _count(session_factory) == 0


def test_session_outside_context_raises():
    with pytest.raises(RuntimeError):
        SqlUnitOfWork().session


async def test_session_released_after_exit(session_factory):
    uow = SqlUnitOfWork(session_factory)
    async with uow:
        pass
    with pytest.raises(RuntimeError):
        uow.session


async def test_cancelled_batch_leaves_nothing_persisted(session_factory):
    flushed = asyncio.Event()

    async def batch():
        async with SqlUnitOfWork(session_factory) as uow:
            await uow.products.add(Product.create("Keyboard", "149.99", stock=12))
            flushed.set()
            await asyncio.Event().wait()

    task = asyncio.create_task(batch())
    await flushed.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert await _count(session_factory) == 0


async def test_commit_failure_is_wrapped_and_rolled_back():
    session = AsyncMock()
    failure = OperationalError("COMMIT", {}, Exception("deadlock detected"))
    session.commit.side_effect = failure
    uow = SqlUnitOfWork(MagicMock(return_value=session))
    with pytest.raises(RepositoryError) as excinfo:
        async with uow:
            pass
    assert excinfo.value.__cause__ is failure
    session.rollback.assert_awaited_once()
    session.close.assert_awaited_once()
