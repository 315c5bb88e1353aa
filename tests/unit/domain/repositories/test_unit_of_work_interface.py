"""Tests for src/domain/repositories/unit_of_work.py."""

import pytest

from src.domain.repositories.unit_of_work import UnitOfWork


class _RecordingUnitOfWork(UnitOfWork):
    def __init__(self):
        self.calls = []

    async def commit(self):
        self.calls.append("commit")

    async def rollback(self):
        self.calls.append("rollback")


def test_unit_of_work_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        UnitOfWork()  # type: ignore[abstract]


async def test_clean_exit_commits():
    uow = _RecordingUnitOfWork()
    async with uow:
        pass
    assert uow.calls == ["commit"]


async def test_exception_rolls_back_and_propagates():
    uow = _RecordingUnitOfWork()
    with pytest.raises(RuntimeError):
        async with uow:
            raise RuntimeError("boom")
    assert uow.calls == ["rollback"]


async def test_enter_returns_self():
    uow = _RecordingUnitOfWork()
    async with uow as entered:
        assert entered is uow
