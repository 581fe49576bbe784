"""Tests for portfolio_tracker/domain/repositories/holdings.py."""

import asyncio
import pytest

from portfolio_tracker.domain.repositories.holdings import HoldingRepository


def _concrete() -> HoldingRepository:
    class _Impl(HoldingRepository):
        async def get_by_id(self, holding_id): return "found"
        async def exists_by_id(self, holding_id): return holding_id == 1
        async def list(self): return []
        async def create(self, candidate): return candidate
        async def delete(self, holding_id): return None

    return _Impl()


def test_holding_repository_is_abstract():
    with pytest.raises(TypeError):
        HoldingRepository()  # type: ignore[abstract]


def test_holding_repository_concrete_instantiates():
    assert _concrete() is not None


def test_holding_repository_get_delegates_to_get_by_id():
    result = asyncio.run(_concrete().get(1))
    assert result == "found"


def test_holding_repository_exists_delegates_to_exists_by_id():
    repo = _concrete()
    assert asyncio.run(repo.exists(1)) is True
    assert asyncio.run(repo.exists(2)) is False


def test_holding_repository_missing_exists_by_id_is_abstract():
    class _Partial(HoldingRepository):
        async def get_by_id(self, holding_id): return None
        async def list(self): return []
        async def create(self, candidate): return candidate
        async def delete(self, holding_id): return None

    with pytest.raises(TypeError):
        _Partial()  # type: ignore[abstract]
