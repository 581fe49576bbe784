"""Holdings repository interface."""

from __future__ import annotations

from abc import abstractmethod

from portfolio_tracker.domain.models.holdings import Holding, HoldingCreate

from .base import Repository


class HoldingRepository(Repository[Holding, HoldingCreate]):
    """Read/write interface for Holding entities.

    Holdings are never updated in place; a holding is created, read any
    number of times, and deleted by identity.  list() must return holdings in
    identity order so summaries and top-performer queries are reproducible.
    """

    async def get(self, id: int) -> Holding | None:
        return await self.get_by_id(id)

    async def exists(self, id: int) -> bool:
        return await self.exists_by_id(id)

    @abstractmethod
    async def get_by_id(self, holding_id: int) -> Holding | None:
        """Return the holding, or None."""

    @abstractmethod
    async def exists_by_id(self, holding_id: int) -> bool:
        """Return True if a holding with this identity is stored."""

    @abstractmethod
    async def list(self) -> list[Holding]:
        """Return all holdings ordered by holding_id ascending."""

    @abstractmethod
    async def create(self, candidate: HoldingCreate) -> Holding:
        """Assign an identity, persist the holding and return the full record."""

    @abstractmethod
    async def delete(self, holding_id: int) -> None:
        """Remove the holding.  Callers check existence first."""
