"""Generic repository base interface.

Repository[T, C] is the root abstraction for data-access interfaces in this
domain layer.  Concrete implementations live in
portfolio_tracker/infrastructure/persistence/ and are wired at the
application boundary via dependency injection.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is the stored domain model type (never an ORM row); C is the candidate
    type accepted by create(), which has no identity yet.
  - Identities are store-assigned integers.
  - list() returns the full collection in a stable order so that callers
    can rely on first-occurrence tie-breaks being reproducible.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
C = TypeVar("C")


class Repository(ABC, Generic[T, C]):
    """Abstract create / read / delete interface for a domain entity."""

    @abstractmethod
    async def get(self, id: int) -> T | None:
        """Return the entity with the given identity, or None if not found."""

    @abstractmethod
    async def list(self) -> list[T]:
        """Return every entity ordered by identity (insertion order)."""

    @abstractmethod
    async def create(self, candidate: C) -> T:
        """Persist a new entity and return it with its identity assigned."""

    @abstractmethod
    async def exists(self, id: int) -> bool:
        """Return True if an entity with the given identity is stored."""

    @abstractmethod
    async def delete(self, id: int) -> None:
        """Remove the entity with the given identity."""
