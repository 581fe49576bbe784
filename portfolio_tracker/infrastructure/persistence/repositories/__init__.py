"""Concrete SQLAlchemy repository implementations.

Exports the SqlRepository classes and the get_repositories() factory function
for wiring at the application boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .holdings import SqlHoldingRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession."""

    holdings: SqlHoldingRepository


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

        async with AsyncSessionLocal() as session:
            async with session.begin():
                repos = get_repositories(session)
                holdings = await repos.holdings.list()
    """
    return Repositories(
        holdings=SqlHoldingRepository(session),
    )


__all__ = [
    "SqlHoldingRepository",
    "Repositories",
    "get_repositories",
]
