"""SQLAlchemy implementation of HoldingRepository."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_tracker.domain.models.holdings import Holding as DomainHolding
from portfolio_tracker.domain.models.holdings import HoldingCreate
from portfolio_tracker.domain.repositories.holdings import HoldingRepository
from portfolio_tracker.infrastructure.persistence.models.holdings import Holding as OrmHolding


def _to_domain(row: OrmHolding) -> DomainHolding:
    return DomainHolding(
        holding_id=row.holding_id,
        name=row.name,
        quantity=row.quantity,
        purchase_price=row.purchase_price,
        current_price=row.current_price,
        created_at=row.created_at,
    )


class SqlHoldingRepository(HoldingRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, holding_id: int) -> DomainHolding | None:
        stmt = select(OrmHolding).where(OrmHolding.holding_id == holding_id)
        result = await self._session.execute(stmt)
        row = result.scalar_one_or_none()
        return _to_domain(row) if row else None

    async def exists_by_id(self, holding_id: int) -> bool:
        stmt = select(OrmHolding.holding_id).where(OrmHolding.holding_id == holding_id).limit(1)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list(self) -> list[DomainHolding]:
        # Identity order keeps first-occurrence tie-breaks reproducible.
        stmt = select(OrmHolding).order_by(OrmHolding.holding_id)
        result = await self._session.execute(stmt)
        return [_to_domain(row) for row in result.scalars()]

    async def create(self, candidate: HoldingCreate) -> DomainHolding:
        row = OrmHolding(
            name=candidate.name,
            quantity=candidate.quantity,
            purchase_price=candidate.purchase_price,
            current_price=candidate.current_price,
            created_at=datetime.now(timezone.utc),
        )
        self._session.add(row)
        # Flush so the database assigns holding_id before we map back.
        await self._session.flush()
        return _to_domain(row)

    async def delete(self, holding_id: int) -> None:
        stmt = delete(OrmHolding).where(OrmHolding.holding_id == holding_id)
        await self._session.execute(stmt)
