"""Portfolio access layer.

Glues the holding store to the analytics engine:
  - validates raw holdings before they reach the store
  - pulls the full holding collection for every analytics read
  - turns missing identities and empty-portfolio top queries into NotFound

Derived figures are recomputed on every read and never written back.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_tracker.domain.exceptions import HoldingNotFoundError, InvalidHoldingError
from portfolio_tracker.domain.models.holdings import HoldingCreate, HoldingView, PortfolioSummary
from portfolio_tracker.domain.repositories.holdings import HoldingRepository
from portfolio_tracker.domain.services.analytics import AnalyticsService
from portfolio_tracker.infrastructure.persistence.repositories import get_repositories

logger = logging.getLogger(__name__)


class PortfolioService:
    """Use-case entry points for holdings and portfolio analytics."""

    def __init__(
        self,
        holdings: HoldingRepository,
        analytics: AnalyticsService | None = None,
    ) -> None:
        self._holdings = holdings
        self._analytics = analytics or AnalyticsService()

    async def add_holding(self, raw: HoldingCreate | Mapping[str, Any]) -> HoldingView:
        """Validate and store a new holding.

        The returned view carries a zero portfolio_share: shares are only
        meaningful when computed against the whole collection on read.

        Raises InvalidHoldingError if the candidate fails validation.
        """
        candidate = self._validate(raw)
        holding = await self._holdings.create(candidate)
        logger.info("Added holding %s (%s)", holding.holding_id, holding.name)
        return self._analytics.enrich(holding, Decimal(0))

    async def list_holdings(self) -> list[HoldingView]:
        holdings = await self._holdings.list()
        return self._analytics.enrich_all(holdings)

    async def delete_holding(self, holding_id: int) -> None:
        """Remove a holding, raising HoldingNotFoundError if it does not exist."""
        if not await self._holdings.exists_by_id(holding_id):
            logger.warning("Delete requested for unknown holding %s", holding_id)
            raise HoldingNotFoundError(holding_id)
        await self._holdings.delete(holding_id)
        logger.info("Deleted holding %s", holding_id)

    async def get_summary(self) -> PortfolioSummary:
        holdings = await self._holdings.list()
        return self._analytics.summarize(holdings)

    async def get_top_performer(self) -> HoldingView:
        """Return the highest-ROI holding; EmptyPortfolioError if there are none."""
        holdings = await self._holdings.list()
        return self._analytics.top_by_roi(holdings)

    @staticmethod
    def _validate(raw: HoldingCreate | Mapping[str, Any]) -> HoldingCreate:
        if isinstance(raw, HoldingCreate):
            return raw
        try:
            return HoldingCreate.model_validate(raw)
        except ValidationError as exc:
            raise InvalidHoldingError(exc.errors()) from exc


def get_portfolio_service(session: AsyncSession) -> PortfolioService:
    """Construct a PortfolioService backed by the SQL holding store."""
    return PortfolioService(holdings=get_repositories(session).holdings)
