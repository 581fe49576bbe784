"""Portfolio analytics service.

Turns stored Holdings into enriched HoldingViews and a PortfolioSummary.

Pipeline for a collection read:
    enrich_all
        → total_current_value   (one summing pass over the collection)
        → enrich                (per-holding value / ROI / share)

All methods are pure computation — no database access, no mutation of the
input.  The caller must supply a single consistent, ordered snapshot of
holdings; tie-breaks (largest holding, top performer) pick the first
occurrence in that order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal

from portfolio_tracker.domain.exceptions import EmptyPortfolioError
from portfolio_tracker.domain.models.holdings import Holding, HoldingView, PortfolioSummary

from . import valuation

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Stateless calculator for per-holding and portfolio-wide analytics.

    Responsibilities:
    - Enrich holdings with current value, invested value, ROI and share.
    - Reduce a collection into a PortfolioSummary.
    - Select the top performer by ROI.
    """

    # ------------------------------------------------------------------ #
    # Public API                                                           #
    # ------------------------------------------------------------------ #

    def enrich(self, holding: Holding, total_current_value: Decimal) -> HoldingView:
        """Derive a HoldingView against a precomputed collection total."""
        value = valuation.current_value(holding.quantity, holding.current_price)
        return HoldingView(
            holding_id=holding.holding_id,
            name=holding.name,
            quantity=holding.quantity,
            purchase_price=holding.purchase_price,
            current_price=holding.current_price,
            created_at=holding.created_at,
            current_value=value,
            invested_value=valuation.invested_value(holding.quantity, holding.purchase_price),
            roi=self._roi(holding),
            portfolio_share=valuation.portfolio_share(value, total_current_value),
        )

    def enrich_all(self, holdings: Sequence[Holding]) -> list[HoldingView]:
        total = self.total_current_value(holdings)
        return [self.enrich(h, total) for h in holdings]

    def total_current_value(self, holdings: Sequence[Holding]) -> Decimal:
        return valuation.total(
            valuation.current_value(h.quantity, h.current_price) for h in holdings
        )

    def total_invested_value(self, holdings: Sequence[Holding]) -> Decimal:
        return valuation.total(
            valuation.invested_value(h.quantity, h.purchase_price) for h in holdings
        )

    def summarize(self, holdings: Sequence[Holding]) -> PortfolioSummary:
        """Reduce a collection to its portfolio-wide aggregates.

        An empty collection is a valid state: every numeric field is zero and
        largest_asset_name is None.
        """
        if not holdings:
            return PortfolioSummary.empty()

        total_current = self.total_current_value(holdings)
        total_invested = self.total_invested_value(holdings)
        average_roi = valuation.mean([self._roi(h) for h in holdings])
        largest = max(
            holdings, key=lambda h: valuation.current_value(h.quantity, h.current_price)
        )

        summary = PortfolioSummary(
            total_invested_value=total_invested,
            total_current_value=total_current,
            total_profit=valuation.profit(total_current, total_invested),
            average_roi=average_roi,
            largest_asset_name=largest.name,
            holding_count=len(holdings),
        )
        logger.debug(
            "Summarized %d holdings: current=%s invested=%s average_roi=%s",
            summary.holding_count,
            summary.total_current_value,
            summary.total_invested_value,
            summary.average_roi,
        )
        return summary

    def top_by_roi(self, holdings: Sequence[Holding]) -> HoldingView:
        """Return the holding with the highest ROI.

        Raises EmptyPortfolioError when there is nothing to choose from.
        """
        if not holdings:
            raise EmptyPortfolioError("Cannot select a top performer from an empty portfolio")
        top = max(holdings, key=self._roi)
        return self.enrich(top, self.total_current_value(holdings))

    # ------------------------------------------------------------------ #
    # Helpers                                                              #
    # ------------------------------------------------------------------ #

    @staticmethod
    def _roi(holding: Holding) -> Decimal:
        return valuation.roi(holding.quantity, holding.purchase_price, holding.current_price)
