"""Holding domain models.

HoldingCreate is the boundary record: it enforces the structural invariants
(non-blank name, strictly positive quantity and prices) before a candidate
reaches the store.  Holding is the persisted record and does not re-validate
positivity; the analytics engine tolerates a zero purchase price that slips
past the boundary.

HoldingView and PortfolioSummary are derived on every read and never stored,
so they always reflect the prices they were computed from.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HoldingCreate(BaseModel):
    """A candidate holding submitted by a caller, before identity assignment.

    Amounts must fit the NUMERIC(19, 8) store columns exactly, so a positive
    value can never be rounded to zero (or overflow) on insert.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    quantity: Decimal = Field(gt=0, max_digits=19, decimal_places=8)
    # cost basis per unit
    purchase_price: Decimal = Field(gt=0, max_digits=19, decimal_places=8)
    # latest known market price per unit
    current_price: Decimal = Field(gt=0, max_digits=19, decimal_places=8)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Name cannot be blank")
        return stripped


class Holding(BaseModel):
    """A tracked position with a store-assigned identity.

    holding_id is assigned by the store on create and never changes.
    """

    model_config = ConfigDict(frozen=True)

    holding_id: int
    name: str
    quantity: Decimal
    purchase_price: Decimal
    current_price: Decimal
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class HoldingView(BaseModel):
    """A holding enriched with its derived analytics.

    portfolio_share is the holding's current value as a percentage of the
    total current value of the collection it was computed against.
    """

    model_config = ConfigDict(frozen=True)

    holding_id: int
    name: str
    quantity: Decimal
    purchase_price: Decimal
    current_price: Decimal
    created_at: datetime
    current_value: Decimal
    invested_value: Decimal
    roi: Decimal
    portfolio_share: Decimal


class PortfolioSummary(BaseModel):
    """Portfolio-wide aggregates.

    average_roi is the simple (unweighted) mean of per-holding ROI.
    largest_asset_name is None when the portfolio is empty.
    """

    model_config = ConfigDict(frozen=True)

    total_invested_value: Decimal
    total_current_value: Decimal
    total_profit: Decimal
    average_roi: Decimal
    largest_asset_name: str | None = None
    holding_count: int = Field(default=0, ge=0)

    @classmethod
    def empty(cls) -> PortfolioSummary:
        zero = Decimal("0.0000")
        return cls(
            total_invested_value=zero,
            total_current_value=zero,
            total_profit=zero,
            average_roi=zero,
            largest_asset_name=None,
            holding_count=0,
        )
