"""Holdings ORM model: holdings."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Integer, Numeric, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_tracker.infrastructure.database import Base


class Holding(Base):
    """A tracked position.

    holding_id is assigned by the database on insert (identity column).
    Positivity of quantity and prices is enforced at the application layer.
    Derived figures (value, ROI, share) are never stored.
    """

    __tablename__ = "holdings"

    holding_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    quantity: Mapped[Decimal] = mapped_column(Numeric(19, 8), nullable=False)
    purchase_price: Mapped[Decimal] = mapped_column(Numeric(19, 8), nullable=False)
    current_price: Mapped[Decimal] = mapped_column(Numeric(19, 8), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
