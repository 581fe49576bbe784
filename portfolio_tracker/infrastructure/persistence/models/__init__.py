"""ORM model registry — imports every model module so each mapper class is
registered with Base.metadata before Alembic or SQLAlchemy runs.
"""

from portfolio_tracker.infrastructure.persistence.models.holdings import Holding

__all__ = [
    "Holding",
]
