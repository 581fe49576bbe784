"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for Alembic autogenerate and SQLAlchemy mapper configuration)
and exports the repository implementations and the DI factory.
"""

from portfolio_tracker.infrastructure.persistence.models import *  # noqa: F401, F403
from portfolio_tracker.infrastructure.persistence.models import __all__ as _orm_all
from portfolio_tracker.infrastructure.persistence.repositories import (
    Repositories,
    SqlHoldingRepository,
    get_repositories,
)

__all__ = _orm_all + [
    "Repositories",
    "SqlHoldingRepository",
    "get_repositories",
]
