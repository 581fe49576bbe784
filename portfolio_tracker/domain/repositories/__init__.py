"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in portfolio_tracker/infrastructure/persistence/
and are wired at the application boundary via dependency injection.
"""

from .base import Repository
from .holdings import HoldingRepository

__all__ = [
    "Repository",
    "HoldingRepository",
]
