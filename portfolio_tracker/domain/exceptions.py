"""Domain error taxonomy.

Two conditions are reportable to callers:
  - InvalidHoldingError — a raw holding failed structural validation at the
    boundary (blank name, non-positive quantity or price).
  - NotFoundError — a requested identity does not exist, or a single answer
    was requested from an empty portfolio.

An empty portfolio passed to a summary is NOT an error; it yields a
zero-valued summary.
"""

from __future__ import annotations

from typing import Any


class PortfolioError(Exception):
    """Root of all portfolio-tracker domain errors."""


class InvalidHoldingError(PortfolioError, ValueError):
    """A candidate holding failed validation.

    errors carries the structured validation error list (pydantic format)
    so the caller can report each offending field.
    """

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        self.errors = errors
        fields = ", ".join(".".join(str(p) for p in e.get("loc", ())) or "?" for e in errors)
        super().__init__(f"Invalid holding: {fields}")


class NotFoundError(PortfolioError, LookupError):
    """Base class for missing-entity conditions."""


class HoldingNotFoundError(NotFoundError):
    def __init__(self, holding_id: int) -> None:
        self.holding_id = holding_id
        super().__init__(f"Holding not found with id: {holding_id}")


class EmptyPortfolioError(NotFoundError):
    def __init__(self, message: str = "Portfolio contains no holdings") -> None:
        super().__init__(message)
