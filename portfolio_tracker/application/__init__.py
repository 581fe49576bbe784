"""Application (access) layer package."""

from .portfolio import PortfolioService, get_portfolio_service

__all__ = ["PortfolioService", "get_portfolio_service"]
