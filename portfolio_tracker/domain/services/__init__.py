"""Domain services package."""

from .analytics import AnalyticsService

__all__ = ["AnalyticsService"]
