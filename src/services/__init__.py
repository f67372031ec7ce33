"""비즈니스 로직 서비스 - export only."""

from .impl import CacheService, MetricsService

__all__ = ["CacheService", "MetricsService"]
