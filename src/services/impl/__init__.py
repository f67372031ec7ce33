"""서비스 구현체 모음"""

from .cache_service import CacheService, CacheEntry
from .metrics_service import MetricsService, MetricSample

__all__ = ["CacheService", "CacheEntry", "MetricsService", "MetricSample"]
