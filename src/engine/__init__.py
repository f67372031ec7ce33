"""Engine Layer - Core Orchestration

- SearchOrchestrator: 검색 실행 진입점 (캐시 → 제공자 폴백 체인)
- query: 검색어 정규화/부스팅/캐시 키
- SearchResultItem / SearchOutcome: 표준 결과 형식
"""

from .orchestrator import (
    METRIC_SCHOOLS_CACHE_HIT,
    METRIC_SCHOOLS_SEARCH,
    METRIC_WEB_CACHE_HIT,
    METRIC_WEB_SEARCH,
    ProviderAttempt,
    SearchOrchestrator,
)
from .query import (
    build_cache_key,
    build_school_boosted_query,
    build_topic_query,
    normalize_query,
    parse_top_k,
)
from .result import CacheStatus, SearchOutcome, SearchResultItem

__all__ = [
    "SearchOrchestrator",
    "ProviderAttempt",
    "METRIC_SCHOOLS_SEARCH",
    "METRIC_SCHOOLS_CACHE_HIT",
    "METRIC_WEB_SEARCH",
    "METRIC_WEB_CACHE_HIT",
    "build_cache_key",
    "build_school_boosted_query",
    "build_topic_query",
    "normalize_query",
    "parse_top_k",
    "CacheStatus",
    "SearchOutcome",
    "SearchResultItem",
]
