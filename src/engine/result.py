"""Search Result - Standardized Result Format

모든 제공자(API/스크래핑)가 공통으로 반환하는 결과 형식입니다.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Optional


class CacheStatus(str, Enum):
    """캐시 상태"""

    HIT = "hit"
    MISS = "miss"


@dataclass(frozen=True)
class SearchResultItem:
    """정규화된 검색 결과 한 건

    Attributes:
        title: 제목 (비어 있으면 URL로 대체)
        url: 실제 대상 URL
        snippet: 요약문
        source: 제공자 태그 ("brave" | "bing" | "duckduckgo")
        score: 제공자 고유 순위 (없으면 0)
    """

    title: str
    url: str
    snippet: str = ""
    source: str = ""
    score: float = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class SearchOutcome:
    """오케스트레이터 실행 결과"""

    query: str
    boosted_query: str
    results: list[SearchResultItem]
    cache: CacheStatus
    duration_ms: float
    provider: Optional[str] = None  # 캐시 히트 시 None
    attempts: list[str] = field(default_factory=list)

    @property
    def is_cache_hit(self) -> bool:
        return self.cache == CacheStatus.HIT

    def to_response(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "boostedQuery": self.boosted_query,
            "results": [item.to_dict() for item in self.results],
            "duration_ms": round(self.duration_ms, 2),
            "cache": self.cache.value,
        }
