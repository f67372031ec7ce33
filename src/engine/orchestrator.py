"""Search Orchestrator - Main Engine Entry Point

검색 파이프라인을 조정합니다:
1. 검색어 정규화 및 부스팅
2. Cache 조회
3. 제공자 우선순위대로 시도 (API 제공자 1개 → 스크래핑 체인)
4. 결과 캐시 및 메트릭 기록
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from src.core.exceptions import SearchExhaustedException
from src.core.logging import logger, sanitize_for_log

from .query import (
    SCHOOLS_CACHE_NAMESPACE,
    build_cache_key,
    build_school_boosted_query,
    build_topic_query,
    require_query,
)
from .result import CacheStatus, SearchOutcome, SearchResultItem


METRIC_SCHOOLS_SEARCH = "api_schools_search"
METRIC_SCHOOLS_CACHE_HIT = "api_schools_search_cache_hit"
METRIC_WEB_SEARCH = "api_web_search"
METRIC_WEB_CACHE_HIT = "api_web_search_cache_hit"


@dataclass(frozen=True)
class ProviderAttempt:
    provider: str
    error: Exception


class SearchOrchestrator:
    """검색 엔진 오케스트레이터

    제공자 선택 규칙:
    - API 제공자는 설정된 것 중 첫 번째 하나만 시도합니다 (자격 증명은 사전 확인).
    - API 제공자가 런타임 오류로 실패하면 형제 API 제공자가 아니라
      스크래핑 체인으로 넘어갑니다.
    - 같은 제공자를 재시도하지 않습니다.
    """

    def __init__(
        self,
        cache_service,
        metrics_service,
        providers: Sequence[Any],
        cache_ttl_ms: Optional[int] = None,
    ):
        """
        Args:
            cache_service: 캐시 서비스 (get/set 메서드 구현)
            metrics_service: 메트릭 서비스 (observe_duration 구현)
            providers: 우선순위 순 제공자 목록 (name/kind/is_configured/search 구현)
            cache_ttl_ms: 결과 캐시 TTL (None이면 캐시 기본값)
        """
        if cache_service is None:
            raise ValueError("cache_service must not be None")
        if metrics_service is None:
            raise ValueError("metrics_service must not be None")
        if not providers:
            raise ValueError("providers must not be empty")

        self.cache = cache_service
        self.metrics = metrics_service
        self.providers = list(providers)
        self.cache_ttl_ms = cache_ttl_ms

    def plan_attempts(self) -> List[Any]:
        """이번 요청에서 시도할 제공자 순서"""
        plan: List[Any] = []
        primary = next(
            (p for p in self.providers if p.kind == "api" and p.is_configured()),
            None,
        )
        if primary is not None:
            plan.append(primary)
        plan.extend(p for p in self.providers if p.kind == "scrape" and p.is_configured())
        return plan

    def configured_providers(self) -> List[str]:
        return [p.name for p in self.providers if p.is_configured()]

    async def search_schools(self, raw_query: Any, top_k: int) -> SearchOutcome:
        """학교/교육 검색

        Raises:
            InvalidQueryException: 검색어가 비어 있음 (캐시/제공자 작업 전)
            SearchExhaustedException: 모든 제공자 실패
        """
        query = require_query(raw_query)
        boosted = build_school_boosted_query(query)
        return await self._execute(
            query=query,
            boosted=boosted,
            top_k=top_k,
            cache_key=build_cache_key(SCHOOLS_CACHE_NAMESPACE, top_k, boosted),
            metric=METRIC_SCHOOLS_SEARCH,
            hit_metric=METRIC_SCHOOLS_CACHE_HIT,
        )

    async def search_web(self, raw_query: Any, max_results: int, topic: str = "general") -> SearchOutcome:
        """주제별 일반 웹 검색 (general | news | academic)"""
        query = require_query(raw_query)
        boosted = build_topic_query(query, topic)
        return await self._execute(
            query=query,
            boosted=boosted,
            top_k=max_results,
            cache_key=build_cache_key(f"web:{topic}", max_results, boosted),
            metric=METRIC_WEB_SEARCH,
            hit_metric=METRIC_WEB_CACHE_HIT,
        )

    async def _execute(
        self,
        *,
        query: str,
        boosted: str,
        top_k: int,
        cache_key: str,
        metric: str,
        hit_metric: str,
    ) -> SearchOutcome:
        started = time.perf_counter()
        logger.info(f"[ORCH] Search started: query='{sanitize_for_log(query)}', k={top_k}")

        cached = self.cache.get(cache_key)
        if cached is not None:
            elapsed = self._elapsed_ms(started)
            self.metrics.observe_duration(hit_metric, elapsed)
            self.metrics.observe_duration(metric, elapsed)
            logger.info(f"[ORCH] Cache hit: query='{sanitize_for_log(query)}'")
            return SearchOutcome(
                query=query,
                boosted_query=boosted,
                results=list(cached),
                cache=CacheStatus.HIT,
                duration_ms=elapsed,
            )

        attempts: List[ProviderAttempt] = []
        for provider in self.plan_attempts():
            try:
                results = await provider.search(boosted, top_k)
            except Exception as e:
                attempts.append(ProviderAttempt(provider.name, e))
                logger.warning(
                    f"[ORCH] Provider failed, falling back: provider={provider.name}, "
                    f"error={type(e).__name__}: {e}"
                )
                continue

            items = self._cap(results, top_k)
            self.cache.set(cache_key, tuple(items), self.cache_ttl_ms)
            elapsed = self._elapsed_ms(started)
            self.metrics.observe_duration(metric, elapsed)
            logger.info(
                f"[ORCH] Search completed: provider={provider.name}, "
                f"results={len(items)}, elapsed={elapsed:.1f}ms"
            )
            return SearchOutcome(
                query=query,
                boosted_query=boosted,
                results=items,
                cache=CacheStatus.MISS,
                duration_ms=elapsed,
                provider=provider.name,
                attempts=[a.provider for a in attempts] + [provider.name],
            )

        elapsed = self._elapsed_ms(started)
        self.metrics.observe_duration(metric, elapsed)
        logger.error(
            f"[ORCH] All providers failed: query='{sanitize_for_log(query)}', "
            f"attempts={[a.provider for a in attempts]}"
        )
        raise SearchExhaustedException(
            [(a.provider, a.error) for a in attempts],
            duration_ms=elapsed,
        )

    @staticmethod
    def _cap(results: Sequence[SearchResultItem], top_k: int) -> List[SearchResultItem]:
        return list(results or [])[:top_k]

    @staticmethod
    def _elapsed_ms(started: float) -> float:
        return (time.perf_counter() - started) * 1000
