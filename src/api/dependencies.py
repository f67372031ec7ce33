"""애플리케이션 컨텍스트 조립 및 FastAPI 의존성

캐시/메트릭/오케스트레이터는 명시적으로 생성해 app.state에 보관하고
요청 핸들러에 주입합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import httpx
from fastapi import Request

from src.core.config import Settings, settings as default_settings
from src.core.logging import logger
from src.crawlers import SearchProvider
from src.crawlers.http_client import ApiHttpClient, ScrapeHttpClient
from src.crawlers.providers import (
    BingApiSearchProvider,
    BingScrapeProvider,
    BraveSearchProvider,
    DuckDuckGoScrapeProvider,
)
from src.engine import SearchOrchestrator
from src.services import CacheService, MetricsService


@dataclass
class AppContext:
    settings: Settings
    cache: CacheService
    metrics: MetricsService
    orchestrator: SearchOrchestrator
    api_client: Optional[ApiHttpClient] = None
    scrape_client: Optional[ScrapeHttpClient] = None

    async def aclose(self) -> None:
        if self.api_client is not None:
            await self.api_client.close()
        if self.scrape_client is not None:
            await self.scrape_client.close()


def build_default_providers(
    app_settings: Settings,
    api_client: ApiHttpClient,
    scrape_client: ScrapeHttpClient,
) -> list[SearchProvider]:
    """우선순위 순: Brave API → Bing API → DuckDuckGo HTML → Bing HTML"""
    return [
        BraveSearchProvider(api_client, app_settings.brave_api_key, app_settings.api_provider_timeout_s),
        BingApiSearchProvider(api_client, app_settings.bing_api_key, app_settings.api_provider_timeout_s),
        DuckDuckGoScrapeProvider(scrape_client, app_settings.scrape_provider_timeout_s),
        BingScrapeProvider(scrape_client, app_settings.scrape_provider_timeout_s),
    ]


def build_context(
    app_settings: Optional[Settings] = None,
    providers: Optional[Sequence[SearchProvider]] = None,
    api_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AppContext:
    """AppContext 생성

    Args:
        app_settings: 설정 (None이면 환경 변수 기반 기본 설정)
        providers: 제공자 목록 오버라이드 (테스트용)
        api_transport: httpx 전송 계층 오버라이드 (테스트용)
    """
    app_settings = app_settings or default_settings

    cache = CacheService(
        max_entries=app_settings.cache_max_entries,
        default_ttl_ms=app_settings.cache_ttl_ms,
    )
    metrics = MetricsService()

    api_client: Optional[ApiHttpClient] = None
    scrape_client: Optional[ScrapeHttpClient] = None
    if providers is None:
        api_client = ApiHttpClient(transport=api_transport)
        scrape_client = ScrapeHttpClient(
            user_agent=app_settings.scrape_user_agent,
            impersonate=app_settings.scrape_impersonate,
            max_clients=app_settings.scrape_max_clients,
        )
        providers = build_default_providers(app_settings, api_client, scrape_client)

    orchestrator = SearchOrchestrator(
        cache_service=cache,
        metrics_service=metrics,
        providers=providers,
        cache_ttl_ms=app_settings.cache_ttl_ms,
    )
    logger.info(f"[APP] Providers configured: {orchestrator.configured_providers()}")

    return AppContext(
        settings=app_settings,
        cache=cache,
        metrics=metrics,
        orchestrator=orchestrator,
        api_client=api_client,
        scrape_client=scrape_client,
    )


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_metrics_service(request: Request) -> MetricsService:
    return get_context(request).metrics
