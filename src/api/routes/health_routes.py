"""헬스 체크 / 메트릭 엔드포인트"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from src import __version__
from src.api.dependencies import get_metrics_service
from src.schemas.search_schema import HealthResponse
from src.services import MetricsService

router = APIRouter(tags=["health"])

EXPOSITION_CONTENT_TYPE = "text/plain; version=0.0.4"


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """헬스 체크 (외부 호출 없음)"""
    ts = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return HealthResponse(ok=True, ts=ts)


@router.get("/stats")
async def stats(metrics: MetricsService = Depends(get_metrics_service)):
    """연산별 메트릭 요약 (JSON)"""
    return metrics.get_summary()


@router.get("/metrics")
async def metrics_exposition(metrics: MetricsService = Depends(get_metrics_service)):
    """Prometheus 스크래핑용 텍스트"""
    return PlainTextResponse(
        metrics.to_exposition_text(),
        headers={"Content-Type": EXPOSITION_CONTENT_TYPE},
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": "School Search API",
        "version": __version__,
        "docs": "/docs"
    }
