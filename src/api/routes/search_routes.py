"""Search Routes - HTTP Layer

HTTP Layer는 Engine Layer(SearchOrchestrator)로 요청을 위임하고
결과/예외를 JSON 응답으로 변환하는 역할만 수행합니다.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from src import __version__
from src.api.dependencies import AppContext, get_context
from src.api.errors import invalid_payload_response
from src.core.exceptions import InvalidQueryException, SearchExhaustedException
from src.core.logging import logger, sanitize_for_log
from src.engine import SearchOutcome, parse_top_k
from src.schemas.search_schema import (
    InfoResponse,
    SchoolSearchResponse,
    SearchErrorResponse,
    WebSearchData,
    WebSearchRequest,
    WebSearchResponse,
)

router = APIRouter(prefix="/api", tags=["search"])

MISSING_QUERY_MESSAGE = "Parametro q requerido"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _search_failed(exc: SearchExhaustedException) -> JSONResponse:
    body = SearchErrorResponse(
        error="search_failed",
        details=exc.message,
        duration_ms=round(exc.duration_ms, 2) if exc.duration_ms is not None else None,
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@router.get(
    "/schools/search",
    response_model=SchoolSearchResponse,
    responses={400: {"model": SearchErrorResponse}, 500: {"model": SearchErrorResponse}},
)
async def search_schools(
    q: Optional[str] = Query(None, description="검색어"),
    k: Optional[str] = Query(None, description="결과 수 (기본 5)"),
    ctx: AppContext = Depends(get_context),
):
    """학교/교육 검색

    Flow:
        1. 검색어 정규화 (비어 있으면 400)
        2. 도메인/키워드 부스팅
        3. Cache → 제공자 폴백 체인
    """
    top_k = parse_top_k(k, default=ctx.settings.default_top_k, maximum=ctx.settings.max_top_k)

    try:
        outcome = await ctx.orchestrator.search_schools(q, top_k)
    except InvalidQueryException:
        return JSONResponse(status_code=400, content={"error": MISSING_QUERY_MESSAGE})
    except SearchExhaustedException as e:
        logger.warning(f"[API] School search failed: q='{sanitize_for_log(q or '')}', status={e.status_code}")
        return _search_failed(e)
    except Exception as e:
        logger.exception(f"[API] Unexpected error in school search: {type(e).__name__}")
        return JSONResponse(status_code=500, content={"error": "search_failed", "details": str(e)})

    return SchoolSearchResponse.model_validate(outcome.to_response())


def _web_search_data(outcome: SearchOutcome) -> WebSearchData:
    payload = outcome.to_response()
    return WebSearchData(
        query=payload["query"],
        boostedQuery=payload["boostedQuery"],
        results=payload["results"],
        totalResults=len(payload["results"]),
        searchTime=int(round(outcome.duration_ms)),
        cache=payload["cache"],
    )


async def _run_web_search(ctx: AppContext, payload: Any, topic: str):
    try:
        request = WebSearchRequest.model_validate(payload if payload is not None else {})
    except ValidationError as e:
        return invalid_payload_response(e.errors(include_url=False, include_context=False))

    try:
        outcome = await ctx.orchestrator.search_web(request.query, request.max_results, topic)
    except InvalidQueryException as e:
        return JSONResponse(status_code=400, content={"success": False, "error": e.message})
    except SearchExhaustedException as e:
        logger.warning(f"[API] Web search failed: topic={topic}, status={e.status_code}")
        return JSONResponse(
            status_code=e.status_code,
            content={"success": False, "error": e.message, "details": e.details},
        )

    return WebSearchResponse(success=True, data=_web_search_data(outcome), timestamp=_now_iso())


@router.post("/search", response_model=WebSearchResponse, response_model_by_alias=True)
async def web_search(payload: Any = Body(None), ctx: AppContext = Depends(get_context)):
    """일반 웹 검색"""
    return await _run_web_search(ctx, payload, "general")


@router.post("/search/news", response_model=WebSearchResponse, response_model_by_alias=True)
async def news_search(payload: Any = Body(None), ctx: AppContext = Depends(get_context)):
    """뉴스 사이트로 제한한 웹 검색"""
    return await _run_web_search(ctx, payload, "news")


@router.post("/search/academic", response_model=WebSearchResponse, response_model_by_alias=True)
async def academic_search(payload: Any = Body(None), ctx: AppContext = Depends(get_context)):
    """학술 사이트로 제한한 웹 검색"""
    return await _run_web_search(ctx, payload, "academic")


@router.get("/info", response_model=InfoResponse)
async def info(ctx: AppContext = Depends(get_context)):
    """서비스 정보 (자격 증명 값은 노출하지 않음)"""
    return InfoResponse(
        name=ctx.settings.api_title,
        version=__version__,
        description=ctx.settings.api_description,
        endpoints={
            "/api/schools/search": "Búsqueda de escuelas (GET ?q=&k=)",
            "/api/search": "Búsqueda general en web",
            "/api/search/news": "Búsqueda de noticias",
            "/api/search/academic": "Búsqueda académica",
            "/stats": "Resumen de métricas (JSON)",
            "/metrics": "Métricas en formato de exposición",
        },
        providers=ctx.orchestrator.configured_providers(),
    )
