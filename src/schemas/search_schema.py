"""Pydantic 스키마 정의"""
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchResultItemModel(BaseModel):
    """검색 결과 한 건"""
    title: str = Field(..., description="제목")
    url: str = Field(..., description="대상 URL")
    snippet: str = Field("", description="요약문")
    source: str = Field(..., description="제공자 태그 (brave/bing/duckduckgo)")
    score: float = Field(0, description="제공자 고유 순위")


class SchoolSearchResponse(BaseModel):
    """학교 검색 응답"""
    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(..., description="정규화된 검색어")
    boosted_query: str = Field(..., alias="boostedQuery", description="부스팅된 검색어")
    results: List[SearchResultItemModel]
    duration_ms: float = Field(..., ge=0, description="소요 시간 (ms)")
    cache: str = Field(..., description="hit | miss")


class SearchErrorResponse(BaseModel):
    """검색 실패 응답"""
    error: str
    details: Optional[Any] = None
    duration_ms: Optional[float] = None


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    ok: bool
    ts: str


class WebSearchRequest(BaseModel):
    """일반 웹 검색 요청"""
    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(..., min_length=1, max_length=500, description="검색어")
    max_results: int = Field(10, ge=1, le=50, alias="maxResults", description="최대 결과 수 (1~50)")

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("La consulta no puede estar vacía")
        return v.strip()


class WebSearchData(BaseModel):
    """일반 웹 검색 결과"""
    model_config = ConfigDict(populate_by_name=True)

    query: str
    boosted_query: str = Field(..., alias="boostedQuery")
    results: List[SearchResultItemModel]
    total_results: int = Field(..., alias="totalResults")
    search_time: int = Field(..., alias="searchTime", description="소요 시간 (ms)")
    cache: str


class WebSearchResponse(BaseModel):
    """일반 웹 검색 응답"""
    success: bool
    data: Optional[WebSearchData] = None
    timestamp: str


class InfoResponse(BaseModel):
    """서비스 정보"""
    name: str
    version: str
    description: str
    endpoints: dict[str, str]
    providers: List[str] = Field(..., description="설정된 제공자 (우선순위 순)")
