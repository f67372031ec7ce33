"""Pydantic 스키마 - export only."""

from .search_schema import (
    HealthResponse,
    InfoResponse,
    SchoolSearchResponse,
    SearchErrorResponse,
    SearchResultItemModel,
    WebSearchData,
    WebSearchRequest,
    WebSearchResponse,
)

__all__ = [
    "HealthResponse",
    "InfoResponse",
    "SchoolSearchResponse",
    "SearchErrorResponse",
    "SearchResultItemModel",
    "WebSearchData",
    "WebSearchRequest",
    "WebSearchResponse",
]
