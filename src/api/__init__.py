"""API 엔드포인트 패키지 - export only."""

from .dependencies import AppContext, build_context, get_context
from .routes import health_router, search_router

__all__ = ["AppContext", "build_context", "get_context", "health_router", "search_router"]
