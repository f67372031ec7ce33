"""FastAPI 앱 팩토리"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api import AppContext, build_context, health_router, search_router
from src.api.errors import register_error_handlers
from src.core.config import settings
from src.core.logging import logger


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Args:
        context: 캐시/메트릭/오케스트레이터 묶음 (None이면 환경 설정으로 생성)

    Returns:
        FastAPI 앱 인스턴스
    """
    ctx = context or build_context()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """애플리케이션 생명주기"""
        logger.info("Starting application...")
        yield
        logger.info("Shutting down application...")
        try:
            await app.state.context.aclose()
        except Exception as e:
            # 종료 훅에서의 예외는 앱 종료를 막지 않음
            logger.warning(f"HTTP client shutdown failed: {e!r}")

    app = FastAPI(
        title=ctx.settings.api_title,
        description=ctx.settings.api_description,
        version=ctx.settings.api_version,
        lifespan=lifespan
    )
    app.state.context = ctx

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ctx.settings.cors_origin_list or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(search_router)

    register_error_handlers(app)

    return app


# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run("src.app:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
