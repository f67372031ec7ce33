"""FastAPI 공통 예외 핸들러

- /api/search* 요청 본문 검증 실패 → 400 {success: false, error, details}
- 존재하지 않는 경로 → 404 {success: false, error}
그 외에는 FastAPI 기본 핸들러에 위임합니다.
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import (
    http_exception_handler,
    request_validation_exception_handler,
)
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.logging import logger


WEB_SEARCH_PATH_PREFIX = "/api/search"
INVALID_PAYLOAD_MESSAGE = "Datos de entrada inválidos"
NOT_FOUND_MESSAGE = "Endpoint no encontrado"


def invalid_payload_response(details) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": INVALID_PAYLOAD_MESSAGE,
            "details": jsonable_encoder(details),
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """앱에 예외 핸들러 등록"""

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        if not request.url.path.startswith(WEB_SEARCH_PATH_PREFIX):
            return await request_validation_exception_handler(request, exc)
        logger.info(f"[API] Invalid web search payload: path={request.url.path}")
        return invalid_payload_response(exc.errors())

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code != 404:
            return await http_exception_handler(request, exc)
        return JSONResponse(
            status_code=404,
            content={"success": False, "error": NOT_FOUND_MESSAGE},
        )
