"""로깅 설정"""
import logging
import os
import re
import sys
from src.core.config import settings


# Production 환경에서는 DEBUG 로그 비활성화
IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"


def setup_logging() -> logging.Logger:
    """로거 초기화 및 설정"""

    logger = logging.getLogger("school_search")

    log_level = settings.log_level.upper()
    if IS_PRODUCTION and log_level == "DEBUG":
        log_level = "INFO"
    level = getattr(logging, log_level, logging.INFO)

    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    if IS_PRODUCTION:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    console_handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(console_handler)

    return logger


logger = setup_logging()

_SECRET_PARAM = re.compile(
    r"\b(api[_-]?key|token|secret|subscription[_-]?key)\s*[=:]\s*[^\s&]+",
    re.IGNORECASE,
)


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """검색어/URL을 한 줄 로그용 문자열로 변환

    - 연속 공백과 줄바꿈을 공백 하나로 합침
    - api_key=..., token=... 형태의 값은 *** 로 마스킹
    - max_length 초과 시 잘라내고 "..." 추가
    """
    if not value:
        return "[empty]"

    result = " ".join(str(value).split())
    result = _SECRET_PARAM.sub(lambda m: f"{m.group(1)}=***", result)

    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
