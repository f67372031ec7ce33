"""설정 관리 - 환경 변수 로드 및 검증"""
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 검색 제공자 자격 증명 (존재 여부가 우선순위를 결정)
    brave_api_key: Optional[str] = None
    bing_api_key: Optional[str] = None

    # 캐시 (프로세스 메모리)
    cache_ttl_ms: int = 15 * 60 * 1000  # 15분
    cache_max_entries: int = 500

    # 제공자 타임아웃
    # - api_provider_timeout_s: API 키 기반 제공자 (Brave/Bing API)
    # - scrape_provider_timeout_s: HTML 스크래핑 제공자 (DuckDuckGo/Bing HTML)
    api_provider_timeout_s: float = 8.0
    scrape_provider_timeout_s: float = 10.0
    scrape_user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/110.0.0.0 Safari/537.36"
    )
    scrape_impersonate: str = "chrome110"
    scrape_max_clients: int = 10

    # 검색 결과 개수
    default_top_k: int = 5
    max_top_k: int = 20

    # 서버
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: str = "*"

    # API
    api_title: str = "School Search API"
    api_version: str = "1.0.0"
    api_description: str = "여러 검색 제공자를 우선순위대로 시도하고 결과를 캐시합니다."

    # 로깅
    log_level: str = "INFO"

    @field_validator("brave_api_key", "bing_api_key")
    @classmethod
    def blank_key_is_missing(cls, v: Optional[str]) -> Optional[str]:
        # 빈 문자열 키는 미설정으로 취급
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("cache_ttl_ms", "cache_max_entries")
    @classmethod
    def validate_cache_limits(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("cache_ttl_ms and cache_max_entries must be positive")
        return v

    @field_validator("api_provider_timeout_s", "scrape_provider_timeout_s")
    @classmethod
    def validate_timeouts(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("provider timeouts must be positive")
        return v

    @field_validator("default_top_k", "max_top_k")
    @classmethod
    def validate_top_k(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("top_k limits must be positive")
        return v

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
