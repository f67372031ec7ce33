"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class SchoolSearchException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 검색 제공자 관련 예외
class ProviderException(SchoolSearchException):
    """검색 제공자 예외의 기본 클래스

    status_code는 업스트림 HTTP 상태가 있을 때만 설정됩니다.
    """
    status_code: Optional[int] = None

    def __init__(self, provider: str, message: str, error_code: str = "PROVIDER_ERROR", details: Optional[dict[str, Any]] = None):
        self.provider = provider
        merged = {"provider": provider}
        merged.update(details or {})
        super().__init__(message, error_code or "PROVIDER_ERROR", merged)


class MissingCredentialException(ProviderException):
    """자격 증명 누락 (네트워크 호출 전 즉시 실패, 재시도 금지)"""
    def __init__(self, provider: str, env_var: str):
        super().__init__(
            provider,
            f"missing_{env_var.lower()}",
            "MISSING_CREDENTIAL",
            {"env_var": env_var},
        )


class ProviderHTTPException(ProviderException):
    """업스트림이 2xx가 아닌 상태를 반환"""
    def __init__(self, provider: str, status_code: int, details: Optional[dict[str, Any]] = None):
        self.status_code = status_code
        super().__init__(
            provider,
            f"Request failed with status code {status_code}",
            "PROVIDER_HTTP_ERROR",
            {"status_code": status_code, **(details or {})},
        )


class NetworkTimeoutException(ProviderException):
    """네트워크 타임아웃 예외"""
    def __init__(self, provider: str, timeout_s: float):
        super().__init__(
            provider,
            f"timeout of {int(timeout_s * 1000)}ms exceeded",
            "NETWORK_TIMEOUT",
            {"timeout_s": timeout_s},
        )


class ProviderRequestException(ProviderException):
    """연결 실패 등 전송 계층 오류"""
    def __init__(self, provider: str, reason: str):
        super().__init__(provider, reason, "PROVIDER_REQUEST_ERROR", {"reason": reason})


class ParsingException(ProviderException):
    """응답(JSON/HTML) 파싱 오류"""
    def __init__(self, provider: str, reason: str):
        super().__init__(
            provider,
            f"Failed to parse response: {reason}",
            "PARSING_ERROR",
            {"reason": reason},
        )


class SearchExhaustedException(SchoolSearchException):
    """모든 제공자 시도 실패

    Args:
        attempts: (provider, exception) 순서 목록
        duration_ms: 요청 전체 소요 시간
    """
    def __init__(self, attempts: list[tuple[str, Exception]], duration_ms: Optional[float] = None):
        self.attempts = attempts
        self.duration_ms = duration_ms
        last_error = attempts[-1][1] if attempts else None
        message = str(getattr(last_error, "message", last_error)) if last_error else "no providers available"
        super().__init__(
            message,
            "SEARCH_FAILED",
            {"attempts": [{"provider": p, "error": str(e)} for p, e in attempts]},
        )

    @property
    def status_code(self) -> int:
        """마지막 시도의 업스트림 HTTP 상태 (없으면 500)"""
        if not self.attempts:
            return 500
        status = getattr(self.attempts[-1][1], "status_code", None)
        return status if isinstance(status, int) and status >= 400 else 500


# 유효성 검증 관련 예외
class ValidationException(SchoolSearchException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class InvalidQueryException(ValidationException):
    """유효하지 않은 검색어"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("q", reason, details)
