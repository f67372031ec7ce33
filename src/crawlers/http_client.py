"""공유 HTTP 클라이언트

- ScrapeHttpClient (curl_cffi): 브라우저 TLS 지문을 흉내 내는 HTML 스크래핑용 세션
- ApiHttpClient (httpx): JSON API 제공자용 비동기 클라이언트

요청마다 세션을 만들면 TLS/커넥션 오버헤드가 커지므로 프로세스 단위로 재사용하고,
앱 종료 시 close()로 정리합니다.
오류는 삼키지 않고 제공자 예외로 변환해 그대로 올립니다.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional

import httpx
from curl_cffi import CurlECode, CurlError
from curl_cffi.requests import AsyncSession
from curl_cffi.requests.exceptions import Timeout as CurlTimeout

from src.core.config import settings
from src.core.exceptions import (
    NetworkTimeoutException,
    ParsingException,
    ProviderHTTPException,
    ProviderRequestException,
)
from src.core.logging import logger


def _is_timeout(exc: Exception) -> bool:
    if isinstance(exc, (CurlTimeout, asyncio.TimeoutError)):
        return True
    return isinstance(exc, CurlError) and exc.code == CurlECode.OPERATION_TIMEDOUT


class ScrapeHttpClient:
    def __init__(
        self,
        *,
        user_agent: Optional[str] = None,
        impersonate: Optional[str] = None,
        max_clients: Optional[int] = None,
    ) -> None:
        self._lock = asyncio.Lock()
        self._session: Optional[AsyncSession] = None
        self._user_agent = user_agent or settings.scrape_user_agent
        self._impersonate = impersonate or settings.scrape_impersonate
        self._max_clients = max_clients or settings.scrape_max_clients

    async def _ensure_session(self) -> AsyncSession:
        async with self._lock:
            if self._session is not None:
                return self._session
            self._session = AsyncSession(
                impersonate=self._impersonate,
                headers=self.default_headers(),
                allow_redirects=True,
                max_clients=self._max_clients,
                trust_env=False,
            )
            return self._session

    def default_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self._user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "es-MX,es;q=0.9,en-US;q=0.8,en;q=0.7",
        }

    async def get_text(
        self,
        url: str,
        *,
        provider: str,
        timeout_s: float,
        params: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> str:
        """GET 후 본문 텍스트 반환

        Raises:
            ProviderHTTPException: 2xx가 아닌 응답
            NetworkTimeoutException: 타임아웃
            ProviderRequestException: 그 외 전송 오류
        """
        sess = await self._ensure_session()
        try:
            resp = await sess.get(
                url,
                params=params,
                headers=headers,
                timeout=timeout_s,
            )
        except Exception as e:
            logger.info(f"[HTTP_CLIENT] GET failed ({provider}): {type(e).__name__}: {e!r}")
            if _is_timeout(e):
                raise NetworkTimeoutException(provider, timeout_s) from e
            raise ProviderRequestException(provider, f"{type(e).__name__}: {e}") from e

        status = getattr(resp, "status_code", 0) or 0
        if status < 200 or status >= 300:
            raise ProviderHTTPException(provider, status, {"url": url})
        return getattr(resp, "text", "") or ""

    async def close(self) -> None:
        async with self._lock:
            if self._session is None:
                return
            try:
                await self._session.close()
            except Exception as e:
                logger.warning(f"[HTTP_CLIENT] scrape session close failed: {e!r}")
            self._session = None


class ApiHttpClient:
    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self._lock = asyncio.Lock()
        self._client: Optional[httpx.AsyncClient] = None
        self._transport = transport

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._lock:
            if self._client is None:
                self._client = httpx.AsyncClient(
                    transport=self._transport,
                    headers={"Accept": "application/json"},
                    follow_redirects=True,
                )
            return self._client

    async def get_json(
        self,
        url: str,
        *,
        provider: str,
        timeout_s: float,
        params: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """GET 후 JSON 디코딩 결과 반환

        Raises:
            ProviderHTTPException: 2xx가 아닌 응답
            NetworkTimeoutException: 타임아웃
            ProviderRequestException: 그 외 전송 오류
            ParsingException: JSON 디코딩 실패
        """
        client = await self._ensure_client()
        try:
            resp = await client.get(url, params=params, headers=headers, timeout=timeout_s)
        except httpx.TimeoutException as e:
            logger.info(f"[HTTP_CLIENT] GET timeout ({provider}): {e!r}")
            raise NetworkTimeoutException(provider, timeout_s) from e
        except httpx.HTTPError as e:
            logger.info(f"[HTTP_CLIENT] GET failed ({provider}): {type(e).__name__}: {e!r}")
            raise ProviderRequestException(provider, f"{type(e).__name__}: {e}") from e

        if not resp.is_success:
            raise ProviderHTTPException(provider, resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            raise ParsingException(provider, f"invalid JSON body: {e}") from e

    async def close(self) -> None:
        async with self._lock:
            if self._client is None:
                return
            await self._client.aclose()
            self._client = None
