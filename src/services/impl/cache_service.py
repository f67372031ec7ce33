"""인메모리 TTL 캐시 서비스 - 캐싱 로직만 담당

- 만료는 get 시점에 지연 처리합니다 (백그라운드 sweep 없음).
- 용량 초과 시 가장 먼저 '삽입된' 항목 하나를 제거합니다.
  접근 순서는 고려하지 않으므로 LRU가 아닙니다.
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from threading import RLock
from typing import Any, Callable, Dict, Optional

from src.core.logging import logger


def _now_ms() -> float:
    return time.time() * 1000


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    expires_at: float


class CacheService:
    """프로세스 수명 동안 유지되는 TTL 캐시"""

    def __init__(
        self,
        max_entries: int = 500,
        default_ttl_ms: int = 15 * 60 * 1000,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Args:
            max_entries: 최대 항목 수
            default_ttl_ms: 기본 TTL (밀리초)
            clock: 현재 시각(밀리초)을 반환하는 함수 (테스트용 주입)
        """
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        if default_ttl_ms <= 0:
            raise ValueError("default_ttl_ms must be positive")

        self.max_entries = int(max_entries)
        self.default_ttl_ms = int(default_ttl_ms)
        self._clock = clock or _now_ms
        self._lock = RLock()
        self._data: Dict[str, CacheEntry] = {}

    def get(self, key: Any) -> Optional[Any]:
        """
        캐시 조회

        Args:
            key: 캐시 키 (문자열로 변환됨)

        Returns:
            저장된 값 또는 None (미스/만료)
        """
        k = str(key)
        with self._lock:
            entry = self._data.get(k)
            if entry is None:
                return None
            if entry.expires_at <= self._clock():
                self._data.pop(k, None)
                logger.debug(f"[CACHE] expired: {k[:80]}")
                return None
            return entry.value

    def set(self, key: Any, value: Any, ttl_ms: Optional[int] = None) -> None:
        """
        캐시 저장

        Args:
            key: 캐시 키
            value: 저장할 값
            ttl_ms: TTL 오버라이드 (None이면 기본 TTL)
        """
        k = str(key)
        ttl = self.default_ttl_ms if ttl_ms is None else ttl_ms
        with self._lock:
            self._data[k] = CacheEntry(value=value, expires_at=self._clock() + ttl)
            if len(self._data) > self.max_entries:
                oldest = next(iter(self._data))
                self._data.pop(oldest, None)
                logger.debug(f"[CACHE] evicted oldest entry: {oldest[:80]}")

    def delete(self, key: Any) -> None:
        with self._lock:
            self._data.pop(str(key), None)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def keys(self) -> list[str]:
        """삽입 순서대로 키 목록 반환 (만료 항목 포함)"""
        with self._lock:
            return list(self._data)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: Any) -> bool:
        with self._lock:
            return str(key) in self._data
