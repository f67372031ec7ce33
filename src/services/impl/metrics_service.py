"""인메모리 메트릭 수집기

연산 이름별 호출 수/누적 시간/마지막 시간을 누적합니다.
히스토그램, 백분위, 윈도우 없음 (프로세스 시작 이후 누적).
"""
from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from threading import RLock
from typing import Dict, Iterator


@dataclass
class MetricSample:
    calls: int = 0
    total_ms: float = 0.0
    last_ms: float = 0.0


class MetricsService:
    """연산별 소요 시간 수집기"""

    SUM_FAMILY = "app_request_duration_ms_sum"
    COUNT_FAMILY = "app_request_duration_ms_count"

    def __init__(self) -> None:
        self._lock = RLock()
        self._store: Dict[str, MetricSample] = {}

    def observe_duration(self, name: str, duration_ms: float) -> None:
        key = str(name)
        with self._lock:
            sample = self._store.setdefault(key, MetricSample())
            sample.calls += 1
            sample.total_ms += duration_ms
            sample.last_ms = duration_ms

    @contextmanager
    def timer(self, name: str) -> Iterator[None]:
        """블록 실행 시간을 observe_duration으로 기록"""
        started = time.perf_counter()
        try:
            yield
        finally:
            self.observe_duration(name, (time.perf_counter() - started) * 1000)

    def get_summary(self) -> dict[str, dict[str, float]]:
        """이름별 {calls, total_ms, avg_ms, last_ms} (소수 둘째 자리 반올림)"""
        with self._lock:
            return {
                key: {
                    "calls": s.calls,
                    "total_ms": round(s.total_ms, 2),
                    "avg_ms": round(s.total_ms / max(1, s.calls), 2),
                    "last_ms": round(s.last_ms, 2),
                }
                for key, s in self._store.items()
            }

    def to_exposition_text(self) -> str:
        """Prometheus 텍스트 형식 (counter 두 계열)"""
        lines = [
            f"# HELP {self.SUM_FAMILY} Sum of durations per key in ms",
            f"# TYPE {self.SUM_FAMILY} counter",
            f"# HELP {self.COUNT_FAMILY} Call count per key",
            f"# TYPE {self.COUNT_FAMILY} counter",
        ]
        with self._lock:
            for key, s in self._store.items():
                label = 'key="{}"'.format(key.replace('"', '\\"'))
                lines.append(f"{self.SUM_FAMILY}{{{label}}} {s.total_ms:.2f}")
                lines.append(f"{self.COUNT_FAMILY}{{{label}}} {s.calls}")
        return "\n".join(lines) + "\n"

    def reset(self) -> None:
        """누적 상태 초기화 (테스트 격리용)"""
        with self._lock:
            self._store.clear()
