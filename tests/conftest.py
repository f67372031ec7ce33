"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Fake 제공자/시계 주입
- 외부 네트워크 호출 금지
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# 설정 모듈 import 전에 자격 증명 제거 (로컬 .env/환경 변수 영향 차단)
os.environ["ENVIRONMENT"] = "test"
os.environ["BRAVE_API_KEY"] = ""
os.environ["BING_API_KEY"] = ""

from src.core.config import Settings  # noqa: E402
from src.engine.result import SearchResultItem  # noqa: E402
from tests.fixtures.api_payloads import BING_RESPONSE, BRAVE_RESPONSE  # noqa: E402
from tests.fixtures.html_pages import (  # noqa: E402
    BING_RESULTS_HTML,
    DUCKDUCKGO_EMPTY_HTML,
    DUCKDUCKGO_RESULTS_HTML,
)


class FakeProvider:
    """오케스트레이터 테스트용 제공자

    - 호출 기록 (query, top_k)
    - error가 있으면 항상 raise
    """

    def __init__(
        self,
        name: str,
        kind: str = "scrape",
        configured: bool = True,
        items: Optional[Sequence[SearchResultItem]] = None,
        error: Optional[Exception] = None,
    ):
        self.name = name
        self.kind = kind
        self.configured = configured
        self.items = list(items or [])
        self.error = error
        self.calls: list[tuple[str, int]] = []

    def is_configured(self) -> bool:
        return self.configured

    async def search(self, query: str, top_k: int) -> list[SearchResultItem]:
        self.calls.append((query, top_k))
        if self.error:
            raise self.error
        return self.items[:top_k]


class FakeClock:
    """밀리초 단위 수동 시계"""

    def __init__(self, start_ms: float = 1_000_000.0):
        self.now_ms = start_ms

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms


def make_items(source: str, count: int) -> list[SearchResultItem]:
    return [
        SearchResultItem(
            title=f"{source} result {i}",
            url=f"https://example.edu.mx/{source}/{i}",
            snippet=f"snippet {i}",
            source=source,
            score=0,
        )
        for i in range(1, count + 1)
    ]


@pytest.fixture
def fake_provider() -> Callable[..., FakeProvider]:
    return FakeProvider


@pytest.fixture
def items_factory() -> Callable[[str, int], list[SearchResultItem]]:
    return make_items


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def test_settings() -> Settings:
    """자격 증명 없는 기본 설정"""
    return Settings(_env_file=None, brave_api_key=None, bing_api_key=None)


@pytest.fixture
def duckduckgo_html() -> str:
    return DUCKDUCKGO_RESULTS_HTML


@pytest.fixture
def duckduckgo_empty_html() -> str:
    return DUCKDUCKGO_EMPTY_HTML


@pytest.fixture
def bing_html() -> str:
    return BING_RESULTS_HTML


@pytest.fixture
def brave_payload() -> dict:
    return BRAVE_RESPONSE


@pytest.fixture
def bing_payload() -> dict:
    return BING_RESPONSE
