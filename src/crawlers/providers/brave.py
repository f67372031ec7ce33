"""Brave Search API 제공자"""

from __future__ import annotations

from typing import Any, List, Optional

from src.core.config import settings
from src.core.exceptions import MissingCredentialException, ParsingException
from src.core.logging import logger
from src.crawlers.http_client import ApiHttpClient
from src.engine.result import SearchResultItem


BRAVE_SEARCH_URL = "https://api.search.brave.com/res/v1/web/search"
BRAVE_MAX_COUNT = 20


class BraveSearchProvider:
    """Brave Web Search API (우선순위 1, 키가 설정된 경우)"""

    name = "brave"
    kind = "api"

    def __init__(
        self,
        http_client: ApiHttpClient,
        api_key: Optional[str] = None,
        timeout_s: Optional[float] = None,
    ):
        self.http = http_client
        self.api_key = api_key
        self.timeout_s = timeout_s or settings.api_provider_timeout_s

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def search(self, query: str, top_k: int) -> List[SearchResultItem]:
        if not self.api_key:
            raise MissingCredentialException(self.name, "BRAVE_API_KEY")

        params = {
            "q": query,
            "count": str(min(top_k, BRAVE_MAX_COUNT)),
            "search_lang": "es",
            "ui_lang": "es",
            "country": "mx",
            "safesearch": "moderate",
        }
        data = await self.http.get_json(
            BRAVE_SEARCH_URL,
            provider=self.name,
            timeout_s=self.timeout_s,
            params=params,
            headers={"X-Subscription-Token": self.api_key},
        )
        items = self._normalize(data)[:top_k]
        logger.debug(f"[PROVIDER] brave returned {len(items)} items")
        return items

    def _normalize(self, data: Any) -> List[SearchResultItem]:
        if not isinstance(data, dict):
            raise ParsingException(self.name, "response body is not an object")

        raw_results = (data.get("web") or {}).get("results") or []
        items: List[SearchResultItem] = []
        for r in raw_results:
            if not isinstance(r, dict) or not r.get("url"):
                continue
            items.append(
                SearchResultItem(
                    title=r.get("title") or r["url"],
                    url=r["url"],
                    snippet=r.get("description") or "",
                    source="brave",
                    score=r.get("rank") or 0,
                )
            )
        return items
