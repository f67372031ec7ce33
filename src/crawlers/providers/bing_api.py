"""Bing Web Search API 제공자"""

from __future__ import annotations

from typing import Any, List, Optional

from src.core.config import settings
from src.core.exceptions import MissingCredentialException, ParsingException
from src.core.logging import logger
from src.crawlers.http_client import ApiHttpClient
from src.engine.result import SearchResultItem


BING_SEARCH_URL = "https://api.bing.microsoft.com/v7.0/search"
BING_MAX_COUNT = 50


class BingApiSearchProvider:
    """Bing Web Search API v7 (우선순위 2, Brave 키가 없을 때)"""

    name = "bing_api"
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
            raise MissingCredentialException(self.name, "BING_API_KEY")

        params = {
            "q": query,
            "mkt": "es-MX",
            "count": str(min(top_k, BING_MAX_COUNT)),
            "safeSearch": "Moderate",
        }
        data = await self.http.get_json(
            BING_SEARCH_URL,
            provider=self.name,
            timeout_s=self.timeout_s,
            params=params,
            headers={"Ocp-Apim-Subscription-Key": self.api_key},
        )
        items = self._normalize(data)[:top_k]
        logger.debug(f"[PROVIDER] bing_api returned {len(items)} items")
        return items

    def _normalize(self, data: Any) -> List[SearchResultItem]:
        if not isinstance(data, dict):
            raise ParsingException(self.name, "response body is not an object")

        raw_results = (data.get("webPages") or {}).get("value") or []
        items: List[SearchResultItem] = []
        for r in raw_results:
            if not isinstance(r, dict) or not r.get("url"):
                continue
            items.append(
                SearchResultItem(
                    title=r.get("name") or r["url"],
                    url=r["url"],
                    snippet=r.get("snippet") or "",
                    source="bing",
                    score=r.get("rank") or 0,
                )
            )
        return items
