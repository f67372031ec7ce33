"""DuckDuckGo HTML 스크래핑 제공자 (자격 증명 불필요)"""

from __future__ import annotations

from typing import List, Optional

from src.core.config import settings
from src.core.exceptions import ParsingException
from src.core.logging import logger
from src.crawlers.boundary.html_parsing import parse_duckduckgo_results
from src.crawlers.http_client import ScrapeHttpClient
from src.engine.result import SearchResultItem


DUCKDUCKGO_HTML_URL = "https://html.duckduckgo.com/html/"


class DuckDuckGoScrapeProvider:
    name = "duckduckgo"
    kind = "scrape"

    def __init__(self, http_client: ScrapeHttpClient, timeout_s: Optional[float] = None):
        self.http = http_client
        self.timeout_s = timeout_s or settings.scrape_provider_timeout_s

    def is_configured(self) -> bool:
        return True

    async def search(self, query: str, top_k: int) -> List[SearchResultItem]:
        html = await self.http.get_text(
            DUCKDUCKGO_HTML_URL,
            provider=self.name,
            timeout_s=self.timeout_s,
            params={"q": query},
        )
        try:
            items = parse_duckduckgo_results(html, top_k)
        except Exception as e:
            raise ParsingException(self.name, f"{type(e).__name__}: {e}") from e

        if not items:
            logger.warning(f"[PROVIDER] duckduckgo: no result blocks found (html length={len(html)})")
        return items
