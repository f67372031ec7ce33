"""검색 제공자 모듈 (API + HTML 스크래핑).

공개 API는 이 파일에서만 export합니다.
"""

from .http_client import ApiHttpClient, ScrapeHttpClient
from .provider import SearchProvider
from .providers import (
    BingApiSearchProvider,
    BingScrapeProvider,
    BraveSearchProvider,
    DuckDuckGoScrapeProvider,
)

__all__ = [
        "ApiHttpClient",
        "ScrapeHttpClient",
        "SearchProvider",
        "BraveSearchProvider",
        "BingApiSearchProvider",
        "DuckDuckGoScrapeProvider",
        "BingScrapeProvider",
]
