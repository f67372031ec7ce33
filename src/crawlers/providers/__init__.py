"""검색 제공자 구현체 (우선순위 순)"""

from .brave import BraveSearchProvider
from .bing_api import BingApiSearchProvider
from .duckduckgo import DuckDuckGoScrapeProvider
from .bing_html import BingScrapeProvider

__all__ = [
    "BraveSearchProvider",
    "BingApiSearchProvider",
    "DuckDuckGoScrapeProvider",
    "BingScrapeProvider",
]
