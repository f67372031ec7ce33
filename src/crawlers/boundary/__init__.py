"""검색 결과 HTML 파싱 (네트워크와 분리)."""

from .html_parsing import (
    normalize_href,
    parse_bing_results,
    parse_duckduckgo_results,
    unwrap_duckduckgo_redirect,
)

__all__ = [
    "normalize_href",
    "parse_bing_results",
    "parse_duckduckgo_results",
    "unwrap_duckduckgo_redirect",
]
