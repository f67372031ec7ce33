"""검색 결과 페이지 HTML 파싱 유틸.

이 모듈은 네트워크(fetch)와 분리된 순수 파싱 로직을 담습니다.
마크업 구조는 외부에서 예고 없이 바뀔 수 있는 계약이므로,
결과 블록을 찾지 못하면 빈 목록을 반환하고 판단은 호출자에게 맡깁니다.
"""

from __future__ import annotations

from typing import List, Optional
from urllib.parse import parse_qs, urlparse

from selectolax.parser import HTMLParser, Node

from src.engine.result import SearchResultItem


DUCKDUCKGO_BASE_URL = "https://duckduckgo.com"


def _clean_text(node: Optional[Node]) -> str:
    if node is None:
        return ""
    return " ".join((node.text() or "").split())


def normalize_href(href: str, base_url: str = DUCKDUCKGO_BASE_URL) -> str:
    """상대/프로토콜-상대 href를 절대 URL로 정규화합니다.

    - "//host/path" -> "https://host/path"
    - "/path" -> "{base_url}/path"
    - "http(s)://..." -> 그대로
    """
    if not href:
        return ""

    h = href.strip()
    if not h:
        return ""

    if h.startswith("//"):
        return f"https:{h}"

    if h.startswith("/"):
        return f"{base_url}{h}"

    return h


def unwrap_duckduckgo_redirect(href: str) -> str:
    """DuckDuckGo 리다이렉트 래퍼(/l/?kh=..&uddg=<target>)에서 실제 URL 복원

    uddg 파라미터가 없으면 원래 href를 그대로 반환합니다.
    """
    if not href:
        return href

    h = href.strip()
    is_wrapper = h.startswith("/l/?") or "duckduckgo.com/l/?" in h
    if not is_wrapper:
        return h

    parsed = urlparse(normalize_href(h))
    target = parse_qs(parsed.query).get("uddg")
    if target and target[0]:
        return target[0]
    return h


def parse_duckduckgo_results(html: str, top_k: int) -> List[SearchResultItem]:
    """html.duckduckgo.com 결과 페이지 파싱

    블록: div.result / 링크: a.result__a (없으면 첫 a[href]) / 요약: .result__snippet
    """
    if top_k <= 0 or not html:
        return []

    parser = HTMLParser(html)
    results: List[SearchResultItem] = []

    for block in parser.css("div.result"):
        if len(results) >= top_k:
            break

        link = block.css_first("a.result__a")
        title = _clean_text(link)
        url = link.attributes.get("href") if link is not None else None

        if not url:
            alt = block.css_first("a[href]")
            if alt is not None:
                title = title or _clean_text(alt)
                url = alt.attributes.get("href")

        if not url:
            continue

        url = unwrap_duckduckgo_redirect(url)
        snippet = _clean_text(block.css_first(".result__snippet"))
        results.append(
            SearchResultItem(
                title=title or url,
                url=url,
                snippet=snippet,
                source="duckduckgo",
                score=0,
            )
        )

    return results


def parse_bing_results(html: str, top_k: int) -> List[SearchResultItem]:
    """www.bing.com 결과 페이지 파싱

    블록: li.b_algo / 링크: h2 a / 요약: div.b_caption p
    """
    if top_k <= 0 or not html:
        return []

    parser = HTMLParser(html)
    results: List[SearchResultItem] = []

    for block in parser.css("li.b_algo"):
        if len(results) >= top_k:
            break

        link = block.css_first("h2 a")
        if link is None:
            continue
        url = link.attributes.get("href")
        if not url:
            continue

        title = _clean_text(link)
        snippet = " ".join(_clean_text(p) for p in block.css("div.b_caption p")).strip()
        results.append(
            SearchResultItem(
                title=title or url,
                url=url,
                snippet=snippet,
                source="bing",
                score=0,
            )
        )

    return results
