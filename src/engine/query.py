"""Query Builder - 검색어 정규화 및 도메인 부스팅

부스팅 결과는 입력이 같으면 항상 같으며, 캐시 키의 일부로 그대로 사용됩니다.
"""

from typing import Any, Optional

from src.core.exceptions import InvalidQueryException


# 멕시코 공교육/학교/대학 도메인
SCHOOL_DOMAINS = (
    "site:sep.gob.mx",
    "site:gob.mx/sep",
    "site:.edu.mx",
    "site:.gob.mx",
    "site:unam.mx",
    "site:ipn.mx",
    "site:uab.mx",
    "site:uady.mx",
    "site:uam.mx",
    "site:tec.mx",
)

SCHOOL_KEYWORDS = (
    "escuela",
    "colegio",
    "universidad",
    "bachillerato",
    "preparatoria",
    "becas",
    "calendario escolar",
    "inscripciones",
)

# 주제별 웹 검색 사이트 제한
TOPIC_SITE_FILTERS = {
    "general": "",
    "news": "site:news.google.com OR site:bbc.com OR site:cnn.com OR site:reuters.com",
    "academic": "site:scholar.google.com OR site:arxiv.org OR site:researchgate.net",
}

SCHOOLS_CACHE_NAMESPACE = "schools"


def normalize_query(raw: Any) -> str:
    """검색어 정규화 (앞뒤 공백 제거)"""
    if raw is None:
        return ""
    return str(raw).strip()


def require_query(raw: Any) -> str:
    """정규화 후 비어 있으면 InvalidQueryException"""
    query = normalize_query(raw)
    if not query:
        raise InvalidQueryException("query must not be empty")
    return query


def build_school_boosted_query(query: str) -> str:
    """학교/교육 도메인과 키워드를 OR로 묶어 덧붙인 검색어"""
    domains = " OR ".join(SCHOOL_DOMAINS)
    keywords = " OR ".join(SCHOOL_KEYWORDS)
    return f"{query} ({domains}) ({keywords})"


def build_topic_query(query: str, topic: str = "general") -> str:
    if topic not in TOPIC_SITE_FILTERS:
        raise InvalidQueryException(f"unknown topic '{topic}'", {"field": "topic", "topic": topic})
    suffix = TOPIC_SITE_FILTERS[topic]
    return f"{query} {suffix}" if suffix else query


def build_cache_key(namespace: str, top_k: int, boosted_query: str) -> str:
    return f"{namespace}:{top_k}:{boosted_query}"


def parse_top_k(raw: Optional[Any], default: int = 5, maximum: int = 20) -> int:
    """k 파라미터 해석

    - 없거나 숫자로 시작하지 않으면 default
    - 앞쪽 정수 부분만 사용 ("3abc" -> 3)
    - 결과는 [1, maximum] 범위로 제한
    """
    if raw is None:
        return default

    text = str(raw).strip()
    sign = ""
    if text[:1] in ("+", "-"):
        sign, text = text[0], text[1:]

    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch

    if not digits:
        return default

    value = int(sign + digits)
    return max(1, min(value, maximum))
