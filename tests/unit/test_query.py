"""검색어 정규화/부스팅/캐시 키 테스트"""
import pytest

from src.core.exceptions import InvalidQueryException
from src.engine.query import (
    build_cache_key,
    build_school_boosted_query,
    build_topic_query,
    normalize_query,
    parse_top_k,
    require_query,
)


def test_normalize_query_trims():
    assert normalize_query("  becas  ") == "becas"
    assert normalize_query(None) == ""


@pytest.mark.parametrize("raw", ["", "   ", None, "\t\n"])
def test_require_query_rejects_empty(raw):
    with pytest.raises(InvalidQueryException):
        require_query(raw)


def test_school_boosted_query_layout():
    boosted = build_school_boosted_query("becas")
    assert boosted.startswith("becas (site:sep.gob.mx OR site:gob.mx/sep OR site:.edu.mx")
    assert "site:tec.mx) (escuela OR colegio" in boosted
    assert boosted.endswith("calendario escolar OR inscripciones)")


def test_school_boosted_query_is_deterministic():
    assert build_school_boosted_query("prepa") == build_school_boosted_query("prepa")
    assert build_cache_key("schools", 3, build_school_boosted_query("prepa")) == build_cache_key(
        "schools", 3, build_school_boosted_query("prepa")
    )


def test_cache_key_includes_limit():
    boosted = build_school_boosted_query("becas")
    assert build_cache_key("schools", 3, boosted) != build_cache_key("schools", 5, boosted)
    assert build_cache_key("schools", 3, boosted) == f"schools:3:{boosted}"


def test_topic_query():
    assert build_topic_query("clima") == "clima"
    assert build_topic_query("clima", "news").endswith("site:reuters.com")
    assert "site:arxiv.org" in build_topic_query("redes", "academic")
    with pytest.raises(InvalidQueryException):
        build_topic_query("x", "videos")


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 5),
        ("", 5),
        ("abc", 5),
        ("3", 3),
        ("3abc", 3),
        (" 7 ", 7),
        ("0", 1),
        ("-4", 1),
        ("500", 20),
    ],
)
def test_parse_top_k(raw, expected):
    assert parse_top_k(raw, default=5, maximum=20) == expected
