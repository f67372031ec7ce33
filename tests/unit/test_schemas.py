"""Pydantic 스키마 검증 테스트"""
import pytest
from pydantic import ValidationError

from src.core.config import Settings
from src.schemas.search_schema import SchoolSearchResponse, WebSearchRequest


def test_school_search_response_uses_camel_case_alias():
    response = SchoolSearchResponse.model_validate(
        {
            "query": "becas",
            "boostedQuery": "becas (site:sep.gob.mx)",
            "results": [{"title": "t", "url": "https://a.mx", "snippet": "", "source": "brave", "score": 0}],
            "duration_ms": 1.5,
            "cache": "miss",
        }
    )
    dumped = response.model_dump(by_alias=True)
    assert dumped["boostedQuery"] == "becas (site:sep.gob.mx)"
    assert dumped["results"][0]["source"] == "brave"


def test_web_search_request_defaults():
    request = WebSearchRequest.model_validate({"query": "  clima  "})
    assert request.query == "clima"
    assert request.max_results == 10


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"query": ""},
        {"query": "   "},
        {"query": "x", "maxResults": 0},
        {"query": "x", "maxResults": 51},
    ],
)
def test_web_search_request_invalid(payload):
    with pytest.raises(ValidationError):
        WebSearchRequest.model_validate(payload)


def test_settings_blank_keys_are_missing():
    s = Settings(_env_file=None, brave_api_key="   ", bing_api_key="abc ")
    assert s.brave_api_key is None
    assert s.bing_api_key == "abc"


@pytest.mark.parametrize("field", ["cache_ttl_ms", "cache_max_entries", "api_provider_timeout_s"])
def test_settings_reject_non_positive(field):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: 0})


def test_settings_cors_origin_list():
    s = Settings(_env_file=None, cors_origins="http://localhost:3000, http://localhost:8081")
    assert s.cors_origin_list == ["http://localhost:3000", "http://localhost:8081"]
