"""메트릭 서비스 유닛 테스트"""
import pytest

from src.services import MetricsService


@pytest.fixture
def metrics() -> MetricsService:
    return MetricsService()


def test_observe_accumulates(metrics):
    durations = [10.0, 20.5, 3.333]
    for d in durations:
        metrics.observe_duration("x", d)

    summary = metrics.get_summary()["x"]
    assert summary["calls"] == 3
    assert summary["total_ms"] == pytest.approx(sum(durations), abs=0.01)
    assert summary["last_ms"] == pytest.approx(3.33, abs=0.01)
    assert summary["avg_ms"] == pytest.approx(sum(durations) / 3, abs=0.01)


def test_summary_rounds_to_two_decimals(metrics):
    metrics.observe_duration("y", 1.23456)
    assert metrics.get_summary()["y"] == {
        "calls": 1,
        "total_ms": 1.23,
        "avg_ms": 1.23,
        "last_ms": 1.23,
    }


def test_exposition_text_format(metrics):
    metrics.observe_duration("api_schools_search", 12.5)
    metrics.observe_duration("api_schools_search", 7.5)
    metrics.observe_duration('we"ird', 1)

    text = metrics.to_exposition_text()
    lines = text.splitlines()

    assert text.endswith("\n")
    assert "# TYPE app_request_duration_ms_sum counter" in lines
    assert "# TYPE app_request_duration_ms_count counter" in lines
    assert 'app_request_duration_ms_sum{key="api_schools_search"} 20.00' in lines
    assert 'app_request_duration_ms_count{key="api_schools_search"} 2' in lines
    assert 'app_request_duration_ms_count{key="we\\"ird"} 1' in lines


def test_exposition_text_without_samples(metrics):
    lines = metrics.to_exposition_text().splitlines()
    assert len(lines) == 4
    assert all(line.startswith("#") for line in lines)


def test_timer_records_block(metrics):
    with metrics.timer("block"):
        pass
    assert metrics.get_summary()["block"]["calls"] == 1


def test_reset(metrics):
    metrics.observe_duration("x", 1)
    metrics.reset()
    assert metrics.get_summary() == {}
