from selectolax.parser import HTMLParser

from src.crawlers.boundary.html_parsing import (
    normalize_href,
    parse_bing_results,
    parse_duckduckgo_results,
    unwrap_duckduckgo_redirect,
)


def test_normalize_href():
    assert normalize_href("//duckduckgo.com/l/?uddg=x") == "https://duckduckgo.com/l/?uddg=x"
    assert normalize_href("/l/?kh=-1") == "https://duckduckgo.com/l/?kh=-1"
    assert normalize_href("https://a.mx") == "https://a.mx"
    assert normalize_href("  ") == ""


def test_unwrap_duckduckgo_redirect():
    assert (
        unwrap_duckduckgo_redirect("/l/?kh=-1&uddg=https%3A%2F%2Fwww.sep.gob.mx%2F")
        == "https://www.sep.gob.mx/"
    )
    assert (
        unwrap_duckduckgo_redirect("//duckduckgo.com/l/?uddg=https%3A%2F%2Funam.mx&rut=1")
        == "https://unam.mx"
    )
    # uddg 없으면 원래 값 유지
    assert unwrap_duckduckgo_redirect("/l/?kh=-1") == "/l/?kh=-1"
    assert unwrap_duckduckgo_redirect("https://ipn.mx/") == "https://ipn.mx/"


def test_parse_duckduckgo_results(duckduckgo_html):
    items = parse_duckduckgo_results(duckduckgo_html, top_k=10)

    assert [i.url for i in items] == [
        "https://www.gob.mx/sep/becas",
        "https://www.unam.mx/becas?a=1",
        "https://www.ipn.mx/becas/",
        "https://www.tec.mx/becas",
    ]
    first = items[0]
    assert first.title == "Becas SEP 2024"
    assert first.snippet == "Convocatorias de becas para estudiantes de educación básica."
    assert first.source == "duckduckgo"
    assert first.score == 0

    # a.result__a 가 없으면 첫 a[href] 사용
    assert items[3].title == "Tec de Monterrey becas"
    assert items[3].snippet == ""


def test_parse_duckduckgo_stops_at_top_k(duckduckgo_html):
    items = parse_duckduckgo_results(duckduckgo_html, top_k=2)
    assert len(items) == 2


def test_parse_duckduckgo_without_blocks(duckduckgo_empty_html):
    assert parse_duckduckgo_results(duckduckgo_empty_html, top_k=5) == []
    assert parse_duckduckgo_results("", top_k=5) == []


def test_parse_bing_results(bing_html):
    items = parse_bing_results(bing_html, top_k=10)

    assert [i.url for i in items] == [
        "https://www.sep.gob.mx/calendario",
        "https://www.uam.mx/inscripciones",
        "https://www.uady.mx/",
    ]
    assert items[0].title == "Calendario escolar SEP"
    assert items[0].snippet == "Consulta el calendario escolar oficial."
    assert all(i.source == "bing" for i in items)
    assert items[2].snippet == ""


def test_parse_bing_stops_at_top_k(bing_html):
    assert len(parse_bing_results(bing_html, top_k=1)) == 1
    assert parse_bing_results(bing_html, top_k=0) == []


def test_installed_selectolax_ships_modest_parser():
    import selectolax

    major = int(selectolax.__version__.split(".")[0])
    assert major < 1
    assert HTMLParser("<p>ok</p>").css_first("p").text() == "ok"
