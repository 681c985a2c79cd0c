# File: tests/test_link_extractor.py
import logging

from site_harvest.crawler.link_extractor import extract_links
from site_harvest.parser.html_parser import parse_document

BASE = "https://site.example/y"


def test_domain_filtering():
    doc = parse_document(
        '<a href="https://other.example/x">ext</a>'
        '<a href="https://site.example/z">int</a>'
    )
    assert extract_links(doc, BASE) == ["https://site.example/z"]


def test_sorted_unique_and_fragment_free():
    doc = parse_document(
        """
        <nav>
          <a href="/b#top">B top</a>
          <a href="/a">A</a>
          <a href="/b">B</a>
          <a href="https://site.example/a#footer">A again</a>
        </nav>
        """
    )
    assert extract_links(doc, BASE) == ["https://site.example/a", "https://site.example/b"]


def test_extraction_is_idempotent():
    html = '<a href="/c">c</a><a href="/a">a</a><a href="/b">b</a><a href="/a">a</a>'
    first = extract_links(parse_document(html), BASE)
    second = extract_links(parse_document(html), BASE)
    assert first == second == sorted(first)


def test_only_anchors_with_href():
    doc = parse_document(
        '<a name="anchor">no href</a>'
        '<link rel="stylesheet" href="/style.css">'
        '<a href="/page">page</a>'
    )
    assert extract_links(doc, BASE) == ["https://site.example/page"]


def test_non_web_schemes_are_dropped():
    doc = parse_document(
        '<a href="mailto:me@site.example">mail</a>'
        '<a href="javascript:void(0)">js</a>'
        '<a href="/ok">ok</a>'
    )
    assert extract_links(doc, BASE) == ["https://site.example/ok"]


def test_malformed_links_are_logged_and_skipped(caplog, propagate_logs):
    doc = parse_document('<a href="http://[::1/broken">bad</a><a href="/good">good</a>')
    with caplog.at_level(logging.WARNING):
        links = extract_links(doc, BASE)
    assert links == ["https://site.example/good"]
    assert any("http://[::1/broken" in r.getMessage() for r in caplog.records)


def test_page_without_links():
    assert extract_links(parse_document("<main>leaf</main>"), BASE) == []
