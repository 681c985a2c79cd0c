# File: tests/test_report.py
import json

from site_harvest.aggregator import CrawlReport
from site_harvest.crawler.models import CrawlTask, TaskState
from site_harvest.report import render_html, render_json


def build_report() -> CrawlReport:
    report = CrawlReport(seeds=["https://x.test/"], max_depth=2, duration=0.5)
    report.add_page(CrawlTask("https://x.test/", 0), TaskState.DONE, status=200, bucket="x.test", links=2)
    report.add_page(CrawlTask("https://x.test/a", 1), TaskState.DONE, status=200, bucket=None, links=0)
    report.add_page(CrawlTask("https://x.test/<b>", 1), TaskState.FAILED, error="timed out")
    report.add_skip("visited")
    report.add_skip("visited")
    return report


def test_summary_counts():
    report = build_report()
    assert report.fetched_urls == ["https://x.test/", "https://x.test/a", "https://x.test/<b>"]
    assert report.failed_urls == ["https://x.test/<b>"]
    assert report.buckets == ["x.test"]
    assert report.summary() == {
        "pages": 3,
        "failed": 1,
        "buckets": 1,
        "skipped": {"depth": 0, "visited": 2},
        "duration": 0.5,
    }


def test_json_roundtrip_fields():
    data = json.loads(build_report().json(pretty=True))
    assert data["seeds"] == ["https://x.test/"]
    assert data["pages"][2] == {
        "url": "https://x.test/<b>",
        "depth": 1,
        "state": "failed",
        "status": None,
        "bucket": None,
        "links": 0,
        "error": "timed out",
    }
    assert "error" not in data["pages"][0]


def test_render_json(tmp_path):
    path = render_json(build_report(), tmp_path / "out" / "report.json")
    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8"))["summary"]["pages"] == 3


def test_render_html_escapes_urls(tmp_path):
    path = render_html(build_report(), tmp_path / "report.html")
    html = path.read_text(encoding="utf-8")
    assert "https://x.test/&lt;b&gt;" in html
    assert "<b>" not in html.split("<body>", 1)[1].replace("<br>", "")
    assert 'class="failed"' in html


def test_render_html_custom_template(tmp_path):
    templates = tmp_path / "tpl"
    templates.mkdir()
    (templates / "report.html.j2").write_text(
        "{% for p in pages %}{{ p.url }};{% endfor %}", encoding="utf-8"
    )
    path = render_html(build_report(), tmp_path / "custom.html", templates)
    assert path.read_text(encoding="utf-8").startswith("https://x.test/;https://x.test/a;")
