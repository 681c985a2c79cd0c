# File: tests/conftest.py
import asyncio
from pathlib import Path
from typing import Dict, List, Union

import pytest

from site_harvest.config import CrawlerConfig
from site_harvest.crawler.models import PageData
from site_harvest.logger import get_logger

PageSpec = Union[str, tuple, Exception]


class FakeTransport:
    """
    In-memory transport: maps URL -> body, (status, body) or an exception.
    Unknown URLs answer 404. Records every call and the peak number of
    concurrent fetches.
    """

    def __init__(self, pages: Dict[str, PageSpec], delay: float = 0.0) -> None:
        self.pages = pages
        self.delay = delay
        self.calls: List[str] = []
        self.in_flight = 0
        self.peak_in_flight = 0

    async def fetch(self, url: str) -> PageData:
        self.calls.append(url)
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            entry = self.pages.get(url)
            if entry is None:
                return PageData(url, 404, "Not Found")
            if isinstance(entry, Exception):
                raise entry
            if isinstance(entry, tuple):
                status, body = entry
                return PageData(url, status, body)
            return PageData(url, 200, entry)
        finally:
            self.in_flight -= 1


@pytest.fixture()
def fake_transport():
    """Factory for FakeTransport instances."""
    return FakeTransport


@pytest.fixture()
def output_dir(tmp_path) -> Path:
    return tmp_path / "crawled_pages"


@pytest.fixture()
def make_config(output_dir):
    """
    Build a CrawlerConfig writing into the per-test output directory.
    """

    def _make(start_urls, **kwargs) -> CrawlerConfig:
        kwargs.setdefault("output_dir", output_dir)
        kwargs.setdefault("timeout", 2.0)
        return CrawlerConfig(start_urls=list(start_urls), **kwargs)

    return _make


@pytest.fixture()
def propagate_logs():
    """Let caplog see records of the project logger (it does not propagate by default)."""
    root = get_logger()
    root.propagate = True
    yield
    root.propagate = False
