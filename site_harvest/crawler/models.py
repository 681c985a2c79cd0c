# site_harvest/crawler/models.py
"""
Data models for the SiteHarvest crawler.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(slots=True)
class PageData:
    """Result of a completed HTTP exchange: final URL, status code and body text."""

    url: str
    status: int
    content: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


@dataclass(frozen=True, slots=True)
class CrawlTask:
    """One page to process; seeds have depth 0, every hop adds 1."""

    url: str
    depth: int

    def child(self, url: str) -> CrawlTask:
        return CrawlTask(url, self.depth + 1)


class TaskState(str, Enum):
    """Outcome of a task that reached the fetch; skipped tasks are only counted."""

    FAILED = "failed"
    DONE = "done"
