# File: site_harvest/crawler/__init__.py
"""site_harvest.crawler: обход сайта с ограничением глубины."""

from .crawler import SiteCrawler, dedupe_seeds
from .fetcher import HttpTransport, Transport
from .link_extractor import extract_links
from .models import CrawlTask, PageData, TaskState
from .urls import canonicalize, resolve, same_domain
from .visited import ClaimRegistry, VisitedSet

__all__ = [
    "SiteCrawler",
    "dedupe_seeds",
    "HttpTransport",
    "Transport",
    "extract_links",
    "CrawlTask",
    "PageData",
    "TaskState",
    "canonicalize",
    "resolve",
    "same_domain",
    "ClaimRegistry",
    "VisitedSet",
]
