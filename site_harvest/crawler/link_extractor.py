# site_harvest/crawler/link_extractor.py
"""
Link extraction for SiteHarvest: resolve, filter by domain, deduplicate.
"""
from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup
from bs4.element import Tag

from site_harvest.crawler.urls import resolve, same_domain
from site_harvest.errors import NormalizationError
from site_harvest.logger import get_logger

LINK_SELECTOR = "a[href]"

log = get_logger("links")


def extract_links(document: BeautifulSoup, base_url: str) -> List[str]:
    """
    Return the sorted, unique, same-domain links of *document*.

    Each href is resolved against *base_url* with its fragment removed.
    Unresolvable hrefs are logged and skipped; external links are dropped.
    """
    links: List[str] = []
    for tag in document.select(LINK_SELECTOR):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        try:
            absolute = resolve(base_url, href_val)
        except NormalizationError as exc:
            log.warning("Failed to join URL with base URL %s. Found link is %s (%s)", base_url, href_val, exc.reason)
            continue
        if same_domain(absolute, base_url):
            links.append(absolute)
        else:
            log.debug("Skip external link %s", absolute)
    return sorted(set(links))


__all__ = ["LINK_SELECTOR", "extract_links"]
