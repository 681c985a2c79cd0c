# === FILE: site_harvest/parser/html_parser.py ===
"""HTML parsing utilities for SiteHarvest.

Thin layer over BeautifulSoup so the crawler, the link extractor and the
bucketer agree on one parser backend and one notion of "main content":

* :func:`parse_document` — markup → queryable document (``.select()``).
* :func:`main_content` — the first ``<main>`` element, or ``None``.
* :func:`inner_markup` — the markup inside an element, without its own tags.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

__all__: Sequence[str] = ("PARSER_BACKEND", "parse_document", "main_content", "inner_markup")

PARSER_BACKEND = "html.parser"
MAIN_SELECTOR = "main"


def parse_document(markup: str) -> BeautifulSoup:
    """Parse *markup* into a document supporting CSS selection."""
    return BeautifulSoup(markup, PARSER_BACKEND)


def main_content(document: BeautifulSoup) -> Optional[Tag]:
    """Return the main content region (``<main>``) of *document* if present."""
    return document.select_one(MAIN_SELECTOR)


def inner_markup(element: Tag) -> str:
    """Markup of the children of *element*."""
    return element.decode_contents()
