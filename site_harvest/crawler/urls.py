# site_harvest/crawler/urls.py
"""
URL resolution and comparison helpers used by the link extractor and the crawler.

Canonical form of an address is its absolute string with the fragment removed;
two addresses are the same page iff their canonical strings are equal.
"""
from __future__ import annotations

from typing import Optional
from urllib.parse import urljoin, urlsplit, urlunsplit

from site_harvest.errors import NormalizationError

__all__ = ("canonicalize", "resolve", "host_of", "same_domain")

_WEB_SCHEMES = ("http", "https")


def canonicalize(url: str) -> str:
    """Return *url* without its fragment."""
    parts = urlsplit(url)
    return urlunsplit(parts._replace(fragment=""))


def resolve(base: str, href: str) -> str:
    """
    Resolve *href* against *base* and drop the fragment.

    Raises NormalizationError when the result is not a usable URL
    (broken authority, non-numeric or out-of-range port, http(s) without host).
    """
    raw = href.strip()
    try:
        parts = urlsplit(urljoin(base, raw))
        parts.port  # validates the port component
    except ValueError as exc:
        raise NormalizationError(href, str(exc)) from exc
    if parts.scheme in _WEB_SCHEMES and not parts.hostname:
        raise NormalizationError(href, "missing host")
    return urlunsplit(parts._replace(fragment=""))


def host_of(url: str) -> Optional[str]:
    """Lowercased host of *url* without port or credentials, None if absent."""
    try:
        return urlsplit(url).hostname
    except ValueError:
        return None


def same_domain(a: str, b: str) -> bool:
    """True when both addresses carry a host and the hosts are equal."""
    host_a = host_of(a)
    return host_a is not None and host_a == host_of(b)
