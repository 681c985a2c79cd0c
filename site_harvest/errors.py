# site_harvest/errors.py
"""
Exception hierarchy for SiteHarvest.
"""
from __future__ import annotations


class SiteHarvestError(Exception):
    """Base class for all errors raised by the package."""


class NormalizationError(SiteHarvestError, ValueError):
    """Link text is not a valid URL or relative reference."""

    def __init__(self, href: str, reason: str) -> None:
        super().__init__(f"cannot resolve link {href!r}: {reason}")
        self.href = href
        self.reason = reason


class TransportError(SiteHarvestError):
    """The HTTP exchange did not complete (connection error, timeout, bad payload)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


__all__ = ["SiteHarvestError", "NormalizationError", "TransportError"]
