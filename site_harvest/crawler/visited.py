# site_harvest/crawler/visited.py
"""
Shared record of claimed addresses for one crawl run.
"""
from __future__ import annotations

import threading
from typing import FrozenSet, Protocol, Set, runtime_checkable


@runtime_checkable
class ClaimRegistry(Protocol):
    """Anything the crawler can ask to claim an address exactly once."""

    def try_claim(self, url: str) -> bool:
        ...


class VisitedSet:
    """
    Lock-guarded set of canonical URLs.

    ``try_claim`` is a test-and-set: the membership check and the insertion
    happen under the same lock, so only one caller can win a given URL.
    The lock is never held while awaiting I/O.
    """

    def __init__(self) -> None:
        self._urls: Set[str] = set()
        self._lock = threading.Lock()

    def try_claim(self, url: str) -> bool:
        """Return True if *url* was not claimed before; record it as claimed."""
        with self._lock:
            if url in self._urls:
                return False
            self._urls.add(url)
            return True

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._urls

    def __len__(self) -> int:
        with self._lock:
            return len(self._urls)

    def snapshot(self) -> FrozenSet[str]:
        with self._lock:
            return frozenset(self._urls)


__all__ = ["ClaimRegistry", "VisitedSet"]
