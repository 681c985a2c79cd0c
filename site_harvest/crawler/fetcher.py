# site_harvest/crawler/fetcher.py
"""
Fetcher module: the HTTP transport used by the crawler.

The transport only performs the exchange. Status interpretation, logging of
failures and the decision not to retry belong to the crawler.
"""
from __future__ import annotations

import asyncio
from typing import Optional, Protocol

from aiohttp import ClientError, ClientSession, ClientTimeout

from site_harvest.config import CrawlerConfig
from site_harvest.crawler.models import PageData
from site_harvest.errors import TransportError


class Transport(Protocol):
    """Given a URL, return the status code and body text, or raise TransportError."""

    async def fetch(self, url: str) -> PageData:
        ...


class HttpTransport:
    """aiohttp-backed transport with a per-request timeout and a fixed User-Agent."""

    def __init__(self, config: CrawlerConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> HttpTransport:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, url: str) -> PageData:
        """
        GET *url* and return PageData with the response status and decoded body.

        Any client-side failure (connection, timeout, undecodable body) is
        reported as TransportError.
        """
        if not self.session:
            raise RuntimeError("Session not initialized")
        try:
            async with self.session.get(url) as resp:
                text = await resp.text(errors="replace")
                return PageData(url, resp.status, text)
        except asyncio.TimeoutError as exc:
            raise TransportError(url, f"timed out after {self.config.timeout}s") from exc
        except ClientError as exc:
            raise TransportError(url, str(exc) or type(exc).__name__) from exc


__all__ = ["Transport", "HttpTransport"]
