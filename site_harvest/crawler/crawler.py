# === FILE: site_harvest/crawler/crawler.py ===
"""
Bounded-depth crawler: a task queue served by a fixed pool of workers.

Each CrawlTask goes through: depth check -> claim -> fetch -> record main
content -> extract links -> enqueue children at depth + 1. ``crawl()``
returns once the queue has no outstanding tasks.
"""
from __future__ import annotations

import asyncio
import time
from typing import Iterable, List, Optional, Sequence

from site_harvest.aggregator import CrawlReport
from site_harvest.config import CrawlerConfig
from site_harvest.crawler.fetcher import Transport
from site_harvest.crawler.link_extractor import extract_links
from site_harvest.crawler.models import CrawlTask, TaskState
from site_harvest.crawler.urls import canonicalize
from site_harvest.crawler.visited import ClaimRegistry, VisitedSet
from site_harvest.errors import TransportError
from site_harvest.logger import get_logger
from site_harvest.parser.html_parser import parse_document
from site_harvest.storage.bucketer import ContentBucketer

__all__ = ("SiteCrawler", "dedupe_seeds")


def dedupe_seeds(urls: Iterable[str]) -> List[str]:
    """Drop repeated seed strings, keeping first-occurrence order."""
    return list(dict.fromkeys(urls))


class SiteCrawler:
    """Асинхронный краулер с ограничением глубины и пулом воркеров."""

    def __init__(
        self,
        config: CrawlerConfig,
        transport: Transport,
        visited: Optional[ClaimRegistry] = None,
        bucketer: Optional[ContentBucketer] = None,
    ) -> None:
        self.config = config
        self.transport = transport
        self.visited: ClaimRegistry = visited if visited is not None else VisitedSet()
        self.bucketer = bucketer if bucketer is not None else ContentBucketer(config.output_dir)
        self.concurrency: int = config.concurrency
        self.logger = get_logger("crawler")
        self.report = CrawlReport(max_depth=config.max_depth)

    async def crawl(self, seeds: Optional[Sequence[str]] = None) -> CrawlReport:
        start_urls = dedupe_seeds(seeds if seeds is not None else self.config.start_urls)
        self.report.seeds = list(start_urls)
        self.logger.info(
            "Старт обхода: %d seed(s), max_depth=%d, workers=%d",
            len(start_urls), self.config.max_depth, self.concurrency,
        )
        start = time.monotonic()
        queue: asyncio.Queue[CrawlTask] = asyncio.Queue()
        for url in start_urls:
            queue.put_nowait(CrawlTask(canonicalize(url), 0))
        workers = [asyncio.create_task(self._worker(queue)) for _ in range(self.concurrency)]
        try:
            await queue.join()
        finally:
            for w in workers:
                w.cancel()
            await asyncio.gather(*workers, return_exceptions=True)
        self.report.duration = time.monotonic() - start
        self.logger.info(
            "Завершено: %d страниц (%d ошибок) за %.2f с",
            len(self.report.pages), len(self.report.failed_urls), self.report.duration,
        )
        return self.report

    async def _worker(self, queue: asyncio.Queue[CrawlTask]) -> None:
        while True:
            task = await queue.get()
            try:
                for child in await self.process(task):
                    queue.put_nowait(child)
            except Exception:
                self.logger.exception("Unexpected error while processing %s", task.url)
                self.report.add_page(task, TaskState.FAILED, error="internal error")
            finally:
                queue.task_done()

    async def process(self, task: CrawlTask) -> List[CrawlTask]:
        """Run one task to a terminal state and return the child tasks it produced."""
        if task.depth > self.config.max_depth:
            self.report.add_skip("depth")
            return []
        if not self.visited.try_claim(task.url):
            self.report.add_skip("visited")
            return []

        self.logger.info("Crawling: %s (depth %d)", task.url, task.depth)
        try:
            page = await self.transport.fetch(task.url)
        except TransportError as exc:
            self.logger.error("Failed to fetch %s: %s", task.url, exc.reason)
            self.report.add_page(task, TaskState.FAILED, error=exc.reason)
            return []
        if not page.ok:
            self.logger.error("Failed to fetch %s: Status %s", task.url, page.status)
            self.report.add_page(task, TaskState.FAILED, status=page.status, error=f"HTTP {page.status}")
            return []

        document = parse_document(page.content)
        try:
            bucket = self.bucketer.record_document(task.url, document)
        except OSError as exc:
            # a failed write loses this page's content, not its links
            self.logger.error("Failed to save %s: %s", task.url, exc)
            bucket = None
        links: List[str] = []
        if task.depth < self.config.max_depth:
            links = extract_links(document, task.url)
            for link in links:
                self.logger.debug("Found link: %s, depth: %d", link, task.depth)
        self.report.add_page(task, TaskState.DONE, status=page.status, bucket=bucket, links=len(links))
        return [task.child(link) for link in links]
