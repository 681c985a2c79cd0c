# File: site_harvest/engine.py
"""site_harvest.engine: Orchestration layer для подготовки каталога вывода и запуска обхода."""

from __future__ import annotations

import asyncio
from typing import Optional

from site_harvest.aggregator import CrawlReport
from site_harvest.config import CrawlerConfig
from site_harvest.crawler.crawler import SiteCrawler
from site_harvest.crawler.fetcher import HttpTransport, Transport
from site_harvest.logger import logger
from site_harvest.storage.bucketer import ContentBucketer, prepare_output_dir

__all__ = ["Engine", "start_crawl"]


async def start_crawl(config: CrawlerConfig, transport: Optional[Transport] = None) -> CrawlReport:
    """
    Пересоздаёт каталог вывода и выполняет обход.

    Parameters
    ----------
    config : CrawlerConfig
        Конфигурация обхода.
    transport : Transport, optional
        Готовый транспорт; по умолчанию открывается HttpTransport на aiohttp.

    Returns
    -------
    CrawlReport
        Сводка по запрошенным страницам и бакетам.
    """
    output_dir = prepare_output_dir(config.output_dir)
    logger.info("Output directory ready: %s", output_dir)
    bucketer = ContentBucketer(output_dir)

    if transport is not None:
        return await SiteCrawler(config, transport, bucketer=bucketer).crawl()

    async with HttpTransport(config) as http:
        return await SiteCrawler(config, http, bucketer=bucketer).crawl()


class Engine:
    """Синхронный фасад: запуск обхода и сводка."""

    def __init__(self, config: CrawlerConfig, transport: Optional[Transport] = None) -> None:
        self.config = config
        self.transport = transport

    def run(self) -> CrawlReport:
        """Синхронно запускает обход и возвращает отчёт."""
        logger.info("Starting crawl…")
        try:
            return asyncio.run(start_crawl(self.config, self.transport))
        except Exception as exc:
            logger.error("Crawl failed: %s", exc)
            raise
