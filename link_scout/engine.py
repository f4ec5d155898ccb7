# File: link_scout/engine.py
"""link_scout.engine: entry point that runs one crawl and returns the visit table."""

from __future__ import annotations

from typing import Optional

from link_scout.config import CrawlerConfig
from link_scout.crawler.crawler import AsyncCrawler
from link_scout.crawler.errors import MalformedURL
from link_scout.crawler.models import VisitTable
from link_scout.logger import logger

__all__ = ["start_crawl"]


async def start_crawl(base_url: str, config: Optional[CrawlerConfig] = None) -> VisitTable:
    """Crawl every page on the host of *base_url* and return the visit table."""
    config = config or CrawlerConfig()
    logger.info("Starting crawl…")
    try:
        async with AsyncCrawler(config, base_url) as crawler:
            return await crawler.crawl()
    except MalformedURL:
        raise
    except Exception as exc:
        logger.error("Crawl failed: %s", exc)
        raise
