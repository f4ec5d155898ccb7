# === FILE: link_scout/crawler/crawler.py ===
from __future__ import annotations

import logging
import time
from typing import Iterator, List, Optional

from aiohttp import ClientSession, ClientTimeout

from link_scout.config import CrawlerConfig
from link_scout.crawler.fetcher import Fetcher, PageSource
from link_scout.crawler.link_extractor import extract_links
from link_scout.crawler.models import (
    HTTPErrorStatus,
    PageFetched,
    TransportFailure,
    UnsupportedContentType,
    VisitTable,
)
from link_scout.crawler.normalizer import normalize_url, url_host

__all__ = ("AsyncCrawler", "crawl_page")

logger = logging.getLogger("LinkScout")


async def _visit(
    base_url: str,
    url: str,
    visited: VisitTable,
    fetcher: PageSource,
) -> Optional[List[str]]:
    """Count *url* and fetch it on first sight; return its links or None if not traversed."""
    if url_host(url) != url_host(base_url):
        return None

    key = normalize_url(url)
    if key in visited:
        visited[key] += 1
        return None
    visited[key] = 1

    logger.info("Actively crawling: %s", url)
    outcome = await fetcher.fetch(url)

    if isinstance(outcome, HTTPErrorStatus):
        logger.info("HTTP error, status code: %d (%s)", outcome.status, url)
        return None
    if isinstance(outcome, UnsupportedContentType):
        logger.info("Non-HTML response: %s (%s)", outcome.content_type or "<none>", url)
        return None
    if isinstance(outcome, TransportFailure):
        logger.warning("Failed %s: %s", url, outcome.reason)
        return None
    if not isinstance(outcome, PageFetched):
        raise TypeError(f"unexpected fetch outcome {outcome!r}")
    return extract_links(outcome.html, base_url)


async def crawl_page(
    base_url: str,
    current_url: str,
    visited: VisitTable,
    fetcher: PageSource,
) -> VisitTable:
    """
    Crawl *current_url* and every same-host page reachable from it, depth first.

    The table is updated in place and returned. A page already in the table
    only gets its count bumped; a new page is recorded with count 1 *before*
    it is fetched, which is what stops cycles. Children are crawled one by
    one in the order their links appear on the page, each subtree finished
    before the next sibling starts.

    Each stack entry holds the remaining links of one page, so link chains
    of any length never grow the Python call stack.
    """
    links = await _visit(base_url, current_url, visited, fetcher)
    if links is None:
        return visited

    stack: List[Iterator[str]] = [iter(links)]
    while stack:
        next_url = next(stack[-1], None)
        if next_url is None:
            stack.pop()
            continue
        children = await _visit(base_url, next_url, visited, fetcher)
        if children is not None:
            stack.append(iter(children))
    return visited


class AsyncCrawler:
    """Sequential same-host crawler owning its aiohttp session."""

    def __init__(self, config: CrawlerConfig, base_url: str) -> None:
        self.config = config
        # fail fast on a bad start URL
        normalize_url(base_url)
        self.base_url = base_url
        self.session: Optional[ClientSession] = None
        self.logger = logging.getLogger("LinkScout")

    async def __aenter__(self) -> AsyncCrawler:
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.config.timeout),
            headers={"User-Agent": self.config.user_agent},
            raise_for_status=False,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, visited: Optional[VisitTable] = None) -> VisitTable:
        if not self.session:
            raise RuntimeError("Session not initialized")
        fetcher = Fetcher(self.session, follow_redirects=self.config.follow_redirects)
        self.logger.info("Crawl started: %s", self.base_url)
        start = time.monotonic()
        pages = await crawl_page(self.base_url, self.base_url, {} if visited is None else visited, fetcher)
        duration = time.monotonic() - start
        self.logger.info("Finished: %d pages in %.2f s", len(pages), duration)
        return pages
