# File: tests/conftest.py
from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Dict, List

import pytest
from aiohttp import web

from link_scout.crawler.models import FetchOutcome, HTTPErrorStatus, PageFetched
from link_scout.logger import LOGGER_NAME


class FakeFetcher:
    """In-memory transport: URL -> outcome, records every requested URL."""

    def __init__(self, pages: Dict[str, FetchOutcome]) -> None:
        self.pages = pages
        self.calls: List[str] = []

    async def fetch(self, url: str) -> FetchOutcome:
        self.calls.append(url)
        return self.pages.get(url, HTTPErrorStatus(url, 404))


def html_page(url: str, *hrefs: str) -> PageFetched:
    """Build a PageFetched whose body links to *hrefs* in order."""
    body = "".join(f'<a href="{h}">{h}</a>' for h in hrefs)
    return PageFetched(url, f"<html><body>{body}</body></html>")


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


@pytest.fixture(autouse=True)
def reset_logger():
    """Undo handlers installed by the CLI so tests do not leak into each other."""
    yield
    lg = logging.getLogger(LOGGER_NAME)
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()
    lg.setLevel(logging.NOTSET)
    lg.propagate = True
