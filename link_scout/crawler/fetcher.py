# link_scout/crawler/fetcher.py
"""
Fetcher module: the HTTP transport used by the crawl engine.

Every request ends in a :data:`~link_scout.crawler.models.FetchOutcome`;
network problems are reported as :class:`TransportFailure` values instead of
exceptions so that one broken page never stops the rest of the crawl.
"""
from __future__ import annotations

import asyncio
from typing import Protocol

from aiohttp import ClientError, ClientSession

from link_scout.crawler.models import (
    FetchOutcome,
    HTTPErrorStatus,
    PageFetched,
    TransportFailure,
    UnsupportedContentType,
)

__all__ = ("Fetcher", "PageSource")

_HTML_TYPE = "text/html"


class PageSource(Protocol):
    """Anything able to turn a URL into a fetch outcome."""

    async def fetch(self, url: str) -> FetchOutcome: ...


class Fetcher:
    """Handles HTTP fetching over a shared aiohttp session."""

    def __init__(self, session: ClientSession, *, follow_redirects: bool = True) -> None:
        self.session = session
        self.follow_redirects = follow_redirects

    async def fetch(self, url: str) -> FetchOutcome:
        """
        GET *url* and classify the response.

        Returns PageFetched for HTML, HTTPErrorStatus for status >= 400,
        UnsupportedContentType for any other body, TransportFailure when
        the request itself fails.
        """
        try:
            async with self.session.get(
                url, allow_redirects=self.follow_redirects, raise_for_status=False
            ) as resp:
                if resp.status >= 400:
                    return HTTPErrorStatus(url, resp.status)
                ctype = resp.headers.get("Content-Type", "")
                if _HTML_TYPE not in ctype.lower():
                    return UnsupportedContentType(url, ctype)
                text = await resp.text(errors="replace")
                return PageFetched(url, text)
        except asyncio.TimeoutError:
            return TransportFailure(url, "request timed out")
        except ClientError as exc:
            return TransportFailure(url, f"{type(exc).__name__}: {exc}")
