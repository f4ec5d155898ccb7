# link_scout/crawler/link_extractor.py
"""
Link extraction for LinkScout.
"""
from __future__ import annotations

import logging
from typing import List
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup
from bs4.element import Tag

logger = logging.getLogger("LinkScout")


def _is_candidate(href: str) -> bool:
    if href.startswith("/"):
        return True
    return urlsplit(href).scheme == "https"


def extract_links(html_body: str, base_url: str) -> List[str]:
    """
    Extract candidate URLs from the anchors of *html_body*, in document order.

    Keeps absolute ``https:`` hrefs and hrefs starting with ``/`` (resolved
    against *base_url*). Relative paths, ``mailto:``, ``javascript:`` and
    fragment-only links are dropped. The result is neither de-duplicated
    nor normalized.
    """
    soup = BeautifulSoup(html_body, "html.parser")
    links: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        raw = href_val.strip()
        try:
            if not _is_candidate(raw):
                continue
            absolute = urljoin(base_url, raw)
            parsed = urlsplit(absolute)
            # raises ValueError on a non-numeric or out-of-range port
            parsed.port
        except ValueError as exc:
            logger.debug("Skipping malformed href %r: %s", raw, exc)
            continue
        if not parsed.hostname:
            logger.debug("Skipping href without host %r", raw)
            continue
        links.append(absolute)
    return links
