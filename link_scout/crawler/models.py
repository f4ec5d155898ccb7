"""
Data models for the LinkScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union

#: normalized key -> number of references seen during the crawl
VisitTable = Dict[str, int]


@dataclass(slots=True, frozen=True)
class PageFetched:
    """HTML page downloaded successfully."""

    url: str
    html: str


@dataclass(slots=True, frozen=True)
class HTTPErrorStatus:
    """Server answered with a status code of 400 or above."""

    url: str
    status: int


@dataclass(slots=True, frozen=True)
class UnsupportedContentType:
    """Response body is not HTML."""

    url: str
    content_type: str


@dataclass(slots=True, frozen=True)
class TransportFailure:
    """Network error, timeout or unreadable response."""

    url: str
    reason: str


FetchOutcome = Union[PageFetched, HTTPErrorStatus, UnsupportedContentType, TransportFailure]
