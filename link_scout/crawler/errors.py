"""
Exceptions raised by the LinkScout crawler.
"""
from __future__ import annotations


class MalformedURL(ValueError):
    """The given string cannot be parsed as an absolute URL."""

    def __init__(self, url: str, reason: str = "not an absolute URL") -> None:
        super().__init__(f"Malformed URL {url!r}: {reason}")
        self.url = url
        self.reason = reason
