"""
URL normalization for LinkScout.

The normalized key of a page is ``host + pathname`` without one trailing
slash. Scheme, query string and fragment are not part of the key, so::

    normalize_url("https://blog.example.dev/path/")   # "blog.example.dev/path"
    normalize_url("http://blog.example.dev/path?x=1") # "blog.example.dev/path"
"""
from __future__ import annotations

import posixpath
from typing import Dict, Final
from urllib.parse import SplitResult, quote, urlsplit

from link_scout.crawler.errors import MalformedURL

__all__ = ("normalize_url", "url_host")

_DEFAULT_PORTS: Final[Dict[str, int]] = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}
# characters left as-is in a path; everything else is percent-encoded
_PATH_SAFE: Final[str] = "/%:@!$&'()*+,;=-._~"


def _split(url: str) -> SplitResult:
    try:
        parts = urlsplit(url.strip())
    except ValueError as exc:
        raise MalformedURL(url, str(exc)) from exc
    if not parts.scheme or not parts.hostname:
        raise MalformedURL(url)
    return parts


def _host(parts: SplitResult, url: str) -> str:
    hostname = parts.hostname or ""
    if ":" in hostname:
        hostname = f"[{hostname}]"
    try:
        port = parts.port
    except ValueError as exc:
        raise MalformedURL(url, str(exc)) from exc
    if port is None or port == _DEFAULT_PORTS.get(parts.scheme):
        return hostname
    return f"{hostname}:{port}"


def _pathname(path: str) -> str:
    if not path:
        return "/"
    norm = posixpath.normpath(path)
    if path.endswith("/") and not norm.endswith("/"):
        norm += "/"
    return quote(norm, safe=_PATH_SAFE)


def url_host(url: str) -> str:
    """Return the lower-cased host of *url*, with the port unless it is the scheme default."""
    return _host(_split(url), url)


def normalize_url(url: str) -> str:
    """Return the de-duplication key of *url*.

    Raises :class:`MalformedURL` when *url* is not an absolute URL.
    """
    parts = _split(url)
    key = _host(parts, url) + _pathname(parts.path)
    if key.endswith("/"):
        key = key[:-1]
    return key
