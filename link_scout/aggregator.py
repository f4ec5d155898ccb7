# File: link_scout/aggregator.py
"""link_scout.aggregator: turns a visit table into a sorted crawl report."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import List, Mapping, TypedDict


class PageCount(TypedDict):
    """One row of the report: normalized page key and its reference count."""

    url: str
    count: int


@dataclass(slots=True)
class CrawlReport:
    """Crawl result ready for printing or rendering."""

    base_url: str
    pages: List[PageCount] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    @property
    def total_references(self) -> int:
        return sum(p["count"] for p in self.pages)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["total_pages"] = self.total_pages
        data["total_references"] = self.total_references
        return data

    def json(self, *, pretty: bool = False) -> str:
        """Return the JSON representation of the report."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def build_report(base_url: str, visited: Mapping[str, int]) -> CrawlReport:
    """Sort pages by count (highest first), ties broken by key."""
    rows = sorted(visited.items(), key=lambda item: (-item[1], item[0]))
    return CrawlReport(
        base_url=base_url,
        pages=[{"url": url, "count": count} for url, count in rows],
    )


__all__ = ["PageCount", "CrawlReport", "build_report"]
