"""link_scout.crawler: URL normalization, link extraction, fetching and the crawl engine."""

from link_scout.crawler.crawler import AsyncCrawler, crawl_page
from link_scout.crawler.errors import MalformedURL
from link_scout.crawler.link_extractor import extract_links
from link_scout.crawler.normalizer import normalize_url

__all__ = ["AsyncCrawler", "MalformedURL", "crawl_page", "extract_links", "normalize_url"]
