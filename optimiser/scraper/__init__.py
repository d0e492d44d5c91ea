"""Scraper package: page fetch, link discovery & Markdown conversion."""

from optimiser.scraper.converter import html_to_markdown
from optimiser.scraper.fetcher import fetch_page
from optimiser.scraper.links import extract_links, normalize_url
from optimiser.scraper.models import CrawlResult, CrawlTask, PageRecord

__all__ = [
    "fetch_page",
    "html_to_markdown",
    "extract_links",
    "normalize_url",
    "CrawlResult",
    "CrawlTask",
    "PageRecord",
]
