"""Data models for the crawl pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, NamedTuple


class CrawlTask(NamedTuple):
    """A URL waiting in the crawl queue at a given link distance from the seed."""

    url: str
    depth: int


@dataclass
class PageRecord:
    """The markup fetched for a single URL.

    When produced by a fetch, ``url`` is where the page was finally served
    from, after any redirects.
    """

    url: str
    html: str


@dataclass
class CrawlResult:
    """Everything one crawl produced.

    ``pages`` keeps crawl (breadth-first) order; ``failed`` maps each URL
    that could not be fetched to the error message.
    """

    seed_url: str
    pages: Dict[str, str] = field(default_factory=dict)
    failed: Dict[str, str] = field(default_factory=dict)

    def records(self) -> list[PageRecord]:
        return [PageRecord(url=url, html=html) for url, html in self.pages.items()]
