"""Breadth-first same-origin crawl with per-page-type depth limits.

The crawler owns its queue, visited set and result map; nothing is shared
between runs.  A URL is marked visited *before* it is fetched so the same
page can never be queued twice while its fetch is in flight.
"""

from __future__ import annotations

import logging
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Deque

from optimiser.classifier import PageType, classify
from optimiser.config import settings
from optimiser.scraper.fetcher import fetch_page
from optimiser.scraper.links import extract_links, normalize_url
from optimiser.scraper.models import CrawlResult, CrawlTask, PageRecord

logger = logging.getLogger(__name__)

FetchFn = Callable[[str], PageRecord]


class CrawlError(RuntimeError):
    """Run-level failure: the crawl could not produce anything useful."""


class Crawler:
    """Crawl a single site starting from *seed_url*.

    Args:
        seed_url: Where the crawl starts; also defines the allowed origin.
        fetch: ``url -> PageRecord`` callable whose record holds the URL the
            page was finally served from.  Any exception it raises is
            logged and the page is skipped.
        max_depth: Default depth ceiling (``settings.crawl_max_depth``).
        blog_max_depth: Ceiling for blog pages, never above *max_depth*.
        workers: Pages fetched concurrently; ``1`` keeps strict BFS order.
        max_pages: Stop after this many pages were fetched (``0`` = no limit).
    """

    def __init__(
        self,
        seed_url: str,
        fetch: FetchFn | None = None,
        max_depth: int | None = None,
        blog_max_depth: int | None = None,
        workers: int | None = None,
        max_pages: int | None = None,
    ) -> None:
        self.seed_url = normalize_url(seed_url)
        self.fetch = fetch or fetch_page
        self.max_depth = settings.crawl_max_depth if max_depth is None else max_depth
        self.blog_max_depth = (
            settings.blog_max_depth if blog_max_depth is None else blog_max_depth
        )
        self.workers = max(1, settings.crawl_workers if workers is None else workers)
        self.max_pages = settings.crawl_max_pages if max_pages is None else max_pages

        self.visited: set[str] = set()
        self.queue: Deque[CrawlTask] = deque([CrawlTask(self.seed_url, 0)])
        self.result = CrawlResult(seed_url=self.seed_url)

    # ------------------------------------------------------------------
    # Depth policy
    # ------------------------------------------------------------------

    def effective_max_depth(self, url: str) -> int:
        if classify(url, self.seed_url) is PageType.BLOG:
            return min(self.max_depth, self.blog_max_depth)
        return self.max_depth

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _full(self) -> bool:
        return bool(self.max_pages) and len(self.result.pages) >= self.max_pages

    def _next_batch(self) -> list[CrawlTask]:
        """Dequeue up to ``workers`` runnable tasks, marking each visited."""
        batch: list[CrawlTask] = []
        while self.queue and len(batch) < self.workers:
            task = self.queue.popleft()
            if task.url in self.visited:
                continue
            if task.depth > self.effective_max_depth(task.url):
                continue
            self.visited.add(task.url)
            batch.append(task)
        return batch

    def _handle(self, task: CrawlTask, page: PageRecord) -> None:
        self.result.pages[task.url] = page.html
        logger.info("Fetched %s (depth %d)", task.url, task.depth)

        # A redirect target is the same page; never fetch it again.
        final_url = normalize_url(page.url)
        if final_url != task.url:
            logger.debug("%s was served from %s", task.url, final_url)
            self.visited.add(final_url)

        if task.depth >= self.effective_max_depth(task.url):
            return
        links = extract_links(page.html, page.url, self.seed_url)
        fresh = [link for link in links if link not in self.visited]
        logger.debug("Queueing %d link(s) from %s at depth %d", len(fresh), task.url, task.depth + 1)
        self.queue.extend(CrawlTask(link, task.depth + 1) for link in fresh)

    def _fail(self, task: CrawlTask, exc: Exception) -> None:
        if task.depth == 0:
            raise CrawlError(f"Seed {task.url} could not be fetched: {exc}") from exc
        logger.warning("Error fetching %s: %s", task.url, exc)
        self.result.failed[task.url] = str(exc)

    def _fetch_one(self, task: CrawlTask) -> tuple[PageRecord | None, Exception | None]:
        try:
            return self.fetch(task.url), None
        except Exception as exc:  # noqa: BLE001
            return None, exc

    def run(self) -> CrawlResult:
        """Crawl until the queue is empty and return the collected pages.

        Raises:
            CrawlError: If the seed URL itself cannot be fetched.
        """
        logger.info(
            "Starting crawl at %s with max depth %d (%d worker(s))",
            self.seed_url, self.max_depth, self.workers,
        )

        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            while self.queue and not self._full():
                batch = self._next_batch()
                if not batch:
                    continue
                outcomes = list(pool.map(self._fetch_one, batch))
                for task, (page, exc) in zip(batch, outcomes):
                    if exc is not None:
                        self._fail(task, exc)
                    elif not self._full():
                        self._handle(task, page)

        logger.info(
            "Crawl complete: %d page(s), %d failure(s)",
            len(self.result.pages), len(self.result.failed),
        )
        return self.result


def crawl(seed_url: str, fetch: FetchFn | None = None, **options) -> CrawlResult:
    """Convenience wrapper: ``Crawler(seed_url, fetch, **options).run()``."""
    return Crawler(seed_url, fetch=fetch, **options).run()
