"""End-to-end run: crawl → convert → classify/extract → rewrite → write.

A run is scoped to one seed URL.  Per-page problems (fetch or rewrite
errors) are logged and skipped; only run-level failures such as an
unreachable seed or an unwritable output directory propagate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import Callable, List

from optimiser.classifier import MANDATORY_TYPES, PageType, classify
from optimiser.crawler import Crawler, FetchFn
from optimiser.extract.blog import extract_blog_posts
from optimiser.extract.layout import HeaderFooter, detect_common_header_footer
from optimiser.output import OutputWriter
from optimiser.rewrite import optimise_copy
from optimiser.scraper.converter import html_to_markdown
from optimiser.scraper.fetcher import fetch_page

logger = logging.getLogger(__name__)

RewriteFn = Callable[..., str]


@dataclass
class PageOutput:
    url: str
    markdown: str
    page_type: PageType | None
    raw_path: Path
    optimised_path: Path | None = None


@dataclass
class RunSummary:
    seed_url: str
    output_root: Path
    pages: List[PageOutput] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)
    header_footer: HeaderFooter = field(default_factory=HeaderFooter)

    @property
    def page_types(self) -> set[PageType]:
        return {p.page_type for p in self.pages if p.page_type is not None}


def load_seeds(path: str | Path) -> list[str]:
    """Read seed URLs from *path*, one per line; blanks and ``#`` comments are skipped."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip() and not line.strip().startswith("#")]


def run_site(
    seed_url: str,
    *,
    tone: str | None = None,
    browser_path: str | None = None,
    max_depth: int | None = None,
    workers: int | None = None,
    output_dir: Path | None = None,
    rewrite: bool = True,
    fetch: FetchFn | None = None,
    rewriter: RewriteFn | None = None,
) -> RunSummary:
    """Crawl *seed_url* and write raw and optimised Markdown for every page.

    Args:
        seed_url: Site to process.
        tone: Optional tone passed to the rewriting model.
        browser_path: Chromium executable for rendered fetches.
        max_depth: Override ``settings.crawl_max_depth``.
        workers: Override ``settings.crawl_workers``.
        output_dir: Override ``settings.output_dir``.
        rewrite: When ``False`` only the crawl and raw output happen.
        fetch: Page fetcher, ``fetch_page`` by default.
        rewriter: Rewriting callable, ``optimise_copy`` by default.

    Raises:
        optimiser.crawler.CrawlError: If the seed cannot be fetched.
        OSError: If the output directory cannot be written.
    """
    writer = OutputWriter(seed_url, output_dir)
    writer.clear()

    crawler = Crawler(
        seed_url,
        fetch=fetch or partial(fetch_page, browser_path=browser_path),
        max_depth=max_depth,
        workers=workers,
    )
    result = crawler.run()
    seed = crawler.seed_url
    rewriter = rewriter or optimise_copy

    summary = RunSummary(seed_url=seed, output_root=writer.root, failed=dict(result.failed))
    markdowns = {rec.url: html_to_markdown(rec.html) for rec in result.records()}

    done_types: set[PageType] = set()
    for url, markdown in markdowns.items():
        page_type = classify(url, seed)
        logger.info("Processing %s (type: %s)", url, page_type.value if page_type else "unknown")

        page = PageOutput(
            url=url,
            markdown=markdown,
            page_type=page_type,
            raw_path=writer.write_raw(url, markdown),
        )
        summary.pages.append(page)

        if not rewrite or page_type is None:
            continue
        if page_type in done_types:
            logger.info("Already have a %s page, not rewriting %s", page_type.value, url)
            continue

        body, posts = markdown, None
        if page_type is PageType.BLOG:
            posts, body = extract_blog_posts(markdown)

        try:
            optimised = rewriter(body, page_type, url, tone=tone, posts=posts)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Rewriting %s failed: %s", url, exc)
            continue
        page.optimised_path = writer.write_optimised(page_type.value, optimised)
        done_types.add(page_type)

    summary.header_footer = detect_common_header_footer(list(markdowns.values()))
    if summary.header_footer.found():
        writer.write_header_footer(summary.header_footer.render())

    missing = sorted(t.value for t in MANDATORY_TYPES - summary.page_types)
    if missing:
        logger.warning("No page found for mandatory type(s): %s", ", ".join(missing))

    return summary
