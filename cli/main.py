"""Site optimiser CLI, entry-point for all pipeline operations.

Usage:
    python cli/main.py --help

Commands:
    run       → crawl a site, write raw + optimised Markdown
    crawl     → crawl only and list what was found
    classify  → print the page type of a URL
    facts     → print contact details found in a text/Markdown file
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from optimiser.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import List, Optional

import typer

from optimiser.classifier import classify
from optimiser.config import settings
from optimiser.crawler import CrawlError

app = typer.Typer(
    name="optimiser",
    help="Crawl a website, classify its pages and rewrite their copy.",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        force=True,
    )


# ---------------------------------------------------------------------------
# Full pipeline
# ---------------------------------------------------------------------------
@app.command("run")
def run(
    url: Optional[str] = typer.Argument(None, help="Seed URL to crawl."),
    list_path: Optional[Path] = typer.Option(
        None, "--list", help="Path to a file with one seed URL per line."
    ),
    tone: Optional[str] = typer.Option(None, help="Override tone of the rewritten copy."),
    browser_path: Optional[str] = typer.Option(
        None, "--browser-path", help="Path to a Chrome/Chromium executable."
    ),
    max_depth: Optional[int] = typer.Option(None, "--max-depth", help="Link depth ceiling."),
    workers: Optional[int] = typer.Option(None, help="Pages fetched concurrently."),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", help="Output root."),
    no_rewrite: bool = typer.Option(False, "--no-rewrite", help="Skip the LLM rewriting step."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Crawl one or more sites and write raw and optimised Markdown."""
    from optimiser.pipeline import load_seeds, run_site

    _configure_logging(verbose)

    seeds: List[str] = []
    if url:
        seeds.append(url)
    if list_path is not None:
        try:
            seeds.extend(load_seeds(list_path))
        except OSError as exc:
            typer.echo(f"[run] Cannot read URL list {str(list_path)!r}: {exc}")
            raise typer.Exit(1)
    if not seeds:
        typer.echo("[run] You need to provide at least one URL or use --list.")
        raise typer.Exit(1)

    failures = 0
    for seed in seeds:
        typer.echo(f"[run] Crawling {seed!r} …")
        try:
            summary = run_site(
                seed,
                tone=tone,
                browser_path=browser_path,
                max_depth=max_depth,
                workers=workers,
                output_dir=output_dir,
                rewrite=not no_rewrite,
            )
        except (CrawlError, OSError) as exc:
            typer.echo(f"[run] Failed: {exc}")
            failures += 1
            continue

        optimised = sum(1 for p in summary.pages if p.optimised_path is not None)
        typer.echo(f"[run] Pages     : {len(summary.pages)}")
        typer.echo(f"[run] Failed    : {len(summary.failed)}")
        typer.echo(f"[run] Optimised : {optimised}")
        if summary.header_footer.found():
            typer.echo("[run] Common header/footer detected")
        typer.echo(f"[run] Output    : {summary.output_root}")

    if failures:
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Crawl only
# ---------------------------------------------------------------------------
@app.command("crawl")
def crawl_cmd(
    url: str = typer.Argument(..., help="Seed URL to crawl."),
    max_depth: Optional[int] = typer.Option(None, "--max-depth", help="Link depth ceiling."),
    browser_path: Optional[str] = typer.Option(None, "--browser-path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Crawl a site and list each page with its type and size."""
    from functools import partial

    from optimiser.crawler import crawl
    from optimiser.scraper.fetcher import fetch_page

    _configure_logging(verbose)
    typer.echo(f"[crawl] Crawling {url!r} …")
    try:
        result = crawl(url, fetch=partial(fetch_page, browser_path=browser_path), max_depth=max_depth)
    except CrawlError as exc:
        typer.echo(f"[crawl] Failed: {exc}")
        raise typer.Exit(1)

    for page_url, html in result.pages.items():
        page_type = classify(page_url, result.seed_url)
        label = page_type.value if page_type else "-"
        typer.echo(f"  [{label:<9}] {len(html):>8}  {page_url}")
    for page_url, error in result.failed.items():
        typer.echo(f"  [failed   ] {page_url}  {error}")


# ---------------------------------------------------------------------------
# Single-page helpers
# ---------------------------------------------------------------------------
@app.command("classify")
def classify_cmd(
    url: str = typer.Argument(..., help="URL to classify."),
    seed: Optional[str] = typer.Option(None, help="Seed URL of the run (enables 'home')."),
) -> None:
    """Print the page type of URL."""
    page_type = classify(url, seed)
    typer.echo(page_type.value if page_type else "unclassified")


@app.command("facts")
def facts_cmd(
    path: Path = typer.Argument(..., help="Text or Markdown file to scan."),
) -> None:
    """Print the contact details found in a file."""
    from optimiser.extract.facts import extract_contact_facts

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        typer.echo(f"[facts] Cannot read {str(path)!r}: {exc}")
        raise typer.Exit(1)

    facts = extract_contact_facts(text)
    typer.echo(f"[facts] Emails  : {', '.join(sorted(facts.emails)) or '(none)'}")
    typer.echo(f"[facts] Phones  : {', '.join(sorted(facts.phones)) or '(none)'}")
    typer.echo(f"[facts] Address : {facts.address or '(none)'}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
