"""HTTP fetcher with a Playwright fallback for JS-rendered pages."""

from __future__ import annotations

import logging
import threading

import httpx

from optimiser.config import settings
from optimiser.scraper.models import PageRecord

logger = logging.getLogger(__name__)

# At most one headless browser is alive at any time.
_render_lock = threading.Lock()


def _default_headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent}


def needs_rendering(html: str) -> bool:
    """Return ``True`` when a static response is too short to be a real page.

    Short bodies are usually a JavaScript shell that only fills in once a
    browser executes it.
    """
    return len(html) < settings.static_min_length


def _fetch_static(url: str) -> PageRecord:
    """GET *url* without executing scripts.

    The record carries the URL the redirects ended on, not the one requested.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
    """
    with httpx.Client(
        headers=_default_headers(),
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as client:
        response = client.get(url)
        response.raise_for_status()
        return PageRecord(url=str(response.url), html=response.text)


def _fetch_with_playwright(url: str, browser_path: str | None = None) -> PageRecord:
    """Render *url* with a headless Chromium browser and return its final URL and HTML.

    Playwright is imported lazily so tests that don't exercise the render
    path don't need a browser installed.  The browser is closed on every
    path, navigation failures included.
    """
    from playwright.sync_api import sync_playwright  # noqa: PLC0415

    with _render_lock, sync_playwright() as pw:
        browser = pw.chromium.launch(headless=True, executable_path=browser_path)
        try:
            page = browser.new_page()
            page.goto(
                url,
                timeout=int(settings.request_timeout * 1000),
                wait_until="networkidle",
            )
            return PageRecord(url=page.url, html=page.content())
        finally:
            browser.close()


def fetch_page(url: str, browser_path: str | None = None) -> PageRecord:
    """Fetch *url* and return its markup together with the final URL.

    Uses ``httpx`` first.  When the static body is shorter than
    ``settings.static_min_length`` the page is re-fetched in a headless
    browser and the rendered markup is returned instead.

    Args:
        url: Absolute URL to fetch.
        browser_path: Chromium executable to launch; ``None`` uses the
            browser bundled with Playwright (or ``settings.browser_path``).

    Raises:
        httpx.HTTPError: On network failure or an error status.
        playwright.sync_api.Error: If rendering fails.
    """
    page = _fetch_static(url)

    if needs_rendering(page.html):
        logger.info("Static body for %s is %d chars, rendering in browser", url, len(page.html))
        page = _fetch_with_playwright(url, browser_path or settings.browser_path)

    return page
