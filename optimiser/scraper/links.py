"""Same-origin link discovery and URL normalisation."""

from __future__ import annotations

from typing import List
from urllib.parse import urljoin, urlsplit, urlunsplit

from bs4 import BeautifulSoup

_DEFAULT_PORTS = {"http": 80, "https": 443}


def origin(url: str) -> tuple[str, str, int | None]:
    """Return ``(scheme, host, port)`` with the scheme's default port made explicit.

    Raises:
        ValueError: If the URL's port is not a valid number.
    """
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    port = parts.port or _DEFAULT_PORTS.get(scheme)
    return scheme, (parts.hostname or "").lower(), port


def normalize_url(url: str) -> str:
    """Canonical form used for the visited set.

    Lowercases scheme and host, drops credentials, default ports and the
    fragment, and turns an empty path into ``/``.  The query string is kept.
    """
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    host = (parts.hostname or "").lower()
    netloc = host
    if parts.port and parts.port != _DEFAULT_PORTS.get(scheme):
        netloc = f"{host}:{parts.port}"
    return urlunsplit((scheme, netloc, parts.path or "/", parts.query, ""))


def _document_base(soup: BeautifulSoup, page_url: str) -> str:
    base = soup.find("base", href=True)
    href = base.get("href") if base is not None else None
    if not isinstance(href, str) or not href.strip():
        return page_url
    try:
        return urljoin(page_url, href.strip())
    except ValueError:
        return page_url


def extract_links(html: str, page_url: str, seed_url: str) -> List[str]:
    """Return same-origin links found in the ``<a href>`` tags of *html*.

    Each href is resolved against the document base (``<base href>`` when
    present, otherwise *page_url*) and normalised; hrefs that cannot be
    parsed are dropped.  The result is deduplicated while
    preserving document order.
    """
    seed_origin = origin(seed_url)
    soup = BeautifulSoup(html, "html.parser")
    base_url = _document_base(soup, page_url)
    seen: set[str] = set()
    links: List[str] = []

    for tag in soup.find_all("a", href=True):
        href = tag.get("href")
        if not isinstance(href, str) or not href.strip():
            continue
        try:
            absolute = urljoin(base_url, href.strip())
            if urlsplit(absolute).scheme not in _DEFAULT_PORTS:
                continue
            if origin(absolute) != seed_origin:
                continue
            link = normalize_url(absolute)
        except ValueError:
            continue
        if link not in seen:
            seen.add(link)
            links.append(link)

    return links
