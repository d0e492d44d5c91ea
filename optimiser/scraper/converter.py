"""HTML → Markdown conversion.

Headings come out in ATX style (``## Title``), which is the marker the blog
segmenter keys on.  Links and lists are preserved and lines are never
wrapped, so the leading/trailing windows used for header/footer detection
stay stable between pages.
"""

from __future__ import annotations

import html2text


def _converter() -> html2text.HTML2Text:
    h2t = html2text.HTML2Text()
    h2t.ignore_links = False
    h2t.ignore_images = False
    h2t.ignore_emphasis = False
    h2t.body_width = 0  # Don't wrap lines
    return h2t


def html_to_markdown(html: str) -> str:
    """Convert *html* to Markdown; empty input gives an empty string."""
    if not html.strip():
        return ""
    return _converter().handle(html).strip()
