"""Detect the header and footer shared by most pages of a crawl."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from optimiser.config import settings


@dataclass
class HeaderFooter:
    header: str | None = None
    footer: str | None = None

    def found(self) -> bool:
        return self.header is not None or self.footer is not None

    def render(self) -> str:
        return f"{self.header or ''}\n\n{self.footer or ''}"


def find_common_section(sections: Sequence[str], threshold: float | None = None) -> str | None:
    """Return the section that appears verbatim in at least *threshold* of *sections*."""
    if not sections:
        return None
    if threshold is None:
        threshold = settings.header_footer_threshold

    counts = Counter(s for s in sections if s)
    if not counts:
        return None
    section, count = counts.most_common(1)[0]
    return section if count / len(sections) >= threshold else None


def detect_common_header_footer(
    markdowns: Sequence[str],
    window: int | None = None,
    threshold: float | None = None,
) -> HeaderFooter:
    """Compare the leading and trailing *window* characters across *markdowns*.

    Matching is exact: a single differing character breaks agreement.
    """
    if window is None:
        window = settings.header_footer_window

    headers = [md[:window] for md in markdowns]
    footers = [md[-window:] if window else "" for md in markdowns]
    return HeaderFooter(
        header=find_common_section(headers, threshold),
        footer=find_common_section(footers, threshold),
    )
