"""URL-based page-type classification.

Rules are evaluated in priority order and the first match wins, so a URL
such as ``/about/contact`` is an ``about`` page.  Matching is a
case-insensitive regex search over the whole URL string; page content is
never consulted.
"""

from __future__ import annotations

import re
from enum import Enum


class PageType(str, Enum):
    ABOUT = "about"
    CONTACT = "contact"
    SERVICES = "services"
    FAQ = "faq"
    PORTFOLIO = "portfolio"
    BLOG = "blog"
    HOME = "home"


# Ordered highest priority first.
RULES: tuple[tuple[re.Pattern[str], PageType], ...] = (
    (re.compile(r"about|team|management|leadership|company", re.IGNORECASE), PageType.ABOUT),
    (re.compile(r"contact|support|help|inquiries", re.IGNORECASE), PageType.CONTACT),
    (re.compile(r"service|solution|what-we-do", re.IGNORECASE), PageType.SERVICES),
    (re.compile(r"faq|questions|help-center", re.IGNORECASE), PageType.FAQ),
    (re.compile(r"portfolio|work|projects|case-studies", re.IGNORECASE), PageType.PORTFOLIO),
    (re.compile(r"blog|news|articles|posts", re.IGNORECASE), PageType.BLOG),
)

PRIORITY: tuple[PageType, ...] = tuple(label for _, label in RULES)

# Page types every site is expected to have.
MANDATORY_TYPES: frozenset[PageType] = frozenset({PageType.ABOUT, PageType.CONTACT})


def classify(url: str, seed_url: str | None = None) -> PageType | None:
    """Return the page type for *url*, or ``None`` when it is unclassified.

    Args:
        url: Absolute page URL.
        seed_url: The run's seed.  A URL that matches no rule is the
            ``home`` page only when it is exactly this string.
    """
    for pattern, label in RULES:
        if pattern.search(url):
            return label
    if seed_url is not None and url == seed_url:
        return PageType.HOME
    return None
