"""Extract package: contact facts, blog posts and shared layout fragments."""

from optimiser.extract.blog import BlogPost, extract_blog_posts, slugify
from optimiser.extract.facts import (
    ContactFacts,
    extract_address,
    extract_contact_facts,
    extract_emails,
    extract_phones,
    normalize_phone,
    parse_date,
    strip_contact_facts,
)
from optimiser.extract.layout import HeaderFooter, detect_common_header_footer

__all__ = [
    "BlogPost",
    "ContactFacts",
    "HeaderFooter",
    "detect_common_header_footer",
    "extract_address",
    "extract_blog_posts",
    "extract_contact_facts",
    "extract_emails",
    "extract_phones",
    "normalize_phone",
    "parse_date",
    "slugify",
    "strip_contact_facts",
]
