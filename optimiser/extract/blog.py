"""Split a blog listing page's Markdown into discrete posts."""

from __future__ import annotations

import re
from dataclasses import dataclass

from optimiser.extract.facts import parse_date

_HEADING_PREFIX = "## "
_SLUG_MAX = 60
_EXCERPT_MAX = 300
_ELLIPSIS = "..."

_IMAGE_RE = re.compile(r"!\[[^\]]*\]\(\s*([^)\s]+)[^)]*\)")
_READ_MORE_RE = re.compile(r"read more", re.IGNORECASE)


@dataclass
class BlogPost:
    title: str
    excerpt: str
    slug: str
    date: str | None = None
    hero_image: str | None = None

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "slug": self.slug,
            "date": self.date,
            "excerpt": self.excerpt,
            "heroImage": self.hero_image,
        }


def slugify(text: str) -> str:
    """Return a lowercase kebab-case slug of at most 60 characters."""
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    return slug[:_SLUG_MAX].rstrip("-")


def truncate_excerpt(text: str, limit: int = _EXCERPT_MAX) -> str:
    """Trim *text*; if still longer than *limit*, cut it so the ellipsis fits."""
    text = text.strip()
    if len(text) > limit:
        return text[: limit - len(_ELLIPSIS)] + _ELLIPSIS
    return text


def _unique_slug(title: str, used: set[str]) -> str:
    base = slugify(title)
    slug = base
    counter = 1
    while slug in used:
        counter += 1
        slug = f"{base}-{counter}"
    used.add(slug)
    return slug


def _nearby_date(lines: list[str], index: int) -> str | None:
    for j in range(max(0, index - 1), min(len(lines), index + 2)):
        found = parse_date(lines[j])
        if found:
            return found
    return None


def _finalise(post: BlogPost, body: list[str]) -> BlogPost:
    post.excerpt = truncate_excerpt("\n".join(body))
    return post


def extract_blog_posts(markdown: str) -> tuple[list[BlogPost], str]:
    """Segment *markdown* into posts at each second-level heading.

    Returns:
        ``(posts, clean_body)`` where *clean_body* holds the lines that come
        before the first heading.
    """
    lines = markdown.split("\n")
    posts: list[BlogPost] = []
    clean_body: list[str] = []
    used_slugs: set[str] = set()

    current: BlogPost | None = None
    body: list[str] = []

    for i, line in enumerate(lines):
        if line.startswith(_HEADING_PREFIX):
            if current is not None:
                posts.append(_finalise(current, body))
            title = line[len(_HEADING_PREFIX):].strip()
            current = BlogPost(
                title=title,
                excerpt="",
                slug=_unique_slug(title, used_slugs),
                date=_nearby_date(lines, i),
            )
            body = []
            continue

        if current is None:
            clean_body.append(line)
            continue

        if _READ_MORE_RE.search(line):
            continue

        image = _IMAGE_RE.search(line)
        if image and current.hero_image is None:
            current.hero_image = image.group(1)
            line = _IMAGE_RE.sub("", line, count=1).strip()
            if not line:
                continue

        body.append(line)

    if current is not None:
        posts.append(_finalise(current, body))

    return posts, "\n".join(clean_body)
