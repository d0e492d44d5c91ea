"""Tests for blog post segmentation."""

from __future__ import annotations

from optimiser.extract.blog import extract_blog_posts, slugify, truncate_excerpt

_LISTING = """\
# Our blog

Latest thoughts from the team.

March 3rd, 2024
## Launching our new site
We rebuilt everything from scratch.
[Read more](/blog/launch)

## Hiring update
Jan 5 2023
![Team photo](https://cdn.example.com/team.jpg)
We are growing.
Read More →
"""


class TestSlugify:
    def test_kebab_case(self) -> None:
        assert slugify("Hello, World! 2024") == "hello-world-2024"

    def test_trims_separators(self) -> None:
        assert slugify("  --Already  sluggy--  ") == "already-sluggy"

    def test_max_length(self) -> None:
        slug = slugify("word " * 40)
        assert len(slug) <= 60
        assert not slug.endswith("-")


class TestTruncateExcerpt:
    def test_long_excerpt_cut_to_300_with_ellipsis(self) -> None:
        text = "x" * 310
        out = truncate_excerpt(text)
        assert len(out) == 300
        assert out.endswith("...")

    def test_exactly_300_untouched(self) -> None:
        text = "y" * 300
        assert truncate_excerpt(text) == text

    def test_trims_whitespace(self) -> None:
        assert truncate_excerpt("\n  body \n") == "body"


class TestExtractBlogPosts:
    def test_segments_posts(self) -> None:
        posts, _ = extract_blog_posts(_LISTING)
        assert [p.title for p in posts] == ["Launching our new site", "Hiring update"]
        assert [p.slug for p in posts] == ["launching-our-new-site", "hiring-update"]

    def test_clean_body_is_text_before_first_heading(self) -> None:
        _, clean_body = extract_blog_posts(_LISTING)
        assert "# Our blog" in clean_body
        assert "Latest thoughts" in clean_body
        assert "Launching" not in clean_body

    def test_date_from_line_before_or_after_heading(self) -> None:
        posts, _ = extract_blog_posts(_LISTING)
        assert posts[0].date == "2024-03-03"
        assert posts[1].date == "2023-01-05"

    def test_read_more_lines_skipped(self) -> None:
        posts, _ = extract_blog_posts(_LISTING)
        assert posts[0].excerpt == "We rebuilt everything from scratch."
        assert "Read More" not in posts[1].excerpt

    def test_hero_image(self) -> None:
        posts, _ = extract_blog_posts(_LISTING)
        assert posts[0].hero_image is None
        assert posts[1].hero_image == "https://cdn.example.com/team.jpg"
        assert "![" not in posts[1].excerpt

    def test_text_beside_hero_image_kept(self) -> None:
        md = "## Studio tour\n![Studio](/img/studio.png) A look around our new workshop."
        posts, _ = extract_blog_posts(md)
        assert posts[0].hero_image == "/img/studio.png"
        assert posts[0].excerpt == "A look around our new workshop."

    def test_duplicate_titles_get_numbered_slugs(self) -> None:
        md = "## Update\nfirst\n## Update\nsecond\n## Update\nthird"
        posts, _ = extract_blog_posts(md)
        assert [p.slug for p in posts] == ["update", "update-2", "update-3"]

    def test_excerpt_truncated(self) -> None:
        md = "## Long one\n" + "z" * 310
        posts, _ = extract_blog_posts(md)
        assert len(posts[0].excerpt) == 300
        assert posts[0].excerpt.endswith("...")

    def test_no_headings(self) -> None:
        posts, clean_body = extract_blog_posts("just text\nmore text")
        assert posts == []
        assert clean_body == "just text\nmore text"

    def test_to_dict(self) -> None:
        posts, _ = extract_blog_posts("## Title\nBody")
        assert posts[0].to_dict() == {
            "title": "Title",
            "slug": "title",
            "date": None,
            "excerpt": "Body",
            "heroImage": None,
        }
