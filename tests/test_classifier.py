"""Tests for URL-based page classification."""

from __future__ import annotations

import pytest

from optimiser.classifier import MANDATORY_TYPES, PRIORITY, PageType, classify

_SEED = "https://example.com/"


class TestClassify:
    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("https://example.com/about", PageType.ABOUT),
            ("https://example.com/team", PageType.ABOUT),
            ("https://example.com/contact", PageType.CONTACT),
            ("https://example.com/support", PageType.CONTACT),
            ("https://example.com/service", PageType.SERVICES),
            ("https://example.com/faq", PageType.FAQ),
            ("https://example.com/portfolio", PageType.PORTFOLIO),
            ("https://example.com/blog", PageType.BLOG),
        ],
    )
    def test_pattern_rules(self, url: str, expected: PageType) -> None:
        assert classify(url, _SEED) is expected

    def test_seed_without_match_is_home(self) -> None:
        assert classify(_SEED, _SEED) is PageType.HOME

    def test_other_url_without_match_is_unclassified(self) -> None:
        assert classify("https://example.com/unknown", _SEED) is None

    def test_home_requires_seed(self) -> None:
        assert classify(_SEED) is None

    def test_case_insensitive(self) -> None:
        assert classify("https://example.com/About-Us", _SEED) is PageType.ABOUT
        assert classify("https://example.com/NEWS/latest", _SEED) is PageType.BLOG

    def test_first_rule_wins(self) -> None:
        # matches both "about" and "contact"
        assert classify("https://example.com/about/contact", _SEED) is PageType.ABOUT
        # "help-center" is also "help", which the contact rule sees first
        assert classify("https://example.com/help-center", _SEED) is PageType.CONTACT

    def test_seed_matching_a_rule_keeps_rule_label(self) -> None:
        seed = "https://example.com/blog"
        assert classify(seed, seed) is PageType.BLOG

    def test_deterministic(self) -> None:
        url = "https://example.com/our-work"
        assert classify(url, _SEED) is classify(url, _SEED) is PageType.PORTFOLIO


class TestRuleTable:
    def test_priority_order(self) -> None:
        assert PRIORITY == (
            PageType.ABOUT,
            PageType.CONTACT,
            PageType.SERVICES,
            PageType.FAQ,
            PageType.PORTFOLIO,
            PageType.BLOG,
        )

    def test_mandatory_types(self) -> None:
        assert MANDATORY_TYPES == {PageType.ABOUT, PageType.CONTACT}

    def test_values_are_strings(self) -> None:
        assert PageType.HOME == "home"
        assert PageType("faq") is PageType.FAQ
