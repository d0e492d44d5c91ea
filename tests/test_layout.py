"""Tests for common header/footer detection."""

from __future__ import annotations

from optimiser.extract.layout import HeaderFooter, detect_common_header_footer, find_common_section

_NAV = "[Home](/) [About](/about) [Contact](/contact) " * 10  # > 250 chars
_FOOTER = "\n\n© 2024 Acme Inc. All rights reserved. " * 10


def _page(i: int, header: str = _NAV, footer: str = "") -> str:
    return header + f"\n\nBody {i} " * 60 + footer


class TestFindCommonSection:
    def test_majority_wins(self) -> None:
        assert find_common_section(["a", "a", "a", "a", "b"], threshold=0.8) == "a"

    def test_below_threshold(self) -> None:
        assert find_common_section(["a", "a", "a", "b", "c"], threshold=0.8) is None

    def test_empty_batch(self) -> None:
        assert find_common_section([], threshold=0.8) is None

    def test_empty_strings_never_common(self) -> None:
        assert find_common_section(["", "", ""], threshold=0.8) is None


class TestDetectCommonHeaderFooter:
    def test_four_of_five_share_header(self) -> None:
        pages = [_page(i) for i in range(4)] + [_page(4, header="Completely different start " * 20)]
        result = detect_common_header_footer(pages, window=250, threshold=0.8)
        assert result.header == _NAV[:250]
        assert result.footer is None

    def test_no_agreement(self) -> None:
        pages = [f"Page {i} " * 100 for i in range(5)]
        result = detect_common_header_footer(pages, window=250, threshold=0.8)
        assert result == HeaderFooter()
        assert not result.found()

    def test_common_footer(self) -> None:
        pages = [_page(i, header=f"Title {i}\n", footer=_FOOTER) for i in range(5)]
        result = detect_common_header_footer(pages, window=250, threshold=0.8)
        assert result.header is None
        assert result.footer == _FOOTER[-250:]

    def test_single_character_breaks_match(self) -> None:
        altered = "X" + _NAV[1:]
        pages = [_page(0), _page(1), _page(2, header=altered), _page(3, header=altered)]
        result = detect_common_header_footer(pages, window=250, threshold=0.8)
        assert result.header is None

    def test_uses_settings_defaults(self, monkeypatch) -> None:
        monkeypatch.setattr("optimiser.extract.layout.settings.header_footer_window", 10)
        monkeypatch.setattr("optimiser.extract.layout.settings.header_footer_threshold", 0.5)
        pages = ["0123456789 alpha", "0123456789 beta", "something else"]
        assert detect_common_header_footer(pages).header == "0123456789"

    def test_render(self) -> None:
        assert HeaderFooter(header="H", footer=None).render() == "H\n\n"
