"""Tests for contact-detail and date extraction."""

from __future__ import annotations

import time

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

_CONTACT_PAGE = """\
# Contact us

Email info@acme.com or Sales@Acme.co.uk for a quote.
Call (415) 555-0100 during office hours.
Visit us at 123 Main St, Springfield, IL 62704 any weekday.
"""


class TestEmails:
    def test_finds_all(self) -> None:
        assert extract_emails(_CONTACT_PAGE) == {"info@acme.com", "Sales@Acme.co.uk"}

    def test_deduplicates(self) -> None:
        assert extract_emails("a@b.io a@b.io") == {"a@b.io"}

    def test_none_found(self) -> None:
        assert extract_emails("no contact here") == set()


class TestPhones:
    def test_ten_digits_get_country_code(self) -> None:
        assert normalize_phone("(415) 555-0100") == "+14155550100"

    def test_eleven_digits_with_leading_one(self) -> None:
        assert normalize_phone("1-415-555-0100") == "+14155550100"

    def test_other_lengths_prefixed_as_is(self) -> None:
        assert normalize_phone("+44 20 7946 0958") == "+442079460958"

    def test_extract_normalises_and_deduplicates(self) -> None:
        text = "Call (415) 555-0100 or 1-415-555-0100 or 415.555.0100"
        assert extract_phones(text) == {"+14155550100"}

    def test_short_numbers_ignored(self) -> None:
        assert extract_phones("Suite 12, floor 3, since 1999") == set()

    def test_does_not_join_lines(self) -> None:
        phones = extract_phones("415 555 0100\n212 555 0199")
        assert phones == {"+14155550100", "+12125550199"}


class TestAddress:
    def test_first_match_with_house_number(self) -> None:
        assert extract_address(_CONTACT_PAGE) == "123 Main St, Springfield, IL 62704"

    def test_zip_plus_four(self) -> None:
        text = "HQ: 9 Ocean Blvd, Miami, FL 33139-1234"
        assert extract_address(text) == "9 Ocean Blvd, Miami, FL 33139-1234"

    def test_absent(self) -> None:
        assert extract_address("We are fully remote.") is None

    def test_spelled_out_suffix(self) -> None:
        text = "Find us at 42 Harbour Street, Portland, ME 04101."
        assert extract_address(text) == "42 Harbour Street, Portland, ME 04101"

    def test_suffix_inside_a_word_is_not_a_street(self) -> None:
        assert extract_address("In 1998 we started with 12 staff, Boston, MA 02108") is None

    def test_long_paragraph_without_address_is_fast(self) -> None:
        paragraph = "Founded in 1998 we first started with 12 staff and just 3 vans. " * 160
        assert len(paragraph) > 10_000

        start = time.perf_counter()
        assert extract_address(paragraph) is None
        assert time.perf_counter() - start < 2.0


class TestParseDate:
    def test_long_form_with_ordinal(self) -> None:
        assert parse_date("Posted March 3rd, 2024 by admin") == "2024-03-03"

    def test_short_month_without_comma(self) -> None:
        assert parse_date("Jan 5 2023") == "2023-01-05"

    def test_full_month_name(self) -> None:
        assert parse_date("September 21, 2022") == "2022-09-21"

    def test_impossible_date_is_none(self) -> None:
        assert parse_date("February 30, 2024") is None

    def test_no_date(self) -> None:
        assert parse_date("Nothing to see") is None


class TestContactFacts:
    def test_bundle(self) -> None:
        facts = extract_contact_facts(_CONTACT_PAGE)
        assert facts.emails == {"info@acme.com", "Sales@Acme.co.uk"}
        assert facts.phones == {"+14155550100"}
        assert facts.address == "123 Main St, Springfield, IL 62704"
        assert not facts.is_empty()

    def test_empty_text(self) -> None:
        facts = extract_contact_facts("")
        assert facts == ContactFacts()
        assert facts.is_empty()

    def test_strip_removes_details(self) -> None:
        facts = extract_contact_facts(_CONTACT_PAGE)
        cleaned = strip_contact_facts(_CONTACT_PAGE, facts)
        assert "info@acme.com" not in cleaned
        assert "555-0100" not in cleaned
        assert "Main St" not in cleaned
        assert "# Contact us" in cleaned

    def test_strip_keeps_unlisted_numbers(self) -> None:
        facts = ContactFacts(phones={"+14155550100"})
        cleaned = strip_contact_facts("a (415) 555-0100 b 212-555-0199", facts)
        assert "555-0100" not in cleaned
        assert "212-555-0199" in cleaned
