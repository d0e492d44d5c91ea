"""Regex extraction of contact details and dates from converted page text.

Every extractor is pure and tolerant of missing signals: nothing found is
an empty set or ``None``, never an exception.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime

_EMAIL_RE = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)

# Loosely delimited digit runs; horizontal whitespace only so a match never
# joins numbers from separate lines.
_PHONE_RE = re.compile(r"\+?\d[\d \t().-]{7,}")

# House number, street suffix, then "City, ST 12345(-6789)", all on one line.
# Every gap is bounded so a long line without an address fails fast.
_ADDRESS_RE = re.compile(
    r"\b\d+[ \t]+[A-Za-z0-9 \t,.-]{1,80}?"
    r"\b(?:St(?:reet)?|Rd|Road|Ave(?:nue)?|Blvd|Boulevard|Dr(?:ive)?|Ln|Lane|Way)\b"
    r"[A-Za-z0-9 \t,.-]{1,80}?[A-Za-z \t]{1,40},[ \t]*[A-Z]{2}[ \t]*\d{5}(?:-\d{4})?",
    re.IGNORECASE,
)

_DATE_RE = re.compile(
    r"(Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|Jul(?:y)?|"
    r"Aug(?:ust)?|Sep(?:tember)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
    r"\s+(\d{1,2})(?:st|nd|rd|th)?,?\s+(\d{4})",
    re.IGNORECASE,
)


@dataclass
class ContactFacts:
    """Contact details found on a single page."""

    emails: set[str] = field(default_factory=set)
    phones: set[str] = field(default_factory=set)
    address: str | None = None

    def is_empty(self) -> bool:
        return not (self.emails or self.phones or self.address)


def extract_emails(text: str) -> set[str]:
    return set(_EMAIL_RE.findall(text))


def normalize_phone(raw: str) -> str:
    """Normalise a phone number to ``+<digits>``, assuming NANP for 10/11 digits."""
    digits = re.sub(r"\D", "", raw)
    if len(digits) == 11 and digits.startswith("1"):
        return f"+{digits}"
    if len(digits) == 10:
        return f"+1{digits}"
    return f"+{digits}"


def extract_phones(text: str) -> set[str]:
    return {normalize_phone(match) for match in _PHONE_RE.findall(text)}


def extract_address(text: str) -> str | None:
    """Return the first street address in *text* (house number included)."""
    match = _ADDRESS_RE.search(text)
    return match.group(0).strip() if match else None


def parse_date(text: str) -> str | None:
    """Return the first month-name date in *text* as ``YYYY-MM-DD``.

    ``"March 3rd, 2024"`` → ``"2024-03-03"``.  Dates that do not exist on the
    calendar (``Feb 30, 2024``) yield ``None``.
    """
    match = _DATE_RE.search(text)
    if not match:
        return None
    month, day, year = match.groups()
    # %b only knows three-letter abbreviations
    try:
        parsed = datetime.strptime(f"{month[:3]} {day} {year}", "%b %d %Y")
    except ValueError:
        return None
    return parsed.date().isoformat()


def extract_contact_facts(text: str) -> ContactFacts:
    return ContactFacts(
        emails=extract_emails(text),
        phones=extract_phones(text),
        address=extract_address(text),
    )


def strip_contact_facts(text: str, facts: ContactFacts) -> str:
    """Remove the given contact details from *text*.

    Phone numbers are removed in their written form, i.e. every raw
    match whose normalised form is one of ``facts.phones``.
    """
    cleaned = text
    for email in facts.emails:
        cleaned = cleaned.replace(email, "")
    if facts.phones:
        cleaned = _PHONE_RE.sub(
            lambda m: "" if normalize_phone(m.group(0)) in facts.phones else m.group(0),
            cleaned,
        )
    if facts.address:
        cleaned = cleaned.replace(facts.address, "")
    return cleaned
