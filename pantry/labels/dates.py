"""Date candidate scanning, parsing and expiry classification."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime

from dateutil.parser import ParserError
from dateutil.parser import parse as parse_generic_date

from .models import DateCandidate
from .vocabulary import DATE_FORMATS, EXPIRY_KEYWORDS, MONTH_ABBREVIATIONS

logger = logging.getLogger(__name__)

CONTEXT_WINDOW = 20

_MONTH = "(" + "|".join(MONTH_ABBREVIATIONS) + ")[a-z]*"

# Each pattern is run independently over the whole text
_DATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # MM/DD/YYYY or MM-DD-YY
    re.compile(r"(\d{1,2})[/-](\d{1,2})[/-](\d{2,4})"),
    # YYYY-MM-DD or YYYY/MM/DD
    re.compile(r"(\d{4})[/-](\d{1,2})[/-](\d{1,2})"),
    # Month DD, YYYY or Month DD YYYY
    re.compile(_MONTH + r"\s+(\d{1,2}),?\s+(\d{4})", re.IGNORECASE),
    # DD Month YYYY
    re.compile(r"(\d{1,2})\s+" + _MONTH + r"\s+(\d{4})", re.IGNORECASE),
)

_HAS_LETTERS = re.compile(r"[A-Za-z]")

_DEFAULT_A = datetime(2000, 1, 1)
_DEFAULT_B = datetime(2001, 2, 2)


def scan_date_candidates(
    text: str, window: int = CONTEXT_WINDOW
) -> list[DateCandidate]:
    """Find every date-shaped substring in ``text``.

    Matches from all patterns are pooled in pattern order. The same
    physical date may appear once per pattern that matches it.
    """
    candidates: list[DateCandidate] = []
    for pattern in _DATE_PATTERNS:
        for match in pattern.finditer(text):
            start = max(0, match.start() - window)
            end = min(len(text), match.end() + window)
            candidates.append(
                DateCandidate(
                    raw_text=match.group(0),
                    context=text[start:end].strip(),
                    position=match.start(),
                )
            )
    return candidates


def parse_date(raw_text: str) -> date | None:
    """Resolve a date-shaped string to a calendar date.

    Explicit formats are tried in order and the first valid one wins, so
    ``12/05/2024`` is always read month-first. Only strings with a month
    word fall through to the generic parser; a numeric string rejected by
    every explicit format has an out-of-range field, and reinterpreting it
    would amount to guessing the locale. Partial dates such as "May" or
    "Dec 2024" are rejected rather than completed from the clock.
    """
    cleaned = raw_text.strip()

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt).date()
        except ValueError:
            continue

    if not _HAS_LETTERS.search(cleaned):
        return None

    # A field missing from the text takes its value from `default`, so two
    # different defaults only agree when year, month and day are all present
    try:
        first = parse_generic_date(cleaned, dayfirst=False, default=_DEFAULT_A)
        second = parse_generic_date(cleaned, dayfirst=False, default=_DEFAULT_B)
    except (ParserError, ValueError, OverflowError):
        return None
    if first.date() != second.date():
        return None
    return first.date()


def is_expiry_likely(context: str) -> bool:
    """Check whether a context window mentions an expiry phrase."""
    lowered = context.lower()
    return any(keyword in lowered for keyword in EXPIRY_KEYWORDS)


def resolve_date_candidates(text: str) -> list[DateCandidate]:
    """Scan, parse and classify dates, dropping the unparseable ones."""
    resolved: list[DateCandidate] = []
    for candidate in scan_date_candidates(text):
        candidate.parsed_date = parse_date(candidate.raw_text)
        if candidate.parsed_date is None:
            logger.debug("Dropping unparseable date %r", candidate.raw_text)
            continue
        candidate.is_expiry_likely = is_expiry_likely(candidate.context)
        resolved.append(candidate)
    return resolved
