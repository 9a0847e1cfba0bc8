"""Turn recognized label text into grocery item records.

The pipeline is a chain of pure functions::

    text ─┬─ resolve_date_candidates ──┐
          └─ extract_item_names ───────┴─ associate ─→ sorted records

Every call builds its own state, so concurrent calls are safe.
"""

from __future__ import annotations

import logging
import uuid
from datetime import date, timedelta

from . import scoring
from .dates import resolve_date_candidates
from .models import DateCandidate, GroceryItemRecord, NameCandidate
from .names import extract_item_names
from .validator import MAX_NAME_LENGTH

logger = logging.getLogger(__name__)

# Characters of a name that must appear in a context for truncated OCR matches
_NAME_PREFIX_LENGTH = 4


def process_label_text(
    text: str, today: date | None = None
) -> list[GroceryItemRecord]:
    """Extract grocery items with expiry dates from recognized text.

    Never raises: malformed input or an internal failure yields an empty
    list, which callers should read as "nothing confidently extracted".
    """
    if not text or not isinstance(text, str):
        return []

    today = today or date.today()
    try:
        dates = resolve_date_candidates(text)
        names = extract_item_names(text, [d.context for d in dates])
        records = associate(dates, names, today)
    except Exception:
        logger.exception("Failed to interpret label text")
        return []

    logger.info(
        "Extracted %d item(s) from %d date(s) and %d name(s)",
        len(records), len(dates), len(names),
    )
    return records


def rank_dates(
    dates: list[DateCandidate], today: date
) -> list[DateCandidate]:
    """Order parsed dates by relevance.

    Expiry-flagged dates come first, then dates closest to today.
    """
    parsed = [d for d in dates if d.parsed_date is not None]
    return sorted(
        parsed,
        key=lambda d: (
            not d.is_expiry_likely,
            abs((d.parsed_date - today).days),
        ),
    )


def associate(
    dates: list[DateCandidate],
    names: list[NameCandidate],
    today: date,
) -> list[GroceryItemRecord]:
    """Pair item names with dates and build output records."""
    ranked = rank_dates(dates, today)
    used: set[int] = set()
    records: list[GroceryItemRecord] = []
    unmatched: list[NameCandidate] = []

    # Pass 1: a date whose context mentions the name
    for name in names:
        index = _find_anchored_date(name, ranked, used)
        if index is None:
            unmatched.append(name)
            continue
        used.add(index)
        candidate = ranked[index]
        records.append(
            _make_record(
                name.name,
                candidate.parsed_date,
                today,
                scoring.anchored_confidence(
                    name.confidence, candidate.is_expiry_likely
                ),
            )
        )

    # Pass 2: leftover names take leftover dates in rank order
    leftover = [d for i, d in enumerate(ranked) if i not in used]
    default_expiry = today + timedelta(days=scoring.DEFAULT_SHELF_LIFE_DAYS)
    for i, name in enumerate(unmatched):
        if i < len(leftover):
            records.append(
                _make_record(
                    name.name,
                    leftover[i].parsed_date,
                    today,
                    scoring.paired_confidence(name.confidence),
                )
            )
        else:
            records.append(
                _make_record(
                    name.name,
                    default_expiry,
                    today,
                    scoring.undated_confidence(name.confidence),
                )
            )

    # Dates but no names at all: emit generic placeholders
    if not records and leftover:
        for i, candidate in enumerate(leftover[: scoring.MAX_GENERIC_ITEMS]):
            records.append(
                _make_record(
                    f"Item {i + 1}",
                    candidate.parsed_date,
                    today,
                    scoring.GENERIC_ITEM_CONFIDENCE,
                )
            )

    return sorted(records, key=lambda r: r.expiry_date)


def _find_anchored_date(
    name: NameCandidate, ranked: list[DateCandidate], used: set[int]
) -> int | None:
    needle = name.name.lower()
    prefix = needle[:_NAME_PREFIX_LENGTH]
    for index, candidate in enumerate(ranked):
        if index in used:
            continue
        context = candidate.context.lower()
        if needle in context or prefix in context:
            return index
    return None


def _make_record(
    name: str, expiry: date, today: date, confidence: float
) -> GroceryItemRecord:
    return GroceryItemRecord(
        id=uuid.uuid4().hex,
        name=name[:MAX_NAME_LENGTH],
        expiry_date=expiry.isoformat(),
        added_date=today.isoformat(),
        confidence=confidence,
    )
