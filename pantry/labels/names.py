"""Item name extraction from recognized label text."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .models import NameCandidate
from .scoring import (
    CONTEXT_CONFIDENCE,
    LINE_FALLBACK_CONFIDENCE,
    WHOLE_TEXT_CONFIDENCE,
)
from .vocabulary import GROCERY_ITEMS

_NON_LETTERS = re.compile(r"[^a-z]")
_NON_LETTERS_ANY_CASE = re.compile(r"[^a-zA-Z]")


def extract_item_names(
    text: str, contexts: Iterable[str] = ()
) -> list[NameCandidate]:
    """Propose item names for the text.

    Strategy order:
    1. Vocabulary terms contained in any word of the whole text
    2. Vocabulary terms appearing as whole words in date context windows
    3. Only if nothing matched: the leading word of each line
    """
    names = _names_from_text(text)
    seen = {n.name for n in names}

    for context in contexts:
        for candidate in _names_from_context(context):
            if candidate.name not in seen:
                seen.add(candidate.name)
                names.append(candidate)

    if not names:
        names = _names_from_line_starts(text)

    return names


def _names_from_text(text: str) -> list[NameCandidate]:
    words = text.lower().split()
    return [
        NameCandidate(name=item.capitalize(), confidence=WHOLE_TEXT_CONFIDENCE)
        for item in GROCERY_ITEMS
        if any(item in word for word in words)
    ]


def _names_from_context(context: str) -> list[NameCandidate]:
    names: list[NameCandidate] = []
    for word in context.lower().split():
        cleaned = _NON_LETTERS.sub("", word)
        if len(cleaned) > 2 and cleaned in GROCERY_ITEMS:
            names.append(
                NameCandidate(name=cleaned.capitalize(), confidence=CONTEXT_CONFIDENCE)
            )
    return names


def _names_from_line_starts(text: str) -> list[NameCandidate]:
    names: list[NameCandidate] = []
    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        first_word = _NON_LETTERS_ANY_CASE.sub("", stripped.split()[0])
        if len(first_word) >= 3:
            names.append(
                NameCandidate(
                    name=first_word.capitalize(),
                    confidence=LINE_FALLBACK_CONFIDENCE,
                )
            )
    return names
