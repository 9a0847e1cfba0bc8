"""Confidence scoring rules for extracted grocery items.

All confidence arithmetic used by the interpreter lives here. Scores are
heuristic, not calibrated probabilities.

Name-anchored matches add ``EXPIRY_BONUS`` on top of the name confidence
without clamping, so a context-anchored name (0.9) next to an expiry
keyword scores 1.1. Downstream code that needs a value in [0, 1] should
pass records through :func:`pantry.labels.validator.validate_item`, which
resets out-of-range confidences.
"""

from __future__ import annotations

WHOLE_TEXT_CONFIDENCE = 0.8
CONTEXT_CONFIDENCE = 0.9
LINE_FALLBACK_CONFIDENCE = 0.5

EXPIRY_BONUS = 0.2
GENERIC_ITEM_CONFIDENCE = 0.3
MAX_GENERIC_ITEMS = 3

# Shelf life assumed for items without a recognized date
DEFAULT_SHELF_LIFE_DAYS = 7


def anchored_confidence(name_confidence: float, is_expiry_likely: bool) -> float:
    """Score a name matched to a date through its context window (unclamped)."""
    bonus = EXPIRY_BONUS if is_expiry_likely else 0.0
    return name_confidence + bonus


def paired_confidence(name_confidence: float) -> float:
    """Score a name paired positionally with a leftover date."""
    return name_confidence


def undated_confidence(name_confidence: float) -> float:
    """Score a name that received the default shelf-life expiry."""
    return name_confidence * 0.5
