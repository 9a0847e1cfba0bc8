"""Data models for label-text interpretation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

# Days ahead of expiry at which an item counts as "expiring soon"
EXPIRING_SOON_DAYS = 3


@dataclass
class DateCandidate:
    """A date-shaped substring found in recognized text."""

    raw_text: str
    context: str  # Up to 20 chars either side of the match, stripped
    position: int
    parsed_date: date | None = None
    is_expiry_likely: bool = False


@dataclass
class NameCandidate:
    name: str  # Capitalized
    confidence: float  # 0.0〜1.0


@dataclass
class GroceryItemRecord:
    """A grocery item extracted from a label, ready for storage."""

    id: str
    name: str
    expiry_date: str  # YYYY-MM-DD
    added_date: str  # YYYY-MM-DD
    confidence: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "expiryDate": self.expiry_date,
            "addedDate": self.added_date,
            "confidence": self.confidence,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GroceryItemRecord:
        """Build a record from a dict using either camelCase or snake_case keys.

        No validation is done here; see ``validator.validate_item``.
        """
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            expiry_date=data.get("expiryDate", data.get("expiry_date", "")),
            added_date=data.get("addedDate", data.get("added_date", "")),
            confidence=data.get("confidence", 0.0),
        )


def confidence_description(confidence: float) -> str:
    """Describe a confidence score in words."""
    if confidence >= 0.8:
        return "High confidence"
    if confidence >= 0.6:
        return "Medium confidence"
    if confidence >= 0.4:
        return "Low confidence"
    return "Very low confidence"


def expiry_status(expiry_date: str, today: date | None = None) -> str:
    """Classify an expiry date relative to today.

    Returns "expired", "expiring soon" or "fresh". Missing or malformed
    dates are treated as fresh.
    """
    if not expiry_date:
        return "fresh"
    try:
        expiry = date.fromisoformat(expiry_date)
    except (ValueError, TypeError):
        return "fresh"

    days_left = (expiry - (today or date.today())).days
    if days_left < 0:
        return "expired"
    if days_left <= EXPIRING_SOON_DAYS:
        return "expiring soon"
    return "fresh"
