"""Normalize-or-reject for grocery item records from any source."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from datetime import date, datetime, timedelta
from typing import Any

from .dates import parse_date
from .models import GroceryItemRecord
from .scoring import DEFAULT_SHELF_LIFE_DAYS

MAX_NAME_LENGTH = 50


def validate_item(
    item: Mapping[str, Any] | GroceryItemRecord | None,
    today: date | None = None,
) -> GroceryItemRecord | None:
    """Canonicalize an item record, or return None if it has no usable name.

    An empty name is the only hard rejection. An unreadable expiry date is
    replaced with the default shelf life, an out-of-range confidence with 0,
    and the added date is always reset to today.
    """
    if isinstance(item, GroceryItemRecord):
        item = item.to_dict()
    if not isinstance(item, Mapping):
        return None

    today = today or date.today()

    raw_name = item.get("name")
    name = raw_name.strip()[:MAX_NAME_LENGTH] if isinstance(raw_name, str) else ""
    if not name:
        return None

    raw_expiry = item.get("expiryDate", item.get("expiry_date"))
    expiry_date = ""
    if raw_expiry:
        expiry = _coerce_date(raw_expiry)
        if expiry is None:
            expiry = today + timedelta(days=DEFAULT_SHELF_LIFE_DAYS)
        expiry_date = expiry.isoformat()

    return GroceryItemRecord(
        id=item.get("id") or uuid.uuid4().hex,
        name=name,
        expiry_date=expiry_date,
        added_date=today.isoformat(),
        confidence=_coerce_confidence(item.get("confidence")),
    )


def _coerce_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    return parse_date(text)


def _coerce_confidence(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    if 0 <= value <= 1:
        return value
    return 0.0
