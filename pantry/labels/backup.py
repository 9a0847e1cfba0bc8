"""JSON export/import of grocery item records."""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import datetime

from .models import GroceryItemRecord
from .validator import validate_item


class BackupFormatError(ValueError):
    """Raised when a backup document cannot be read."""


def export_items(
    records: Iterable[GroceryItemRecord], exported_at: datetime | None = None
) -> str:
    """Serialize records to a JSON backup document."""
    data = {
        "items": [r.to_dict() for r in records],
        "exportDate": (exported_at or datetime.now()).isoformat(),
    }
    return json.dumps(data, ensure_ascii=False, indent=2)


def import_items(json_text: str) -> list[GroceryItemRecord]:
    """Read records from a backup document or a bare JSON list.

    Every entry goes through ``validate_item``; rejected entries are dropped.

    Raises:
        BackupFormatError: If the text is not JSON or has no item list.
    """
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise BackupFormatError(f"Backup is not valid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("items")
    if not isinstance(data, list):
        raise BackupFormatError("Backup does not contain an item list")

    records: list[GroceryItemRecord] = []
    for entry in data:
        record = validate_item(entry)
        if record is not None:
            records.append(record)
    return records
