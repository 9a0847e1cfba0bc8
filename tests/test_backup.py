"""Tests for JSON backup export/import."""

import json
from datetime import datetime

import pytest

from pantry.labels.backup import BackupFormatError, export_items, import_items
from pantry.labels.validator import validate_item


@pytest.fixture
def records():
    return [
        validate_item({"name": "Milk", "expiryDate": "2024-12-25", "confidence": 1.0}),
        validate_item({"name": "Bread", "expiryDate": "12/20/2024", "confidence": 0.4}),
    ]


def test_export_document(records):
    text = export_items(records, exported_at=datetime(2024, 12, 15, 9, 30))
    data = json.loads(text)

    assert data["exportDate"] == "2024-12-15T09:30:00"
    assert data["items"][0]["name"] == "Milk"
    assert data["items"][0]["expiryDate"] == "2024-12-25"
    assert data["items"][1]["expiryDate"] == "2024-12-20"
    assert set(data["items"][0]) == {"id", "name", "expiryDate", "addedDate", "confidence"}


def test_round_trip_is_fixed_point(records):
    imported = import_items(export_items(records))
    assert imported == records
    assert import_items(export_items(imported)) == imported


def test_import_bare_list_drops_rejected_entries():
    text = json.dumps([
        {"name": "Cheese", "expiryDate": "2025-01-05"},
        {"name": "   "},
        "garbage",
    ])
    imported = import_items(text)
    assert [r.name for r in imported] == ["Cheese"]


def test_import_invalid_json():
    with pytest.raises(BackupFormatError, match="not valid JSON"):
        import_items("{not json")


def test_import_without_items():
    with pytest.raises(BackupFormatError):
        import_items(json.dumps({"settings": {}}))


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        import_items("42")
