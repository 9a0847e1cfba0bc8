"""Grocery label reading: recognized text in, dated grocery items out."""

from .backup import BackupFormatError, export_items, import_items
from .config import LabelsConfig, RecognizerConfig, load_config
from .dates import is_expiry_likely, parse_date, scan_date_candidates
from .interpreter import associate, process_label_text, rank_dates
from .models import (
    DateCandidate,
    GroceryItemRecord,
    NameCandidate,
    confidence_description,
    expiry_status,
)
from .names import extract_item_names
from .recognition import TextRecognizer, create_recognizer
from .validator import validate_item

__all__ = [
    "process_label_text",
    "scan_date_candidates",
    "parse_date",
    "is_expiry_likely",
    "extract_item_names",
    "associate",
    "rank_dates",
    "validate_item",
    "export_items",
    "import_items",
    "BackupFormatError",
    "DateCandidate",
    "NameCandidate",
    "GroceryItemRecord",
    "confidence_description",
    "expiry_status",
    "TextRecognizer",
    "create_recognizer",
    "LabelsConfig",
    "RecognizerConfig",
    "load_config",
]
