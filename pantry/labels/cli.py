"""CLI entry point for the labels module."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

from .backup import BackupFormatError, export_items, import_items
from .config import load_config
from .interpreter import process_label_text
from .models import GroceryItemRecord, confidence_description, expiry_status
from .recognition import create_recognizer


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="pantry-labels",
        description="Read grocery labels and list items with their expiry dates",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to the config file (TOML)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # parse
    parse_parser = sub.add_parser("parse", help="Interpret already-recognized label text")
    parse_parser.add_argument(
        "file", nargs="?", default=None, help="Text file to read (default: stdin)"
    )
    parse_parser.add_argument("--json", action="store_true", help="Output as JSON")
    parse_parser.add_argument(
        "--today", type=date.fromisoformat, default=None, metavar="YYYY-MM-DD",
        help="Processing date to use instead of today",
    )

    # scan
    scan_parser = sub.add_parser("scan", help="Recognize label photos, then interpret them")
    scan_parser.add_argument(
        "--image", type=str, nargs="+", required=True, help="Label image files"
    )
    scan_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # validate
    validate_parser = sub.add_parser(
        "validate", help="Validate a JSON backup and print canonical records"
    )
    validate_parser.add_argument("file", help="Backup file (JSON)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    load_dotenv()
    config = load_config(args.config)
    level = logging.DEBUG if args.verbose else config.logging.level
    logging.basicConfig(
        level=level, format="%(levelname)s [%(name)s] %(message)s"
    )

    match args.command:
        case "parse":
            _cmd_parse(config, args)
        case "scan":
            asyncio.run(_cmd_scan(config, args))
        case "validate":
            _cmd_validate(args)


def _cmd_parse(config, args) -> None:
    if args.file:
        text = Path(args.file).read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    items = process_label_text(text, today=args.today)
    _show_items(items, config, as_json=args.json, today=args.today)


async def _cmd_scan(config, args) -> None:
    recognizer = create_recognizer(config)
    print("Reading label text...", file=sys.stderr)
    try:
        text = await recognizer.recognize_text(args.image)
    except (ValueError, ImportError, FileNotFoundError) as e:
        print(f"Recognition error: {e}", file=sys.stderr)
        sys.exit(1)

    items = process_label_text(text)
    _show_items(items, config, as_json=args.json)


def _cmd_validate(args) -> None:
    try:
        records = import_items(Path(args.file).read_text(encoding="utf-8"))
    except (BackupFormatError, FileNotFoundError) as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    print(export_items(records))


def _show_items(
    items: list[GroceryItemRecord],
    config,
    as_json: bool = False,
    today: date | None = None,
) -> None:
    # Filter by confidence
    reliable = [
        i for i in items if i.confidence >= config.interpreter.min_confidence
    ]

    if as_json:
        print(json.dumps([i.to_dict() for i in reliable], ensure_ascii=False, indent=2))
        return

    if not reliable:
        print("No items were found.")
        return
    print(f"Found {len(reliable)} item(s):")
    for i in reliable:
        status = expiry_status(i.expiry_date, today)
        print(
            f"  {i.name:<14} {i.expiry_date}  {status:<13} "
            f"{i.confidence:.0%} ({confidence_description(i.confidence)})"
        )
