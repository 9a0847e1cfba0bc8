"""Tests for the labels CLI."""

import json

import pytest

from pantry.labels.cli import main


def test_no_command_prints_help():
    with pytest.raises(SystemExit):
        main([])


def test_parse_json(tmp_path, capsys):
    label = tmp_path / "label.txt"
    label.write_text("Milk exp 12/25/2024\n")

    main(["parse", str(label), "--json", "--today", "2024-12-15"])

    data = json.loads(capsys.readouterr().out)
    assert len(data) == 1
    assert data[0]["name"] == "Milk"
    assert data[0]["expiryDate"] == "2024-12-25"
    assert data[0]["addedDate"] == "2024-12-15"


def test_parse_table(tmp_path, capsys):
    label = tmp_path / "label.txt"
    label.write_text("Milk exp 12/25/2024\n")

    main(["parse", str(label), "--today", "2024-12-23"])

    out = capsys.readouterr().out
    assert "Found 1 item(s)" in out
    assert "expiring soon" in out
    assert "High confidence" in out


def test_parse_filters_by_min_confidence(tmp_path, capsys):
    config = tmp_path / "labels.toml"
    config.write_text("[interpreter]\nmin_confidence = 0.5\n")
    label = tmp_path / "label.txt"
    label.write_text("Hummus\n")

    main(["-c", str(config), "parse", str(label)])

    assert "No items were found." in capsys.readouterr().out


def test_scan_with_sample_recognizer(tmp_path, capsys):
    config = tmp_path / "labels.toml"
    config.write_text('[recognizer]\nbackend = "sample"\n\n[recognizer.sample]\nseed = 0\n')

    main(["-c", str(config), "scan", "--image", "label.jpg", "--json"])

    data = json.loads(capsys.readouterr().out)
    assert len(data) == 4


def test_validate(tmp_path, capsys):
    backup = tmp_path / "backup.json"
    backup.write_text(json.dumps([
        {"id": "a1", "name": " Milk ", "expiryDate": "12/25/2024", "confidence": 0.9},
        {"name": ""},
    ]))

    main(["validate", str(backup)])

    data = json.loads(capsys.readouterr().out)
    assert [i["name"] for i in data["items"]] == ["Milk"]
    assert data["items"][0]["expiryDate"] == "2024-12-25"


def test_validate_bad_file(tmp_path, capsys):
    backup = tmp_path / "backup.json"
    backup.write_text("{oops")

    with pytest.raises(SystemExit):
        main(["validate", str(backup)])
    assert "not valid JSON" in capsys.readouterr().err
