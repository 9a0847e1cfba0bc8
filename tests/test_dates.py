"""Tests for date candidate scanning, parsing and expiry classification."""

from datetime import date

import pytest

from pantry.labels.dates import (
    is_expiry_likely,
    parse_date,
    resolve_date_candidates,
    scan_date_candidates,
)


class TestScanDateCandidates:
    def test_slash_date(self):
        result = scan_date_candidates("Milk exp 12/25/2024")
        assert len(result) == 1
        assert result[0].raw_text == "12/25/2024"
        assert result[0].position == 9
        assert result[0].context == "Milk exp 12/25/2024"
        assert result[0].parsed_date is None

    def test_iso_date_is_pooled_across_shapes(self):
        result = scan_date_candidates("2024-12-25")
        assert [c.raw_text for c in result] == ["24-12-25", "2024-12-25"]

    def test_month_name_first(self):
        result = scan_date_candidates("Apples fresh until Dec 22, 2024")
        assert [c.raw_text for c in result] == ["Dec 22, 2024"]

    def test_month_name_second(self):
        result = scan_date_candidates("Butter 05 january 2025")
        assert [c.raw_text for c in result] == ["05 january 2025"]

    def test_context_window_is_limited(self):
        text = "x" * 30 + "12/25/2024" + "y" * 30
        result = scan_date_candidates(text)
        assert result[0].context == "x" * 20 + "12/25/2024" + "y" * 20

    def test_context_window_is_trimmed(self):
        result = scan_date_candidates("   12/25/2024   ")
        assert result[0].context == "12/25/2024"

    def test_no_dates(self):
        assert scan_date_candidates("Fresh milk, whole") == []

    def test_repeated_calls_are_independent(self):
        text = "Bread 12/20/2024 Milk 12/25/2024"
        first = scan_date_candidates(text)
        second = scan_date_candidates(text)
        assert [c.raw_text for c in first] == [c.raw_text for c in second]
        assert len(first) == 2


class TestParseDate:
    @pytest.mark.parametrize("text", ["12/05/2024", "12-05-2024", "12/05/24", "12-05-24"])
    def test_separator_variants_read_month_first(self, text):
        assert parse_date(text) == date(2024, 12, 5)

    def test_single_digit_fields(self):
        assert parse_date("1/5/2024") == date(2024, 1, 5)

    @pytest.mark.parametrize("text", ["2024-12-25", "2024/12/25", " 2024-12-25 "])
    def test_year_first(self, text):
        assert parse_date(text) == date(2024, 12, 25)

    @pytest.mark.parametrize(
        "text",
        [
            "Dec 22 2024",
            "Dec 22, 2024",
            "December 22 2024",
            "December 22, 2024",
            "22 Dec 2024",
            "22 December 2024",
            "dec 22, 2024",
        ],
    )
    def test_month_names(self, text):
        assert parse_date(text) == date(2024, 12, 22)

    def test_generic_fallback_for_other_month_spellings(self):
        assert parse_date("Sept 5, 2024") == date(2024, 9, 5)

    def test_out_of_range_numeric_date_is_dropped(self):
        # Never reinterpreted day-first
        assert parse_date("24-12-25") is None
        assert parse_date("13/45/2024") is None

    @pytest.mark.parametrize("text", ["May", "Dec 2024", "Dec 22"])
    def test_partial_date_is_dropped(self, text):
        assert parse_date(text) is None

    def test_impossible_month_name_date(self):
        assert parse_date("Feb 30, 2024") is None


class TestIsExpiryLikely:
    @pytest.mark.parametrize(
        "context",
        [
            "Milk EXP 12/25/2024",
            "Bread Best By 12/20/2024",
            "use by 2024-12-18",
            "Sell by: 01/02/2025",
            "fresh until Dec 22, 2024",
            "good until December 30, 2024",
            "best before 12/26/2024",
        ],
    )
    def test_keywords(self, context):
        assert is_expiry_likely(context) is True

    def test_no_keyword(self):
        assert is_expiry_likely("Bananas 12/19/2024") is False

    def test_substring_match_favors_recall(self):
        assert is_expiry_likely("expected delivery 12/19/2024") is True


def test_resolve_drops_unparseable_candidates():
    result = resolve_date_candidates("Yogurt use by 2024-12-18")
    assert len(result) == 1
    assert result[0].raw_text == "2024-12-18"
    assert result[0].parsed_date == date(2024, 12, 18)
    assert result[0].is_expiry_likely is True
