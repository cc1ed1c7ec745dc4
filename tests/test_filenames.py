"""Tests for canonical issue filenames."""

from datetime import date

import pytest

from weekly_registry.filenames import date_span, generate_filename, parse_filename


class TestGenerateFilename:
    """Tests for generate_filename."""

    def test_generate_filename(self):
        """Builds the canonical relative path from a date range."""
        result = generate_filename(date(2025, 10, 1), date(2025, 10, 7))
        assert result == "weeklies/20251001-20251007issue-report.html"

    def test_generate_filename_custom_directory(self):
        """Uses the given issue directory."""
        result = generate_filename(date(2025, 10, 1), date(2025, 10, 7), "archive")
        assert result == "archive/20251001-20251007issue-report.html"

    def test_date_span(self):
        """Formats the compact date token."""
        assert date_span(date(2024, 12, 30), date(2025, 1, 5)) == "20241230-20250105"


class TestParseFilename:
    """Tests for parse_filename."""

    def test_parse_valid_filename(self):
        """Extracts both dates from a canonical name."""
        result = parse_filename("20251001-20251007issue-report.html")
        assert result == (date(2025, 10, 1), date(2025, 10, 7))

    @pytest.mark.parametrize(
        "name",
        [
            "index.html",
            "20251001-20251007issue-report.htm",
            "2025101-20251007issue-report.html",
            "20251001_20251007issue-report.html",
            "x20251001-20251007issue-report.html",
            "20251001-20251007issue-report.html.bak",
            "weeklies/20251001-20251007issue-report.html",
        ],
    )
    def test_parse_rejects_other_names(self, name):
        """Returns None for names outside the pattern."""
        assert parse_filename(name) is None

    def test_parse_rejects_impossible_dates(self):
        """Returns None when the digits are not a calendar date."""
        assert parse_filename("20251301-20251307issue-report.html") is None

    def test_round_trip_across_year_boundary(self):
        """A generated name parses back to the same range."""
        start, end = date(2024, 12, 30), date(2025, 1, 5)
        name = generate_filename(start, end).split("/")[-1]
        assert parse_filename(name) == (start, end)
