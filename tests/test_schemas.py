"""Tests for schema definitions."""

from datetime import date

import pytest
from pydantic import ValidationError

from schemas import WeeklyConfig, WeeklyRecord


class TestWeeklyRecord:
    """Tests for WeeklyRecord model."""

    def test_validate_from_json_keys(self, sample_weekly_record):
        """Accepts the camelCase keys used on disk."""
        weekly = WeeklyRecord.model_validate(sample_weekly_record)

        assert weekly.date == date(2025, 10, 1)
        assert weekly.end_date == date(2025, 10, 7)
        assert weekly.tool_count == 8
        assert weekly.tech_count == 4
        assert weekly.blackboard_image is None

    def test_create_by_field_name(self):
        """Accepts snake_case field names."""
        weekly = WeeklyRecord(
            date=date(2025, 10, 1),
            end_date=date(2025, 10, 7),
            filename="weeklies/20251001-20251007issue-report.html",
            title="第1期",
        )

        assert weekly.summary == ""
        assert weekly.news_count == 0
        assert weekly.published is False

    def test_dump_by_alias(self, sample_weekly_record):
        """Dumps back to the on-disk keys."""
        weekly = WeeklyRecord.model_validate(sample_weekly_record)

        data = weekly.model_dump(mode="json", by_alias=True, exclude_none=True)

        assert data == sample_weekly_record

    def test_missing_fields_get_defaults(self):
        """Hand-edited records with missing fields still validate."""
        weekly = WeeklyRecord.model_validate({"date": "2025-10-01"})

        assert weekly.date == date(2025, 10, 1)
        assert weekly.end_date is None
        assert weekly.filename == ""
        assert weekly.title == ""

    def test_unparsed_date_kept_as_string(self, sample_weekly_record):
        """Dates that are not ISO dates are kept as written."""
        sample_weekly_record["date"] = "2025/10/01"

        weekly = WeeklyRecord.model_validate(sample_weekly_record)

        assert weekly.date == "2025/10/01"

    def test_non_numeric_count_rejected(self, sample_weekly_record):
        """Counts must be integers."""
        sample_weekly_record["newsCount"] = "many"

        with pytest.raises(ValidationError):
            WeeklyRecord.model_validate(sample_weekly_record)


class TestWeeklyConfig:
    """Tests for WeeklyConfig model."""

    def test_defaults(self):
        """An empty document has no weeklies and no settings."""
        config = WeeklyConfig()

        assert config.weeklies == []
        assert config.settings == {}

    def test_find(self, sample_weekly_record):
        """Finds records by exact filename."""
        config = WeeklyConfig.model_validate({"weeklies": [sample_weekly_record]})

        assert config.find(sample_weekly_record["filename"]) is config.weeklies[0]
        assert config.find("20251001-20251007issue-report.html") is None
