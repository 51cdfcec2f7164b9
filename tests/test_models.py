"""Tests for lintcache.models."""

import dataclasses
from datetime import datetime, timezone

import pytest

from lintcache.models import AnalysisRecord, FileReport, Problem


def _record() -> AnalysisRecord:
    return AnalysisRecord(
        path="github.com/o/r",
        updated_at=datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc),
        line_format="{url}#L{line}",
        browse_url="https://github.com/o/r/tree/HEAD",
        files=(
            FileReport(
                name="a.py",
                browse_url="https://github.com/o/r/blob/HEAD/a.py",
                problems=(
                    Problem(line=3, text="t1", line_text="def f():", confidence=0.9),
                    Problem(line=0, text="whole file"),
                ),
            ),
        ),
    )


class TestAnalysisRecord:
    def test_dict_round_trip_preserves_record(self):
        record = _record()
        assert AnalysisRecord.from_dict(record.to_dict()) == record

    def test_updated_at_keeps_timezone(self):
        restored = AnalysisRecord.from_dict(_record().to_dict())
        assert restored.updated_at.tzinfo is not None

    def test_problem_count(self):
        assert _record().problem_count == 2

    def test_line_url_formats_line(self):
        record = _record()
        report = record.files[0]
        assert record.line_url(report, 3) == "https://github.com/o/r/blob/HEAD/a.py#L3"

    def test_line_url_without_line_is_file_url(self):
        record = _record()
        report = record.files[0]
        assert record.line_url(report, 0) == report.browse_url

    def test_record_is_immutable(self):
        record = _record()
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.path = "other"  # type: ignore[misc]

    def test_from_dict_missing_field_raises(self):
        data = _record().to_dict()
        del data["files"]
        with pytest.raises(KeyError):
            AnalysisRecord.from_dict(data)

    def test_problem_defaults(self):
        problem = Problem.from_dict({"line": 0, "text": "boom"})
        assert problem.line_text == ""
        assert problem.confidence == 0.0
