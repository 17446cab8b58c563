"""Tests for the JSON and plain-text diff reports."""

from __future__ import annotations

import json
from datetime import datetime, timezone

from dmp_diff import compare
from dmp_diff.aggregator import statistics
from dmp_diff.config import DiffConfig
from dmp_diff.report import export_json, export_text

OLD = {"dmp": {"title": "Old", "language": "eng", "dataset": [{"id": 1}]}}
NEW = {"dmp": {"title": "New", "dataset": [{"id": 1}, {"id": 2}]}}


class TestExportJson:
    def test_structure(self) -> None:
        result = compare(OLD, NEW)
        data = json.loads(export_json(result))
        assert set(data) == {"timestamp", "statistics", "changes"}
        assert data["statistics"] == statistics(result).to_dict()
        assert data["changes"] == result.to_dict()

    def test_fixed_timestamp(self) -> None:
        when = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
        data = json.loads(export_json(compare(OLD, NEW), timestamp=when))
        assert data["timestamp"] == "2024-05-01T12:30:00.000Z"

    def test_explicit_statistics_used(self) -> None:
        result = compare(OLD, NEW)
        stats = statistics(compare({}, {"x": 1}))
        data = json.loads(export_json(result, stats=stats))
        assert data["statistics"]["added"] == 1
        assert data["statistics"]["removed"] == 0

    def test_indented(self) -> None:
        assert '\n  "statistics"' in export_json(compare(OLD, NEW))


class TestExportText:
    def test_sections(self) -> None:
        text = export_text(compare(OLD, NEW))
        assert text.startswith("maDMP Comparison Report\n" + "=" * 50 + "\n")
        assert "Added Fields:\n" in text
        assert "Removed Fields:\n" in text
        assert "Modified Fields:\n" in text

    def test_lines(self) -> None:
        text = export_text(compare(OLD, NEW))
        assert '+ dmp.dataset[1]: {"id":2}\n' in text
        assert "- dmp.language: eng\n" in text
        assert "~ dmp.title:\n  Old: Old\n  New: New\n" in text

    def test_unchanged_not_listed(self) -> None:
        assert "dmp.dataset[0].id" not in export_text(compare(OLD, NEW))

    def test_empty_result(self) -> None:
        text = export_text(compare({}, {}))
        assert "+ " not in text
        assert "- " not in text
        assert "~ " not in text

    def test_value_length_from_config(self) -> None:
        text = export_text(
            compare({}, {"note": "abcdefgh"}), config=DiffConfig(report_value_length=4)
        )
        assert "+ note: abcd...\n" in text
