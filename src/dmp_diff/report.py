"""Diff reports: a JSON export and a plain-text summary of a comparison."""

from __future__ import annotations

import json
from datetime import datetime, timezone

from dmp_diff.aggregator import DiffStatistics, format_value, statistics
from dmp_diff.config import DiffConfig
from dmp_diff.result import ClassificationResult

__all__ = ["export_json", "export_text"]

_RULE = "-" * 50


def export_json(
    result: ClassificationResult,
    stats: DiffStatistics | None = None,
    timestamp: datetime | None = None,
) -> str:
    """Serialise a comparison as indented JSON.

    The document holds an ISO-8601 ``timestamp``, the ``statistics`` and
    the four ``changes`` lists.  ``stats`` is computed from ``result`` and
    ``timestamp`` defaults to the current UTC time when not given.
    """
    stats = stats if stats is not None else statistics(result)
    when = timestamp if timestamp is not None else datetime.now(timezone.utc)
    data = {
        "timestamp": when.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "statistics": stats.to_dict(),
        "changes": result.to_dict(),
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def export_text(result: ClassificationResult, config: DiffConfig | None = None) -> str:
    """Render the added, removed and modified records as a plain-text report."""
    width = (config if config is not None else DiffConfig()).report_value_length

    lines = ["maDMP Comparison Report", "=" * 50, "", "Added Fields:", _RULE]
    lines.extend(f"+ {r.path}: {format_value(r.value, width)}" for r in result.added)

    lines.extend(["", "Removed Fields:", _RULE])
    lines.extend(f"- {r.path}: {format_value(r.value, width)}" for r in result.removed)

    lines.extend(["", "Modified Fields:", _RULE])
    for r in result.modified:
        lines.append(f"~ {r.path}:")
        lines.append(f"  Old: {format_value(r.old_value, width)}")
        lines.append(f"  New: {format_value(r.new_value, width)}")

    return "\n".join(lines) + "\n"
