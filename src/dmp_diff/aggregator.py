"""Aggregator: statistics and transformation descriptors derived from a diff.

Both projections only read the public shape of a ClassificationResult and
are recomputed on every call.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from dmp_diff.config import DiffConfig
from dmp_diff.result import ChangeRecord, ClassificationResult

__all__ = [
    "DescriptorKind",
    "DiffStatistics",
    "TransformationDescriptor",
    "format_value",
    "statistics",
    "transformation_descriptors",
]


class DescriptorKind(StrEnum):
    """The edit a TransformationDescriptor describes."""

    ADDITION = auto()
    DELETION = auto()
    MODIFICATION = auto()


@dataclass(frozen=True, slots=True)
class DiffStatistics:
    """Summary counts of a ClassificationResult.

    Attributes:
        total_changes: ``added + removed + modified``.
        added: Number of ADDED records.
        removed: Number of REMOVED records.
        modified: Number of MODIFIED records.
        unchanged: Number of UNCHANGED records.
        change_percentage: ``round(100 * total_changes / (total_changes +
            unchanged))``, rounded half up; 0 when nothing was compared.
    """

    total_changes: int
    added: int
    removed: int
    modified: int
    unchanged: int
    change_percentage: int

    def to_dict(self) -> dict[str, int]:
        return {
            "totalChanges": self.total_changes,
            "added": self.added,
            "removed": self.removed,
            "modified": self.modified,
            "unchanged": self.unchanged,
            "changePercentage": self.change_percentage,
        }


@dataclass(frozen=True, slots=True)
class TransformationDescriptor:
    """How to turn the old document into the new one at a single path.

    Attributes:
        kind: ADDITION, DELETION or MODIFICATION.
        path: Path of the changed node.
        description: Human-readable summary of the edit.
        query: JSONata-style transform expression performing the edit.
        value: The added value (ADDITION only).
        old_value: The removed or replaced value (DELETION, MODIFICATION).
        new_value: The replacement value (MODIFICATION only).
    """

    kind: DescriptorKind
    path: str
    description: str
    query: str
    value: Any = None
    old_value: Any = None
    new_value: Any = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": str(self.kind),
            "path": self.path,
            "query": self.query,
            "description": self.description,
        }
        if self.kind == DescriptorKind.ADDITION:
            data["value"] = self.value
        else:
            data["oldValue"] = self.old_value
        if self.kind == DescriptorKind.MODIFICATION:
            data["newValue"] = self.new_value
        return data


# Integral numbers at or above this magnitude display in exponent form
_EXP_LIMIT = 1e21


def _to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def format_value(value: Any, max_length: int = 100) -> str:
    """Render a JSON value for display, truncated to ``max_length`` characters.

    ``None`` renders as ``null``, booleans as ``true``/``false``, objects
    and arrays as compact JSON, integral floats below 1e21 without a
    fraction or exponent (``1.0`` -> ``1``), everything else via ``str``.
    Truncated text is followed by ``...``.
    """
    if value is None:
        text = "null"
    elif isinstance(value, (dict, list, bool)):
        text = _to_json(value)
    elif isinstance(value, float) and value.is_integer() and abs(value) < _EXP_LIMIT:
        text = str(int(value))
    else:
        text = str(value)
    return text[:max_length] + "..." if len(text) > max_length else text


def statistics(result: ClassificationResult) -> DiffStatistics:
    """Return summary statistics for a comparison result."""
    added = len(result.added)
    removed = len(result.removed)
    modified = len(result.modified)
    unchanged = len(result.unchanged)
    total_changes = added + removed + modified

    compared = total_changes + unchanged
    percentage = math.floor(100 * total_changes / compared + 0.5) if compared else 0

    return DiffStatistics(
        total_changes=total_changes,
        added=added,
        removed=removed,
        modified=modified,
        unchanged=unchanged,
        change_percentage=percentage,
    )


def _addition(record: ChangeRecord) -> TransformationDescriptor:
    return TransformationDescriptor(
        kind=DescriptorKind.ADDITION,
        path=record.path,
        description=f"Add field {record.path}",
        query=f'$ ~> | $ | {{ "{record.path}": {_to_json(record.value)} }} |',
        value=record.value,
    )


def _deletion(record: ChangeRecord) -> TransformationDescriptor:
    return TransformationDescriptor(
        kind=DescriptorKind.DELETION,
        path=record.path,
        description=f"Remove field {record.path}",
        query=f'$ ~> | $ | {{ "{record.path}": undefined }} |',
        old_value=record.value,
    )


def _modification(record: ChangeRecord, max_length: int) -> TransformationDescriptor:
    old_text = format_value(record.old_value, max_length)
    new_text = format_value(record.new_value, max_length)
    return TransformationDescriptor(
        kind=DescriptorKind.MODIFICATION,
        path=record.path,
        description=f"Change {record.path} from {old_text} to {new_text}",
        query=f'$ ~> | $ | {{ "{record.path}": {_to_json(record.new_value)} }} |',
        old_value=record.old_value,
        new_value=record.new_value,
    )


def transformation_descriptors(
    result: ClassificationResult,
    config: DiffConfig | None = None,
) -> list[TransformationDescriptor]:
    """Describe how to turn the old document into the new one.

    Additions come first, then deletions, then modifications; each group
    keeps the traversal order of its records.  UNCHANGED records produce
    no descriptor.

    Args:
        result: A comparison result.
        config: Supplies ``description_value_length``.  Defaults to
            ``DiffConfig()`` when None.
    """
    config = config if config is not None else DiffConfig()
    descriptors = [_addition(r) for r in result.added]
    descriptors.extend(_deletion(r) for r in result.removed)
    descriptors.extend(
        _modification(r, config.description_value_length) for r in result.modified
    )
    return descriptors
