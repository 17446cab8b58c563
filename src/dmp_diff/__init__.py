"""dmp-diff - structural comparison of maDMP and other JSON documents."""

from __future__ import annotations

from dmp_diff.aggregator import (
    DescriptorKind,
    DiffStatistics,
    TransformationDescriptor,
    format_value,
    statistics,
    transformation_descriptors,
)
from dmp_diff.api import compare, compare_revisions, is_identical
from dmp_diff.comparator import TreeComparator
from dmp_diff.config import DiffConfig, KeyOrder
from dmp_diff.errors import DiffError, InputError, PathError
from dmp_diff.log import init_logging, set_log_level
from dmp_diff.paths import (
    IndexSegment,
    KeySegment,
    format_path,
    is_descendant,
    parse_path,
    resolve_path,
)
from dmp_diff.result import ChangeKind, ChangeRecord, ClassificationResult
from dmp_diff.values import ValueKind

__version__: str = "0.1.0"
__all__: list[str] = [
    "ChangeKind",
    "ChangeRecord",
    "ClassificationResult",
    "DescriptorKind",
    "DiffConfig",
    "DiffError",
    "DiffStatistics",
    "IndexSegment",
    "InputError",
    "KeyOrder",
    "KeySegment",
    "PathError",
    "TransformationDescriptor",
    "TreeComparator",
    "ValueKind",
    "compare",
    "compare_revisions",
    "format_path",
    "format_value",
    "init_logging",
    "is_descendant",
    "is_identical",
    "parse_path",
    "resolve_path",
    "set_log_level",
    "statistics",
    "transformation_descriptors",
]
