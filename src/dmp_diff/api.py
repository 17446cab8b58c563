"""Public API functions for dmp-diff.

``compare`` creates a fresh TreeComparator per call so no state is shared
between calls.  ``statistics`` and ``transformation_descriptors`` live in
``dmp_diff.aggregator`` and are re-exported from the package root.
"""

from __future__ import annotations

from typing import Any

from dmp_diff.comparator import TreeComparator
from dmp_diff.config import DiffConfig
from dmp_diff.history import RevisionHistory, RevisionSummary
from dmp_diff.result import ClassificationResult

__all__ = ["compare", "compare_revisions", "is_identical"]


def compare(
    old: Any,
    new: Any,
    config: DiffConfig | None = None,
) -> ClassificationResult:
    """Compare two JSON values and classify every path.

    Args:
        old:    Original JSON value (dict, list, str, int, float, bool, None).
        new:    Revised JSON value.
        config: Comparison options. Defaults to ``DiffConfig()`` when None.

    Returns:
        A ``ClassificationResult`` with ``added``, ``removed``, ``modified``
        and ``unchanged`` records in traversal order.

    Raises:
        InputError: If either value is not JSON-shaped.
    """
    return TreeComparator(config=config).compare(old, new)


def is_identical(old: Any, new: Any, config: DiffConfig | None = None) -> bool:
    """Return True if nothing was added, removed or modified between the values."""
    return not compare(old, new, config=config).has_changes()


def compare_revisions(
    docs: list[Any],
    config: DiffConfig | None = None,
) -> RevisionSummary:
    """Compare each consecutive pair of revisions in ``docs`` (oldest first).

    Returns:
        A ``RevisionSummary`` with one step per pair plus the mean and
        population standard deviation of the steps' change percentages.
        Lists with fewer than two revisions yield no steps and 0.0 figures.
    """
    return RevisionHistory(config=config).summarize(docs)
