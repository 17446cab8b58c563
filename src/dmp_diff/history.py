"""RevisionHistory: change statistics across successive revisions of a document.

Each consecutive pair of revisions ``(docs[i], docs[i + 1])`` is compared
and summarised with ``statistics``.  The summary also reports how much the
document churns between revisions:

    percentages = [statistics(compare(docs[i], docs[i + 1])).change_percentage
                   for i in range(len(docs) - 1)]
    mean = mean(percentages)
    std  = std(percentages)      # population std (ddof=0)

With fewer than two revisions there is nothing to compare and both
figures are 0.0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from dmp_diff.aggregator import DiffStatistics, statistics
from dmp_diff.comparator import TreeComparator
from dmp_diff.config import DiffConfig
from dmp_diff.result import ClassificationResult

__all__ = ["RevisionHistory", "RevisionStep", "RevisionSummary"]


@dataclass(frozen=True, slots=True)
class RevisionStep:
    """Comparison of revision ``source`` against revision ``target``."""

    source: int
    target: int
    result: ClassificationResult
    statistics: DiffStatistics


@dataclass(frozen=True, slots=True)
class RevisionSummary:
    """Per-step comparisons plus churn figures over a revision history.

    Attributes:
        steps: One RevisionStep per consecutive pair, oldest first.
        mean_change_percentage: Mean of the steps' change percentages.
        std_change_percentage: Population standard deviation of the same.
    """

    steps: tuple[RevisionStep, ...]
    mean_change_percentage: float
    std_change_percentage: float

    @property
    def total_changes(self) -> int:
        return sum(step.statistics.total_changes for step in self.steps)


class RevisionHistory:
    """Compares an ordered list of document revisions pairwise.

    A single ``TreeComparator`` is reused for every step.

    Example::

        from dmp_diff.history import RevisionHistory

        summary = RevisionHistory().summarize([{"v": 1}, {"v": 2}, {"v": 2}])
        [s.statistics.change_percentage for s in summary.steps]   # [100, 0]
        summary.mean_change_percentage                            # 50.0
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._comparator = TreeComparator(config=config)

    def summarize(self, docs: list[Any]) -> RevisionSummary:
        """Compare every consecutive pair of revisions.

        Args:
            docs: JSON documents, oldest revision first.

        Raises:
            InputError: If any revision is not JSON-shaped.
        """
        steps = []
        for i in range(len(docs) - 1):
            result = self._comparator.compare(docs[i], docs[i + 1])
            steps.append(RevisionStep(i, i + 1, result, statistics(result)))

        if not steps:
            return RevisionSummary(
                steps=(), mean_change_percentage=0.0, std_change_percentage=0.0
            )

        percentages = np.array(
            [step.statistics.change_percentage for step in steps], dtype=float
        )
        return RevisionSummary(
            steps=tuple(steps),
            mean_change_percentage=float(np.mean(percentages)),
            std_change_percentage=float(np.std(percentages)),
        )
