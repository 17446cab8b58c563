"""DiffConfig and KeyOrder for comparator and aggregator configuration.

DiffConfig is a frozen (immutable) dataclass holding the parameters that
shape a comparison's output.  KeyOrder selects the fixed order in which
object keys are visited.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["DiffConfig", "KeyOrder"]


class KeyOrder(StrEnum):
    """Order in which the union of two objects' keys is visited.

    - DOCUMENT: keys of the old object in their order, then keys only
      present in the new object in their order.
    - SORTED:   lexicographic order of the key union.
    """

    DOCUMENT = auto()
    SORTED = auto()


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for a comparison.

    Attributes:
        key_order: How object keys are ordered during traversal.
        description_value_length: Maximum characters of a value shown in a
            transformation descriptor's description (>= 1).
        report_value_length: Maximum characters of a value shown in a text
            report (>= 1).
    """

    key_order: KeyOrder = KeyOrder.DOCUMENT
    description_value_length: int = 50
    report_value_length: int = 100

    def __post_init__(self) -> None:
        if not isinstance(self.key_order, KeyOrder):
            msg = f"key_order must be a KeyOrder, got {self.key_order!r}"
            raise ValueError(msg)
        if self.description_value_length < 1:
            msg = (
                "description_value_length must be >= 1, "
                f"got {self.description_value_length}"
            )
            raise ValueError(msg)
        if self.report_value_length < 1:
            msg = f"report_value_length must be >= 1, got {self.report_value_length}"
            raise ValueError(msg)
