"""ChangeRecord and ClassificationResult: the output of a comparison.

A ClassificationResult partitions every compared path into four ordered
tuples of ChangeRecords.  Both types are frozen; consumers read them but
never mutate them.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from dmp_diff.values import ValueKind, value_kind

__all__ = ["ChangeKind", "ChangeRecord", "ClassificationResult"]


class ChangeKind(StrEnum):
    """Classification of a single path."""

    ADDED = auto()
    REMOVED = auto()
    MODIFIED = auto()
    UNCHANGED = auto()


@dataclass(frozen=True, slots=True)
class ChangeRecord:
    """One classified outcome at a specific path.

    ADDED, REMOVED and UNCHANGED records carry ``value`` and its
    ``value_type``.  MODIFIED records carry ``old_value``/``new_value`` and
    ``old_type``/``new_type``; the two types are equal for a primitive
    change and differ when the kind of the node changed.

    Use the ``added``/``removed``/``modified``/``unchanged`` constructors
    rather than building records by hand.
    """

    path: str
    kind: ChangeKind
    value: Any = None
    old_value: Any = None
    new_value: Any = None
    value_type: ValueKind | None = None
    old_type: ValueKind | None = None
    new_type: ValueKind | None = None

    @classmethod
    def added(cls, path: str, value: Any) -> ChangeRecord:
        return cls(path, ChangeKind.ADDED, value=value, value_type=value_kind(value))

    @classmethod
    def removed(cls, path: str, value: Any) -> ChangeRecord:
        return cls(path, ChangeKind.REMOVED, value=value, value_type=value_kind(value))

    @classmethod
    def unchanged(cls, path: str, value: Any) -> ChangeRecord:
        return cls(
            path, ChangeKind.UNCHANGED, value=value, value_type=value_kind(value)
        )

    @classmethod
    def modified(cls, path: str, old_value: Any, new_value: Any) -> ChangeRecord:
        return cls(
            path,
            ChangeKind.MODIFIED,
            old_value=old_value,
            new_value=new_value,
            old_type=value_kind(old_value),
            new_type=value_kind(new_value),
        )

    @property
    def is_type_change(self) -> bool:
        """True for a MODIFIED record whose node changed kind."""
        return self.kind == ChangeKind.MODIFIED and self.old_type != self.new_type

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping holding only the fields this kind populates."""
        if self.kind == ChangeKind.MODIFIED:
            data: dict[str, Any] = {
                "path": self.path,
                "oldValue": self.old_value,
                "newValue": self.new_value,
            }
            if self.is_type_change:
                data["oldType"] = str(self.old_type)
                data["newType"] = str(self.new_type)
            else:
                data["type"] = str(self.old_type)
            return data
        return {"path": self.path, "value": self.value, "type": str(self.value_type)}


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """The four-way partition produced by one comparison.

    Attributes:
        added:     Records for nodes only present in the new document.
        removed:   Records for nodes only present in the old document.
        modified:  Records for nodes whose value or kind changed.
        unchanged: Records for leaves that are identical on both sides.

    Each tuple is in depth-first pre-order traversal order.
    """

    added: tuple[ChangeRecord, ...] = ()
    removed: tuple[ChangeRecord, ...] = ()
    modified: tuple[ChangeRecord, ...] = ()
    unchanged: tuple[ChangeRecord, ...] = ()
    _index: dict[str, ChangeKind] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        index: dict[str, ChangeKind] = {}
        for record in self.records():
            index.setdefault(record.path, record.kind)
        object.__setattr__(self, "_index", index)

    def records(self) -> Iterator[ChangeRecord]:
        """Iterate every record: added, removed, modified, then unchanged."""
        yield from self.added
        yield from self.removed
        yield from self.modified
        yield from self.unchanged

    def has_changes(self) -> bool:
        """True if anything was added, removed or modified."""
        return bool(self.added or self.removed or self.modified)

    def change_kind(self, path: str) -> ChangeKind | None:
        """Return how ``path`` was classified, or None if no record addresses it."""
        return self._index.get(path)

    def changed_paths(self) -> list[str]:
        """Return the sorted, de-duplicated paths of all non-unchanged records."""
        paths = {r.path for r in (*self.added, *self.removed, *self.modified)}
        return sorted(paths)

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Return a JSON-serialisable mapping of the four record lists."""
        return {
            "added": [r.to_dict() for r in self.added],
            "removed": [r.to_dict() for r in self.removed],
            "modified": [r.to_dict() for r in self.modified],
            "unchanged": [r.to_dict() for r in self.unchanged],
        }
