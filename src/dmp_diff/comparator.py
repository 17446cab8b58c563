"""TreeComparator: lock-step structural walk over two JSON documents.

Every reachable path is classified as added, removed, modified or
unchanged and recorded in a ClassificationResult.

Rules applied at each path, in order:

1. Both sides null: UNCHANGED (value null).
2. One side null: ADDED with the new value, or REMOVED with the old one.
   A missing key or index is treated exactly like an explicit null.
3. Kinds differ (object / array / primitive): one MODIFIED record carrying
   both kinds; the mismatched subtrees are not descended into.
4. Two objects: visit the key union in the configured order.  Keys on
   both sides are descended into; a key on one side only is reported once
   as REMOVED or ADDED with its whole value.
5. Two arrays: compare element by element by position.  Surplus elements
   are reported once each as REMOVED (old longer) or ADDED (new longer).
6. Two primitives: UNCHANGED when exactly equal, otherwise MODIFIED.

The walk uses an explicit stack so very deep documents do not hit the
interpreter's recursion limit.  Frames are pushed in reverse so records
come out in depth-first pre-order, identical to a recursive descent.
"""

from __future__ import annotations

from typing import Any

from dmp_diff.config import DiffConfig, KeyOrder
from dmp_diff.log import logger
from dmp_diff.paths import join_index, join_key
from dmp_diff.result import ChangeRecord, ClassificationResult
from dmp_diff.values import ValueKind, ensure_json, primitives_equal, value_kind

__all__ = ["TreeComparator"]

# Marks a side that has no member at a key or index
_MISSING: Any = object()


class TreeComparator:
    """Structural comparator for JSON documents.

    Holds only its immutable configuration, so one instance can be reused
    for any number of comparisons.

    Example::

        from dmp_diff.comparator import TreeComparator

        cmp = TreeComparator()
        result = cmp.compare({"dmp": {"title": "Old"}}, {"dmp": {"title": "New"}})
        result.modified[0].path   # "dmp.title"
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config: DiffConfig = config if config is not None else DiffConfig()

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, old: Any, new: Any) -> ClassificationResult:
        """Classify every path of two JSON values.

        Args:
            old: The original document (dict, list, str, int, float, bool, None).
            new: The revised document.

        Returns:
            A ``ClassificationResult`` whose four tuples are in traversal order.

        Raises:
            InputError: If either document is not JSON-shaped.  Raised before
                any traversal, never partway through.
        """
        ensure_json(old, "old document")
        ensure_json(new, "new document")

        added: list[ChangeRecord] = []
        removed: list[ChangeRecord] = []
        modified: list[ChangeRecord] = []
        unchanged: list[ChangeRecord] = []

        stack: list[tuple[Any, Any, str]] = [(old, new, "")]
        while stack:
            old_val, new_val, path = stack.pop()

            if old_val is _MISSING:
                added.append(ChangeRecord.added(path, new_val))
                continue
            if new_val is _MISSING:
                removed.append(ChangeRecord.removed(path, old_val))
                continue

            if old_val is None and new_val is None:
                unchanged.append(ChangeRecord.unchanged(path, None))
                continue
            if old_val is None:
                added.append(ChangeRecord.added(path, new_val))
                continue
            if new_val is None:
                removed.append(ChangeRecord.removed(path, old_val))
                continue

            old_kind = value_kind(old_val)
            if old_kind != value_kind(new_val):
                modified.append(ChangeRecord.modified(path, old_val, new_val))
                continue

            if old_kind == ValueKind.OBJECT:
                stack.extend(reversed(self._object_frames(old_val, new_val, path)))
            elif old_kind == ValueKind.ARRAY:
                stack.extend(reversed(self._array_frames(old_val, new_val, path)))
            elif primitives_equal(old_val, new_val):
                unchanged.append(ChangeRecord.unchanged(path, old_val))
            else:
                modified.append(ChangeRecord.modified(path, old_val, new_val))

        result = ClassificationResult(
            added=tuple(added),
            removed=tuple(removed),
            modified=tuple(modified),
            unchanged=tuple(unchanged),
        )
        logger.debug(
            "Compared documents: %d added, %d removed, %d modified, %d unchanged",
            len(added),
            len(removed),
            len(modified),
            len(unchanged),
        )
        return result

    # ------------------------------------------------------------------
    # Child frames
    # ------------------------------------------------------------------

    def _ordered_keys(self, old: dict[str, Any], new: dict[str, Any]) -> list[str]:
        """Return the union of both objects' keys in the configured order."""
        keys = list(old)
        keys.extend(k for k in new if k not in old)
        if self._config.key_order == KeyOrder.SORTED:
            keys.sort()
        return keys

    def _object_frames(
        self, old: dict[str, Any], new: dict[str, Any], path: str
    ) -> list[tuple[Any, Any, str]]:
        return [
            (old.get(key, _MISSING), new.get(key, _MISSING), join_key(path, key))
            for key in self._ordered_keys(old, new)
        ]

    def _array_frames(
        self, old: list[Any], new: list[Any], path: str
    ) -> list[tuple[Any, Any, str]]:
        frames: list[tuple[Any, Any, str]] = []
        for i in range(max(len(old), len(new))):
            old_item = old[i] if i < len(old) else _MISSING
            new_item = new[i] if i < len(new) else _MISSING
            frames.append((old_item, new_item, join_index(path, i)))
        return frames
