"""Path model: dotted/bracketed addresses of nodes inside a JSON tree.

Grammar::

    path     := "" | segment ("." segment)*
    segment  := key index* | index+        (index-only only at the start)
    index    := "[" digits "]"

Examples: ``""`` (root), ``"dmp.title"``, ``"dmp.dataset[2].title"``,
``"[0]"`` and ``"[0][1]"`` for documents whose root is an array.

Object keys containing ``.``, ``[`` or ``]`` cannot be addressed
unambiguously and are not supported.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from dmp_diff.errors import PathError

__all__ = [
    "IndexSegment",
    "KeySegment",
    "Segment",
    "format_path",
    "is_descendant",
    "join_index",
    "join_key",
    "parse_path",
    "resolve_path",
]

# One dot-separated part: an optional key followed by zero or more [n] markers
_PART = re.compile(r"([^.\[\]]*)((?:\[\d+\])*)")
_INDEX = re.compile(r"\[(\d+)\]")


@dataclass(frozen=True, slots=True)
class KeySegment:
    """Step into an object member."""

    key: str


@dataclass(frozen=True, slots=True)
class IndexSegment:
    """Step into an array element."""

    index: int


Segment = KeySegment | IndexSegment


def join_key(path: str, key: str) -> str:
    """Return the path of member ``key`` of the object at ``path``."""
    return f"{path}.{key}" if path else key


def join_index(path: str, index: int) -> str:
    """Return the path of element ``index`` of the array at ``path``."""
    return f"{path}[{index}]"


def format_path(segments: Iterable[Segment]) -> str:
    """Join segments into a path string.

    Key segments are joined with ``.``; index segments are appended to the
    preceding segment as ``[n]``.

    Raises:
        PathError: If a segment is neither a ``KeySegment`` nor an
            ``IndexSegment``, or an index is negative.
    """
    path = ""
    for segment in segments:
        if isinstance(segment, IndexSegment):
            if segment.index < 0:
                raise PathError(f"Negative array index in path segment: {segment!r}")
            path = join_index(path, segment.index)
        elif isinstance(segment, KeySegment):
            path = join_key(path, segment.key)
        else:
            raise PathError(f"Unsupported path segment: {segment!r}")
    return path


def parse_path(path: str) -> list[Segment]:
    """Split a path string into segments; the inverse of ``format_path``.

    Args:
        path: A path as produced by the comparator. ``""`` is the root.

    Returns:
        The list of segments, empty for the root path.

    Raises:
        PathError: If ``path`` does not follow the path grammar.
    """
    if path == "":
        return []

    segments: list[Segment] = []
    for position, part in enumerate(path.split(".")):
        match = _PART.fullmatch(part)
        if match is None:
            raise PathError(f"Malformed path {path!r}: bad segment {part!r}")
        key, indices = match.groups()
        if key:
            segments.append(KeySegment(key))
        elif position > 0 or not indices:
            # only a leading segment may be index-only (root array)
            raise PathError(f"Malformed path {path!r}: empty key segment")
        segments.extend(IndexSegment(int(i)) for i in _INDEX.findall(indices))
    return segments


def is_descendant(ancestor: str, candidate: str) -> bool:
    """Return True if ``candidate`` addresses a node strictly inside ``ancestor``.

    The comparison is done on parsed segments, so ``"ab"`` is not a
    descendant of ``"a"`` while ``"a.b"`` and ``"a[0]"`` are.
    """
    ancestor_segments = parse_path(ancestor)
    candidate_segments = parse_path(candidate)
    if len(candidate_segments) <= len(ancestor_segments):
        return False
    return candidate_segments[: len(ancestor_segments)] == ancestor_segments


def resolve_path(document: Any, path: str) -> Any:
    """Descend from the root of ``document`` following ``path``.

    Raises:
        PathError: If the path is malformed or the location does not exist.
    """
    node = document
    for segment in parse_path(path):
        if isinstance(segment, KeySegment):
            if not isinstance(node, dict) or segment.key not in node:
                raise PathError(f"Path {path!r} does not exist: no key {segment.key!r}")
            node = node[segment.key]
        else:
            if not isinstance(node, list) or not 0 <= segment.index < len(node):
                raise PathError(
                    f"Path {path!r} does not exist: no index {segment.index}"
                )
            node = node[segment.index]
    return node
