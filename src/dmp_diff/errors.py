"""Exception types raised by dmp-diff.

Every error subclasses both ``DiffError`` and the builtin it refines, so
callers catching ``TypeError`` or ``ValueError`` keep working.
"""

from __future__ import annotations

__all__ = ["DiffError", "InputError", "PathError"]


class DiffError(Exception):
    """Base class for all dmp-diff errors."""


class InputError(DiffError, TypeError):
    """An input document holds a value that is not JSON-shaped.

    Raised before any traversal begins; there is never a partial result.
    """


class PathError(DiffError, ValueError):
    """A path string is malformed or does not address a node in a document."""
