"""ValueKind StrEnum and the structural helpers built on it.

``value_kind`` is the four-way split the comparator branches on.
``ensure_json`` rejects anything that is not JSON-shaped before a
comparison starts.
"""

from __future__ import annotations

import math
from enum import StrEnum, auto
from typing import Any

from dmp_diff.errors import InputError
from dmp_diff.log import logger
from dmp_diff.paths import join_index, join_key

__all__ = ["JsonValue", "ValueKind", "ensure_json", "primitives_equal", "value_kind"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class ValueKind(StrEnum):
    """Structural kind of a JSON value.

    - OBJECT    -> "object"    : JSON object {}
    - ARRAY     -> "array"     : JSON array []
    - PRIMITIVE -> "primitive" : string, number or boolean
    - NULL      -> "null"      : JSON null
    """

    OBJECT = auto()
    ARRAY = auto()
    PRIMITIVE = auto()
    NULL = auto()


def value_kind(value: Any) -> ValueKind:
    """Return the structural kind of an already-validated JSON value."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, list):
        return ValueKind.ARRAY
    return ValueKind.PRIMITIVE


def primitives_equal(left: Any, right: Any) -> bool:
    """Exact JSON equality of two primitives, without coercion.

    Booleans only equal booleans and strings only equal strings, so
    ``True != 1`` and ``"1" != 1``.  Numbers compare by value, so
    ``1 == 1.0`` as in JSON.
    """
    # bool MUST be checked before numbers: bool subclasses int
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if isinstance(left, str) or isinstance(right, str):
        return isinstance(left, str) and isinstance(right, str) and left == right
    return bool(left == right)


def ensure_json(value: Any, label: str = "document") -> None:
    """Check that ``value`` is JSON-shaped, walking it with an explicit stack.

    Accepted: ``dict`` with ``str`` keys, ``list``, ``str``, ``int``,
    finite ``float``, ``bool`` and ``None``.

    Args:
        value: The value to check.
        label: Name of the input used in error messages.

    Raises:
        InputError: On the first non-JSON value found, naming its path.
    """
    stack: list[tuple[Any, str]] = [(value, "")]
    while stack:
        node, path = stack.pop()
        if node is None or isinstance(node, (str, bool, int)):
            continue
        if isinstance(node, float):
            if not math.isfinite(node):
                _reject(label, path, f"non-finite number {node!r}")
            continue
        if isinstance(node, dict):
            for key, child in node.items():
                if not isinstance(key, str):
                    _reject(label, path, f"non-string object key {key!r}")
                stack.append((child, join_key(path, key)))
            continue
        if isinstance(node, list):
            stack.extend((child, join_index(path, i)) for i, child in enumerate(node))
            continue
        _reject(label, path, f"unsupported value type {type(node).__name__!r}")


def _reject(label: str, path: str, reason: str) -> None:
    where = f"at {path!r}" if path else "at the root"
    msg = f"Cannot compare {label}: {reason} {where}"
    logger.debug(msg)
    raise InputError(msg)
