"""pytest plugin for dmp-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from dmp_diff import DiffConfig, compare, transformation_descriptors


@pytest.fixture(scope="session")
def assert_json_unchanged() -> Any:
    """Fixture that returns a callable asserting two JSON documents are identical.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh TreeComparator per call).

    Usage in tests::

        def test_roundtrip(assert_json_unchanged):
            assert_json_unchanged(load(dump(doc)), doc)

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` listing every transformation from
        ``expected`` to ``actual`` when the documents differ.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: DiffConfig | None = None,
    ) -> None:
        result = compare(expected, actual, config=config)
        if result.has_changes():
            descriptions = "\n".join(
                f"  {d.description}"
                for d in transformation_descriptors(result, config=config)
            )
            raise AssertionError(
                f"JSON documents differ: "
                f"added={len(result.added)} removed={len(result.removed)} "
                f"modified={len(result.modified)}\n{descriptions}"
            )

    return _assert
