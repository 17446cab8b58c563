"""Tests for the path model: format_path, parse_path, is_descendant, resolve_path.

Covers:
- Formatting of key and index segments, including root arrays
- Parsing as the inverse of formatting (round-trip on comparator paths)
- Malformed paths raise PathError
- Descendant checks are segment-aware ("ab" is not inside "a")
- Re-descending a document along a path
"""

from __future__ import annotations

import pytest

from dmp_diff import compare
from dmp_diff.errors import PathError
from dmp_diff.paths import (
    IndexSegment,
    KeySegment,
    format_path,
    is_descendant,
    join_index,
    join_key,
    parse_path,
    resolve_path,
)

# ---------------------------------------------------------------------------
# format_path
# ---------------------------------------------------------------------------


class TestFormatPath:
    def test_empty_is_root(self) -> None:
        assert format_path([]) == ""

    def test_single_key(self) -> None:
        assert format_path([KeySegment("dmp")]) == "dmp"

    def test_nested_keys_joined_with_dots(self) -> None:
        assert format_path([KeySegment("dmp"), KeySegment("title")]) == "dmp.title"

    def test_index_appended_to_preceding_segment(self) -> None:
        segments = [KeySegment("dmp"), KeySegment("dataset"), IndexSegment(2)]
        assert format_path(segments) == "dmp.dataset[2]"

    def test_key_after_index(self) -> None:
        segments = [KeySegment("a"), IndexSegment(0), KeySegment("b")]
        assert format_path(segments) == "a[0].b"

    def test_root_array(self) -> None:
        assert format_path([IndexSegment(0)]) == "[0]"
        assert format_path([IndexSegment(1), IndexSegment(3)]) == "[1][3]"

    def test_root_array_then_key(self) -> None:
        assert format_path([IndexSegment(0), KeySegment("id")]) == "[0].id"

    def test_negative_index_rejected(self) -> None:
        with pytest.raises(PathError):
            format_path([IndexSegment(-1)])

    def test_unknown_segment_rejected(self) -> None:
        with pytest.raises(PathError):
            format_path(["a"])  # type: ignore[list-item]

    def test_join_helpers_match_format(self) -> None:
        assert join_key("", "a") == "a"
        assert join_key("a", "b") == "a.b"
        assert join_index("", 0) == "[0]"
        assert join_index("a", 4) == "a[4]"


# ---------------------------------------------------------------------------
# parse_path
# ---------------------------------------------------------------------------


class TestParsePath:
    def test_root(self) -> None:
        assert parse_path("") == []

    def test_keys(self) -> None:
        assert parse_path("dmp.title") == [KeySegment("dmp"), KeySegment("title")]

    def test_multiple_indices(self) -> None:
        assert parse_path("matrix[1][2]") == [
            KeySegment("matrix"),
            IndexSegment(1),
            IndexSegment(2),
        ]

    def test_root_array_then_key(self) -> None:
        assert parse_path("[0].id") == [IndexSegment(0), KeySegment("id")]

    def test_numeric_looking_key_stays_a_key(self) -> None:
        assert parse_path("a.0") == [KeySegment("a"), KeySegment("0")]

    @pytest.mark.parametrize(
        "path",
        ["a..b", ".a", "a.", "a[x]", "a[-1]", "a[1", "a]1[", "a.[0]", "a[0]b"],
    )
    def test_malformed_paths_raise(self, path: str) -> None:
        with pytest.raises(PathError):
            parse_path(path)

    def test_path_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_path("a..b")

    @pytest.mark.parametrize(
        "path",
        ["a", "a.b.c", "a[0]", "a[0].b[12].c", "[0]", "[0][1].x", "dmp.contact.mbox"],
    )
    def test_round_trip(self, path: str) -> None:
        assert format_path(parse_path(path)) == path

    def test_round_trip_on_comparator_output(self) -> None:
        old = {"dmp": {"dataset": [{"title": "a", "tags": [1, 2]}], "x": None}}
        new = {"dmp": {"dataset": [{"title": "b", "tags": [1]}, {}], "y": [[1]]}}
        result = compare(old, new)
        for record in result.records():
            assert format_path(parse_path(record.path)) == record.path


# ---------------------------------------------------------------------------
# is_descendant
# ---------------------------------------------------------------------------


class TestIsDescendant:
    @pytest.mark.parametrize(
        ("ancestor", "candidate"),
        [
            ("a", "a.b"),
            ("a", "a[0]"),
            ("a", "a[0].b.c"),
            ("a[0]", "a[0].b"),
            ("a[0]", "a[0][1]"),
            ("", "a"),
            ("", "[0]"),
        ],
    )
    def test_descendants(self, ancestor: str, candidate: str) -> None:
        assert is_descendant(ancestor, candidate) is True

    @pytest.mark.parametrize(
        ("ancestor", "candidate"),
        [
            ("a", "a"),
            ("a", "ab"),
            ("a", "b.a"),
            ("a.b", "a"),
            ("a[0]", "a[1].b"),
            ("a[1]", "a[10]"),
            ("", ""),
        ],
    )
    def test_non_descendants(self, ancestor: str, candidate: str) -> None:
        assert is_descendant(ancestor, candidate) is False


# ---------------------------------------------------------------------------
# resolve_path
# ---------------------------------------------------------------------------


class TestResolvePath:
    DOC = {"dmp": {"dataset": [{"title": "Survey"}, {"title": "Interviews"}]}}

    def test_root_returns_document(self) -> None:
        assert resolve_path(self.DOC, "") is self.DOC

    def test_nested_lookup(self) -> None:
        assert resolve_path(self.DOC, "dmp.dataset[1].title") == "Interviews"

    def test_root_array(self) -> None:
        assert resolve_path([[1, 2], [3]], "[0][1]") == 2

    def test_missing_key_raises(self) -> None:
        with pytest.raises(PathError, match="no key"):
            resolve_path(self.DOC, "dmp.project")

    def test_index_out_of_range_raises(self) -> None:
        with pytest.raises(PathError, match="no index"):
            resolve_path(self.DOC, "dmp.dataset[2]")

    def test_index_into_object_raises(self) -> None:
        with pytest.raises(PathError):
            resolve_path(self.DOC, "dmp[0]")

    def test_every_recorded_path_resolves(self) -> None:
        old = {"a": [1, {"b": 2}], "c": "x"}
        new = {"a": [1, {"b": 3}, 4], "d": None}
        result = compare(old, new)
        for record in (*result.removed, *result.unchanged):
            assert resolve_path(old, record.path) == record.value
        for record in result.added:
            assert resolve_path(new, record.path) == record.value
        for record in result.modified:
            assert resolve_path(old, record.path) == record.old_value
            assert resolve_path(new, record.path) == record.new_value
