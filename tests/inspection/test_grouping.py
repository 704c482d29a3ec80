"""Tests for prefix grouping of environment variables."""

import pytest

from envscope.inspection.grouping import group_variables, prefix_of
from envscope.inspection.types import KeyValuePair


def _pairs(*keys: str) -> list[KeyValuePair]:
    """Build sorted pairs whose value is the lowercase key."""
    return [KeyValuePair(key, key.lower()) for key in sorted(keys)]


def _keys(pairs) -> list[str]:
    return [pair.key for pair in pairs]


class TestPrefixOf:
    """Tests for prefix_of()."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("GITHUB_SHA", "GITHUB"),
            ("HOME", None),
            ("A__B", "A"),
            ("_LEADING", ""),
            ("TRAILING_", "TRAILING"),
        ],
    )
    def test_first_delimiter_wins(self, key: str, expected: str | None) -> None:
        """Prefix is everything before the first delimiter."""
        assert prefix_of(key) == expected

    def test_custom_delimiter(self) -> None:
        """Any single character can split keys."""
        assert prefix_of("a.b.c", ".") == "a"
        assert prefix_of("a_b", ".") is None


class TestGroupVariables:
    """Tests for group_variables()."""

    def test_example_environment(self) -> None:
        """HOME and PATH are singles, GITHUB_* forms a section."""
        grouped = group_variables(_pairs("HOME", "GITHUB_SHA", "GITHUB_ACTOR", "PATH"))

        assert _keys(grouped.singles) == ["HOME", "PATH"]
        assert list(grouped.groups) == ["GITHUB"]
        assert _keys(grouped.groups["GITHUB"]) == ["GITHUB_ACTOR", "GITHUB_SHA"]

    def test_single_member_prefix_is_demoted(self) -> None:
        """A lone NPM_TOKEN goes to singles, not to an NPM section."""
        grouped = group_variables(_pairs("NPM_TOKEN"))

        assert _keys(grouped.singles) == ["NPM_TOKEN"]
        assert grouped.groups == {}

    def test_singles_resorted_after_demotion(self) -> None:
        """Demoted variables interleave alphabetically with plain singles."""
        grouped = group_variables(_pairs("ZED", "ALPHA_ONE", "MID", "RUNNER_OS", "RUNNER_TEMP"))

        assert _keys(grouped.singles) == ["ALPHA_ONE", "MID", "ZED"]
        assert list(grouped.groups) == ["RUNNER"]

    def test_sections_ordered_by_prefix(self) -> None:
        """Named sections come out in ascending prefix order."""
        grouped = group_variables(
            _pairs("RUNNER_OS", "RUNNER_ARCH", "CI_A", "CI_B", "GITHUB_SHA", "GITHUB_REF")
        )
        assert list(grouped.groups) == ["CI", "GITHUB", "RUNNER"]

    def test_empty_prefix_group(self) -> None:
        """Leading delimiters share the empty prefix."""
        grouped = group_variables(_pairs("_A", "_B", "X"))

        assert _keys(grouped.groups[""]) == ["_A", "_B"]
        assert _keys(grouped.singles) == ["X"]

    def test_no_loss_no_duplication(self) -> None:
        """Every input key lands in exactly one bucket."""
        keys = ["A", "A_1", "B_1", "B_2", "B_3", "C_", "_D", "_E", "F__G", "H"]
        grouped = group_variables(_pairs(*keys))

        placed = _keys(grouped.singles) + [
            pair.key for members in grouped.groups.values() for pair in members
        ]
        assert sorted(placed) == sorted(keys)
        assert len(placed) == len(set(placed))
        assert len(grouped) == len(keys)

    def test_grouping_threshold(self) -> None:
        """A section exists iff two or more keys share the prefix."""
        keys = ["A_1", "B_1", "B_2", "C_1", "C_2", "C_3"]
        grouped = group_variables(_pairs(*keys))

        for members in grouped.groups.values():
            assert len(members) >= 2
        assert "A" not in grouped.groups
        assert "A_1" in _keys(grouped.singles)

    def test_singles_strictly_sorted(self) -> None:
        """The finalized single bucket is strictly ascending."""
        grouped = group_variables(_pairs("b", "A_x", "C", "a_y", "Z_z", "a"))
        keys = _keys(grouped.singles)
        assert keys == sorted(keys)
        assert len(keys) == len(set(keys))

    def test_custom_delimiter(self) -> None:
        """Grouping honours the configured delimiter."""
        grouped = group_variables(_pairs("app.name", "app.port", "HOME_DIR"), delimiter=".")

        assert _keys(grouped.groups["app"]) == ["app.name", "app.port"]
        assert _keys(grouped.singles) == ["HOME_DIR"]

    def test_empty_input(self) -> None:
        """No variables, no buckets."""
        grouped = group_variables([])
        assert grouped.singles == ()
        assert grouped.groups == {}
        assert len(grouped) == 0
