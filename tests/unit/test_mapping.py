"""Tests for toolbelt.mapping module."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from toolbelt.mapping import (
    from_pairs,
    get_or_default,
    map_items,
    map_values,
    merge,
    sanitized,
    update_from,
    value_of_type,
)

small_dicts = st.dictionaries(st.text(max_size=3), st.integers(), max_size=8)


class TestFromPairs:
    """Tests for building dicts from pairs."""

    def test_later_duplicates_win(self) -> None:
        """Test later pairs overwrite earlier ones."""
        assert from_pairs([("a", 1), ("b", 2), ("a", 3)]) == {"a": 3, "b": 2}

    def test_empty(self) -> None:
        """Test no pairs gives an empty dict."""
        assert from_pairs([]) == {}


class TestMapValues:
    """Tests for value transforms."""

    def test_transforms_values_and_keeps_keys(self) -> None:
        """Test every value is transformed."""
        assert map_values({"a": 1, "b": 2}, lambda v: v * 10) == {"a": 10, "b": 20}

    def test_transform_failure_propagates_without_mutation(self) -> None:
        """Test a failing transform raises and leaves the input intact."""
        source = {"a": "1", "b": "x", "c": "3"}

        with pytest.raises(ValueError):
            map_values(source, int)

        assert source == {"a": "1", "b": "x", "c": "3"}

    def test_map_items(self) -> None:
        """Test keys and values can both be transformed."""
        result = map_items({"a": 1, "b": 2}, lambda k, v: (k.upper(), v + 1))
        assert result == {"A": 2, "B": 3}


class TestMerge:
    """Tests for right-biased merging."""

    def test_right_wins_on_collision(self) -> None:
        """Test the right operand's value wins."""
        assert merge({"a": 1, "b": 2}, {"b": 3, "c": 4}) == {"a": 1, "b": 3, "c": 4}

    def test_inputs_untouched(self) -> None:
        """Test merge returns a new dict."""
        left, right = {"a": 1}, {"a": 2}
        merge(left, right)
        assert left == {"a": 1}
        assert right == {"a": 2}

    def test_update_from_mutates_target(self) -> None:
        """Test in-place update overwrites collisions."""
        target = {"a": 1, "b": 2}
        update_from(target, {"b": 20, "c": 30})
        assert target == {"a": 1, "b": 20, "c": 30}

    @given(small_dicts, small_dicts)
    def test_merge_contains_all_keys_and_prefers_right(
        self, left: dict[str, int], right: dict[str, int]
    ) -> None:
        """Property: merge has every key; shared keys take the right value."""
        merged = merge(left, right)
        assert set(merged) == set(left) | set(right)
        for key, value in right.items():
            assert merged[key] == value
        for key in set(left) - set(right):
            assert merged[key] == left[key]


class TestReads:
    """Tests for defaulted and typed reads."""

    def test_get_or_default_present(self) -> None:
        """Test stored values are returned."""
        assert get_or_default({"a": 1}, "a", 5) == 1

    def test_get_or_default_missing(self) -> None:
        """Test the default is returned for missing keys."""
        assert get_or_default({"a": 1}, "b", 5) == 5

    def test_get_or_default_keeps_falsy_values(self) -> None:
        """Test a stored falsy value is not replaced by the default."""
        assert get_or_default({"a": 0}, "a", 5) == 0

    def test_value_of_type_match(self) -> None:
        """Test values of the expected type are returned."""
        assert value_of_type({"retries": 3}, "retries", int, 0) == 3

    def test_value_of_type_mismatch(self) -> None:
        """Test values of another type fall back to the default."""
        assert value_of_type({"retries": "3"}, "retries", int, 0) == 0

    def test_value_of_type_missing(self) -> None:
        """Test missing keys fall back to the default (None if omitted)."""
        assert value_of_type({}, "retries", int, 7) == 7
        assert value_of_type({}, "retries", int) is None


class TestSanitized:
    """Tests for dropping None values."""

    def test_drops_none(self) -> None:
        """Test None entries are removed and others kept."""
        assert sanitized({"a": 1, "b": None, "c": 3}) == {"a": 1, "c": 3}

    def test_keeps_falsy_values(self) -> None:
        """Test 0, empty string and False are not treated as absent."""
        assert sanitized({"a": 0, "b": "", "c": False, "d": None}) == {
            "a": 0,
            "b": "",
            "c": False,
        }
