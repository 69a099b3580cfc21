"""Tests for document normalization and serialization."""

from __future__ import annotations

import datetime
import itertools
import math

import pytest

from jsonscope.core.normalizer import DiffComparisonFailure, normalize, stringify


class TestNormalize:
    """Tests for normalize()."""

    def test_sorts_keys_recursively(self):
        """Keys are sorted at every level; arrays keep their order."""
        value = {"b": 1, "a": [{"d": 2, "c": 3}, 2, 1]}
        result = normalize(value)
        assert list(result) == ["a", "b"]
        assert list(result["a"][0]) == ["c", "d"]
        assert result["a"][1:] == [2, 1]

    def test_primitives_unchanged(self):
        """Primitives pass through as-is."""
        for value in (None, True, 0, 1.5, "text"):
            assert normalize(value) == value

    def test_idempotent(self, nested_document):
        """Normalizing twice gives the same result as normalizing once."""
        once = normalize(nested_document)
        assert normalize(once) == once
        assert stringify(normalize(once)) == stringify(once)

    def test_key_permutations_serialize_identically(self):
        """Any key order produces the same normalized text."""
        items = [("zeta", 1), ("alpha", {"y": 2, "x": 1}), ("mid", [3, 2])]
        outputs = {
            stringify(normalize(dict(permutation)))
            for permutation in itertools.permutations(items)
        }
        assert len(outputs) == 1

    def test_ordinal_key_order(self):
        """Keys sort by code point: uppercase before lowercase."""
        assert list(normalize({"b": 1, "B": 2, "a": 3})) == ["B", "a", "b"]

    def test_does_not_mutate_input(self):
        """The input document keeps its key order."""
        value = {"b": 1, "a": 2}
        normalize(value)
        assert list(value) == ["b", "a"]


class TestStringify:
    """Tests for stringify()."""

    def test_none_is_empty(self):
        """An absent document serializes to the empty string."""
        assert stringify(None) == ""

    def test_indented_layout(self):
        """Output has one member per line and no trailing newline."""
        assert stringify({"x": 1, "y": [True, None]}) == (
            '{\n  "x": 1,\n  "y": [\n    true,\n    null\n  ]\n}'
        )

    def test_custom_indent(self):
        """Indentation follows the indent argument."""
        assert stringify({"x": 1}, indent=4) == '{\n    "x": 1\n}'

    def test_non_ascii_kept(self):
        """Non-ASCII text is not escaped."""
        assert stringify({"name": "Zoë"}) == '{\n  "name": "Zoë"\n}'

    def test_dates_use_iso_format(self):
        """TOML date leaves serialize as ISO strings."""
        value = {"when": datetime.date(2024, 5, 1)}
        assert stringify(value) == '{\n  "when": "2024-05-01"\n}'

    def test_cycle_raises_comparison_failure(self):
        """A cyclic document cannot be serialized."""
        value: dict = {}
        value["self"] = value
        with pytest.raises(DiffComparisonFailure):
            stringify(value)

    def test_unserializable_leaf_raises_comparison_failure(self):
        """Leaves with no serialized form are reported."""
        with pytest.raises(DiffComparisonFailure):
            stringify({"obj": object()})

    def test_nan_is_serialized(self):
        """NaN from JSON5 input serializes instead of failing."""
        assert stringify([math.nan]) == "[\n  NaN\n]"
