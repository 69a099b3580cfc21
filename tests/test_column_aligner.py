"""Tests for the line diff and the dual-column alignment."""

from __future__ import annotations

import pytest

from jsonscope.core.column_aligner import (
    AlignedColumns,
    ColumnLine,
    ComparisonResult,
    DiffKind,
    DiffRun,
    align,
    compare_values,
    diff_texts,
    summarize,
)


def joined(lines: list[ColumnLine]) -> str:
    """Rejoin column lines with newlines."""
    return "\n".join(line.text for line in lines)


def expected_side(runs: list[DiffRun], excluded: DiffKind) -> str:
    """Concatenate the runs of one side, one trailing newline dropped per run."""
    parts = []
    for run in runs:
        if run.kind is excluded:
            continue
        parts.append(run.text[:-1] if run.text.endswith("\n") else run.text)
    return "\n".join(parts)


class TestAlign:
    """Tests for align()."""

    def test_unchanged_lines_on_both_sides(self):
        """Unchanged runs appear in both columns, unmarked."""
        columns = align([DiffRun("{\n}\n")])
        assert [line.text for line in columns.left] == ["{", "}"]
        assert [line.text for line in columns.right] == ["{", "}"]
        assert not any(line.changed for line in columns.left + columns.right)

    def test_removed_left_added_right(self):
        """Removed lines go left and added lines go right, both marked."""
        runs = [
            DiffRun("a\n"),
            DiffRun("b\n", DiffKind.REMOVED),
            DiffRun("c\nd\n", DiffKind.ADDED),
            DiffRun("e"),
        ]
        columns = align(runs)
        assert [(line.text, line.changed) for line in columns.left] == [
            ("a", False),
            ("b", True),
            ("e", False),
        ]
        assert [(line.text, line.changed) for line in columns.right] == [
            ("a", False),
            ("c", True),
            ("d", True),
            ("e", False),
        ]

    def test_line_numbers_gap_free_per_column(self):
        """Each column is numbered 1..N independently."""
        runs = [
            DiffRun("a\nb\n", DiffKind.REMOVED),
            DiffRun("c\n"),
            DiffRun("d\ne\nf\n", DiffKind.ADDED),
        ]
        columns = align(runs)
        assert [line.line_number for line in columns.left] == [1, 2, 3]
        assert [line.line_number for line in columns.right] == [1, 2, 3, 4]

    @pytest.mark.parametrize(
        "runs",
        [
            [DiffRun("x\n\ny\n"), DiffRun("z", DiffKind.ADDED)],
            [DiffRun("one"), DiffRun("\n\n", DiffKind.REMOVED), DiffRun("two\n")],
            [DiffRun("  a\n", DiffKind.REMOVED), DiffRun("  b\n", DiffKind.ADDED), DiffRun("}")],
        ],
    )
    def test_no_lines_dropped(self, runs):
        """Rejoined columns reproduce their runs modulo one trailing newline each."""
        columns = align(runs)
        assert joined(columns.left) == expected_side(runs, DiffKind.ADDED)
        assert joined(columns.right) == expected_side(runs, DiffKind.REMOVED)

    def test_blank_lines_inside_run_kept(self):
        """Interior empty lines are real lines."""
        columns = align([DiffRun("a\n\nb\n")])
        assert [line.text for line in columns.left] == ["a", "", "b"]

    def test_empty_input(self):
        """No runs gives two empty columns."""
        columns = align([])
        assert columns == AlignedColumns(left=[], right=[])


class TestDiffTexts:
    """Tests for diff_texts()."""

    def test_identical_texts_single_run(self):
        """Equal texts produce one unchanged run."""
        assert diff_texts("a\nb", "a\nb") == [DiffRun("a\nb", DiffKind.UNCHANGED)]

    def test_replacement_is_remove_then_add(self):
        """A changed line is reported as removed then added."""
        runs = diff_texts("a\nb\nc", "a\nx\nc")
        assert [run.kind for run in runs] == [
            DiffKind.UNCHANGED,
            DiffKind.REMOVED,
            DiffKind.ADDED,
            DiffKind.UNCHANGED,
        ]
        assert runs[1].text == "b\n"
        assert runs[2].text == "x\n"

    def test_sides_reconstruct_inputs(self):
        """Runs not added rebuild the left text; runs not removed rebuild the right."""
        left = "{\n  a\n  b\n  c\n}"
        right = "{\n  b\n  c\n  d\n}"
        runs = diff_texts(left, right)
        assert "".join(r.text for r in runs if r.kind is not DiffKind.ADDED) == left
        assert "".join(r.text for r in runs if r.kind is not DiffKind.REMOVED) == right

    def test_empty_sides(self):
        """Two empty texts have no runs; one empty side is all added."""
        assert diff_texts("", "") == []
        assert diff_texts("", "a\nb") == [DiffRun("a\nb", DiffKind.ADDED)]

    def test_carriage_return_stays_in_line(self):
        """Only line feeds split lines."""
        runs = diff_texts("a\rb\n", "a\rb\n")
        assert align(runs).left == [ColumnLine(1, "a\rb", False)]


class TestCompareValues:
    """Tests for compare_values()."""

    def test_end_to_end_scenario(self, left_document, right_document):
        """Only the y lines are marked; both x lines are line 2."""
        result = compare_values(left_document, right_document)
        left, right = result.columns.left, result.columns.right

        assert [line.text for line in left] == ["{", '  "x": 1,', '  "y": 2', "}"]
        assert [line.text for line in right] == ["{", '  "x": 1,', '  "y": 3', "}"]
        assert [line.changed for line in left] == [False, False, True, False]
        assert [line.changed for line in right] == [False, False, True, False]
        assert left[1].line_number == 2
        assert right[1].line_number == 2

    def test_key_order_ignored(self):
        """Documents differing only in key order are identical."""
        result = compare_values({"b": 1, "a": {"d": 1, "c": 2}}, {"a": {"c": 2, "d": 1}, "b": 1})
        assert result.identical
        assert not any(line.changed for line in result.columns.left)

    def test_absent_side_is_all_added(self):
        """Comparing against no document marks every line of the other side."""
        result = compare_values(None, {"a": 1})
        assert result.columns.left == []
        assert all(line.changed for line in result.columns.right)
        assert not result.identical

    def test_both_absent(self):
        """Two absent documents give nothing to show."""
        result = compare_values(None, None)
        assert result.runs == []
        assert not result.identical
        assert result.error is None

    def test_serialization_failure_absorbed(self):
        """A cyclic document yields an empty result carrying the error."""
        cyclic: dict = {}
        cyclic["again"] = cyclic
        result = compare_values(cyclic, {"a": 1})
        assert result.error is not None
        assert result.columns == AlignedColumns()
        assert not result.identical

    def test_indent_applies_to_both_sides(self):
        """The indent argument controls the serialized layout."""
        result = compare_values({"a": 1}, {"a": 1}, indent=4)
        assert result.columns.left[1].text == '    "a": 1'


class TestSummarize:
    """Tests for summarize()."""

    def test_counts(self, left_document, right_document):
        """Counts removed, added and unchanged lines."""
        result = compare_values(left_document, right_document)
        assert summarize(result.columns) == {"removed": 1, "added": 1, "unchanged": 3}

    def test_empty_columns(self):
        """Empty columns count zero everywhere."""
        assert summarize(ComparisonResult().columns) == {"removed": 0, "added": 0, "unchanged": 0}
