"""
Dual-column alignment of a line diff.

This module turns two parsed documents into the left and right columns of the
side-by-side diff view:

    normalize -> stringify -> diff_texts -> align

Diff Kinds:
    - unchanged: Text present on both sides
    - removed: Text present only in the left document
    - added: Text present only in the right document

The left column shows removed and unchanged lines, the right column shows
added and unchanged lines. Each column numbers its own lines from 1.
"""

from __future__ import annotations

import difflib
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from jsonscope.core.normalizer import (
    DEFAULT_INDENT,
    DiffComparisonFailure,
    normalize,
    stringify,
)

logger = logging.getLogger(__name__)

# A physical line including its "\n" terminator, or a final unterminated line
_LINE_PATTERN = re.compile(r"[^\n]*\n|[^\n]+")


class DiffKind(Enum):
    """Tag of a contiguous run of diffed text."""

    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class DiffRun:
    """A contiguous run of serialized text with its diff tag."""

    text: str
    kind: DiffKind = DiffKind.UNCHANGED


@dataclass(frozen=True)
class ColumnLine:
    """One numbered line in one column of the diff view."""

    line_number: int
    text: str
    changed: bool = False


@dataclass
class AlignedColumns:
    """The two independently numbered columns of the diff view."""

    left: list[ColumnLine] = field(default_factory=list)
    right: list[ColumnLine] = field(default_factory=list)


@dataclass
class ComparisonResult:
    """Outcome of comparing two documents.

    Attributes:
        columns: The aligned left/right columns.
        runs: The diff runs the columns were built from.
        error: Message of an absorbed serialization failure, if any.
    """

    columns: AlignedColumns = field(default_factory=AlignedColumns)
    runs: list[DiffRun] = field(default_factory=list)
    error: str | None = None

    @property
    def identical(self) -> bool:
        """True when there is data to compare and no run is added or removed."""
        if self.error is not None or not self.runs:
            return False
        return all(run.kind is DiffKind.UNCHANGED for run in self.runs)


def _split_run(run: DiffRun) -> list[str]:
    """Split a run into physical lines, dropping the trailing-newline remnant."""
    lines = run.text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _build_column(runs: Iterable[DiffRun], excluded: DiffKind) -> list[ColumnLine]:
    column: list[ColumnLine] = []
    line_number = 1
    for run in runs:
        if run.kind is excluded:
            continue
        changed = run.kind is not DiffKind.UNCHANGED
        for text in _split_run(run):
            column.append(ColumnLine(line_number=line_number, text=text, changed=changed))
            line_number += 1
    return column


def align(runs: Iterable[DiffRun]) -> AlignedColumns:
    """Build the left and right diff columns from a sequence of diff runs.

    Args:
        runs: Diff runs in document order, as produced by diff_texts().

    Returns:
        AlignedColumns where the left column holds removed and unchanged lines
        and the right column holds added and unchanged lines.

    Examples:
        >>> runs = [DiffRun("{\\n"), DiffRun('  "y": 2\\n', DiffKind.REMOVED)]
        >>> [line.text for line in align(runs).left]
        ['{', '  "y": 2']
    """
    runs = list(runs)
    return AlignedColumns(
        left=_build_column(runs, excluded=DiffKind.ADDED),
        right=_build_column(runs, excluded=DiffKind.REMOVED),
    )


def _append_run(runs: list[DiffRun], lines: list[str], kind: DiffKind) -> None:
    text = "".join(lines)
    if not text:
        return
    if runs and runs[-1].kind is kind:
        runs[-1] = DiffRun(runs[-1].text + text, kind)
    else:
        runs.append(DiffRun(text, kind))


def diff_texts(left: str, right: str) -> list[DiffRun]:
    """Compute a line-granular diff between two serialized documents.

    Lines keep their terminators, so concatenating the runs that are not
    ADDED reproduces ``left`` and concatenating the runs that are not REMOVED
    reproduces ``right``. A replaced block is reported as a REMOVED run
    followed by an ADDED run.

    Args:
        left: The original text.
        right: The modified text.

    Returns:
        The diff runs in document order.
    """
    left_lines = _LINE_PATTERN.findall(left)
    right_lines = _LINE_PATTERN.findall(right)
    matcher = difflib.SequenceMatcher(None, left_lines, right_lines, autojunk=False)

    runs: list[DiffRun] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            _append_run(runs, left_lines[i1:i2], DiffKind.UNCHANGED)
        else:
            # "delete", "insert" and "replace" all reduce to remove-then-add
            _append_run(runs, left_lines[i1:i2], DiffKind.REMOVED)
            _append_run(runs, right_lines[j1:j2], DiffKind.ADDED)
    return runs


def compare_values(left: Any, right: Any, indent: int = DEFAULT_INDENT) -> ComparisonResult:
    """Compare two parsed documents for the side-by-side diff view.

    A document that cannot be serialized does not propagate: the failure is
    logged and an empty result carrying the error message is returned.

    Args:
        left: The left parsed document (None when absent).
        right: The right parsed document (None when absent).
        indent: Indentation used when serializing both sides.

    Returns:
        A ComparisonResult with the aligned columns.
    """
    try:
        left_text = stringify(normalize(left), indent)
        right_text = stringify(normalize(right), indent)
    except (DiffComparisonFailure, RecursionError) as e:
        logger.warning("Comparison skipped: %s", e)
        return ComparisonResult(error=str(e))

    runs = diff_texts(left_text, right_text)
    return ComparisonResult(columns=align(runs), runs=runs)


def summarize(columns: AlignedColumns) -> dict[str, int]:
    """Count removed, added and unchanged lines.

    Args:
        columns: The aligned columns from align().

    Returns:
        A dictionary with counts for each diff type. Unchanged lines are
        counted once (they appear in both columns).

    Examples:
        >>> summarize(columns)
        {'removed': 1, 'added': 1, 'unchanged': 3}
    """
    return {
        "removed": sum(1 for line in columns.left if line.changed),
        "added": sum(1 for line in columns.right if line.changed),
        "unchanged": sum(1 for line in columns.left if not line.changed),
    }
