"""Tests for the document utilities used by the screens."""

from __future__ import annotations

import pytest

from jsonscope.tui.documents import (
    ParseOutcome,
    compare_sources,
    format_output,
    load_source_file,
    parse_source,
)


class TestParseSource:
    """Tests for parse_source()."""

    def test_valid_json(self):
        """Valid text yields the document."""
        outcome = parse_source('{"a": 1}')
        assert outcome == ParseOutcome(value={"a": 1})
        assert outcome.ok
        assert outcome.has_document

    def test_blank_text(self):
        """Blank text is no document and no error."""
        outcome = parse_source("   ")
        assert outcome.ok
        assert not outcome.has_document

    def test_invalid_json_absorbed(self):
        """Parse failures are returned, not raised."""
        outcome = parse_source('{\n  "a": ]\n}')
        assert not outcome.ok
        assert outcome.value is None
        assert outcome.error
        assert outcome.location is not None
        assert outcome.location.line == 2

    def test_toml_dialect(self):
        """The dialect selects the parser."""
        assert parse_source("a = 1", dialect="toml").value == {"a": 1}
        assert not parse_source('{"a": 1}', dialect="toml").ok

    def test_parse_json_strings(self):
        """Embedded JSON is expanded only when enabled."""
        text = '{"args": "{\\"city\\": \\"Oslo\\"}"}'
        assert parse_source(text).value == {"args": '{"city": "Oslo"}'}
        assert parse_source(text, parse_json_strings=True).value == {"args": {"city": "Oslo"}}

    def test_parse_json_strings_ignored_for_toml(self):
        """TOML strings are never expanded."""
        outcome = parse_source("args = '[1, 2]'", dialect="toml", parse_json_strings=True)
        assert outcome.value == {"args": "[1, 2]"}

    def test_unknown_dialect_raises(self):
        """Programming errors are not absorbed."""
        with pytest.raises(ValueError):
            parse_source("{}", dialect="yaml")


class TestLoadSourceFile:
    """Tests for load_source_file()."""

    def test_reads_text(self, json_file):
        """Files are read as UTF-8 text."""
        assert "name: 'demo'" in load_source_file(json_file)

    def test_missing_file_raises(self, tmp_path):
        """Read errors propagate to the caller."""
        with pytest.raises(FileNotFoundError):
            load_source_file(tmp_path / "missing.json")

    def test_binary_file_raises(self, tmp_path):
        """Non-UTF-8 files raise a decode error."""
        path = tmp_path / "blob.json"
        path.write_bytes(b"\xff\xfe\x00\x81")
        with pytest.raises(UnicodeDecodeError):
            load_source_file(path)


class TestFormatOutput:
    """Tests for format_output()."""

    def test_pretty_prints_in_document_order(self):
        """Formatted output keeps the document's key order."""
        assert format_output({"b": 1, "a": 2}) == '{\n  "b": 1,\n  "a": 2\n}'

    def test_indent(self):
        """The indent setting is applied."""
        assert format_output([1], indent=4) == "[\n    1\n]"

    def test_no_document(self):
        """No document formats to the empty string."""
        assert format_output(None) == ""

    def test_failure_absorbed(self):
        """Unserializable documents format to the empty string."""
        cyclic: list = []
        cyclic.append(cyclic)
        assert format_output(cyclic) == ""


class TestCompareSources:
    """Tests for compare_sources()."""

    def test_compares_parsed_documents(self):
        """Both sides are parsed and diffed."""
        left, right, result = compare_sources('{"x":1,"y":2}', '{"x":1,"y":3}')
        assert left.ok and right.ok
        assert [line.text for line in result.columns.left if line.changed] == ['  "y": 2']
        assert [line.text for line in result.columns.right if line.changed] == ['  "y": 3']

    def test_invalid_side_counts_as_absent(self):
        """A side that fails to parse contributes no lines."""
        left, right, result = compare_sources('{"a": 1}', "{oops")
        assert not right.ok
        assert result.columns.right == []
        assert all(line.changed for line in result.columns.left)

    def test_identical_documents(self):
        """Key order and formatting differences are not differences."""
        _, _, result = compare_sources('{"a": 1, "b": 2}', "{b: 2,\n a: 1}")
        assert result.identical

    def test_toml(self):
        """TOML documents compare through the same pipeline."""
        _, _, result = compare_sources("a = 1\nb = 2", "b = 2\na = 1", dialect="toml")
        assert result.identical
