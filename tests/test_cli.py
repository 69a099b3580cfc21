"""Tests for the command line entry point in jsonscope.tui.app."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from jsonscope.tui.app import build_config, build_parser, main

# Path to the module
APP_MODULE = "jsonscope.tui.app"


def run_app(*args: str) -> subprocess.CompletedProcess:
    """Run the app module with given arguments."""
    return subprocess.run(
        [sys.executable, "-m", APP_MODULE, *args],
        capture_output=True,
        text=True,
        cwd=Path(__file__).parent.parent,
        timeout=60,
    )


class TestCLIBasic:
    """Basic CLI functionality tests."""

    def test_help_flag(self):
        """--help should show usage."""
        result = run_app("--help")
        assert result.returncode == 0
        assert "usage" in result.stdout.lower()
        assert "--compare" in result.stdout

    def test_file_not_found_error(self):
        """Non-existent file should error with message."""
        result = run_app("/nonexistent/file.json")
        assert result.returncode == 1
        assert "not found" in result.stderr.lower()

    def test_compare_file_not_found_error(self, json_file):
        """Non-existent compare file should error with message."""
        result = run_app(str(json_file), "--compare", "/nonexistent/other.json")
        assert result.returncode == 1
        assert "compare path not found" in result.stderr.lower()

    def test_invalid_dialect_rejected(self):
        """Unknown dialects are rejected by argparse."""
        result = run_app("--dialect", "yaml")
        assert result.returncode == 2


class TestMainValidation:
    """Tests for argument validation in main()."""

    def test_directory_rejected(self, tmp_path, capsys):
        """Directories are not files."""
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path)])
        assert exc_info.value.code == 1
        assert "is not a file" in capsys.readouterr().err

    def test_negative_depth_rejected(self, capsys):
        """The collapse depth cannot be negative."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--collapsed-depth", "-1"])
        assert exc_info.value.code == 1
        assert "collapsed-depth" in capsys.readouterr().err


class TestBuildConfig:
    """Tests for build_config()."""

    def test_defaults(self):
        """No arguments give the default settings."""
        config = build_config(build_parser().parse_args([]))
        assert config.dialect == "json"
        assert config.collapsed_depth == 2
        assert config.indent == 2
        assert config.parse_json_strings is False
        assert config.log_level == "WARNING"

    def test_auto_dialect_from_path(self, toml_file):
        """The dialect is detected from the file extension."""
        config = build_config(build_parser().parse_args([str(toml_file)]))
        assert config.dialect == "toml"

    def test_explicit_options(self, toml_file):
        """Explicit options override detection and defaults."""
        args = build_parser().parse_args(
            [
                str(toml_file),
                "--dialect",
                "json",
                "--collapsed-depth",
                "4",
                "--parse-json-strings",
                "--log-level",
                "DEBUG",
            ]
        )
        config = build_config(args)
        assert config.dialect == "json"
        assert config.collapsed_depth == 4
        assert config.parse_json_strings is True
        assert config.log_level == "DEBUG"
