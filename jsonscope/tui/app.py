"""
Main Textual application for jsonscope.

This is the entry point for the TUI that parses JSON/JSON5 or TOML text into
a collapsible tree, highlights search matches and parse errors in the
source, and compares two documents side by side.

Supported Formats:
    - JSON (.json) and JSON5 (.json5), including Python-style None/False
    - TOML (.toml)
"""

import argparse
import logging
import os
import sys

from textual.app import App
from textual.binding import Binding
from textual.logging import TextualHandler

from jsonscope.config import ViewerConfig
from jsonscope.core import DEFAULT_COLLAPSED_DEPTH
from jsonscope.parsers import detect_dialect
from jsonscope.tui.documents import load_source_file
from jsonscope.tui.views import ViewerScreen

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonScopeApp(App):
    """A Textual app for viewing and comparing structured documents."""

    TITLE = "jsonscope"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
        height: 3;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
    }

    .panel-header {
        dock: top;
        height: 1;
        background: $primary-darken-1;
        color: $text;
        text-align: center;
        text-style: bold;
    }

    TextArea {
        background: $surface;
    }

    OptionList {
        background: $surface;
    }

    OptionList > .option-list--option-highlighted {
        background: $secondary;
    }

    Static {
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True, priority=True),
    ]

    def __init__(
        self,
        config: ViewerConfig | None = None,
        path: str | None = None,
        compare_path: str | None = None,
    ):
        """Initialize the app with optional files to load.

        Args:
            config: Viewer settings; defaults are used when omitted.
            path: File loaded into the viewer's editor.
            compare_path: File loaded into the right side of the compare
                screen, which opens on start when given.
        """
        super().__init__()
        self.config = config or ViewerConfig()
        self._path = path
        self._compare_path = compare_path

    def on_mount(self) -> None:
        """Load the files and push the viewer (and compare) screens."""
        initial_text = self._read_initial(self._path)
        viewer = ViewerScreen(self.config, initial_text=initial_text, source_name=self._path)
        self.push_screen(viewer)

        if self._compare_path:
            compare_text = self._read_initial(self._compare_path)
            viewer.open_compare(initial_text, compare_text)

    def _read_initial(self, path: str | None) -> str:
        """Read a start-up file, reporting failures instead of raising."""
        if not path:
            return ""
        try:
            return load_source_file(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot read %s: %s", path, e)
            self.notify(f"Error loading file: {e}", severity="error")
            return ""


def _check_path(path: str, label: str) -> None:
    if not os.path.exists(path):
        print(f"Error: {label} not found: {path}", file=sys.stderr)
        sys.exit(1)

    if not os.path.isfile(path):
        print(f"Error: {label} is not a file: {path}", file=sys.stderr)
        sys.exit(1)

    if not os.access(path, os.R_OK):
        print(f"Error: {label} permission denied: {path}", file=sys.stderr)
        sys.exit(1)


def build_config(args: argparse.Namespace) -> ViewerConfig:
    """Build the viewer settings from parsed command line arguments."""
    dialect = args.dialect
    if dialect == "auto":
        dialect = detect_dialect(args.path) if args.path else "json"

    return ViewerConfig(
        dialect=dialect,
        collapsed_depth=args.collapsed_depth,
        parse_json_strings=args.parse_json_strings,
        log_level=args.log_level,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonscope",
        description="Parse, browse and compare JSON/JSON5 and TOML documents in a terminal UI.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="File to open in the viewer (JSON, JSON5 or TOML)",
    )
    parser.add_argument(
        "--compare",
        "-c",
        dest="compare_path",
        default=None,
        help="Second file; opens the side-by-side comparison on start",
    )
    parser.add_argument(
        "--dialect",
        choices=["auto", "json", "toml"],
        default="auto",
        help="Source dialect (default: auto, detected from the file extension)",
    )
    parser.add_argument(
        "--collapsed-depth",
        type=int,
        default=DEFAULT_COLLAPSED_DEPTH,
        help=f"Tree nodes at this depth and deeper start collapsed (default: {DEFAULT_COLLAPSED_DEPTH})",
    )
    parser.add_argument(
        "--parse-json-strings",
        action="store_true",
        help="Expand JSON text embedded in string values",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level for the Textual devtools console (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the application."""
    args = build_parser().parse_args(argv)

    if args.collapsed_depth < 0:
        print("Error: --collapsed-depth must not be negative", file=sys.stderr)
        sys.exit(1)

    if args.path:
        _check_path(args.path, "Path")
    if args.compare_path:
        _check_path(args.compare_path, "Compare path")

    config = build_config(args)
    logging.basicConfig(level=config.log_level, handlers=[TextualHandler()])

    app = JsonScopeApp(config=config, path=args.path, compare_path=args.compare_path)
    app.run()


if __name__ == "__main__":
    main()
