"""Modal screen prompting for the path of a file to load."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Label


class OpenFileModal(ModalScreen[str | None]):
    """A modal screen that asks for a file path.

    Dismisses with the entered path, or None when cancelled.
    """

    BINDINGS = [
        Binding("escape", "close", "Cancel"),
    ]

    CSS = """
    OpenFileModal {
        align: center middle;
    }

    OpenFileModal > Vertical {
        width: 70%;
        height: auto;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    OpenFileModal .modal-header {
        width: 100%;
        padding: 0 1;
        background: $primary;
        color: $text;
        text-align: center;
        text-style: bold;
    }

    OpenFileModal Input {
        margin: 1 0;
    }

    OpenFileModal .close-hint {
        width: 100%;
        text-align: center;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        title: str = "Open File",
        initial_path: str = "",
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the open file modal.

        Args:
            title: Header text, e.g. "Open File (left)".
            initial_path: Text pre-filled in the path input.
            name: Optional name for the widget.
            id: Optional ID for the widget.
            classes: Optional CSS classes.
        """
        super().__init__(name=name, id=id, classes=classes)
        self._prompt_title = title
        self._initial_path = initial_path

    def compose(self) -> ComposeResult:
        """Compose the modal content."""
        with Vertical():
            yield Label(self._prompt_title, classes="modal-header")
            yield Input(
                value=self._initial_path,
                placeholder="Path to a .json, .json5 or .toml file",
                id="path-input",
            )
            yield Label("Press [ENTER] to open or [ESC] to cancel", classes="close-hint")

    def on_mount(self) -> None:
        self.query_one("#path-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Dismiss with the entered path; a blank entry cancels."""
        event.stop()
        path = event.value.strip()
        self.dismiss(path or None)

    def action_close(self) -> None:
        """Close the modal without a path."""
        self.dismiss(None)
