"""CustomFooter widget for the TUI application.

Shows the key help of the active view on the left and a status segment
(auto-refresh, last update, refreshing indicator) on the right.

CSS Classes: widget-custom-footer
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.containers import Horizontal
from textual.widgets import Static

if TYPE_CHECKING:
    from textual.app import ComposeResult


class CustomFooter(Horizontal):
    """One-line footer with help text and a right-aligned status segment."""

    DEFAULT_CSS = """
    CustomFooter {
        dock: bottom;
        height: 1;
        width: 1fr;
        background: $panel;
    }
    CustomFooter > #footer-help {
        width: 1fr;
        color: $text-muted;
    }
    CustomFooter > #footer-status {
        width: auto;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        help_text: str = "",
        *,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(id=id, classes=f"widget-custom-footer {classes}".strip())
        self._help_text = help_text

    def compose(self) -> ComposeResult:
        yield Static(self._help_text, id="footer-help", markup=False)
        yield Static("", id="footer-status", markup=False)

    def set_help(self, text: str) -> None:
        self._help_text = text
        self.query_one("#footer-help", Static).update(text)

    def set_status(self, status: str | Text) -> None:
        self.query_one("#footer-status", Static).update(status)
