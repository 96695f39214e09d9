"""CustomHeader widget for the TUI application.

CSS Classes: widget-custom-header
"""

from __future__ import annotations

from textual.widgets import Header as TextualHeader


class CustomHeader(TextualHeader):
    """Application header showing the title and the active screen title."""

    def __init__(self, *, id: str | None = None, classes: str = "") -> None:
        super().__init__(
            show_clock=False,
            id=id,
            classes=f"widget-custom-header {classes}".strip(),
        )
