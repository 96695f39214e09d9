"""CustomInput widget for the TUI application.

CSS Classes: widget-custom-input
"""

from __future__ import annotations

from textual.widgets import Input as TextualInput


class CustomInput(TextualInput):
    """Single-line filter input.

    Hidden by default; screens toggle the ``visible`` class while the
    operator is typing a filter.
    """

    DEFAULT_CSS = """
    CustomInput {
        display: none;
        height: 3;
        width: 1fr;
    }
    CustomInput.visible {
        display: block;
    }
    """

    def __init__(
        self,
        value: str = "",
        *,
        placeholder: str = "",
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(
            value=value,
            placeholder=placeholder,
            id=id,
            classes=f"widget-custom-input {classes}".strip(),
        )

    def show(self) -> None:
        self.add_class("visible")
        self.focus()

    def hide(self) -> None:
        self.remove_class("visible")

    @property
    def is_shown(self) -> bool:
        return self.has_class("visible")
