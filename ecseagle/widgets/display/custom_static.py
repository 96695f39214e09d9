"""CustomStatic widget for the TUI application.

Standard Wrapper Pattern:
- Wraps Textual's Static with standardized styling
- Optional emphasis class (muted, accent, success, warning, error)

CSS Classes: widget-custom-static
"""

from __future__ import annotations

from rich.console import RenderableType
from textual.widgets import Static as TextualStatic


class CustomStatic(TextualStatic):
    """Static text display with consistent styling across the application.

    Example:
        >>> status = CustomStatic("Loading...", emphasis="muted", id="status")
        >>> yield status
    """

    DEFAULT_CSS = """
    CustomStatic {
        width: 1fr;
        height: auto;
    }
    CustomStatic.muted {
        color: $text-muted;
    }
    CustomStatic.error {
        color: $error;
    }
    CustomStatic.accent {
        color: $accent;
    }
    """

    def __init__(
        self,
        content: RenderableType = "",
        *,
        emphasis: str | None = None,
        markup: bool = True,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(
            content,
            markup=markup,
            id=id,
            classes=f"widget-custom-static {classes}".strip(),
        )
        if emphasis:
            self.add_class(emphasis)
