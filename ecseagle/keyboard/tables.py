"""DataTable keyboard bindings."""

from textual.binding import Binding

# ============================================================================
# DataTable bindings
# ============================================================================

DATA_TABLE_BINDINGS: list[Binding] = [
    Binding("j", "cursor_down", "Down", show=False),
    Binding("k", "cursor_up", "Up", show=False),
]

__all__ = [
    "DATA_TABLE_BINDINGS",
]
