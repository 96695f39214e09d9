"""Screen-specific keyboard bindings.

Screen actions translate keys into ``UserAction`` events; the navigation
state machine decides what each one means in the current view.
"""

from typing import Annotated

# ============================================================================
# SCREEN BINDINGS
# ============================================================================

FLEET_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("slash", "start_filter", "Filter"),
    ("ctrl+l", "clear_filter", "Clear filter"),
    ("q", "quit_app", "Quit"),
]

SERVICE_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("ctrl+t", "toggle_auto_refresh", "Auto refresh"),
    ("ctrl+r", "refresh_status", "Refresh"),
    ("ctrl+e", "show_events", "Events"),
    ("ctrl+d", "show_task_sets", "Task sets"),
    ("backspace", "back", "Back"),
    ("slash", "start_filter", "Filter"),
    ("ctrl+l", "clear_filter", "Clear filter"),
]

__all__ = [
    "FLEET_SCREEN_BINDINGS",
    "SERVICE_SCREEN_BINDINGS",
]
