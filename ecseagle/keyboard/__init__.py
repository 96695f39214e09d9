"""Keyboard bindings for EcsEagle TUI.

- app: app-level bindings active on every screen
- navigation: fleet and service screen bindings
- tables: DataTable bindings
"""

from ecseagle.keyboard.app import APP_BINDINGS
from ecseagle.keyboard.navigation import (
    FLEET_SCREEN_BINDINGS,
    SERVICE_SCREEN_BINDINGS,
)
from ecseagle.keyboard.tables import DATA_TABLE_BINDINGS

__all__ = [
    "APP_BINDINGS",
    "DATA_TABLE_BINDINGS",
    "FLEET_SCREEN_BINDINGS",
    "SERVICE_SCREEN_BINDINGS",
]
