"""Screens for EcsEagle TUI.

- status: initial load and fatal error screens
- fleet: service list
- service: service detail with task-set panel and event log
"""

from ecseagle.screens.base_screen import BaseScreen
from ecseagle.screens.fleet import FleetScreen
from ecseagle.screens.service import ServiceScreen
from ecseagle.screens.status import FatalErrorScreen, LoadingScreen

__all__ = [
    "BaseScreen",
    "FatalErrorScreen",
    "FleetScreen",
    "LoadingScreen",
    "ServiceScreen",
]
