"""Fleet list screen."""

from ecseagle.screens.fleet.fleet_screen import FleetScreen
from ecseagle.screens.fleet.presenter import FleetPresenter

__all__ = [
    "FleetPresenter",
    "FleetScreen",
]
