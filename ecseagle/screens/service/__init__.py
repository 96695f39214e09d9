"""Service detail screen."""

from ecseagle.screens.service.presenter import ServicePresenter
from ecseagle.screens.service.service_screen import ServiceScreen

__all__ = [
    "ServicePresenter",
    "ServiceScreen",
]
