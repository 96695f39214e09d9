"""Base controller classes."""

from ecseagle.controllers.base.base_controller import AsyncControllerMixin, BaseController

__all__ = [
    "AsyncControllerMixin",
    "BaseController",
]
