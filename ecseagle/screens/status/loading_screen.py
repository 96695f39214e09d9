"""Initial load screen shown until the fleet list arrives."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.containers import Container
from textual.widgets import LoadingIndicator

from ecseagle.constants.screens.fleet import FLEET_LOADING_MESSAGE
from ecseagle.screens.base_screen import BaseScreen
from ecseagle.widgets import CustomStatic

if TYPE_CHECKING:
    from textual.app import ComposeResult


class LoadingScreen(BaseScreen):
    """Spinner with the fleet loading message."""

    def compose_body(self) -> ComposeResult:
        with Container(id="loading-overlay"):
            yield LoadingIndicator()
            yield CustomStatic(FLEET_LOADING_MESSAGE, id="loading-message", markup=False)

    def refresh_view(self) -> None:
        self.show_loading_overlay(FLEET_LOADING_MESSAGE)
