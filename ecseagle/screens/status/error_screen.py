"""Fatal error screen: the fleet could not be listed."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import events
from textual.containers import Container

from ecseagle.constants.enums import Action
from ecseagle.constants.screens.common import FATAL_HELP_TEXT
from ecseagle.screens.base_screen import BaseScreen
from ecseagle.widgets import CustomStatic

if TYPE_CHECKING:
    from textual.app import ComposeResult


class FatalErrorScreen(BaseScreen):
    """Shows the error text; any key quits."""

    HELP_TEXT = FATAL_HELP_TEXT

    def compose_body(self) -> ComposeResult:
        with Container(id="loading-overlay"):
            yield CustomStatic("", id="loading-message", markup=False)

    def refresh_view(self) -> None:
        self.show_error_state(self.navigation.fatal_error or "")

    def on_key(self, event: events.Key) -> None:
        event.stop()
        self.send_action(Action.QUIT)
