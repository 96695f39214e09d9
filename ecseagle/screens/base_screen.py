"""Base screen class for EcsEagle TUI.

Screens do not own data. The app holds the navigation state machine; a
screen renders the slice of state that belongs to its view and turns key
presses into ``UserAction`` / ``FilterChanged`` events.

Subclasses implement:
- screen_title: title shown in the header
- compose_body: widgets between the header and the footer
- refresh_view: re-render from ``self.navigation``

Loading overlay:
- Include a ``#loading-overlay`` container with a ``#loading-message``
  CustomStatic in compose_body() to use show_loading_overlay().
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from contextlib import suppress
from typing import TYPE_CHECKING, cast

from rich.text import Text
from textual.containers import Container
from textual.css.query import NoMatches, WrongType
from textual.screen import Screen

from ecseagle.constants.enums import Action
from ecseagle.constants.values import APP_TITLE
from ecseagle.models.state.events import FilterChanged, UserAction
from ecseagle.widgets import CustomFooter, CustomHeader, CustomStatic

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from ecseagle.app import EcsEagleApp
    from ecseagle.models.core.service_info import ServiceSummary
    from ecseagle.models.state.navigation import NavigationStateMachine
    from ecseagle.themes import DashboardTheme


class BaseScreen(Screen):
    """Abstract base class for the dashboard's views."""

    HELP_TEXT: str = ""

    @property
    def screen_title(self) -> str:
        return APP_TITLE

    @property
    def app(self) -> EcsEagleApp:
        """Get the application instance."""
        return cast("EcsEagleApp", super().app)

    @property
    def navigation(self) -> NavigationStateMachine:
        return self.app.navigation

    @property
    def palette(self) -> DashboardTheme:
        return self.app.dashboard_theme

    def compose(self) -> ComposeResult:
        yield CustomHeader()
        yield from self.compose_body()
        yield CustomFooter(self.HELP_TEXT, id="screen-footer")

    @abstractmethod
    def compose_body(self) -> ComposeResult:
        """Yield the widgets of this view."""
        ...

    def on_mount(self) -> None:
        self.sub_title = self.screen_title
        self.refresh_view()

    @abstractmethod
    def refresh_view(self) -> None:
        """Re-render the view from the navigation state."""
        ...

    # =========================================================================
    # EVENT HELPERS
    # =========================================================================

    def send_action(self, action: Action, target: ServiceSummary | None = None) -> None:
        self.app.dispatch_navigation(UserAction(action, target))

    def send_filter(self, text: str) -> None:
        self.app.dispatch_navigation(FilterChanged(text))

    # =========================================================================
    # FOOTER
    # =========================================================================

    def set_footer(self, help_text: str, status: str | Text = "") -> None:
        with suppress(NoMatches, WrongType):
            footer = self.query_one("#screen-footer", CustomFooter)
            footer.set_help(help_text)
            footer.set_status(status)

    # =========================================================================
    # LOADING STATE MANAGEMENT
    # =========================================================================

    def show_loading_overlay(
        self, message: str = "Loading...", is_error: bool = False
    ) -> None:
        """Show the loading overlay with a message.

        Args:
            message: The message to display.
            is_error: Whether this is an error state.
        """
        with suppress(NoMatches, WrongType):
            overlay = self.query_one("#loading-overlay", Container)
            overlay.display = True
            msg_widget = self.query_one("#loading-message", CustomStatic)
            msg_widget.update(message)
            if is_error:
                msg_widget.add_class("error")
                msg_widget.remove_class("loading")
            else:
                msg_widget.remove_class("error")
                msg_widget.add_class("loading")

    def hide_loading_overlay(self) -> None:
        with suppress(NoMatches, WrongType):
            overlay = self.query_one("#loading-overlay", Container)
            overlay.display = False

    def show_error_state(self, message: str) -> None:
        self.show_loading_overlay(message, is_error=True)


__all__ = ["BaseScreen"]
