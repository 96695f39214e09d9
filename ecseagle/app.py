"""Main application class for EcsEagle TUI."""

from __future__ import annotations

import logging
from contextlib import suppress
from datetime import datetime
from functools import partial

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.css.query import NoMatches, WrongType
from textual.events import Resize
from textual.screen import Screen

from ecseagle.constants import APP_TITLE, DARK_THEME, LIGHT_THEME, THEME_DEFAULT
from ecseagle.constants.enums import Action, ThemeMode, ViewState
from ecseagle.controllers.base import BaseController
from ecseagle.keyboard.app import APP_BINDINGS
from ecseagle.models.state.app_settings import AppSettings
from ecseagle.models.state.events import (
    AppStarted,
    Effect,
    FetchFleet,
    FetchServiceStatus,
    FleetLoaded,
    FleetLoadFailed,
    NavigationEvent,
    Quit,
    Resized,
    ScheduleTick,
    StatusFetchFailed,
    StatusLoaded,
    Tick,
    UserAction,
)
from ecseagle.models.state.navigation import NavigationStateMachine
from ecseagle.models.state.refresh import RefreshScheduler
from ecseagle.screens import (
    BaseScreen,
    FatalErrorScreen,
    FleetScreen,
    LoadingScreen,
    ServiceScreen,
)
from ecseagle.screens.mixins import WorkerMixin
from ecseagle.screens.service import ServicePresenter
from ecseagle.themes import DEFAULT_DASHBOARD_THEME, DashboardTheme, register_ecseagle_themes
from ecseagle.widgets import CustomStatic

logger = logging.getLogger(__name__)


class TerminalSizeUnsupportedScreen(Screen[None]):
    """Blocking screen shown when terminal is smaller than supported size."""

    DEFAULT_CSS = """
    TerminalSizeUnsupportedScreen {
        align: center middle;
        background: $background;
    }

    #terminal-size-panel {
        width: 1fr;
        max-width: 60;
        height: auto;
        padding: 1 2;
        border: round $warning;
        background: $surface;
    }

    .terminal-size-title {
        color: $warning;
        text-style: bold;
        text-align: center;
    }

    .terminal-size-line {
        text-align: center;
    }
    """

    def __init__(
        self,
        *,
        min_width: int,
        min_height: int,
        current_width: int,
        current_height: int,
    ) -> None:
        super().__init__()
        self._min_width = min_width
        self._min_height = min_height
        self._current_width = current_width
        self._current_height = current_height

    def compose(self) -> ComposeResult:
        yield Container(
            CustomStatic("Terminal size not supported", classes="terminal-size-title"),
            CustomStatic(
                f"Current: {self._current_width}x{self._current_height}",
                id="terminal-size-current",
                classes="terminal-size-line",
            ),
            CustomStatic(
                f"Supported from: {self._min_width}x{self._min_height}",
                classes="terminal-size-line",
            ),
            id="terminal-size-panel",
        )

    def update_current_size(self, width: int, height: int) -> None:
        """Update the current size line while this screen is visible."""
        self._current_width = width
        self._current_height = height
        with suppress(NoMatches, WrongType):
            self.query_one("#terminal-size-current", CustomStatic).update(
                f"Current: {width}x{height}",
            )


class EcsEagleApp(WorkerMixin, App[None]):
    """Main TUI application for EcsEagle.

    The app owns the navigation state machine. Every input, fetch result and
    timer is turned into a ``NavigationEvent`` and fed to ``dispatch_navigation``; the
    returned effects are executed here and the screen stack follows the
    machine's current view.
    """

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS
    MIN_SUPPORTED_TERMINAL_WIDTH = 80
    MIN_SUPPORTED_TERMINAL_HEIGHT = 24
    _SCREEN_FLEET_NAME = "view-fleet"

    def __init__(
        self,
        controller: BaseController,
        settings: AppSettings | None = None,
        *,
        dashboard_theme: DashboardTheme = DEFAULT_DASHBOARD_THEME,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.controller = controller
        self.settings = settings or AppSettings()
        self.dashboard_theme = dashboard_theme
        self.navigation = NavigationStateMachine(
            scheduler=RefreshScheduler(
                interval=self.settings.refresh_interval,
                debounce=self.settings.refresh_debounce,
            ),
            default_auto_refresh=self.settings.auto_refresh,
        )
        self._shown_view: ViewState | None = None
        self._view_screen: BaseScreen | None = None
        register_ecseagle_themes(self)
        self._apply_theme()

    def _apply_theme(self) -> None:
        """Apply the theme preference; unknown names fall back to the default."""
        normalized = str(self.settings.theme or "").strip().lower()
        if normalized in {ThemeMode.LIGHT.value, LIGHT_THEME.lower()}:
            resolved_theme = LIGHT_THEME
        elif normalized in {ThemeMode.DARK.value, DARK_THEME.lower()}:
            resolved_theme = DARK_THEME
        else:
            resolved_theme = THEME_DEFAULT
        self.theme = resolved_theme

    def on_mount(self) -> None:
        self.install_screen(FleetScreen(), name=self._SCREEN_FLEET_NAME)
        self.dispatch_navigation(AppStarted())
        self.call_after_refresh(self._enforce_terminal_size_policy)

    def on_resize(self, event: Resize) -> None:
        self.dispatch_navigation(Resized(event.size.width, event.size.height))
        self._enforce_terminal_size_policy()

    # =========================================================================
    # EVENT DISPATCH
    # =========================================================================

    def dispatch_navigation(self, event: NavigationEvent) -> None:
        """Apply ``event`` to the state machine, run its effects, re-render."""
        effects = self.navigation.apply(event)
        for effect in effects:
            self._run_effect(effect)
        if any(isinstance(effect, Quit) for effect in effects):
            return
        self._sync_view()

    def _run_effect(self, effect: Effect) -> None:
        if isinstance(effect, FetchFleet):
            self.start_worker(self._fetch_fleet(), name="fetch-fleet", group="fleet")
        elif isinstance(effect, FetchServiceStatus):
            self.start_worker(
                self._fetch_status(effect),
                name=f"fetch-status-{effect.generation}",
                group="status",
            )
        elif isinstance(effect, ScheduleTick):
            self.set_timer(effect.delay, partial(self._fire_tick, effect.generation))
        elif isinstance(effect, Quit):
            self.exit()
        else:
            raise TypeError(f"Unhandled effect: {effect!r}")

    async def _fetch_fleet(self) -> None:
        try:
            services = await self.controller.fetch_service_list()
        except Exception as exc:
            logger.exception("Listing services failed")
            self.dispatch_navigation(FleetLoadFailed(str(exc)))
            return
        logger.info("Loaded %d services", len(services))
        self.dispatch_navigation(FleetLoaded(tuple(services)))

    async def _fetch_status(self, effect: FetchServiceStatus) -> None:
        try:
            status = await self.controller.fetch_service_status(effect.cluster, effect.service)
        except Exception as exc:
            logger.exception("Status fetch for %s failed", effect.service)
            self.dispatch_navigation(StatusFetchFailed(effect.generation, str(exc)))
            return
        self.dispatch_navigation(StatusLoaded(effect.generation, status, datetime.now().astimezone()))

    def _fire_tick(self, generation: int) -> None:
        self.dispatch_navigation(Tick(generation, datetime.now().astimezone()))

    # =========================================================================
    # VIEW SYNC
    # =========================================================================

    def _build_view_screen(self, view: ViewState) -> BaseScreen | str:
        if view is ViewState.FLEET_LIST:
            return self._SCREEN_FLEET_NAME
        if view is ViewState.SERVICE_DETAIL:
            presenter = ServicePresenter(
                self.dashboard_theme,
                events_preview_count=self.settings.events_preview_count,
            )
            return ServiceScreen(presenter)
        if view is ViewState.FATAL_ERROR:
            return FatalErrorScreen()
        return LoadingScreen()

    def _sync_view(self) -> None:
        """Show the screen of the current view, or re-render it in place."""
        view = self.navigation.view
        if view is self._shown_view and self._view_screen is not None:
            if self._view_screen.is_mounted:
                self._view_screen.refresh_view()
            return

        self._shown_view = view
        guard_active = self._is_terminal_size_guard_active()
        if guard_active:
            self.pop_screen()
        target = self._build_view_screen(view)
        if len(self.screen_stack) <= 1:
            self.push_screen(target)
        else:
            self.switch_screen(target)
        self._view_screen = self.get_screen(target) if isinstance(target, str) else target
        if view is ViewState.FLEET_LIST and self._view_screen.is_mounted:
            self._view_screen.refresh_view()
        if guard_active:
            self.call_after_refresh(self._enforce_terminal_size_policy)

    # =========================================================================
    # TERMINAL SIZE GUARD
    # =========================================================================

    def _current_terminal_size(self) -> tuple[int, int]:
        return int(self.size.width), int(self.size.height)

    def _is_terminal_size_supported(self) -> bool:
        """Return whether current terminal size is within supported bounds."""
        if self.is_headless:
            return True
        width, height = self._current_terminal_size()
        return (
            width >= self.MIN_SUPPORTED_TERMINAL_WIDTH
            and height >= self.MIN_SUPPORTED_TERMINAL_HEIGHT
        )

    def _is_terminal_size_guard_active(self) -> bool:
        if not self.screen_stack:
            return False
        return isinstance(self.screen, TerminalSizeUnsupportedScreen)

    def _enforce_terminal_size_policy(self) -> None:
        """Show/hide unsupported-size screen based on current terminal size."""
        if not self.screen_stack:
            return

        width, height = self._current_terminal_size()
        if self._is_terminal_size_supported():
            if self._is_terminal_size_guard_active():
                self.pop_screen()
            return

        if self._is_terminal_size_guard_active():
            guard_screen = self.screen
            if isinstance(guard_screen, TerminalSizeUnsupportedScreen):
                guard_screen.update_current_size(width, height)
            return

        self.push_screen(
            TerminalSizeUnsupportedScreen(
                min_width=self.MIN_SUPPORTED_TERMINAL_WIDTH,
                min_height=self.MIN_SUPPORTED_TERMINAL_HEIGHT,
                current_width=width,
                current_height=height,
            )
        )

    # =========================================================================
    # ACTIONS
    # =========================================================================

    async def action_quit(self) -> None:
        self.dispatch_navigation(UserAction(Action.QUIT))

    def action_back(self) -> None:
        """Go back one level; ignored while the size guard is shown."""
        if self._is_terminal_size_guard_active():
            return
        self.dispatch_navigation(UserAction(Action.BACK))


__all__ = [
    "EcsEagleApp",
    "TerminalSizeUnsupportedScreen",
]
