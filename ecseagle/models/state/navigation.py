"""Navigation state machine for the dashboard.

The machine owns the current view (initial load, fleet list, service detail
with its nested panels, fatal error), consumes ``NavigationEvent`` values via
``apply`` and returns the effects the UI layer must execute. It never touches
Textual or AWS, which keeps every transition unit-testable.

Late fetch results are matched against the generation of the active service
detail context; results for a context that was left or replaced are dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from ecseagle.constants.enums import (
    Action,
    DetailPanel,
    DetailState,
    ViewState,
)
from ecseagle.models.core.service_info import ServiceSummary
from ecseagle.models.core.status import ServiceStatus
from ecseagle.models.state.event_log import EventLogState
from ecseagle.models.state.events import (
    AppStarted,
    Effect,
    FetchFleet,
    FilterChanged,
    FleetLoaded,
    FleetLoadFailed,
    NavigationEvent,
    Quit,
    Resized,
    StatusFetchFailed,
    StatusLoaded,
    Tick,
    UserAction,
)
from ecseagle.models.state.refresh import RefreshScheduler

logger = logging.getLogger(__name__)


@dataclass
class FleetListState:
    """Fleet list with its type-to-filter input."""

    services: tuple[ServiceSummary, ...] = ()
    filter_text: str = ""
    filtering: bool = False

    @property
    def visible_services(self) -> tuple[ServiceSummary, ...]:
        query = self.filter_text.strip().lower()
        if not query:
            return self.services
        return tuple(s for s in self.services if query in s.filter_value.lower())


@dataclass
class ServiceDetailContext:
    """State of one opened service; replaced wholesale when another is opened."""

    summary: ServiceSummary
    generation: int
    state: DetailState = DetailState.LOADING
    status: ServiceStatus | None = None
    error: str | None = None
    last_update: datetime | None = None
    auto_refresh: bool = False
    in_flight: bool = False
    refreshing: bool = False
    panel: DetailPanel = DetailPanel.OVERVIEW
    event_log: EventLogState | None = None

    @property
    def is_loaded(self) -> bool:
        """False only while the first fetch of the context is outstanding."""
        return self.state is not DetailState.LOADING

    @property
    def is_stale(self) -> bool:
        """True when the shown snapshot predates a failed refresh."""
        return self.state is DetailState.FAILED and self.status is not None

    @property
    def is_capturing_input(self) -> bool:
        return self.event_log is not None and self.event_log.is_filtering


@dataclass
class NavigationStateMachine:
    """Owns the view hierarchy and routes events to the active view."""

    scheduler: RefreshScheduler = field(default_factory=RefreshScheduler)
    default_auto_refresh: bool = False
    view: ViewState = ViewState.INITIAL_LOAD
    fleet: FleetListState = field(default_factory=FleetListState)
    detail: ServiceDetailContext | None = None
    fatal_error: str | None = None
    width: int = 0
    height: int = 0
    _generation: int = 0

    # =========================================================================
    # Entry point
    # =========================================================================

    def apply(self, event: NavigationEvent) -> list[Effect]:
        """Apply one event to the owned state and return resulting effects."""
        if isinstance(event, Resized):
            self.width = event.width
            self.height = event.height
            return []
        if isinstance(event, AppStarted):
            return self._on_app_started()
        if isinstance(event, FleetLoaded):
            return self._on_fleet_loaded(event)
        if isinstance(event, FleetLoadFailed):
            return self._on_fleet_load_failed(event)
        if isinstance(event, StatusLoaded):
            return self._on_status_loaded(event)
        if isinstance(event, StatusFetchFailed):
            return self._on_status_fetch_failed(event)
        if isinstance(event, Tick):
            return self._on_tick(event)
        if isinstance(event, UserAction):
            return self._on_user_action(event)
        if isinstance(event, FilterChanged):
            return self._on_filter_changed(event)
        raise TypeError(f"Unhandled navigation event: {event!r}")

    # =========================================================================
    # Fleet loading
    # =========================================================================

    def _on_app_started(self) -> list[Effect]:
        if self.view is not ViewState.INITIAL_LOAD:
            return []
        return [FetchFleet()]

    def _on_fleet_loaded(self, event: FleetLoaded) -> list[Effect]:
        self.fleet.services = tuple(event.services)
        if self.view is ViewState.INITIAL_LOAD:
            self.view = ViewState.FLEET_LIST
        return []

    def _on_fleet_load_failed(self, event: FleetLoadFailed) -> list[Effect]:
        logger.error("Fleet load failed: %s", event.error)
        self.view = ViewState.FATAL_ERROR
        self.fatal_error = event.error
        self.detail = None
        return []

    # =========================================================================
    # Status results and ticks
    # =========================================================================

    def _active_context(self, generation: int) -> ServiceDetailContext | None:
        """The detail context if it is active and matches ``generation``."""
        context = self.detail
        if self.view is not ViewState.SERVICE_DETAIL or context is None:
            return None
        if context.generation != generation:
            return None
        return context

    def _on_status_loaded(self, event: StatusLoaded) -> list[Effect]:
        context = self._active_context(event.generation)
        if context is None:
            logger.debug("Dropping stale status for generation %s", event.generation)
            return []
        context.in_flight = False
        context.refreshing = False
        context.error = None
        context.last_update = event.loaded_at
        if event.status is None:
            context.state = DetailState.MISSING
            context.status = None
            context.panel = DetailPanel.OVERVIEW
            context.event_log = None
            return []
        context.state = DetailState.LOADED
        context.status = event.status
        if context.event_log is not None:
            context.event_log.replace_events(event.status.service.events)
        return []

    def _on_status_fetch_failed(self, event: StatusFetchFailed) -> list[Effect]:
        context = self._active_context(event.generation)
        if context is None:
            return []
        context.in_flight = False
        context.refreshing = False
        context.state = DetailState.FAILED
        context.error = event.error
        return []

    def _on_tick(self, event: Tick) -> list[Effect]:
        context = self._active_context(event.generation)
        if context is None:
            # the chain of a torn-down context ends here
            return []
        return self.scheduler.on_tick(context, event.now)

    # =========================================================================
    # User input
    # =========================================================================

    def _on_user_action(self, event: UserAction) -> list[Effect]:
        if event.action is Action.QUIT:
            return [Quit()]
        if self.view is ViewState.FATAL_ERROR:
            return [Quit()]
        if self.view is ViewState.FLEET_LIST:
            return self._on_fleet_action(event)
        if self.view is ViewState.SERVICE_DETAIL and self.detail is not None:
            return self._on_detail_action(self.detail, event.action)
        return []

    def _on_fleet_action(self, event: UserAction) -> list[Effect]:
        fleet = self.fleet
        action = event.action
        if action is Action.START_FILTER:
            fleet.filtering = True
        elif action is Action.CLEAR_FILTER:
            fleet.filter_text = ""
        elif action is Action.BACK:
            fleet.filtering = False
            fleet.filter_text = ""
        elif action is Action.SELECT:
            if fleet.filtering:
                # enter applies the filter instead of opening a service
                fleet.filtering = False
                return []
            if event.target is not None:
                return self._open_service(event.target)
        return []

    def _open_service(self, summary: ServiceSummary) -> list[Effect]:
        self._generation += 1
        context = ServiceDetailContext(
            summary=summary,
            generation=self._generation,
            auto_refresh=self.default_auto_refresh,
        )
        self.detail = context
        self.view = ViewState.SERVICE_DETAIL
        logger.info("Opening %s/%s (generation %d)", summary.cluster, summary.service, context.generation)
        return self.scheduler.start(context)

    def _on_detail_action(self, context: ServiceDetailContext, action: Action) -> list[Effect]:
        if action is Action.BACK:
            return self._on_detail_back(context)

        event_log = context.event_log
        if event_log is not None and event_log.is_filtering:
            # the filter input owns the keyboard
            if action is Action.CLEAR_FILTER:
                event_log.clear_filter()
            return []

        if action is Action.START_FILTER or action is Action.CLEAR_FILTER:
            if event_log is not None and context.panel is DetailPanel.EVENTS:
                if action is Action.START_FILTER:
                    event_log.start_filtering()
                else:
                    event_log.clear_filter()
            return []

        if action is Action.SHOW_EVENTS:
            if context.status is not None:
                context.panel = DetailPanel.EVENTS
                context.event_log = EventLogState(events=context.status.service.events)
            return []

        if action is Action.SHOW_TASK_SETS:
            if context.status is not None:
                context.panel = DetailPanel.TASK_SETS
                context.event_log = None
            return []

        if not context.is_loaded:
            return []
        if action is Action.TOGGLE_AUTO_REFRESH:
            context.auto_refresh = not context.auto_refresh
            return []
        if action is Action.REFRESH:
            return self.scheduler.request_refresh(context)
        return []

    def _on_detail_back(self, context: ServiceDetailContext) -> list[Effect]:
        event_log = context.event_log
        if event_log is not None and event_log.is_filtering:
            event_log.stop_filtering()
            return []
        if context.panel is not DetailPanel.OVERVIEW:
            context.panel = DetailPanel.OVERVIEW
            context.event_log = None
            return []
        self.detail = None
        self.view = ViewState.FLEET_LIST
        return []

    def _on_filter_changed(self, event: FilterChanged) -> list[Effect]:
        if self.view is ViewState.FLEET_LIST:
            self.fleet.filter_text = event.text
        elif self.view is ViewState.SERVICE_DETAIL and self.detail is not None:
            event_log = self.detail.event_log
            if event_log is not None and event_log.is_filtering:
                event_log.set_filter(event.text)
        return []
