"""Service detail screen: overview cards, task-set panel and event log."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.text import Text
from textual.containers import Container, Horizontal, VerticalScroll
from textual.widgets import Input

from ecseagle.constants.enums import Action, DetailPanel
from ecseagle.constants.screens.service import SERVICE_HELP_TEXT
from ecseagle.keyboard import SERVICE_SCREEN_BINDINGS
from ecseagle.screens.base_screen import BaseScreen
from ecseagle.screens.service.components.event_log_view import EventLogView
from ecseagle.screens.service.components.task_set_panel import TaskSetPanel, TaskSetRenderer
from ecseagle.screens.service.presenter import ServicePresenter
from ecseagle.widgets import CustomStatic

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from ecseagle.models.core.status import ServiceStatus
    from ecseagle.models.state.navigation import ServiceDetailContext

logger = logging.getLogger(__name__)


class ServiceScreen(BaseScreen):
    """Detail view of the service opened from the fleet list.

    One screen instance serves one detail context; opening another service
    builds a new screen.
    """

    BINDINGS = SERVICE_SCREEN_BINDINGS
    HELP_TEXT = SERVICE_HELP_TEXT

    def __init__(self, presenter: ServicePresenter) -> None:
        super().__init__()
        self._presenter = presenter
        self._renderer = TaskSetRenderer(presenter)
        self._rendered: ServiceStatus | None = None

    @property
    def context(self) -> ServiceDetailContext | None:
        return self.navigation.detail

    @property
    def screen_title(self) -> str:
        context = self.context
        if context is None:
            return super().screen_title
        return f"{context.summary.cluster} / {context.summary.service}"

    def compose_body(self) -> ComposeResult:
        with Container(id="loading-overlay"):
            yield CustomStatic("", id="loading-message", markup=False)
        yield CustomStatic("", emphasis="error", id="service-error", markup=False)
        with VerticalScroll(id="service-overview"):
            with Horizontal(id="service-cards"):
                yield self._titled(CustomStatic("", id="task-card", classes="card"), "task")
                yield self._titled(
                    CustomStatic("", id="deployment-card", classes="card"), "deployment"
                )
                yield self._titled(CustomStatic("", id="taskdef-card", classes="card"), "taskDef")
            yield self._titled(CustomStatic("", id="sets-section", classes="section"), "tasksets")
            yield self._titled(CustomStatic("", id="events-preview", classes="section"), "events")
        with VerticalScroll(id="task-sets-scroll"):
            yield TaskSetPanel("", id="task-sets-panel")
        yield EventLogView(id="event-log")

    @staticmethod
    def _titled(widget: CustomStatic, title: str) -> CustomStatic:
        widget.border_title = title
        return widget

    # =========================================================================
    # RENDERING
    # =========================================================================

    def refresh_view(self) -> None:
        context = self.context
        if context is None:
            return
        presenter = self._presenter
        self.set_footer(presenter.help_text(context), presenter.footer_status(context))

        error_line = self.query_one("#service-error", CustomStatic)
        error_line.display = context.is_stale
        if context.is_stale:
            error_line.update(Text(context.error or "", style=self.palette.error))

        overlay = presenter.overlay_message(context)
        if overlay is not None:
            message, is_error = overlay
            self.show_loading_overlay(message, is_error=is_error)
            self._show_panel(None)
            return
        self.hide_loading_overlay()

        status = context.status
        if status is None:
            return
        if status is not self._rendered:
            self._rendered = status
            self._render_overview(status)
            self.query_one("#task-sets-panel", TaskSetPanel).show_status(status, self._renderer)

        self._show_panel(context.panel)
        if context.panel is DetailPanel.EVENTS and context.event_log is not None:
            self.query_one("#event-log", EventLogView).show_state(context.event_log, presenter)

    def _render_overview(self, status: ServiceStatus) -> None:
        presenter = self._presenter
        self.query_one("#task-card", CustomStatic).update(presenter.task_card(status))
        self.query_one("#deployment-card", CustomStatic).update(presenter.deployment_card(status))
        taskdef = presenter.taskdef_card(status)
        taskdef_card = self.query_one("#taskdef-card", CustomStatic)
        taskdef_card.display = taskdef is not None
        if taskdef is not None:
            taskdef_card.update(taskdef)
        self.query_one("#sets-section", CustomStatic).update(presenter.sets_summary(status))
        self.query_one("#events-preview", CustomStatic).update(
            presenter.events_preview(status.service.events)
        )

    def _show_panel(self, panel: DetailPanel | None) -> None:
        self.query_one("#service-overview").display = panel is DetailPanel.OVERVIEW
        self.query_one("#task-sets-scroll").display = panel is DetailPanel.TASK_SETS
        self.query_one("#event-log").display = panel is DetailPanel.EVENTS

    # =========================================================================
    # INPUT
    # =========================================================================

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "event-filter":
            return
        context = self.context
        if context is None or context.event_log is None:
            return
        if event.value != context.event_log.filter_text:
            self.send_filter(event.value)

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def action_toggle_auto_refresh(self) -> None:
        self.send_action(Action.TOGGLE_AUTO_REFRESH)

    def action_refresh_status(self) -> None:
        self.send_action(Action.REFRESH)

    def action_show_events(self) -> None:
        self.send_action(Action.SHOW_EVENTS)

    def action_show_task_sets(self) -> None:
        self.send_action(Action.SHOW_TASK_SETS)

    def action_back(self) -> None:
        self.send_action(Action.BACK)

    def action_start_filter(self) -> None:
        self.send_action(Action.START_FILTER)

    def action_clear_filter(self) -> None:
        self.send_action(Action.CLEAR_FILTER)


__all__ = ["ServiceScreen"]
