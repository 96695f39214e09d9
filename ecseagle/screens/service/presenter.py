"""Service detail presentation: cards, task labels, health and footer text.

Every method is a pure function of its inputs and the ``DashboardTheme``
given at construction, so rendering is testable without a running app.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from rich.text import Text

from ecseagle.constants.defaults import EVENTS_PREVIEW_COUNT_DEFAULT
from ecseagle.constants.enums import DetailPanel, DetailState, TaskStatus
from ecseagle.constants.screens.service import (
    EVENT_LOG_HELP_TEXT,
    NO_EVENTS_MESSAGE,
    SERVICE_HELP_TEXT,
    SERVICE_LOADING_MESSAGE,
    SERVICE_MISSING_MESSAGE,
    SERVICE_REFRESHING_LABEL,
    STALE_STATUS_LABEL,
)
from ecseagle.constants.values import ARROW_DOWN, ARROW_UP, EMPTY_VALUE
from ecseagle.models.core.connection import TargetHealthEntry
from ecseagle.models.core.service_info import ServiceEvent
from ecseagle.models.core.status import ServiceStatus
from ecseagle.models.state.navigation import ServiceDetailContext
from ecseagle.themes import DashboardTheme
from ecseagle.utils.arn import task_definition_short_name
from ecseagle.utils.formatting import (
    format_event_timestamp,
    format_last_update,
    format_relative_time,
)
from ecseagle.utils.health import is_healthy_state, summarize_target_health
from ecseagle.utils.images import join_image_names


def task_status_label(status: TaskStatus) -> str:
    """Arrow plus status: up while starting or running, down otherwise."""
    arrow = ARROW_UP if status.is_starting else ARROW_DOWN
    return f"{arrow} {status.value}"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ServicePresenter:
    """Formats one ``ServiceStatus`` and its detail context for display."""

    def __init__(
        self,
        theme: DashboardTheme,
        *,
        events_preview_count: int = EVENTS_PREVIEW_COUNT_DEFAULT,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.theme = theme
        self.events_preview_count = events_preview_count
        self._clock = clock

    # =========================================================================
    # Small pieces
    # =========================================================================

    def task_status_text(self, status: TaskStatus) -> Text:
        return Text(task_status_label(status), style=self.theme.task_status_style(status))

    def field(self, name: str, value: object) -> Text:
        return Text.assemble((f"{name}: ", self.theme.label), str(value) if value not in (None, "") else EMPTY_VALUE)

    def created(self, value: datetime | None) -> Text:
        return Text(f"created {format_relative_time(value, self._clock())}", style=self.theme.muted)

    def health_text(self, entries: Iterable[TargetHealthEntry]) -> Text:
        """``healthy: 1a, 1b unhealthy: 1c``; healthy green, the rest amber."""
        text = Text()
        for state, zones in summarize_target_health(entries):
            if text:
                text.append(" ")
            style = self.theme.healthy if is_healthy_state(state) else self.theme.unhealthy
            text.append(f"{state}: {', '.join(zones)}", style=style)
        return text

    # =========================================================================
    # Overview cards
    # =========================================================================

    def task_card(self, status: ServiceStatus) -> Text:
        service = status.service
        text = Text(str(service.running_count), style=self.theme.title)
        text.append(f"\ndesired: {service.desired_count}", style=self.theme.muted)
        if service.pending_count:
            text.append(f"\npending: {service.pending_count}", style=self.theme.muted)
        text.append(
            f"\nmin: {status.scale.min_capacity}, max: {status.scale.max_capacity}",
            style=self.theme.muted,
        )
        return text

    def deployment_card(self, status: ServiceStatus) -> Text:
        service = status.service
        lines: list[Text] = []
        if service.capacity_provider:
            lines.append(Text(service.capacity_provider))
        elif service.launch_type:
            lines.append(Text(service.launch_type))
        lines.append(self.field("controller", service.deployment_controller))
        lines.append(self.field("status", service.status))
        return Text("\n").join(lines)

    def taskdef_card(self, status: ServiceStatus) -> Text | None:
        """None when the service reports no task definition."""
        task_definition = status.service.task_definition
        if not task_definition:
            return None
        text = Text(task_definition_short_name(task_definition), style=self.theme.label)
        if status.images:
            text.append("\n")
            text.append(join_image_names(status.images), style=self.theme.muted)
        return text

    def sets_summary(self, status: ServiceStatus) -> Text:
        """One line per task set (or deployment) with counts and routing."""
        lines: list[Text] = []
        if status.uses_task_sets:
            for task_set in sorted(status.task_sets, key=lambda s: s.id):
                line = Text.assemble(
                    (task_set.id, self.theme.label),
                    f"  {task_set.status}  {task_set.running_count}/{task_set.computed_desired_count}",
                )
                for connection in status.connections_for(task_set.id):
                    if connection.attached:
                        line.append(
                            f"  → {connection.weight}% {connection.load_balancer_name}",
                            style=self.theme.attached,
                        )
                lines.append(line)
        else:
            for deployment in sorted(status.deployments, key=lambda d: d.id):
                lines.append(
                    Text.assemble(
                        (deployment.id, self.theme.label),
                        f"  {deployment.status}  {deployment.rollout_state or EMPTY_VALUE}"
                        f"  {deployment.running_count}/{deployment.desired_count}",
                    )
                )
        if not lines:
            return Text("not configured", style=self.theme.muted)
        return Text("\n").join(lines)

    # =========================================================================
    # Events
    # =========================================================================

    def event_line(
        self, event: ServiceEvent, spans: Iterable[tuple[int, int]] = ()
    ) -> Text:
        message = Text(event.message)
        for start, end in spans:
            message.stylize(self.theme.highlight, start, end)
        return Text.assemble(
            (format_event_timestamp(event.created_at), self.theme.muted), " ", message
        )

    def events_preview(self, events: tuple[ServiceEvent, ...]) -> Text:
        preview = events[: self.events_preview_count]
        if not preview:
            return Text(NO_EVENTS_MESSAGE, style=self.theme.muted)
        return Text("\n").join(Text(event.message) for event in preview)

    # =========================================================================
    # Detail state
    # =========================================================================

    def overlay_message(self, context: ServiceDetailContext) -> tuple[str, bool] | None:
        """Message covering the detail body, or None when a snapshot is shown."""
        if context.state is DetailState.LOADING:
            return SERVICE_LOADING_MESSAGE, False
        if context.state is DetailState.MISSING:
            return SERVICE_MISSING_MESSAGE, True
        if context.state is DetailState.FAILED and context.status is None:
            return context.error or EMPTY_VALUE, True
        return None

    def help_text(self, context: ServiceDetailContext) -> str:
        if context.panel is DetailPanel.EVENTS:
            return EVENT_LOG_HELP_TEXT
        return SERVICE_HELP_TEXT

    def footer_status(self, context: ServiceDetailContext) -> Text:
        """Auto-refresh flag, last update, refreshing and stale markers."""
        text = Text()
        if context.refreshing:
            text.append(f"{SERVICE_REFRESHING_LABEL} ", style=self.theme.attached)
        if context.is_stale:
            text.append(f"{STALE_STATUS_LABEL} ", style=self.theme.error)
        text.append("auto refresh ", style=self.theme.muted)
        text.append("enabled" if context.auto_refresh else "disabled", style=self.theme.label)
        text.append(" • last update: ", style=self.theme.muted)
        text.append(format_last_update(context.last_update), style=self.theme.label)
        return text


__all__ = [
    "ServicePresenter",
    "task_status_label",
]
