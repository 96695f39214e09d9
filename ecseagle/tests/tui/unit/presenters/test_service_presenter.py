"""Unit tests for ServicePresenter.

This module tests:
- Task status labels and styles
- Overview cards for the task-set and deployments models
- Health summaries, event lines and previews
- Overlay, help and footer text per detail state
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from ecseagle.constants.enums import DetailPanel, DetailState, TaskStatus
from ecseagle.constants.screens.service import (
    EVENT_LOG_HELP_TEXT,
    NO_EVENTS_MESSAGE,
    SERVICE_HELP_TEXT,
    SERVICE_LOADING_MESSAGE,
    SERVICE_MISSING_MESSAGE,
)
from ecseagle.models.core.connection import TargetHealthEntry
from ecseagle.models.core.service_info import ServiceEvent, ServiceSummary
from ecseagle.models.state.navigation import ServiceDetailContext
from ecseagle.screens.service.presenter import ServicePresenter, task_status_label
from ecseagle.themes import DEFAULT_DASHBOARD_THEME

NOW = datetime(2024, 5, 1, 12, 0, 0, 250000, tzinfo=timezone.utc)


@pytest.fixture
def presenter() -> ServicePresenter:
    return ServicePresenter(DEFAULT_DASHBOARD_THEME, events_preview_count=2, clock=lambda: NOW)


def _context(**kwargs) -> ServiceDetailContext:
    return ServiceDetailContext(
        summary=ServiceSummary(service="web", cluster="app-cluster"), generation=1, **kwargs
    )


# =============================================================================
# Task status
# =============================================================================


class TestTaskStatusLabel:
    """Test arrow direction per lifecycle status."""

    @pytest.mark.parametrize(
        "status", [TaskStatus.PROVISIONING, TaskStatus.PENDING, TaskStatus.ACTIVATING, TaskStatus.RUNNING]
    )
    def test_up_arrow(self, status: TaskStatus) -> None:
        assert task_status_label(status) == f"↑ {status.value}"

    @pytest.mark.parametrize(
        "status", [TaskStatus.DEACTIVATING, TaskStatus.STOPPING, TaskStatus.DEPROVISIONING, TaskStatus.STOPPED]
    )
    def test_down_arrow(self, status: TaskStatus) -> None:
        assert task_status_label(status) == f"↓ {status.value}"

    def test_style_from_theme(self, presenter: ServicePresenter) -> None:
        text = presenter.task_status_text(TaskStatus.STOPPED)
        assert str(text.style) == DEFAULT_DASHBOARD_THEME.task_status_style(TaskStatus.STOPPED)


# =============================================================================
# Overview cards
# =============================================================================


class TestOverviewCards:
    """Test the task, deployment and task definition cards."""

    def test_task_card(self, presenter: ServicePresenter, web_status) -> None:
        assert presenter.task_card(web_status).plain == "3\ndesired: 3\nmin: 2, max: 6"

    def test_task_card_with_pending(self, presenter: ServicePresenter, api_status) -> None:
        assert presenter.task_card(api_status).plain == "1\ndesired: 2\npending: 1\nmin: 0, max: 0"

    def test_deployment_card_launch_type(self, presenter: ServicePresenter, web_status) -> None:
        assert presenter.deployment_card(web_status).plain == (
            "FARGATE\ncontroller: EXTERNAL\nstatus: ACTIVE"
        )

    def test_deployment_card_capacity_provider(self, presenter: ServicePresenter, api_status) -> None:
        assert presenter.deployment_card(api_status).plain.startswith("FARGATE_SPOT\n")

    def test_taskdef_card_absent_for_task_sets(self, presenter: ServicePresenter, web_status) -> None:
        assert presenter.taskdef_card(web_status) is None

    def test_taskdef_card(self, presenter: ServicePresenter, api_status) -> None:
        assert presenter.taskdef_card(api_status).plain == "api:7\napi:7"

    def test_sets_summary_task_sets(self, presenter: ServicePresenter, web_status) -> None:
        assert presenter.sets_summary(web_status).plain.splitlines() == [
            "ecs-svc/1111  PRIMARY  2/2  → 90% public-alb",
            "ecs-svc/2222  ACTIVE  1/1  → 10% public-alb",
        ]

    def test_sets_summary_deployments(self, presenter: ServicePresenter, api_status) -> None:
        assert presenter.sets_summary(api_status).plain.splitlines() == [
            "ecs-svc/3333  PRIMARY  IN_PROGRESS  1/2",
            "ecs-svc/4444  ACTIVE  COMPLETED  0/0",
        ]

    def test_field_empty_value(self, presenter: ServicePresenter) -> None:
        assert presenter.field("priority", "").plain == "priority: -"

    def test_created(self, presenter: ServicePresenter) -> None:
        created = presenter.created(datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc))
        assert created.plain == "created 3 hours ago"


# =============================================================================
# Health and events
# =============================================================================


class TestHealthAndEvents:
    """Test health summaries and event rendering."""

    def test_health_text(self, presenter: ServicePresenter) -> None:
        entries = [
            TargetHealthEntry(availability_zone="me-central-1b", state="healthy"),
            TargetHealthEntry(availability_zone="me-central-1a", state="healthy"),
            TargetHealthEntry(availability_zone="me-central-1c", state="unhealthy"),
        ]
        assert presenter.health_text(entries).plain == "healthy: 1a, 1b unhealthy: 1c"

    def test_health_text_empty(self, presenter: ServicePresenter) -> None:
        assert presenter.health_text([]).plain == ""

    def test_event_line_highlights(self, presenter: ServicePresenter) -> None:
        event = ServiceEvent(
            created_at=datetime(2024, 5, 1, 11, 0, 0, 250000), message="has reached a steady state"
        )
        line = presenter.event_line(event, [(14, 20)])
        assert line.plain == "2024-05-01 11:00:00.250 has reached a steady state"
        highlighted = [
            line.plain[span.start : span.end]
            for span in line.spans
            if str(span.style) == DEFAULT_DASHBOARD_THEME.highlight
        ]
        assert highlighted == ["steady"]

    def test_events_preview_limited(self, presenter: ServicePresenter, web_status) -> None:
        assert len(presenter.events_preview(web_status.service.events).plain.splitlines()) == 2

    def test_events_preview_empty(self, presenter: ServicePresenter) -> None:
        assert presenter.events_preview(()).plain == NO_EVENTS_MESSAGE


# =============================================================================
# Detail state
# =============================================================================


class TestDetailState:
    """Test overlay, help and footer texts."""

    def test_overlay_loading(self, presenter: ServicePresenter) -> None:
        assert presenter.overlay_message(_context()) == (SERVICE_LOADING_MESSAGE, False)

    def test_overlay_missing(self, presenter: ServicePresenter) -> None:
        context = _context(state=DetailState.MISSING)
        assert presenter.overlay_message(context) == (SERVICE_MISSING_MESSAGE, True)

    def test_overlay_first_failure(self, presenter: ServicePresenter) -> None:
        context = _context(state=DetailState.FAILED, error="throttled")
        assert presenter.overlay_message(context) == ("throttled", True)

    def test_no_overlay_with_snapshot(self, presenter: ServicePresenter, web_status) -> None:
        assert presenter.overlay_message(_context(state=DetailState.LOADED, status=web_status)) is None
        stale = _context(state=DetailState.FAILED, status=web_status, error="throttled")
        assert presenter.overlay_message(stale) is None

    def test_help_text(self, presenter: ServicePresenter) -> None:
        assert presenter.help_text(_context()) == SERVICE_HELP_TEXT
        assert presenter.help_text(_context(panel=DetailPanel.EVENTS)) == EVENT_LOG_HELP_TEXT

    def test_footer_status(self, presenter: ServicePresenter) -> None:
        context = _context(last_update=datetime(2024, 5, 1, 14, 3, 9, 87000))
        assert presenter.footer_status(context).plain == (
            "auto refresh disabled • last update: 14:03:09.087"
        )

    def test_footer_refreshing_and_stale(self, presenter: ServicePresenter, web_status) -> None:
        context = _context(
            state=DetailState.FAILED,
            status=web_status,
            error="throttled",
            auto_refresh=True,
            refreshing=True,
        )
        assert presenter.footer_status(context).plain == (
            "refreshing... stale auto refresh enabled • last update: -"
        )
