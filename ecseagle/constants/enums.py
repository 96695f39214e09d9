"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# ECS Status Enums
# =============================================================================


class TaskStatus(Enum):
    """Last-known lifecycle status of an ECS task."""

    PROVISIONING = "PROVISIONING"
    PENDING = "PENDING"
    ACTIVATING = "ACTIVATING"
    RUNNING = "RUNNING"
    DEACTIVATING = "DEACTIVATING"
    STOPPING = "STOPPING"
    DEPROVISIONING = "DEPROVISIONING"
    STOPPED = "STOPPED"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: str | None) -> "TaskStatus":
        """Map a raw status string to a member, UNKNOWN when unrecognised."""
        if not value:
            return cls.UNKNOWN
        try:
            return cls(value.upper())
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_starting(self) -> bool:
        return self in _STARTING_STATUSES

    @property
    def is_stopping(self) -> bool:
        return self in _STOPPING_STATUSES


_STARTING_STATUSES = frozenset(
    {
        TaskStatus.PROVISIONING,
        TaskStatus.PENDING,
        TaskStatus.ACTIVATING,
        TaskStatus.RUNNING,
    }
)
_STOPPING_STATUSES = frozenset(
    {
        TaskStatus.DEACTIVATING,
        TaskStatus.STOPPING,
        TaskStatus.DEPROVISIONING,
        TaskStatus.STOPPED,
    }
)


class TargetHealthState(Enum):
    """Target health states reported by Elastic Load Balancing."""

    INITIAL = "initial"
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    UNUSED = "unused"
    DRAINING = "draining"
    UNAVAILABLE = "unavailable"


# =============================================================================
# Navigation Enums
# =============================================================================


class ViewState(Enum):
    """Top-level view owned by the navigation state machine."""

    INITIAL_LOAD = "initial_load"
    FLEET_LIST = "fleet_list"
    SERVICE_DETAIL = "service_detail"
    FATAL_ERROR = "fatal_error"


class DetailState(Enum):
    """Load state of one service-detail context."""

    LOADING = "loading"
    LOADED = "loaded"
    MISSING = "missing"
    FAILED = "failed"


class DetailPanel(Enum):
    """Nested sub-view shown inside the service detail."""

    OVERVIEW = "overview"
    TASK_SETS = "task_sets"
    EVENTS = "events"


class EventLogMode(Enum):
    """Input mode of the event log sub-view."""

    BROWSING = "browsing"
    FILTERING = "filtering"


class Action(Enum):
    """Operator actions routed into the navigation state machine."""

    SELECT = "select"
    BACK = "back"
    QUIT = "quit"
    TOGGLE_AUTO_REFRESH = "toggle_auto_refresh"
    REFRESH = "refresh"
    SHOW_EVENTS = "show_events"
    SHOW_TASK_SETS = "show_task_sets"
    START_FILTER = "start_filter"
    CLEAR_FILTER = "clear_filter"


# =============================================================================
# Theme Enums
# =============================================================================


class ThemeMode(Enum):
    """Theme mode values."""

    DARK = "dark"
    LIGHT = "light"
