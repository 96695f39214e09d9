"""Application state: settings, navigation state machine and refresh policy."""

from ecseagle.models.state.app_settings import AppSettings, ConfigError, ConfigLoadError
from ecseagle.models.state.event_log import EventLogState
from ecseagle.models.state.navigation import (
    FleetListState,
    NavigationStateMachine,
    ServiceDetailContext,
)
from ecseagle.models.state.refresh import RefreshScheduler

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "EventLogState",
    "FleetListState",
    "NavigationStateMachine",
    "RefreshScheduler",
    "ServiceDetailContext",
]
