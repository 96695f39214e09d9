"""Events consumed and effects produced by the navigation state machine.

Both sets are closed: ``NavigationEvent`` and ``Effect`` list every variant,
and the machine handles each one explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from ecseagle.constants.enums import Action
from ecseagle.models.core.service_info import ServiceSummary
from ecseagle.models.core.status import ServiceStatus

# =============================================================================
# Events
# =============================================================================


@dataclass(frozen=True)
class AppStarted:
    """The UI is mounted and ready to load the fleet."""


@dataclass(frozen=True)
class Resized:
    width: int
    height: int


@dataclass(frozen=True)
class FleetLoaded:
    services: tuple[ServiceSummary, ...]


@dataclass(frozen=True)
class FleetLoadFailed:
    error: str


@dataclass(frozen=True)
class StatusLoaded:
    """An aggregation pass finished; ``status`` is None for a missing service."""

    generation: int
    status: ServiceStatus | None
    loaded_at: datetime


@dataclass(frozen=True)
class StatusFetchFailed:
    generation: int
    error: str


@dataclass(frozen=True)
class Tick:
    """Refresh timer fired for the context with ``generation``."""

    generation: int
    now: datetime


@dataclass(frozen=True)
class UserAction:
    """Operator input; ``target`` names the service for SELECT on the fleet."""

    action: Action
    target: ServiceSummary | None = None


@dataclass(frozen=True)
class FilterChanged:
    """Filter text edited in the active view (fleet or event log)."""

    text: str


NavigationEvent = Union[
    AppStarted,
    Resized,
    FleetLoaded,
    FleetLoadFailed,
    StatusLoaded,
    StatusFetchFailed,
    Tick,
    UserAction,
    FilterChanged,
]

# =============================================================================
# Effects
# =============================================================================


@dataclass(frozen=True)
class FetchFleet:
    """Load the fleet list in the background."""


@dataclass(frozen=True)
class FetchServiceStatus:
    """Run one aggregation pass in the background."""

    generation: int
    cluster: str
    service: str


@dataclass(frozen=True)
class ScheduleTick:
    """Fire ``Tick(generation)`` after ``delay`` seconds."""

    generation: int
    delay: float


@dataclass(frozen=True)
class Quit:
    """Terminate the application."""


Effect = Union[FetchFleet, FetchServiceStatus, ScheduleTick, Quit]

__all__ = [
    "AppStarted",
    "Effect",
    "FetchFleet",
    "FetchServiceStatus",
    "FilterChanged",
    "FleetLoadFailed",
    "FleetLoaded",
    "NavigationEvent",
    "Quit",
    "Resized",
    "ScheduleTick",
    "StatusFetchFailed",
    "StatusLoaded",
    "Tick",
    "UserAction",
]
