"""Target health summarization."""

from __future__ import annotations

from collections.abc import Iterable

from ecseagle.constants.enums import TargetHealthState
from ecseagle.models.core.connection import TargetHealthEntry
from ecseagle.utils.formatting import availability_zone_suffix


def summarize_target_health(
    entries: Iterable[TargetHealthEntry],
) -> list[tuple[str, list[str]]]:
    """Group targets by health state with their unique, sorted zone suffixes.

    Healthy targets come first, then the remaining states alphabetically.
    Targets without a zone still count towards their state.
    """
    zones_by_state: dict[str, set[str]] = {}
    for entry in entries:
        state = entry.state or "unknown"
        zones = zones_by_state.setdefault(state, set())
        suffix = availability_zone_suffix(entry.availability_zone)
        if suffix:
            zones.add(suffix)

    healthy = TargetHealthState.HEALTHY.value
    ordered_states = sorted(zones_by_state, key=lambda s: (s != healthy, s))
    return [(state, sorted(zones_by_state[state])) for state in ordered_states]


def is_healthy_state(state: str) -> bool:
    return state == TargetHealthState.HEALTHY.value


__all__ = [
    "is_healthy_state",
    "summarize_target_health",
]
