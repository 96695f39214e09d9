"""Refresh scheduler - decides when a service detail context re-fetches."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from ecseagle.constants.defaults import REFRESH_DEBOUNCE_DEFAULT, REFRESH_INTERVAL_DEFAULT
from ecseagle.models.state.events import Effect, FetchServiceStatus, ScheduleTick

if TYPE_CHECKING:
    from ecseagle.models.state.navigation import ServiceDetailContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RefreshScheduler:
    """Timer policy: tick every ``interval``, refresh when data is older than ``debounce``.

    Every tick of the active context reschedules exactly one tick. At most one
    fetch per context is outstanding; further requests are collapsed.
    """

    interval: float = REFRESH_INTERVAL_DEFAULT
    debounce: float = REFRESH_DEBOUNCE_DEFAULT

    def __post_init__(self) -> None:
        if self.interval <= 0 or self.debounce <= 0:
            raise ValueError("refresh interval and debounce must be positive")
        if self.debounce >= self.interval:
            raise ValueError("refresh debounce must be lower than the interval")

    def is_due(self, context: ServiceDetailContext, now: datetime) -> bool:
        """Return True when an auto refresh should start at ``now``."""
        if not context.auto_refresh or context.in_flight:
            return False
        if context.last_update is None:
            return True
        return (now - context.last_update).total_seconds() > self.debounce

    def start(self, context: ServiceDetailContext) -> list[Effect]:
        """Effects for a newly created context: first fetch plus the tick chain."""
        context.in_flight = True
        return [self._fetch(context), ScheduleTick(context.generation, self.interval)]

    def on_tick(self, context: ServiceDetailContext, now: datetime) -> list[Effect]:
        effects: list[Effect] = []
        if self.is_due(context, now):
            logger.debug("Auto refresh of %s", context.summary.service)
            context.in_flight = True
            effects.append(self._fetch(context))
        effects.append(ScheduleTick(context.generation, self.interval))
        return effects

    def request_refresh(self, context: ServiceDetailContext) -> list[Effect]:
        """Manual refresh: fetch now unless a fetch is already outstanding."""
        if context.in_flight:
            logger.debug("Refresh of %s already in flight", context.summary.service)
            return []
        context.in_flight = True
        context.refreshing = True
        return [self._fetch(context)]

    @staticmethod
    def _fetch(context: ServiceDetailContext) -> FetchServiceStatus:
        return FetchServiceStatus(
            generation=context.generation,
            cluster=context.summary.cluster_arn or context.summary.cluster,
            service=context.summary.service,
        )
