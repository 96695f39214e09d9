"""Base controller with async worker-friendly patterns for EcsEagle TUI.

This module provides the foundation for background data loading using Textual
Workers: blocking AWS calls are pushed to a thread so the UI stays responsive.
"""

from __future__ import annotations

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from ecseagle.models.core.service_info import ServiceSummary
    from ecseagle.models.core.status import ServiceStatus

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncControllerMixin:
    """Mixin running blocking calls off the event loop with timing."""

    def __init__(self) -> None:
        """Initialize the async controller mixin."""
        self.last_duration_ms: float = 0.0

    async def run_blocking(self, func: Callable[..., T], *args: Any) -> T:
        """Run ``func(*args)`` in a worker thread and record its duration.

        Exceptions raised by ``func`` propagate to the awaiting worker.
        """
        started = time.monotonic()
        try:
            return await asyncio.to_thread(func, *args)
        finally:
            self.last_duration_ms = (time.monotonic() - started) * 1000
            logger.debug(
                "%s finished in %.2fms",
                getattr(func, "__name__", repr(func)),
                self.last_duration_ms,
            )


class BaseController(AsyncControllerMixin, ABC):
    """Base controller class with worker-friendly patterns.

    The UI only talks to this interface, so tests can swap in a fake.
    """

    @abstractmethod
    async def fetch_service_list(self) -> list[ServiceSummary]:
        """Fetch the fleet list.

        Returns:
            One summary per service across all clusters.
        """
        ...

    @abstractmethod
    async def fetch_service_status(self, cluster: str, service: str) -> ServiceStatus | None:
        """Run one aggregation pass for a service.

        Returns:
            The snapshot, or None when the service no longer exists.
        """
        ...
