"""WorkerMixin - worker lifecycle management for background fetches.

The app runs every gateway interaction as a Textual worker. Each worker
posts exactly one result event back into the event loop; this mixin only
starts workers and tracks their duration and outcome for the log.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable
from typing import Any

from textual.worker import Worker, WorkerState

logger = logging.getLogger(__name__)


class WorkerMixin:
    """Mixin providing standardized Worker lifecycle management.

    Usage:
        ```python
        class MyApp(WorkerMixin, App[None]):
            def load(self) -> None:
                self.start_worker(self._load(), name="load", group="data")
        ```
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._worker_started_at: dict[str, float] = {}
        self.loading_duration_ms: float = 0.0

    def start_worker(
        self,
        work: Awaitable[Any],
        *,
        name: str,
        group: str = "default",
        exclusive: bool = False,
    ) -> Worker[Any]:
        """Start an async worker that never takes the app down on error.

        Args:
            work: Awaitable to run on the event loop.
            name: Worker name, used for logging and duration tracking.
            group: Worker group.
            exclusive: If True, cancel running workers of the same group first.

        Returns:
            The Worker instance.
        """
        self._worker_started_at[name] = time.monotonic()
        return self.run_worker(  # type: ignore[attr-defined]
            work,
            name=name,
            group=group,
            exclusive=exclusive,
            exit_on_error=False,
        )

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Log worker completion with its duration."""
        if event.state not in (WorkerState.SUCCESS, WorkerState.CANCELLED, WorkerState.ERROR):
            return
        name = event.worker.name
        started_at = self._worker_started_at.pop(name, None)
        duration_ms = 0.0
        if started_at is not None:
            duration_ms = (time.monotonic() - started_at) * 1000
            self.loading_duration_ms = duration_ms

        if event.state == WorkerState.CANCELLED:
            logger.debug("Worker '%s' was cancelled (%.2fms)", name, duration_ms)
        elif event.state == WorkerState.ERROR:
            logger.error("Worker '%s' error: %s (%.2fms)", name, event.worker.error, duration_ms)
        else:
            logger.debug("Worker '%s' completed successfully (%.2fms)", name, duration_ms)


__all__ = [
    "WorkerMixin",
]
