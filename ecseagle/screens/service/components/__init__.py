"""Service detail components."""

from ecseagle.screens.service.components.event_log_view import EventLogView
from ecseagle.screens.service.components.task_set_panel import TaskSetPanel, TaskSetRenderer

__all__ = [
    "EventLogView",
    "TaskSetPanel",
    "TaskSetRenderer",
]
