"""Screen and app mixins."""

from ecseagle.screens.mixins.worker_mixin import WorkerMixin

__all__ = [
    "WorkerMixin",
]
