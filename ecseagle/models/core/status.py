"""Aggregated status snapshots produced by one aggregation pass."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ecseagle.models.core.connection import ConnectionConfig
from ecseagle.models.core.service_info import DeploymentInfo, ServiceRecord, TaskInfo, TaskSetInfo


def _first_per_id(items):
    seen: set[str] = set()
    unique = []
    for item in items:
        if item.id not in seen:
            seen.add(item.id)
            unique.append(item)
    return tuple(unique)


class ServiceScale(BaseModel):
    """Application Auto Scaling bounds; zero when no scalable target exists."""

    model_config = ConfigDict(frozen=True)

    min_capacity: int = 0
    max_capacity: int = 0
    configured: bool = False


class TaskSetStatus(BaseModel):
    """Per task set (or per deployment) images, connections and tasks.

    All maps are keyed by task set / deployment id. ``connections`` is the
    flat list of every resolved connection, which the deployments model
    reports at service level.
    """

    model_config = ConfigDict(frozen=True)

    images: dict[str, tuple[str, ...]] = Field(default_factory=dict)
    connections_by_set: dict[str, tuple[ConnectionConfig, ...]] = Field(default_factory=dict)
    tasks: dict[str, tuple[TaskInfo, ...]] = Field(default_factory=dict)
    connections: tuple[ConnectionConfig, ...] = ()


class ServiceStatus(BaseModel):
    """Consolidated view of one service (the aggregate root)."""

    model_config = ConfigDict(frozen=True)

    service: ServiceRecord
    scale: ServiceScale = ServiceScale()
    images: tuple[str, ...] = ()
    images_by_set: dict[str, tuple[str, ...]] = Field(default_factory=dict)
    connections_by_set: dict[str, tuple[ConnectionConfig, ...]] = Field(default_factory=dict)
    tasks_by_set: dict[str, tuple[TaskInfo, ...]] = Field(default_factory=dict)
    connections: tuple[ConnectionConfig, ...] = ()
    fetched_at: datetime | None = None

    @property
    def uses_task_sets(self) -> bool:
        return self.service.uses_task_sets

    @property
    def task_sets(self) -> tuple[TaskSetInfo, ...]:
        """Task sets in provider order, the first of any duplicate id kept."""
        return _first_per_id(self.service.task_sets)

    @property
    def deployments(self) -> tuple[DeploymentInfo, ...]:
        return _first_per_id(self.service.deployments)

    def connections_for(self, set_id: str) -> tuple[ConnectionConfig, ...]:
        return self.connections_by_set.get(set_id, ())

    def tasks_for(self, set_id: str) -> tuple[TaskInfo, ...]:
        return self.tasks_by_set.get(set_id, ())

    def images_for(self, set_id: str) -> tuple[str, ...]:
        return self.images_by_set.get(set_id, ())
