"""ECS service, task set, deployment and task models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from ecseagle.constants.enums import TaskStatus
from ecseagle.utils.arn import short_name_from_arn


class ServiceSummary(BaseModel):
    """One row of the fleet list."""

    model_config = ConfigDict(frozen=True)

    service: str
    cluster: str
    service_arn: str = ""
    cluster_arn: str = ""

    @property
    def filter_value(self) -> str:
        """Text matched by the fleet filter."""
        return f"{self.service} {self.cluster}"


class ServiceEvent(BaseModel):
    """One entry of a service's event log, in provider order."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    created_at: datetime | None = None
    message: str = ""


class LoadBalancerBinding(BaseModel):
    """Target group registration recorded on a service, task set or deployment."""

    model_config = ConfigDict(frozen=True)

    target_group_arn: str = ""
    load_balancer_name: str | None = None
    container_name: str | None = None
    container_port: int | None = None


class TaskInfo(BaseModel):
    """A single ECS task with its last known lifecycle status."""

    model_config = ConfigDict(frozen=True)

    task_arn: str
    last_status: TaskStatus = TaskStatus.UNKNOWN
    desired_status: str = ""
    health_status: str = ""
    availability_zone: str = ""
    started_by: str = ""
    started_at: datetime | None = None

    @property
    def task_id(self) -> str:
        return short_name_from_arn(self.task_arn)


class TaskSetInfo(BaseModel):
    """A task set of a service using the EXTERNAL or CODE_DEPLOY controller."""

    model_config = ConfigDict(frozen=True)

    id: str
    task_set_arn: str = ""
    created_at: datetime | None = None
    status: str = ""
    stability_status: str = ""
    task_definition: str = ""
    launch_type: str = ""
    running_count: int = 0
    pending_count: int = 0
    computed_desired_count: int = 0
    scale_percent: float | None = None
    load_balancers: tuple[LoadBalancerBinding, ...] = ()


class DeploymentInfo(BaseModel):
    """A deployment of a service using the rolling ECS controller."""

    model_config = ConfigDict(frozen=True)

    id: str
    created_at: datetime | None = None
    status: str = ""
    rollout_state: str = ""
    rollout_state_reason: str = ""
    task_definition: str = ""
    launch_type: str = ""
    desired_count: int = 0
    running_count: int = 0
    pending_count: int = 0
    failed_tasks: int = 0


class ServiceRecord(BaseModel):
    """Description of one ECS service as returned by DescribeServices."""

    model_config = ConfigDict(frozen=True)

    cluster_arn: str
    service_name: str
    service_arn: str = ""
    status: str = ""
    desired_count: int = 0
    running_count: int = 0
    pending_count: int = 0
    task_definition: str | None = None
    deployment_controller: str = "ECS"
    launch_type: str = ""
    capacity_provider: str | None = None
    created_at: datetime | None = None
    events: tuple[ServiceEvent, ...] = ()
    task_sets: tuple[TaskSetInfo, ...] = ()
    deployments: tuple[DeploymentInfo, ...] = ()
    load_balancers: tuple[LoadBalancerBinding, ...] = ()

    @property
    def cluster(self) -> str:
        return short_name_from_arn(self.cluster_arn)

    @property
    def uses_task_sets(self) -> bool:
        """True when task sets, not deployments, describe the rollout."""
        return bool(self.task_sets)
