"""Core domain models."""

from ecseagle.models.core.connection import ConnectionConfig, TargetHealthEntry
from ecseagle.models.core.service_info import (
    DeploymentInfo,
    LoadBalancerBinding,
    ServiceEvent,
    ServiceRecord,
    ServiceSummary,
    TaskInfo,
    TaskSetInfo,
)
from ecseagle.models.core.status import ServiceScale, ServiceStatus, TaskSetStatus

__all__ = [
    "ConnectionConfig",
    "DeploymentInfo",
    "LoadBalancerBinding",
    "ServiceEvent",
    "ServiceRecord",
    "ServiceScale",
    "ServiceStatus",
    "ServiceSummary",
    "TargetHealthEntry",
    "TaskInfo",
    "TaskSetInfo",
    "TaskSetStatus",
]
