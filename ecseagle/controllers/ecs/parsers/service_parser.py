"""Service parser - converts ECS API responses into structured models."""

from __future__ import annotations

from typing import Any

from ecseagle.constants.enums import TaskStatus
from ecseagle.models.core.service_info import (
    DeploymentInfo,
    LoadBalancerBinding,
    ServiceEvent,
    ServiceRecord,
    ServiceSummary,
    TaskInfo,
    TaskSetInfo,
)
from ecseagle.models.core.status import ServiceScale
from ecseagle.utils.arn import short_name_from_arn
from ecseagle.utils.images import short_image_names


class ServiceParser:
    """Parses ECS service, task set, deployment and task dictionaries."""

    def parse_service_summary(self, service_arn: str, cluster_arn: str) -> ServiceSummary:
        """Build a fleet list row from a service ARN and its cluster ARN."""
        return ServiceSummary(
            service=short_name_from_arn(service_arn),
            cluster=short_name_from_arn(cluster_arn),
            service_arn=service_arn,
            cluster_arn=cluster_arn,
        )

    def parse_load_balancers(self, raw: list[dict[str, Any]] | None) -> list[LoadBalancerBinding]:
        return [
            LoadBalancerBinding(
                target_group_arn=item.get("targetGroupArn", ""),
                load_balancer_name=item.get("loadBalancerName"),
                container_name=item.get("containerName"),
                container_port=item.get("containerPort"),
            )
            for item in raw or []
        ]

    def parse_event(self, event: dict[str, Any]) -> ServiceEvent:
        return ServiceEvent(
            id=event.get("id", ""),
            created_at=event.get("createdAt"),
            message=event.get("message", ""),
        )

    def parse_task_set(self, task_set: dict[str, Any]) -> TaskSetInfo:
        scale = task_set.get("scale") or {}
        return TaskSetInfo(
            id=task_set.get("id", ""),
            task_set_arn=task_set.get("taskSetArn", ""),
            created_at=task_set.get("createdAt"),
            status=task_set.get("status", ""),
            stability_status=task_set.get("stabilityStatus", ""),
            task_definition=task_set.get("taskDefinition", ""),
            launch_type=task_set.get("launchType", ""),
            running_count=task_set.get("runningCount", 0),
            pending_count=task_set.get("pendingCount", 0),
            computed_desired_count=task_set.get("computedDesiredCount", 0),
            scale_percent=scale.get("value"),
            load_balancers=self.parse_load_balancers(task_set.get("loadBalancers")),
        )

    def parse_deployment(self, deployment: dict[str, Any]) -> DeploymentInfo:
        return DeploymentInfo(
            id=deployment.get("id", ""),
            created_at=deployment.get("createdAt"),
            status=deployment.get("status", ""),
            rollout_state=deployment.get("rolloutState", ""),
            rollout_state_reason=deployment.get("rolloutStateReason", ""),
            task_definition=deployment.get("taskDefinition", ""),
            launch_type=deployment.get("launchType", ""),
            desired_count=deployment.get("desiredCount", 0),
            running_count=deployment.get("runningCount", 0),
            pending_count=deployment.get("pendingCount", 0),
            failed_tasks=deployment.get("failedTasks", 0),
        )

    def parse_service(self, service: dict[str, Any]) -> ServiceRecord:
        """Parse one DescribeServices entry into a ServiceRecord.

        Task sets and deployments keep provider order; events keep provider
        order too (newest first as ECS returns them).
        """
        strategy = service.get("capacityProviderStrategy") or []
        capacity_provider = strategy[0].get("capacityProvider") if strategy else None
        controller = (service.get("deploymentController") or {}).get("type", "ECS")

        return ServiceRecord(
            cluster_arn=service.get("clusterArn", ""),
            service_name=service.get("serviceName", ""),
            service_arn=service.get("serviceArn", ""),
            status=service.get("status", ""),
            desired_count=service.get("desiredCount", 0),
            running_count=service.get("runningCount", 0),
            pending_count=service.get("pendingCount", 0),
            task_definition=service.get("taskDefinition"),
            deployment_controller=controller,
            launch_type=service.get("launchType", ""),
            capacity_provider=capacity_provider,
            created_at=service.get("createdAt"),
            events=[self.parse_event(event) for event in service.get("events", [])],
            task_sets=[self.parse_task_set(ts) for ts in service.get("taskSets", [])],
            deployments=[self.parse_deployment(d) for d in service.get("deployments", [])],
            load_balancers=self.parse_load_balancers(service.get("loadBalancers")),
        )

    def parse_task(self, task: dict[str, Any]) -> TaskInfo:
        return TaskInfo(
            task_arn=task.get("taskArn", ""),
            last_status=TaskStatus.parse(task.get("lastStatus")),
            desired_status=task.get("desiredStatus", ""),
            health_status=task.get("healthStatus", ""),
            availability_zone=task.get("availabilityZone", ""),
            started_by=task.get("startedBy", ""),
            started_at=task.get("startedAt"),
        )

    def parse_container_images(self, task_definition: dict[str, Any]) -> list[str]:
        """Short image names of every container, blanks dropped."""
        return short_image_names(
            container.get("image") for container in task_definition.get("containerDefinitions", [])
        )

    def parse_scale(self, scalable_targets: list[dict[str, Any]]) -> ServiceScale:
        """Scaling bounds from the first scalable target, defaults when none."""
        if not scalable_targets:
            return ServiceScale()
        target = scalable_targets[0]
        return ServiceScale(
            min_capacity=target.get("MinCapacity", 0),
            max_capacity=target.get("MaxCapacity", 0),
            configured=True,
        )
