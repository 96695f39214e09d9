"""Remote data gateway - blocking boto3 calls for ECS, ELBv2 and Auto Scaling.

Every method returns the raw response items as dictionaries; parsers turn
them into models. Botocore failures are re-raised as ``GatewayError`` with the
operation name, nothing is retried or swallowed here beyond botocore's own
retry policy.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any, Protocol, TypeVar

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ecseagle.constants.limits import (
    DESCRIBE_SERVICES_BATCH_SIZE,
    DESCRIBE_TASKS_BATCH_SIZE,
)
from ecseagle.constants.timeouts import (
    AWS_CONNECT_TIMEOUT,
    AWS_MAX_ATTEMPTS,
    AWS_READ_TIMEOUT,
)
from ecseagle.constants.values import SCALABLE_NAMESPACE_ECS
from ecseagle.errors import GatewayError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RemoteDataGateway(Protocol):
    """Operations the aggregator and resolver need from AWS."""

    def list_clusters(self) -> list[str]: ...

    def list_services(self, cluster: str) -> list[str]: ...

    def describe_services(self, cluster: str, services: list[str]) -> list[dict[str, Any]]: ...

    def describe_task_definition(self, task_definition: str) -> dict[str, Any]: ...

    def describe_scalable_targets(self, resource_id: str) -> list[dict[str, Any]]: ...

    def list_tasks(self, cluster: str, started_by: str) -> list[str]: ...

    def describe_tasks(self, cluster: str, task_arns: list[str]) -> list[dict[str, Any]]: ...

    def describe_load_balancers(self) -> list[dict[str, Any]]: ...

    def describe_listeners(self, load_balancer_arn: str) -> list[dict[str, Any]]: ...

    def describe_rules(self, listener_arn: str) -> list[dict[str, Any]]: ...

    def describe_target_health(self, target_group_arn: str) -> list[dict[str, Any]]: ...


def _chunks(items: list[T], size: int) -> Iterator[list[T]]:
    for start in range(0, len(items), size):
        yield items[start : start + size]


class AwsGateway:
    """boto3-backed implementation of ``RemoteDataGateway``."""

    def __init__(
        self,
        profile: str | None = None,
        region: str | None = None,
        session: Any | None = None,
    ) -> None:
        """Create clients from a boto3 session.

        Args:
            profile: Named AWS profile, default credential chain when None.
            region: Region override, profile/environment region when None.
            session: Pre-built session (tests inject a fake here).
        """
        if session is None:
            session = self._call(
                "Session", lambda: boto3.Session(profile_name=profile, region_name=region)
            )
        self._session = session
        client_config = Config(
            connect_timeout=AWS_CONNECT_TIMEOUT,
            read_timeout=AWS_READ_TIMEOUT,
            retries={"max_attempts": AWS_MAX_ATTEMPTS, "mode": "standard"},
        )
        self._ecs = self._call("client", lambda: session.client("ecs", config=client_config))
        self._elbv2 = self._call("client", lambda: session.client("elbv2", config=client_config))
        self._autoscaling = self._call(
            "client", lambda: session.client("application-autoscaling", config=client_config)
        )

    @property
    def region(self) -> str | None:
        return getattr(self._session, "region_name", None)

    # =========================================================================
    # Call helpers
    # =========================================================================

    @staticmethod
    def _call(operation: str, func: Callable[[], T]) -> T:
        try:
            return func()
        except (ClientError, BotoCoreError) as exc:
            logger.warning("AWS call %s failed: %s", operation, exc)
            raise GatewayError(operation, str(exc)) from exc

    def _paginate(
        self,
        client: Any,
        operation: str,
        result_key: str,
        **kwargs: Any,
    ) -> list[Any]:
        """Collect ``result_key`` items from every page of a paginated call."""

        def collect() -> list[Any]:
            items: list[Any] = []
            for page in client.get_paginator(operation).paginate(**kwargs):
                items.extend(page.get(result_key, []))
            return items

        return self._call(operation, collect)

    # =========================================================================
    # ECS
    # =========================================================================

    def list_clusters(self) -> list[str]:
        return self._paginate(self._ecs, "list_clusters", "clusterArns")

    def list_services(self, cluster: str) -> list[str]:
        return self._paginate(self._ecs, "list_services", "serviceArns", cluster=cluster)

    def describe_services(self, cluster: str, services: list[str]) -> list[dict[str, Any]]:
        """Describe services in batches of ten, the API maximum."""
        described: list[dict[str, Any]] = []
        for batch in _chunks(list(services), DESCRIBE_SERVICES_BATCH_SIZE):
            response = self._call(
                "describe_services",
                lambda batch=batch: self._ecs.describe_services(
                    cluster=cluster, services=batch
                ),
            )
            described.extend(response.get("services", []))
        return described

    def describe_task_definition(self, task_definition: str) -> dict[str, Any]:
        response = self._call(
            "describe_task_definition",
            lambda: self._ecs.describe_task_definition(taskDefinition=task_definition),
        )
        return response.get("taskDefinition", {})

    def list_tasks(self, cluster: str, started_by: str) -> list[str]:
        return self._paginate(
            self._ecs,
            "list_tasks",
            "taskArns",
            cluster=cluster,
            startedBy=started_by,
        )

    def describe_tasks(self, cluster: str, task_arns: list[str]) -> list[dict[str, Any]]:
        """Describe tasks in batches of one hundred; no call for an empty list."""
        described: list[dict[str, Any]] = []
        for batch in _chunks(list(task_arns), DESCRIBE_TASKS_BATCH_SIZE):
            response = self._call(
                "describe_tasks",
                lambda batch=batch: self._ecs.describe_tasks(cluster=cluster, tasks=batch),
            )
            described.extend(response.get("tasks", []))
        return described

    # =========================================================================
    # Application Auto Scaling
    # =========================================================================

    def describe_scalable_targets(self, resource_id: str) -> list[dict[str, Any]]:
        return self._paginate(
            self._autoscaling,
            "describe_scalable_targets",
            "ScalableTargets",
            ServiceNamespace=SCALABLE_NAMESPACE_ECS,
            ResourceIds=[resource_id],
        )

    # =========================================================================
    # Elastic Load Balancing v2
    # =========================================================================

    def describe_load_balancers(self) -> list[dict[str, Any]]:
        return self._paginate(self._elbv2, "describe_load_balancers", "LoadBalancers")

    def describe_listeners(self, load_balancer_arn: str) -> list[dict[str, Any]]:
        return self._paginate(
            self._elbv2,
            "describe_listeners",
            "Listeners",
            LoadBalancerArn=load_balancer_arn,
        )

    def describe_rules(self, listener_arn: str) -> list[dict[str, Any]]:
        """Describe listener rules, following ``NextMarker`` manually."""

        def collect() -> list[dict[str, Any]]:
            rules: list[dict[str, Any]] = []
            kwargs: dict[str, Any] = {"ListenerArn": listener_arn}
            while True:
                response = self._elbv2.describe_rules(**kwargs)
                rules.extend(response.get("Rules", []))
                marker = response.get("NextMarker")
                if not marker:
                    return rules
                kwargs["Marker"] = marker

        return self._call("describe_rules", collect)

    def describe_target_health(self, target_group_arn: str) -> list[dict[str, Any]]:
        response = self._call(
            "describe_target_health",
            lambda: self._elbv2.describe_target_health(TargetGroupArn=target_group_arn),
        )
        return response.get("TargetHealthDescriptions", [])


__all__ = [
    "AwsGateway",
    "RemoteDataGateway",
]
