"""Status aggregator - builds one consistent ServiceStatus per aggregation pass."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import TypeVar

from pydantic import ValidationError

from ecseagle.constants.values import PRIMARY_STATUS
from ecseagle.controllers.ecs.fetchers.target_group_resolver import TargetGroupResolver
from ecseagle.controllers.ecs.gateway import RemoteDataGateway
from ecseagle.controllers.ecs.parsers.service_parser import ServiceParser
from ecseagle.errors import AggregationError
from ecseagle.models.cache.target_health_cache import TargetHealthCache
from ecseagle.models.core.connection import ConnectionConfig
from ecseagle.models.core.service_info import (
    DeploymentInfo,
    LoadBalancerBinding,
    TaskInfo,
    TaskSetInfo,
)
from ecseagle.models.core.status import ServiceStatus, TaskSetStatus
from ecseagle.utils.arn import scalable_resource_id

logger = logging.getLogger(__name__)

_SetT = TypeVar("_SetT", TaskSetInfo, DeploymentInfo)


def _local_now() -> datetime:
    return datetime.now().astimezone()


class StatusAggregator:
    """Composes service, scaling, image, task and routing data into snapshots.

    Each public call is one aggregation pass: calls run sequentially, a fresh
    target health cache is used unless the caller passes one, and the first
    failure aborts the pass.
    """

    def __init__(
        self,
        gateway: RemoteDataGateway,
        resolver: TargetGroupResolver | None = None,
        parser: ServiceParser | None = None,
        clock: Callable[[], datetime] = _local_now,
    ) -> None:
        self._gateway = gateway
        self._resolver = resolver or TargetGroupResolver(gateway)
        self._parser = parser or ServiceParser()
        self._clock = clock

    # =========================================================================
    # Service
    # =========================================================================

    def fetch_service_status(self, cluster: str, service: str) -> ServiceStatus | None:
        """Aggregate the full status of one service.

        Returns:
            The snapshot, or None when the service no longer exists.

        Raises:
            GatewayError: Any remote call failed.
            AggregationError: A response could not be parsed.
        """
        described = self._gateway.describe_services(cluster, [service])
        if not described:
            logger.info("Service %s not found in cluster %s", service, cluster)
            return None

        try:
            record = self._parser.parse_service(described[0])
        except ValidationError as exc:
            raise AggregationError(f"Unexpected service description for {service}: {exc}") from exc

        scale = self._parser.parse_scale(
            self._gateway.describe_scalable_targets(scalable_resource_id(cluster, service))
        )

        image_cache: dict[str, tuple[str, ...]] = {}
        images: tuple[str, ...] = ()
        if record.task_definition:
            images = self._resolve_images(record.task_definition, image_cache)

        health_cache = TargetHealthCache()
        if record.uses_task_sets:
            sets = self._aggregate_task_sets(cluster, record.task_sets, health_cache, image_cache)
        else:
            sets = self._aggregate_deployments(
                cluster,
                record.deployments,
                record.load_balancers,
                health_cache,
                image_cache,
            )

        logger.debug(
            "Aggregated %s/%s: %d sets, %d health lookups (%d cached)",
            cluster,
            service,
            len(sets.images),
            health_cache.misses,
            health_cache.hits,
        )
        return ServiceStatus(
            service=record,
            scale=scale,
            images=images,
            images_by_set=sets.images,
            connections_by_set=sets.connections_by_set,
            tasks_by_set=sets.tasks,
            connections=sets.connections,
            fetched_at=self._clock(),
        )

    # =========================================================================
    # Task sets / deployments
    # =========================================================================

    def fetch_task_set_status(
        self,
        cluster: str,
        task_sets: Iterable[TaskSetInfo],
        *,
        health_cache: TargetHealthCache | None = None,
    ) -> TaskSetStatus:
        """Images, tasks and connections of each task set, keyed by id."""
        if health_cache is None:
            health_cache = TargetHealthCache()
        return self._aggregate_task_sets(cluster, task_sets, health_cache, {})

    def fetch_deployment_status(
        self,
        cluster: str,
        deployments: Iterable[DeploymentInfo],
        load_balancers: Iterable[LoadBalancerBinding],
        *,
        health_cache: TargetHealthCache | None = None,
    ) -> TaskSetStatus:
        """Images, tasks and connections of each deployment, keyed by id.

        Deployments carry no load balancer bindings of their own; the service
        bindings are resolved once and attributed to the PRIMARY deployment.
        """
        if health_cache is None:
            health_cache = TargetHealthCache()
        return self._aggregate_deployments(cluster, deployments, load_balancers, health_cache, {})

    def _aggregate_task_sets(
        self,
        cluster: str,
        task_sets: Iterable[TaskSetInfo],
        health_cache: TargetHealthCache,
        image_cache: dict[str, tuple[str, ...]],
    ) -> TaskSetStatus:
        images: dict[str, tuple[str, ...]] = {}
        tasks: dict[str, tuple[TaskInfo, ...]] = {}
        connections_by_set: dict[str, tuple[ConnectionConfig, ...]] = {}
        flat: list[ConnectionConfig] = []

        for task_set in self._unique_by_id(task_sets, "task set"):
            images[task_set.id] = self._resolve_images(task_set.task_definition, image_cache)
            tasks[task_set.id] = self._fetch_tasks(cluster, task_set.id)
            resolved = self._resolve_bindings(task_set.id, task_set.load_balancers, health_cache)
            connections_by_set[task_set.id] = resolved
            flat.extend(resolved)

        return TaskSetStatus(
            images=images,
            connections_by_set=connections_by_set,
            tasks=tasks,
            connections=tuple(flat),
        )

    def _aggregate_deployments(
        self,
        cluster: str,
        deployments: Iterable[DeploymentInfo],
        load_balancers: Iterable[LoadBalancerBinding],
        health_cache: TargetHealthCache,
        image_cache: dict[str, tuple[str, ...]],
    ) -> TaskSetStatus:
        unique = self._unique_by_id(deployments, "deployment")
        images: dict[str, tuple[str, ...]] = {}
        tasks: dict[str, tuple[TaskInfo, ...]] = {}
        connections_by_set: dict[str, tuple[ConnectionConfig, ...]] = {}

        for deployment in unique:
            images[deployment.id] = self._resolve_images(deployment.task_definition, image_cache)
            tasks[deployment.id] = self._fetch_tasks(cluster, deployment.id)
            connections_by_set[deployment.id] = ()

        owner = next((d for d in unique if d.status == PRIMARY_STATUS), None)
        if owner is None and unique:
            owner = unique[0]
        flat = self._resolve_bindings(owner.id if owner else "", load_balancers, health_cache)
        if owner is not None:
            connections_by_set[owner.id] = flat

        return TaskSetStatus(
            images=images,
            connections_by_set=connections_by_set,
            tasks=tasks,
            connections=flat,
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _unique_by_id(items: Iterable[_SetT], kind: str) -> list[_SetT]:
        seen: set[str] = set()
        unique: list[_SetT] = []
        for item in items:
            if item.id in seen:
                logger.warning("Dropping duplicate %s id %s", kind, item.id)
                continue
            seen.add(item.id)
            unique.append(item)
        return unique

    def _resolve_images(
        self,
        task_definition: str,
        image_cache: dict[str, tuple[str, ...]],
    ) -> tuple[str, ...]:
        """Short container images of a task definition, fetched once per pass."""
        if not task_definition:
            return ()
        cached = image_cache.get(task_definition)
        if cached is not None:
            return cached
        definition = self._gateway.describe_task_definition(task_definition)
        images = tuple(self._parser.parse_container_images(definition))
        image_cache[task_definition] = images
        return images

    def _fetch_tasks(self, cluster: str, started_by: str) -> tuple[TaskInfo, ...]:
        task_arns = self._gateway.list_tasks(cluster, started_by)
        if not task_arns:
            return ()
        described = self._gateway.describe_tasks(cluster, task_arns)
        return tuple(self._parser.parse_task(task) for task in described)

    def _resolve_bindings(
        self,
        set_id: str,
        bindings: Iterable[LoadBalancerBinding],
        health_cache: TargetHealthCache,
    ) -> tuple[ConnectionConfig, ...]:
        connections: list[ConnectionConfig] = []
        for binding in bindings:
            if not binding.target_group_arn:
                continue
            connections.extend(
                self._resolver.resolve_connections(
                    binding.target_group_arn,
                    health_cache=health_cache,
                    task_set_id=set_id,
                )
            )
        return tuple(connections)
