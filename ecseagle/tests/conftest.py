"""Shared fixtures for EcsEagle tests.

Provides:
- FakeGateway: in-memory RemoteDataGateway with canned AWS responses for a
  task-set service (``web``) and a deployments service (``api``)
- FakeController: BaseController serving canned fleet and status snapshots
- app: EcsEagleApp wired to a FakeController
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest

from ecseagle.app import EcsEagleApp
from ecseagle.controllers.base import BaseController
from ecseagle.controllers.ecs.aggregator import StatusAggregator
from ecseagle.controllers.ecs.fetchers.service_list_fetcher import ServiceListFetcher
from ecseagle.models.core.service_info import ServiceSummary
from ecseagle.models.core.status import ServiceStatus
from ecseagle.models.state.app_settings import AppSettings

ACCOUNT = "111122223333"
REGION = "me-central-1"
CLUSTER = "app-cluster"
CLUSTER_ARN = f"arn:aws:ecs:{REGION}:{ACCOUNT}:cluster/{CLUSTER}"
WEB_ARN = f"arn:aws:ecs:{REGION}:{ACCOUNT}:service/{CLUSTER}/web"
API_ARN = f"arn:aws:ecs:{REGION}:{ACCOUNT}:service/{CLUSTER}/api"
TG_BLUE = f"arn:aws:elasticloadbalancing:{REGION}:{ACCOUNT}:targetgroup/web-blue/aaaa1111"
TG_GREEN = f"arn:aws:elasticloadbalancing:{REGION}:{ACCOUNT}:targetgroup/web-green/bbbb2222"
TG_API = f"arn:aws:elasticloadbalancing:{REGION}:{ACCOUNT}:targetgroup/api-tg/cccc3333"
LB_ARN = f"arn:aws:elasticloadbalancing:{REGION}:{ACCOUNT}:loadbalancer/app/public-alb/dddd"
LISTENER_443 = f"arn:aws:elasticloadbalancing:{REGION}:{ACCOUNT}:listener/app/public-alb/dddd/443"
LISTENER_80 = f"arn:aws:elasticloadbalancing:{REGION}:{ACCOUNT}:listener/app/public-alb/dddd/80"
ECR = f"{ACCOUNT}.dkr.ecr.{REGION}.amazonaws.com"
FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, 250000, tzinfo=timezone.utc)


def _at(hours_ago: int) -> datetime:
    return FIXED_NOW.replace(hour=12 - hours_ago)


# =============================================================================
# Fake gateway
# =============================================================================


class FakeGateway:
    """In-memory gateway recording every call as ``(operation, args)``."""

    def __init__(self) -> None:
        self.clusters: dict[str, list[str]] = {}
        self.services: dict[tuple[str, str], dict[str, Any]] = {}
        self.task_definitions: dict[str, dict[str, Any]] = {}
        self.scalable_targets: dict[str, list[dict[str, Any]]] = {}
        self.tasks: dict[str, list[dict[str, Any]]] = {}
        self.load_balancers: list[dict[str, Any]] = []
        self.listeners: dict[str, list[dict[str, Any]]] = {}
        self.rules: dict[str, list[dict[str, Any]]] = {}
        self.target_health: dict[str, list[dict[str, Any]]] = {}
        self.failures: dict[str, Exception] = {}
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, operation: str, *args: Any) -> None:
        self.calls.append((operation, args))
        if operation in self.failures:
            raise self.failures[operation]

    def count(self, operation: str) -> int:
        return sum(1 for name, _ in self.calls if name == operation)

    def list_clusters(self) -> list[str]:
        self._record("list_clusters")
        return list(self.clusters)

    def list_services(self, cluster: str) -> list[str]:
        self._record("list_services", cluster)
        return list(self.clusters.get(cluster, []))

    def describe_services(self, cluster: str, services: list[str]) -> list[dict[str, Any]]:
        self._record("describe_services", cluster, tuple(services))
        return [self.services[(cluster, s)] for s in services if (cluster, s) in self.services]

    def describe_task_definition(self, task_definition: str) -> dict[str, Any]:
        self._record("describe_task_definition", task_definition)
        return self.task_definitions.get(task_definition, {})

    def describe_scalable_targets(self, resource_id: str) -> list[dict[str, Any]]:
        self._record("describe_scalable_targets", resource_id)
        return list(self.scalable_targets.get(resource_id, []))

    def list_tasks(self, cluster: str, started_by: str) -> list[str]:
        self._record("list_tasks", cluster, started_by)
        return [task["taskArn"] for task in self.tasks.get(started_by, [])]

    def describe_tasks(self, cluster: str, task_arns: list[str]) -> list[dict[str, Any]]:
        self._record("describe_tasks", cluster, tuple(task_arns))
        wanted = set(task_arns)
        return [
            task
            for tasks in self.tasks.values()
            for task in tasks
            if task["taskArn"] in wanted
        ]

    def describe_load_balancers(self) -> list[dict[str, Any]]:
        self._record("describe_load_balancers")
        return list(self.load_balancers)

    def describe_listeners(self, load_balancer_arn: str) -> list[dict[str, Any]]:
        self._record("describe_listeners", load_balancer_arn)
        return list(self.listeners.get(load_balancer_arn, []))

    def describe_rules(self, listener_arn: str) -> list[dict[str, Any]]:
        self._record("describe_rules", listener_arn)
        return list(self.rules.get(listener_arn, []))

    def describe_target_health(self, target_group_arn: str) -> list[dict[str, Any]]:
        self._record("describe_target_health", target_group_arn)
        return list(self.target_health.get(target_group_arn, []))


def _task(task_id: str, started_by: str, status: str, zone: str) -> dict[str, Any]:
    return {
        "taskArn": f"arn:aws:ecs:{REGION}:{ACCOUNT}:task/{CLUSTER}/{task_id}",
        "lastStatus": status,
        "desiredStatus": "RUNNING",
        "availabilityZone": zone,
        "startedBy": started_by,
    }


def _health(target_id: str, zone: str, state: str) -> dict[str, Any]:
    return {
        "Target": {"Id": target_id, "Port": 8080, "AvailabilityZone": zone},
        "TargetHealth": {"State": state},
    }


def _container(image: str) -> dict[str, Any]:
    return {"containerDefinitions": [{"name": "app", "image": image}, {"name": "log", "image": ""}]}


def build_gateway() -> FakeGateway:
    gateway = FakeGateway()
    gateway.clusters = {CLUSTER_ARN: [WEB_ARN, API_ARN]}

    gateway.services[(CLUSTER, "web")] = {
        "clusterArn": CLUSTER_ARN,
        "serviceName": "web",
        "serviceArn": WEB_ARN,
        "status": "ACTIVE",
        "desiredCount": 3,
        "runningCount": 3,
        "pendingCount": 0,
        "deploymentController": {"type": "EXTERNAL"},
        "launchType": "FARGATE",
        "createdAt": _at(10),
        "events": [
            {"id": "e3", "createdAt": _at(1), "message": "(service web) has reached a steady state."},
            {
                "id": "e2",
                "createdAt": _at(2),
                "message": "(service web) registered 1 targets in (target-group web-green)",
            },
            {"id": "e1", "createdAt": _at(3), "message": "(service web) has started 2 tasks."},
        ],
        "taskSets": [
            {
                "id": "ecs-svc/2222",
                "taskSetArn": "arn:task-set/2222",
                "status": "ACTIVE",
                "stabilityStatus": "STEADY_STATE",
                "taskDefinition": f"arn:aws:ecs:{REGION}:{ACCOUNT}:task-definition/web:42",
                "computedDesiredCount": 1,
                "runningCount": 1,
                "createdAt": _at(2),
                "loadBalancers": [{"targetGroupArn": TG_GREEN, "containerName": "app", "containerPort": 8080}],
            },
            {
                "id": "ecs-svc/1111",
                "taskSetArn": "arn:task-set/1111",
                "status": "PRIMARY",
                "stabilityStatus": "STEADY_STATE",
                "taskDefinition": f"arn:aws:ecs:{REGION}:{ACCOUNT}:task-definition/web:41",
                "computedDesiredCount": 2,
                "runningCount": 2,
                "createdAt": _at(5),
                "loadBalancers": [{"targetGroupArn": TG_BLUE, "containerName": "app", "containerPort": 8080}],
            },
        ],
    }
    gateway.services[(CLUSTER, "api")] = {
        "clusterArn": CLUSTER_ARN,
        "serviceName": "api",
        "serviceArn": API_ARN,
        "status": "ACTIVE",
        "desiredCount": 2,
        "runningCount": 1,
        "pendingCount": 1,
        "taskDefinition": f"arn:aws:ecs:{REGION}:{ACCOUNT}:task-definition/api:7",
        "deploymentController": {"type": "ECS"},
        "capacityProviderStrategy": [{"capacityProvider": "FARGATE_SPOT", "weight": 1}],
        "events": [],
        "deployments": [
            {
                "id": "ecs-svc/4444",
                "status": "ACTIVE",
                "rolloutState": "COMPLETED",
                "taskDefinition": f"arn:aws:ecs:{REGION}:{ACCOUNT}:task-definition/api:6",
                "desiredCount": 0,
                "runningCount": 0,
            },
            {
                "id": "ecs-svc/3333",
                "status": "PRIMARY",
                "rolloutState": "IN_PROGRESS",
                "taskDefinition": f"arn:aws:ecs:{REGION}:{ACCOUNT}:task-definition/api:7",
                "desiredCount": 2,
                "runningCount": 1,
                "pendingCount": 1,
            },
        ],
        "loadBalancers": [{"targetGroupArn": TG_API, "containerName": "api", "containerPort": 9000}],
    }

    gateway.task_definitions = {
        f"arn:aws:ecs:{REGION}:{ACCOUNT}:task-definition/web:41": _container(f"{ECR}/web:41"),
        f"arn:aws:ecs:{REGION}:{ACCOUNT}:task-definition/web:42": _container(f"{ECR}/web:42"),
        f"arn:aws:ecs:{REGION}:{ACCOUNT}:task-definition/api:7": _container(f"{ECR}/api:7"),
        f"arn:aws:ecs:{REGION}:{ACCOUNT}:task-definition/api:6": _container(f"{ECR}/api:6"),
    }
    gateway.scalable_targets = {
        f"service/{CLUSTER}/web": [{"MinCapacity": 2, "MaxCapacity": 6}],
    }
    gateway.tasks = {
        "ecs-svc/1111": [
            _task("0a1b2c3d4e5f60718293", "ecs-svc/1111", "RUNNING", f"{REGION}a"),
            _task("1b2c3d4e5f6071829304", "ecs-svc/1111", "RUNNING", f"{REGION}b"),
        ],
        "ecs-svc/2222": [_task("2c3d4e5f607182930415", "ecs-svc/2222", "PROVISIONING", f"{REGION}c")],
        "ecs-svc/3333": [_task("3d4e5f60718293041526", "ecs-svc/3333", "PENDING", f"{REGION}a")],
    }

    gateway.load_balancers = [{"LoadBalancerName": "public-alb", "LoadBalancerArn": LB_ARN}]
    gateway.listeners = {
        LB_ARN: [
            {"ListenerArn": LISTENER_443, "Port": 443},
            {"ListenerArn": LISTENER_80, "Port": 80},
        ]
    }
    gateway.rules = {
        LISTENER_443: [
            {
                "Priority": "10",
                "IsDefault": False,
                "Actions": [
                    {
                        "Type": "forward",
                        "ForwardConfig": {
                            "TargetGroups": [
                                {"TargetGroupArn": TG_BLUE, "Weight": 90},
                                {"TargetGroupArn": TG_GREEN, "Weight": 10},
                            ]
                        },
                    }
                ],
            },
            {
                "Priority": "20",
                "IsDefault": False,
                "Actions": [{"Type": "forward", "TargetGroupArn": TG_API}],
            },
            {
                "Priority": "default",
                "IsDefault": True,
                "Actions": [{"Type": "forward", "TargetGroupArn": TG_BLUE}],
            },
        ],
        LISTENER_80: [
            {
                "Priority": "5",
                "IsDefault": False,
                "Actions": [{"Type": "forward", "TargetGroupArn": TG_GREEN}],
            },
        ],
    }
    gateway.target_health = {
        TG_BLUE: [
            _health("10.0.1.10", f"{REGION}a", "healthy"),
            _health("10.0.2.10", f"{REGION}b", "healthy"),
        ],
        TG_GREEN: [_health("10.0.3.10", f"{REGION}c", "unhealthy")],
        TG_API: [_health("10.0.1.20", f"{REGION}a", "initial")],
    }
    return gateway


@pytest.fixture
def gateway() -> FakeGateway:
    """Gateway holding the ``web`` (task sets) and ``api`` (deployments) services."""
    return build_gateway()


@pytest.fixture
def aggregator(gateway: FakeGateway) -> StatusAggregator:
    return StatusAggregator(gateway, clock=lambda: FIXED_NOW)


@pytest.fixture
def web_status(aggregator: StatusAggregator) -> ServiceStatus:
    status = aggregator.fetch_service_status(CLUSTER, "web")
    assert status is not None
    return status


@pytest.fixture
def api_status(aggregator: StatusAggregator) -> ServiceStatus:
    status = aggregator.fetch_service_status(CLUSTER, "api")
    assert status is not None
    return status


@pytest.fixture
def fleet(gateway: FakeGateway) -> list[ServiceSummary]:
    return ServiceListFetcher(gateway).fetch_service_list()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


# =============================================================================
# Fake controller and app
# =============================================================================


class FakeController(BaseController):
    """Controller serving canned data, keyed by service name."""

    def __init__(
        self,
        services: list[ServiceSummary] | None = None,
        statuses: dict[str, ServiceStatus | None] | None = None,
        list_error: Exception | None = None,
    ) -> None:
        super().__init__()
        self.services = list(services or [])
        self.statuses = dict(statuses or {})
        self.list_error = list_error
        self.status_calls: list[tuple[str, str]] = []

    async def fetch_service_list(self) -> list[ServiceSummary]:
        if self.list_error is not None:
            raise self.list_error
        return list(self.services)

    async def fetch_service_status(self, cluster: str, service: str) -> ServiceStatus | None:
        self.status_calls.append((cluster, service))
        return self.statuses.get(service)


@pytest.fixture
def fake_controller(
    fleet: list[ServiceSummary],
    web_status: ServiceStatus,
    api_status: ServiceStatus,
) -> FakeController:
    return FakeController(fleet, {"web": web_status, "api": api_status})


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(log_file=None)


@pytest.fixture
def app(fake_controller: FakeController, settings: AppSettings) -> EcsEagleApp:
    """App over the canned fleet; nothing talks to AWS."""
    return EcsEagleApp(fake_controller, settings)


@pytest.fixture
def settle():
    """Wait for running workers, then let the screen stack catch up."""

    async def _settle(app: EcsEagleApp, pilot: Any) -> None:
        await app.workers.wait_for_complete()
        await pilot.pause()
        await pilot.pause()

    return _settle


@pytest.fixture
def make_controller():
    """Factory for FakeController with custom canned data."""
    return FakeController
