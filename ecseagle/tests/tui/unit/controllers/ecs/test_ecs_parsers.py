"""Unit tests for ServiceParser and ElbParser."""

from __future__ import annotations

from datetime import datetime, timezone

from ecseagle.constants.enums import TaskStatus
from ecseagle.controllers.ecs.parsers import ElbParser, ServiceParser, WeightedTarget

CREATED = datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)

# =============================================================================
# ServiceParser
# =============================================================================


class TestServiceParser:
    """Test ECS response parsing."""

    def test_service_summary(self) -> None:
        summary = ServiceParser().parse_service_summary(
            "arn:aws:ecs:me-central-1:1:service/app-cluster/web",
            "arn:aws:ecs:me-central-1:1:cluster/app-cluster",
        )
        assert (summary.service, summary.cluster) == ("web", "app-cluster")
        assert summary.service_arn.endswith("/web")

    def test_parse_service_task_sets(self) -> None:
        record = ServiceParser().parse_service(
            {
                "clusterArn": "arn:aws:ecs:me-central-1:1:cluster/app-cluster",
                "serviceName": "web",
                "desiredCount": 2,
                "deploymentController": {"type": "EXTERNAL"},
                "events": [{"id": "e1", "createdAt": CREATED, "message": "steady"}],
                "taskSets": [
                    {
                        "id": "ecs-svc/1",
                        "status": "PRIMARY",
                        "computedDesiredCount": 2,
                        "scale": {"value": 100.0, "unit": "PERCENT"},
                        "loadBalancers": [{"targetGroupArn": "arn:tg/a"}],
                    }
                ],
            }
        )
        assert record.cluster == "app-cluster"
        assert record.deployment_controller == "EXTERNAL"
        assert record.uses_task_sets
        task_set = record.task_sets[0]
        assert task_set.scale_percent == 100.0
        assert task_set.load_balancers[0].target_group_arn == "arn:tg/a"
        assert record.events[0].message == "steady"

    def test_parse_service_deployments_and_capacity_provider(self) -> None:
        record = ServiceParser().parse_service(
            {
                "clusterArn": "c",
                "serviceName": "api",
                "capacityProviderStrategy": [{"capacityProvider": "FARGATE_SPOT"}],
                "deployments": [{"id": "ecs-svc/3", "status": "PRIMARY", "rolloutState": "COMPLETED"}],
            }
        )
        assert record.capacity_provider == "FARGATE_SPOT"
        assert record.deployment_controller == "ECS"
        assert not record.uses_task_sets
        assert record.deployments[0].rollout_state == "COMPLETED"

    def test_parse_task(self) -> None:
        task = ServiceParser().parse_task(
            {"taskArn": "arn:task/app-cluster/abc", "lastStatus": "DEACTIVATING", "startedBy": "ecs-svc/1"}
        )
        assert task.task_id == "abc"
        assert task.last_status is TaskStatus.DEACTIVATING
        assert task.started_by == "ecs-svc/1"

    def test_container_images(self) -> None:
        images = ServiceParser().parse_container_images(
            {
                "containerDefinitions": [
                    {"image": "1.dkr.ecr.me-central-1.amazonaws.com/web:41"},
                    {"image": ""},
                    {"name": "no-image"},
                    {"image": "nginx:1.25"},
                ]
            }
        )
        assert images == ["web:41", "nginx:1.25"]

    def test_scale(self) -> None:
        parser = ServiceParser()
        scale = parser.parse_scale([{"MinCapacity": 2, "MaxCapacity": 6}])
        assert (scale.min_capacity, scale.max_capacity, scale.configured) == (2, 6, True)
        assert parser.parse_scale([]).configured is False


# =============================================================================
# ElbParser
# =============================================================================


class TestElbParser:
    """Test listener rule and target health parsing."""

    def test_forward_actions_only(self) -> None:
        rule = {
            "Actions": [
                {"Type": "redirect", "RedirectConfig": {}},
                {"Type": "forward", "TargetGroupArn": "arn:tg/a"},
                {
                    "Type": "forward",
                    "ForwardConfig": {
                        "TargetGroups": [
                            {"TargetGroupArn": "arn:tg/b", "Weight": 20},
                            {"TargetGroupArn": "arn:tg/c"},
                        ]
                    },
                },
            ]
        }
        actions = ElbParser().parse_forward_actions(rule)
        assert len(actions) == 2
        assert actions[0].target_group_arn == "arn:tg/a"
        assert actions[0].weighted_targets == ()
        assert actions[1].target_group_arn is None
        assert actions[1].weighted_targets == (
            WeightedTarget("arn:tg/b", 20),
            WeightedTarget("arn:tg/c", None),
        )

    def test_target_health(self) -> None:
        entries = ElbParser().parse_target_health(
            [
                {
                    "Target": {"Id": "10.0.0.1", "Port": 80, "AvailabilityZone": "me-central-1a"},
                    "TargetHealth": {"State": "draining", "Reason": "Target.DeregistrationInProgress"},
                },
                {},
            ]
        )
        assert entries[0].state == "draining"
        assert entries[0].availability_zone == "me-central-1a"
        assert entries[1].state == ""
