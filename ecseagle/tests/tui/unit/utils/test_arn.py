"""Unit tests for ARN helpers."""

from __future__ import annotations

from ecseagle.utils.arn import (
    last_segment,
    scalable_resource_id,
    short_name_from_arn,
    target_group_name_from_arn,
    task_definition_short_name,
)


class TestShortNameFromArn:
    """Test short_name_from_arn."""

    def test_cluster_arn(self) -> None:
        arn = "arn:aws:ecs:me-central-1:111122223333:cluster/app-cluster-staging"
        assert short_name_from_arn(arn) == "app-cluster-staging"

    def test_task_arn(self) -> None:
        arn = "arn:aws:ecs:me-central-1:111122223333:task/app-cluster/0a1b2c"
        assert short_name_from_arn(arn) == "0a1b2c"

    def test_plain_name_unchanged(self) -> None:
        assert short_name_from_arn("web") == "web"

    def test_empty(self) -> None:
        assert short_name_from_arn(None) == ""
        assert short_name_from_arn("") == ""

    def test_last_segment_custom_separator(self) -> None:
        assert last_segment("a:b:c", ":") == "c"


class TestTargetGroupName:
    """Test target_group_name_from_arn."""

    def test_target_group_arn(self) -> None:
        arn = "arn:aws:elasticloadbalancing:me-central-1:111122223333:targetgroup/kt-tg/cdf8771a"
        assert target_group_name_from_arn(arn) == "kt-tg"

    def test_bare_name(self) -> None:
        assert target_group_name_from_arn("kt-tg") == "kt-tg"

    def test_empty(self) -> None:
        assert target_group_name_from_arn(None) == ""


class TestTaskDefinitionShortName:
    def test_family_revision(self) -> None:
        arn = "arn:aws:ecs:me-central-1:111122223333:task-definition/web:42"
        assert task_definition_short_name(arn) == "web:42"


class TestScalableResourceId:
    def test_from_arns(self) -> None:
        """Test ARNs and short names build the same resource id."""
        cluster_arn = "arn:aws:ecs:me-central-1:111122223333:cluster/app-cluster"
        assert scalable_resource_id(cluster_arn, "web") == "service/app-cluster/web"
        assert scalable_resource_id("app-cluster", "web") == "service/app-cluster/web"
