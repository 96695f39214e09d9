"""ARN parsing utilities.

ECS and Elastic Load Balancing identify resources by ARN; the dashboard only
ever displays the trailing resource name:

- ``arn:aws:ecs:...:cluster/app-cluster-staging`` -> ``app-cluster-staging``
- ``arn:aws:ecs:...:task/app-cluster-staging/0a1b2c`` -> ``0a1b2c``
- ``arn:aws:elasticloadbalancing:...:targetgroup/kt-tg/cdf8771a`` -> ``kt-tg``
"""

from __future__ import annotations


def last_segment(value: str | None, separator: str = "/") -> str:
    """Return the text after the last separator, or the whole value."""
    if not value:
        return ""
    return value.rsplit(separator, 1)[-1]


def short_name_from_arn(arn: str | None) -> str:
    """Return the resource name at the end of an ARN.

    Plain names (no ``/``) are returned unchanged, so callers may pass either
    an ARN or an already-short name.
    """
    return last_segment(arn, "/")


def target_group_name_from_arn(arn: str | None) -> str:
    """Return the target group name embedded in a target group ARN.

    Target group ARNs end in ``targetgroup/<name>/<id>``; the name is the
    second to last path segment.
    """
    if not arn:
        return ""
    parts = arn.split("/")
    if len(parts) >= 3:
        return parts[-2]
    return parts[-1]


def task_definition_short_name(task_definition: str | None) -> str:
    """Return ``family:revision`` from a task definition ARN."""
    return last_segment(task_definition, "/")


def scalable_resource_id(cluster: str, service: str) -> str:
    """Build the Application Auto Scaling resource id for an ECS service."""
    return f"service/{short_name_from_arn(cluster)}/{short_name_from_arn(service)}"


__all__ = [
    "last_segment",
    "scalable_resource_id",
    "short_name_from_arn",
    "target_group_name_from_arn",
    "task_definition_short_name",
]
