"""Fetchers for the ECS controller."""

from ecseagle.controllers.ecs.fetchers.service_list_fetcher import ServiceListFetcher
from ecseagle.controllers.ecs.fetchers.target_group_resolver import TargetGroupResolver

__all__ = [
    "ServiceListFetcher",
    "TargetGroupResolver",
]
