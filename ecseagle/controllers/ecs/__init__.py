"""ECS controller package."""

from ecseagle.controllers.ecs.aggregator import StatusAggregator
from ecseagle.controllers.ecs.controller import EcsController
from ecseagle.controllers.ecs.gateway import AwsGateway, RemoteDataGateway

__all__ = [
    "AwsGateway",
    "EcsController",
    "RemoteDataGateway",
    "StatusAggregator",
]
