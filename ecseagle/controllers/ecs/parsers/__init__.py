"""Parsers converting raw AWS responses into models."""

from ecseagle.controllers.ecs.parsers.elb_parser import (
    ElbParser,
    ForwardAction,
    WeightedTarget,
)
from ecseagle.controllers.ecs.parsers.service_parser import ServiceParser

__all__ = [
    "ElbParser",
    "ForwardAction",
    "ServiceParser",
    "WeightedTarget",
]
