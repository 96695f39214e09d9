"""Target group resolver - finds the load balancer rules forwarding to a target group."""

from __future__ import annotations

import logging

from ecseagle.constants.defaults import (
    DEFAULT_RULE_PRIORITY,
    FORWARD_WEIGHT_DEFAULT,
    HTTPS_LISTENER_PORT,
)
from ecseagle.controllers.ecs.gateway import RemoteDataGateway
from ecseagle.controllers.ecs.parsers.elb_parser import ElbParser, ForwardAction
from ecseagle.models.cache.target_health_cache import TargetHealthCache
from ecseagle.models.core.connection import ConnectionConfig, TargetHealthEntry
from ecseagle.utils.arn import target_group_name_from_arn

logger = logging.getLogger(__name__)


class TargetGroupResolver:
    """Resolves a target group ARN into its load balancer connections.

    Only listeners on ``listener_port`` (HTTPS) are scanned and default rules
    are ignored. A target group reachable through several rules yields one
    connection per rule. Gateway errors abort the whole resolution.
    """

    def __init__(
        self,
        gateway: RemoteDataGateway,
        *,
        listener_port: int = HTTPS_LISTENER_PORT,
        parser: ElbParser | None = None,
    ) -> None:
        self._gateway = gateway
        self._listener_port = listener_port
        self._parser = parser or ElbParser()

    def load_target_health(self, target_group_arn: str) -> list[TargetHealthEntry]:
        return self._parser.parse_target_health(
            self._gateway.describe_target_health(target_group_arn)
        )

    def resolve_connections(
        self,
        target_group_arn: str,
        *,
        health_cache: TargetHealthCache,
        task_set_id: str = "",
    ) -> list[ConnectionConfig]:
        """Return every connection forwarding to ``target_group_arn``.

        Args:
            target_group_arn: Target group to look up.
            health_cache: Cache of the current aggregation pass.
            task_set_id: Task set or deployment the binding belongs to.

        Returns:
            Attached connections in load balancer/listener/rule order, or a
            single unattached connection when nothing forwards to the group.
            Health is attached either way.
        """
        target_group_name = target_group_name_from_arn(target_group_arn)
        matches: list[tuple[str, int, str, int]] = []

        for load_balancer in self._gateway.describe_load_balancers():
            lb_name = load_balancer.get("LoadBalancerName", "")
            lb_arn = load_balancer.get("LoadBalancerArn", "")
            for listener in self._gateway.describe_listeners(lb_arn):
                port = listener.get("Port")
                if port != self._listener_port:
                    continue
                for rule in self._gateway.describe_rules(listener.get("ListenerArn", "")):
                    priority = str(rule.get("Priority", ""))
                    if priority == DEFAULT_RULE_PRIORITY or rule.get("IsDefault"):
                        continue
                    for action in self._parser.parse_forward_actions(rule):
                        for weight in self._match_weights(action, target_group_arn):
                            matches.append((lb_name, port, priority, weight))

        health = health_cache.get_or_load(target_group_arn, self.load_target_health)

        if not matches:
            logger.debug("No %s rule forwards to %s", self._listener_port, target_group_name)
            return [
                ConnectionConfig.unattached(
                    task_set_id=task_set_id,
                    target_group_arn=target_group_arn,
                    target_group_name=target_group_name,
                    health=health,
                )
            ]

        return [
            ConnectionConfig(
                task_set_id=task_set_id,
                load_balancer_name=lb_name,
                target_group_name=target_group_name,
                target_group_arn=target_group_arn,
                weight=weight,
                listener_port=port,
                priority=priority,
                health=health,
            )
            for lb_name, port, priority, weight in matches
        ]

    @staticmethod
    def _match_weights(action: ForwardAction, target_group_arn: str) -> list[int]:
        """Weights this action sends to the target group, one per match."""
        if action.target_group_arn == target_group_arn:
            if action.weighted_targets:
                first = action.weighted_targets[0].weight
                return [FORWARD_WEIGHT_DEFAULT if first is None else first]
            return [FORWARD_WEIGHT_DEFAULT]
        return [
            FORWARD_WEIGHT_DEFAULT if entry.weight is None else entry.weight
            for entry in action.weighted_targets
            if entry.target_group_arn == target_group_arn
        ]
