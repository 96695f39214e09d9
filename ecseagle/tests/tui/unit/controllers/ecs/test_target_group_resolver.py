"""Unit tests for TargetGroupResolver.

Uses the FakeGateway fixture: load balancer ``public-alb`` with an HTTPS
listener (rule 10 splits web-blue 90 / web-green 10, rule 20 forwards to
api-tg, plus a default rule) and an HTTP listener forwarding to web-green.
"""

from __future__ import annotations

import pytest

from ecseagle.controllers.ecs.fetchers.target_group_resolver import TargetGroupResolver
from ecseagle.errors import GatewayError
from ecseagle.models.cache.target_health_cache import TargetHealthCache

TG_BLUE = "arn:aws:elasticloadbalancing:me-central-1:111122223333:targetgroup/web-blue/aaaa1111"
TG_GREEN = "arn:aws:elasticloadbalancing:me-central-1:111122223333:targetgroup/web-green/bbbb2222"
TG_API = "arn:aws:elasticloadbalancing:me-central-1:111122223333:targetgroup/api-tg/cccc3333"
LISTENER_443 = "arn:aws:elasticloadbalancing:me-central-1:111122223333:listener/app/public-alb/dddd/443"


class TestResolveConnections:
    """Test rule matching and weights."""

    def test_weighted_forward(self, gateway) -> None:
        connections = TargetGroupResolver(gateway).resolve_connections(
            TG_BLUE, health_cache=TargetHealthCache(), task_set_id="ecs-svc/1111"
        )
        assert len(connections) == 1
        connection = connections[0]
        assert connection.attached
        assert connection.load_balancer_name == "public-alb"
        assert connection.target_group_name == "web-blue"
        assert connection.weight == 90
        assert connection.priority == "10"
        assert connection.listener_port == 443
        assert connection.task_set_id == "ecs-svc/1111"
        assert [h.state for h in connection.health] == ["healthy", "healthy"]

    def test_http_listener_ignored(self, gateway) -> None:
        """Test the port 80 rule for web-green does not add a connection."""
        connections = TargetGroupResolver(gateway).resolve_connections(
            TG_GREEN, health_cache=TargetHealthCache()
        )
        assert [(c.priority, c.weight) for c in connections] == [("10", 10)]

    def test_plain_forward_defaults_to_full_weight(self, gateway) -> None:
        connections = TargetGroupResolver(gateway).resolve_connections(
            TG_API, health_cache=TargetHealthCache()
        )
        assert [(c.priority, c.weight) for c in connections] == [("20", 100)]

    def test_default_rule_skipped(self, gateway) -> None:
        """Test a target group only reachable through the default rule is unattached."""
        gateway.rules[LISTENER_443] = [
            rule for rule in gateway.rules[LISTENER_443] if rule["Priority"] != "10"
        ]
        connections = TargetGroupResolver(gateway).resolve_connections(
            TG_BLUE, health_cache=TargetHealthCache(), task_set_id="ecs-svc/1111"
        )
        assert len(connections) == 1
        unattached = connections[0]
        assert not unattached.attached
        assert unattached.weight == 0
        assert unattached.priority == ""
        assert unattached.target_group_name == "web-blue"
        assert len(unattached.health) == 2

    def test_multiple_rules_yield_one_connection_each(self, gateway) -> None:
        gateway.rules[LISTENER_443].append(
            {
                "Priority": "30",
                "Actions": [{"Type": "forward", "TargetGroupArn": TG_BLUE}],
            }
        )
        connections = TargetGroupResolver(gateway).resolve_connections(
            TG_BLUE, health_cache=TargetHealthCache()
        )
        assert [(c.priority, c.weight) for c in connections] == [("10", 90), ("30", 100)]

    def test_missing_weight_defaults_to_full(self, gateway) -> None:
        gateway.rules[LISTENER_443][0]["Actions"][0]["ForwardConfig"]["TargetGroups"][0].pop("Weight")
        connections = TargetGroupResolver(gateway).resolve_connections(
            TG_BLUE, health_cache=TargetHealthCache()
        )
        assert connections[0].weight == 100

    def test_custom_listener_port(self, gateway) -> None:
        connections = TargetGroupResolver(gateway, listener_port=80).resolve_connections(
            TG_GREEN, health_cache=TargetHealthCache()
        )
        assert [(c.listener_port, c.priority) for c in connections] == [(80, "5")]


class TestHealthLookups:
    """Test target health goes through the pass cache."""

    def test_health_fetched_once_per_pass(self, gateway) -> None:
        resolver = TargetGroupResolver(gateway)
        cache = TargetHealthCache()
        resolver.resolve_connections(TG_BLUE, health_cache=cache)
        resolver.resolve_connections(TG_BLUE, health_cache=cache)
        assert gateway.count("describe_target_health") == 1

    def test_gateway_error_propagates(self, gateway) -> None:
        gateway.failures["describe_rules"] = GatewayError("describe_rules", "throttled")
        with pytest.raises(GatewayError):
            TargetGroupResolver(gateway).resolve_connections(
                TG_BLUE, health_cache=TargetHealthCache()
            )
