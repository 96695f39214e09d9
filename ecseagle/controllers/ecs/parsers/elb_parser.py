"""Load balancer parser - listener rules, forward actions and target health."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ecseagle.constants.values import FORWARD_ACTION_TYPE
from ecseagle.models.core.connection import TargetHealthEntry


@dataclass(frozen=True)
class WeightedTarget:
    """One target group entry of a forward action's weighted list."""

    target_group_arn: str
    weight: int | None = None


@dataclass(frozen=True)
class ForwardAction:
    """A listener rule action of type ``forward``."""

    target_group_arn: str | None
    weighted_targets: tuple[WeightedTarget, ...] = ()


class ElbParser:
    """Parses Elastic Load Balancing v2 response dictionaries."""

    def parse_forward_actions(self, rule: dict[str, Any]) -> list[ForwardAction]:
        """Return the rule's forward actions in rule order."""
        actions: list[ForwardAction] = []
        for action in rule.get("Actions", []):
            if str(action.get("Type", "")).lower() != FORWARD_ACTION_TYPE:
                continue
            forward_config = action.get("ForwardConfig") or {}
            weighted = tuple(
                WeightedTarget(
                    target_group_arn=entry.get("TargetGroupArn", ""),
                    weight=entry.get("Weight"),
                )
                for entry in forward_config.get("TargetGroups", [])
            )
            actions.append(
                ForwardAction(
                    target_group_arn=action.get("TargetGroupArn"),
                    weighted_targets=weighted,
                )
            )
        return actions

    def parse_target_health(self, descriptions: list[dict[str, Any]]) -> list[TargetHealthEntry]:
        entries: list[TargetHealthEntry] = []
        for description in descriptions:
            target = description.get("Target") or {}
            health = description.get("TargetHealth") or {}
            entries.append(
                TargetHealthEntry(
                    target_id=target.get("Id", ""),
                    port=target.get("Port"),
                    availability_zone=target.get("AvailabilityZone", ""),
                    state=health.get("State", ""),
                    reason=health.get("Reason", ""),
                )
            )
        return entries
