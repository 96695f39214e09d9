"""Load balancer attachment and target health models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TargetHealthEntry(BaseModel):
    """Health of one registered target in a target group."""

    model_config = ConfigDict(frozen=True)

    target_id: str = ""
    port: int | None = None
    availability_zone: str = ""
    state: str = ""
    reason: str = ""


class ConnectionConfig(BaseModel):
    """Resolved attachment of a task set to at most one load balancer rule.

    A config is either attached (``load_balancer_name`` set) or unattached,
    in which case it carries no weight, listener or priority. Health is
    attached in both cases.
    """

    model_config = ConfigDict(frozen=True)

    task_set_id: str = ""
    load_balancer_name: str = ""
    target_group_name: str = ""
    target_group_arn: str = ""
    weight: int = Field(default=0, ge=0)
    listener_port: int | None = None
    priority: str = ""
    health: tuple[TargetHealthEntry, ...] = ()

    @model_validator(mode="after")
    def _check_unattached_is_empty(self) -> ConnectionConfig:
        if not self.load_balancer_name and (
            self.weight or self.priority or self.listener_port is not None
        ):
            raise ValueError(
                "unattached connection must not carry weight, priority or listener"
            )
        return self

    @property
    def attached(self) -> bool:
        return bool(self.load_balancer_name)

    @classmethod
    def unattached(
        cls,
        *,
        task_set_id: str,
        target_group_arn: str,
        target_group_name: str,
        health: tuple[TargetHealthEntry, ...] | list[TargetHealthEntry] = (),
    ) -> ConnectionConfig:
        """Build the placeholder emitted when no rule forwards to a target group."""
        return cls(
            task_set_id=task_set_id,
            target_group_arn=target_group_arn,
            target_group_name=target_group_name,
            health=tuple(health),
        )
