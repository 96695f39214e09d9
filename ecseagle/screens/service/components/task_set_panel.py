"""Task-set panel: task sets grouped under the load balancer routing to them.

For the deployments model the panel lists deployments side by side, marks
the PRIMARY one as the routed deployment and shows the service-level
connections below.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from ecseagle.constants.screens.service import UNATTACHED_TITLE
from ecseagle.constants.values import ATTACHED_ARROW, PRIMARY_STATUS
from ecseagle.models.core.connection import ConnectionConfig, TargetHealthEntry
from ecseagle.models.core.service_info import DeploymentInfo, TaskInfo, TaskSetInfo
from ecseagle.models.core.status import ServiceStatus
from ecseagle.screens.service.presenter import ServicePresenter
from ecseagle.utils.arn import task_definition_short_name
from ecseagle.widgets import CustomStatic

CARD_WIDTH = 44


@dataclass(frozen=True)
class SetAttachment:
    """All connections of one task set collapsed into a single attachment."""

    set_id: str
    load_balancer_name: str = ""
    target_group_name: str = ""
    weight: int = 0
    priorities: str = ""
    health: tuple[TargetHealthEntry, ...] = ()

    @property
    def attached(self) -> bool:
        return bool(self.load_balancer_name)


def collapse_connections(set_id: str, connections: tuple[ConnectionConfig, ...]) -> SetAttachment:
    """Collapse a set's connections; the first one names the LB and target group.

    Priorities of every attached connection are joined with commas.
    """
    if not connections:
        return SetAttachment(set_id=set_id)
    first = connections[0]
    priorities = [c.priority for c in connections if c.attached and c.priority]
    return SetAttachment(
        set_id=set_id,
        load_balancer_name=first.load_balancer_name,
        target_group_name=first.target_group_name,
        weight=first.weight,
        priorities=",".join(priorities),
        health=first.health,
    )


def group_by_load_balancer(
    status: ServiceStatus,
) -> tuple[list[tuple[str, list[SetAttachment]]], list[SetAttachment]]:
    """Split task sets into per-LB groups and unattached sets.

    Groups are ordered by load balancer name, sets within a group and
    unattached sets by set id.
    """
    groups: dict[str, list[SetAttachment]] = {}
    unattached: list[SetAttachment] = []
    for task_set in status.task_sets:
        attachment = collapse_connections(task_set.id, status.connections_for(task_set.id))
        if attachment.attached:
            groups.setdefault(attachment.load_balancer_name, []).append(attachment)
        else:
            unattached.append(attachment)
    ordered = [
        (name, sorted(groups[name], key=lambda a: a.set_id)) for name in sorted(groups)
    ]
    return ordered, sorted(unattached, key=lambda a: a.set_id)


class TaskSetRenderer:
    """Builds Rich renderables for the task-set panel."""

    def __init__(self, presenter: ServicePresenter) -> None:
        self.presenter = presenter
        self.theme = presenter.theme

    def tasks_text(self, tasks: tuple[TaskInfo, ...]) -> Text:
        text = Text("tasks:", style=self.theme.label)
        for task in tasks:
            text.append("\n")
            text.append(f"{task.task_id[:10]:<10} ")
            text.append_text(self.presenter.task_status_text(task.last_status))
        return text

    def set_details(
        self,
        set_id: str,
        created_at: datetime | None,
        fields: list[tuple[str, str]],
        task_definition: str,
        images: tuple[str, ...],
        tasks: tuple[TaskInfo, ...],
    ) -> Text:
        lines = [Text(set_id, style=self.theme.title), self.presenter.created(created_at)]
        lines.extend(self.presenter.field(name, value) for name, value in fields)
        lines.append(Text())
        lines.append(self.presenter.field("taskdef", task_definition_short_name(task_definition)))
        lines.extend(Text(f"  {image}", style=self.theme.muted) for image in images)
        lines.append(self.tasks_text(tasks))
        return Text("\n").join(lines)

    def attachment_text(self, attachment: SetAttachment) -> Text:
        text = Text()
        if attachment.attached:
            text.append(f"{ATTACHED_ARROW} {attachment.weight}% ", style=self.theme.attached)
        else:
            text.append("(unattached) ", style=self.theme.muted)
        text.append(attachment.target_group_name or "-", style=self.theme.label)
        health = self.presenter.health_text(attachment.health)
        if health:
            text.append("\n")
            text.append_text(health)
        if attachment.attached:
            text.append("\n")
            text.append_text(self.presenter.field("priority", attachment.priorities))
        return text

    def task_set_card(self, status: ServiceStatus, task_set: TaskSetInfo, attachment: SetAttachment) -> Panel:
        details = self.set_details(
            task_set.id,
            task_set.created_at,
            [("status", task_set.status), ("steady", task_set.stability_status)],
            task_set.task_definition,
            status.images_for(task_set.id),
            status.tasks_for(task_set.id),
        )
        body = Text("\n").join([details, Text(), self.attachment_text(attachment)])
        return Panel(body, width=CARD_WIDTH)

    def render_task_sets(self, status: ServiceStatus) -> RenderableType:
        sets_by_id = {task_set.id: task_set for task_set in status.task_sets}
        groups, unattached = group_by_load_balancer(status)
        renderables: list[RenderableType] = []
        for lb_name, attachments in groups:
            cards = [self.task_set_card(status, sets_by_id[a.set_id], a) for a in attachments]
            renderables.append(
                Panel(Columns(cards), title=Text(lb_name, style=self.theme.title), title_align="center")
            )
        if unattached:
            cards = [self.task_set_card(status, sets_by_id[a.set_id], a) for a in unattached]
            renderables.append(
                Panel(Columns(cards), title=Text(UNATTACHED_TITLE, style=self.theme.muted), title_align="center")
            )
        return Group(*renderables)

    def deployment_card(self, status: ServiceStatus, deployment: DeploymentInfo) -> Panel:
        details = self.set_details(
            deployment.id,
            deployment.created_at,
            [("status", deployment.status), ("rollout", deployment.rollout_state)],
            deployment.task_definition,
            status.images_for(deployment.id),
            status.tasks_for(deployment.id),
        )
        if deployment.status == PRIMARY_STATUS:
            details.append(f"\n\n{ATTACHED_ARROW} routed", style=self.theme.attached)
        return Panel(details, width=CARD_WIDTH)

    def connection_card(self, connection: ConnectionConfig) -> Panel:
        attachment = collapse_connections(connection.task_set_id, (connection,))
        title = connection.load_balancer_name or UNATTACHED_TITLE
        return Panel(
            self.attachment_text(attachment),
            title=Text(title, style=self.theme.title),
            width=CARD_WIDTH,
        )

    def render_deployments(self, status: ServiceStatus) -> RenderableType:
        deployments = sorted(status.deployments, key=lambda d: d.id)
        connections = sorted(status.connections, key=lambda c: c.load_balancer_name)
        renderables: list[RenderableType] = [
            Columns([self.deployment_card(status, d) for d in deployments])
        ]
        if connections:
            renderables.append(Columns([self.connection_card(c) for c in connections]))
        return Group(*renderables)

    def render(self, status: ServiceStatus) -> RenderableType:
        if status.uses_task_sets:
            return self.render_task_sets(status)
        return self.render_deployments(status)


class TaskSetPanel(CustomStatic):
    """Static showing the rendered task sets or deployments."""

    def show_status(self, status: ServiceStatus, renderer: TaskSetRenderer) -> None:
        self.update(renderer.render(status))


__all__ = [
    "SetAttachment",
    "TaskSetPanel",
    "TaskSetRenderer",
    "collapse_connections",
    "group_by_load_balancer",
]
