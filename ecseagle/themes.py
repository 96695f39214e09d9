"""Textual themes and the immutable render palette used by presenters."""

from __future__ import annotations

from dataclasses import dataclass, field

from textual.app import App
from textual.theme import Theme

from ecseagle.constants.enums import TaskStatus
from ecseagle.constants.screens.common import DARK_THEME, LIGHT_THEME

ECSEAGLE_DARK = Theme(
    name=DARK_THEME,
    primary="#FF9900",
    secondary="#6C757D",
    accent="#17A2B8",
    warning="#FFBF00",
    error="#FF007A",
    success="#80C904",
    foreground="#E6E6E6",
    background="#161B22",
    surface="#1F2630",
    panel="#2A3340",
    dark=True,
)

ECSEAGLE_LIGHT = Theme(
    name=LIGHT_THEME,
    primary="#C46A00",
    secondary="#6C757D",
    accent="#0F7C8C",
    warning="#B37F00",
    error="#C4005C",
    success="#4C8A00",
    foreground="#1F2328",
    background="#FFFFFF",
    surface="#F3F4F6",
    panel="#E5E7EB",
    dark=False,
)


def _default_task_status_styles() -> dict[TaskStatus, str]:
    return {
        TaskStatus.RUNNING: "#80C904",
        TaskStatus.ACTIVATING: "#FFBF00",
        TaskStatus.DEACTIVATING: "#FFBF00",
        TaskStatus.PENDING: "#FF87D7",
        TaskStatus.STOPPING: "#FF87D7",
        TaskStatus.PROVISIONING: "#ADD8E6",
        TaskStatus.DEPROVISIONING: "#ADD8E6",
        TaskStatus.STOPPED: "#FF007A",
        TaskStatus.UNKNOWN: "",
    }


@dataclass(frozen=True)
class DashboardTheme:
    """Rich styles handed to renderers at construction; never mutated."""

    title: str = "bold #FF9900"
    label: str = "bold"
    muted: str = "dim"
    healthy: str = "#80C904"
    unhealthy: str = "#FFBF00"
    error: str = "bold #FF007A"
    highlight: str = "black on #FFBF00"
    attached: str = "bold #17A2B8"
    task_status: dict[TaskStatus, str] = field(default_factory=_default_task_status_styles)

    def task_status_style(self, status: TaskStatus) -> str:
        return self.task_status.get(status, "")


DEFAULT_DASHBOARD_THEME = DashboardTheme()


def register_ecseagle_themes(app: App) -> None:
    """Register the custom dark and light themes on ``app``."""
    app.register_theme(ECSEAGLE_DARK)
    app.register_theme(ECSEAGLE_LIGHT)


__all__ = [
    "DEFAULT_DASHBOARD_THEME",
    "DashboardTheme",
    "ECSEAGLE_DARK",
    "ECSEAGLE_LIGHT",
    "register_ecseagle_themes",
]
