"""Fleet list presentation helpers."""

from __future__ import annotations

from rich.text import Text

from ecseagle.models.core.service_info import ServiceSummary
from ecseagle.themes import DashboardTheme


def fleet_row_key(summary: ServiceSummary) -> str:
    """Stable row key; falls back to ``cluster/service`` without an ARN."""
    return summary.service_arn or f"{summary.cluster}/{summary.service}"


class FleetPresenter:
    """Builds fleet table rows and the filter status line."""

    def __init__(self, theme: DashboardTheme) -> None:
        self._theme = theme

    def build_rows(
        self, services: tuple[ServiceSummary, ...]
    ) -> list[tuple[str, tuple[Text, Text]]]:
        return [
            (
                fleet_row_key(summary),
                (
                    Text(summary.service, style=self._theme.label),
                    Text(summary.cluster, style=self._theme.muted),
                ),
            )
            for summary in services
        ]

    def filter_status(self, visible: int, total: int, query: str) -> str:
        if query.strip():
            return f'{visible} of {total} services matching "{query}"'
        return f"{total} services"


__all__ = [
    "FleetPresenter",
    "fleet_row_key",
]
