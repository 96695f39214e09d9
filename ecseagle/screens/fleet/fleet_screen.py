"""Fleet list screen: every service across every cluster."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual.containers import Vertical
from textual.widgets import DataTable, Input

from ecseagle.constants.enums import Action
from ecseagle.constants.screens.fleet import (
    FLEET_EMPTY_MESSAGE,
    FLEET_FILTER_PLACEHOLDER,
    FLEET_HELP_TEXT,
    FLEET_TABLE_COLUMNS,
)
from ecseagle.constants.values import FLEET_TITLE
from ecseagle.keyboard import FLEET_SCREEN_BINDINGS
from ecseagle.screens.base_screen import BaseScreen
from ecseagle.screens.fleet.presenter import FleetPresenter, fleet_row_key
from ecseagle.widgets import CustomDataTable, CustomInput, CustomStatic

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from ecseagle.models.core.service_info import ServiceSummary

logger = logging.getLogger(__name__)


class FleetScreen(BaseScreen):
    """Filterable service list; enter opens the selected service."""

    BINDINGS = FLEET_SCREEN_BINDINGS
    HELP_TEXT = FLEET_HELP_TEXT

    def __init__(self) -> None:
        super().__init__()
        self._rows_by_key: dict[str, ServiceSummary] = {}
        self._shown: tuple[ServiceSummary, ...] | None = None
        self._presenter: FleetPresenter | None = None

    @property
    def screen_title(self) -> str:
        return FLEET_TITLE

    @property
    def presenter(self) -> FleetPresenter:
        if self._presenter is None:
            self._presenter = FleetPresenter(self.palette)
        return self._presenter

    def compose_body(self) -> ComposeResult:
        with Vertical(id="fleet-body"):
            yield CustomInput(placeholder=FLEET_FILTER_PLACEHOLDER, id="fleet-filter")
            yield CustomStatic("", emphasis="muted", id="fleet-filter-status")
            yield CustomDataTable(FLEET_TABLE_COLUMNS, id="fleet-table", zebra_stripes=True)
            yield CustomStatic(FLEET_EMPTY_MESSAGE, emphasis="muted", id="fleet-empty")

    # =========================================================================
    # RENDERING
    # =========================================================================

    def refresh_view(self) -> None:
        fleet = self.navigation.fleet
        visible = fleet.visible_services
        table = self.query_one("#fleet-table", CustomDataTable)
        filter_input = self.query_one("#fleet-filter", CustomInput)

        if visible != self._shown:
            self._shown = visible
            self._rows_by_key = {fleet_row_key(summary): summary for summary in visible}
            table.replace_rows(self.presenter.build_rows(visible))

        self.query_one("#fleet-empty", CustomStatic).display = not visible
        self.query_one("#fleet-filter-status", CustomStatic).update(
            self.presenter.filter_status(len(visible), len(fleet.services), fleet.filter_text)
        )

        if filter_input.value != fleet.filter_text:
            filter_input.value = fleet.filter_text
        if fleet.filtering and not filter_input.is_shown:
            filter_input.show()
        elif not fleet.filtering and filter_input.is_shown:
            filter_input.hide()
            table.focus_table()
        elif not fleet.filtering:
            table.focus_table()

        self.set_footer(self.HELP_TEXT)

    def selected_service(self) -> ServiceSummary | None:
        table = self.query_one("#fleet-table", CustomDataTable)
        if table.cursor_row is None:
            return None
        key = table.get_row_key_at(table.cursor_row)
        return self._rows_by_key.get(key) if key is not None else None

    # =========================================================================
    # INPUT
    # =========================================================================

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "fleet-filter":
            return
        if event.value != self.navigation.fleet.filter_text:
            self.send_filter(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "fleet-filter":
            self.send_action(Action.SELECT)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        summary = self._rows_by_key.get(event.row_key.value)
        if summary is None:
            logger.debug("Selected row %s has no service", event.row_key.value)
            return
        self.send_action(Action.SELECT, summary)

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def action_start_filter(self) -> None:
        self.send_action(Action.START_FILTER)

    def action_clear_filter(self) -> None:
        self.send_action(Action.CLEAR_FILTER)

    def action_quit_app(self) -> None:
        self.send_action(Action.QUIT)


__all__ = ["FleetScreen"]
