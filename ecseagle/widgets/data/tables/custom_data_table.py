"""CustomDataTable widget - standardized wrapper around Textual's DataTable."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from contextlib import suppress
from typing import TYPE_CHECKING, Any

from textual.containers import Container
from textual.coordinate import Coordinate
from textual.widgets import DataTable as TextualDataTable

from ecseagle.constants.limits import MAX_ROWS_DISPLAY
from ecseagle.keyboard.tables import DATA_TABLE_BINDINGS

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from textual.app import ComposeResult


class CustomDataTable(Container):
    """Standardized data table wrapper around Textual's DataTable widget.

    Provides consistent styling and a row cap of ``MAX_ROWS_DISPLAY``.
    Row selection bubbles up as Textual's ``DataTable.RowSelected``.

    CSS Classes: widget-custom-data-table

    Example:
        ```python
        table = CustomDataTable(
            columns=[("Service", "service"), ("Cluster", "cluster")],
            id="fleet-table",
        )
        ```
    """

    DEFAULT_CSS = """
    CustomDataTable {
        height: 1fr;
        width: 1fr;
        min-width: 0;
        min-height: 3;
        background: $surface;
    }
    CustomDataTable > DataTable {
        height: 1fr;
        width: 1fr;
        min-width: 0;
        border: none;
        background: transparent;
    }
    """

    BINDINGS = DATA_TABLE_BINDINGS

    def __init__(
        self,
        columns: list[tuple[str, str]] | None = None,
        *,
        id: str | None = None,
        classes: str = "",
        zebra_stripes: bool = False,
    ) -> None:
        """Initialize the custom data table wrapper.

        Args:
            columns: Optional list of (label, key) column definitions.
            id: Widget ID.
            classes: CSS classes (widget-custom-data-table is automatically added).
            zebra_stripes: Whether to display alternating row colors.
        """
        super().__init__(id=id, classes=f"widget-custom-data-table {classes}".strip())
        self._columns = list(columns or [])
        self._zebra_stripes = zebra_stripes
        self._inner_widget: TextualDataTable | None = None

    def compose(self) -> ComposeResult:
        """Compose the data table with Textual's DataTable widget."""
        table = TextualDataTable(cursor_type="row", zebra_stripes=self._zebra_stripes)
        self._inner_widget = table
        yield table

    def on_mount(self) -> None:
        self._ensure_columns()

    def _ensure_columns(self) -> None:
        if self._inner_widget is not None and not self._inner_widget.columns:
            for label, key in self._columns:
                self._inner_widget.add_column(label, key=key)

    @property
    def data_table(self) -> TextualDataTable | None:
        """The composed Textual DataTable, or None before compose."""
        return self._inner_widget

    def add_row(self, *cells: Any, key: str | None = None) -> Any:
        """Add a row; returns None once MAX_ROWS_DISPLAY is reached."""
        if self._inner_widget is None:
            return None
        self._ensure_columns()
        if self._inner_widget.row_count >= MAX_ROWS_DISPLAY:
            return None
        return self._inner_widget.add_row(*cells, key=key)

    def replace_rows(self, rows: Iterable[tuple[str, tuple[Any, ...]]]) -> None:
        """Replace all rows with ``(key, cells)`` pairs, keeping the cursor row."""
        table = self._inner_widget
        if table is None:
            return
        previous_row = self.cursor_row
        materialized = list(rows)
        if len(materialized) > MAX_ROWS_DISPLAY:
            logger.warning("Truncating %d rows to %d", len(materialized), MAX_ROWS_DISPLAY)
            materialized = materialized[:MAX_ROWS_DISPLAY]
        self._ensure_columns()
        table.clear()
        for key, cells in materialized:
            table.add_row(*cells, key=key)
        if previous_row is not None:
            self.cursor_row = previous_row

    def clear(self) -> None:
        if self._inner_widget is not None:
            self._inner_widget.clear()

    @property
    def row_count(self) -> int:
        if self._inner_widget is not None:
            return self._inner_widget.row_count
        return 0

    @property
    def cursor_row(self) -> int | None:
        if self._inner_widget is not None and self._inner_widget.row_count:
            return self._inner_widget.cursor_coordinate.row
        return None

    @cursor_row.setter
    def cursor_row(self, row: int | None) -> None:
        if self._inner_widget is None or row is None or not self._inner_widget.row_count:
            return
        max_row = self._inner_widget.row_count - 1
        self._inner_widget.cursor_coordinate = Coordinate(max(0, min(row, max_row)), 0)

    def get_row_key_at(self, index: int) -> str | None:
        """Key of the row at ``index``, None when out of range."""
        if self._inner_widget is None or index < 0:
            return None
        with suppress(IndexError):
            return self._inner_widget.ordered_rows[index].key.value
        return None

    def focus_table(self) -> None:
        if self._inner_widget is not None:
            self._inner_widget.focus()

    def action_cursor_down(self) -> None:
        if self._inner_widget is not None:
            self._inner_widget.action_cursor_down()

    def action_cursor_up(self) -> None:
        if self._inner_widget is not None:
            self._inner_widget.action_cursor_up()
