"""Table widgets for EcsEagle TUI."""

from ecseagle.widgets.data.tables.custom_data_table import CustomDataTable

__all__ = [
    "CustomDataTable",
]
