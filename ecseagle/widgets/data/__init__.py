"""Data display widgets for EcsEagle TUI."""

from ecseagle.widgets.data.tables import CustomDataTable

__all__ = [
    "CustomDataTable",
]
