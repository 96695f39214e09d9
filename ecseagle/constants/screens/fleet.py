"""Fleet list screen constants."""

from typing import Final

# ============================================================================
# Table
# ============================================================================

FLEET_TABLE_COLUMNS: list[tuple[str, str]] = [
    ("Service", "service"),
    ("Cluster", "cluster"),
]

# ============================================================================
# Labels
# ============================================================================

FLEET_LOADING_MESSAGE: Final = "Loading services..."
FLEET_FILTER_PLACEHOLDER: Final = "Filter services..."
FLEET_EMPTY_MESSAGE: Final = "No services found"
FLEET_HELP_TEXT: Final = "/ filter • enter open • q quit"

__all__ = [
    "FLEET_EMPTY_MESSAGE",
    "FLEET_FILTER_PLACEHOLDER",
    "FLEET_HELP_TEXT",
    "FLEET_LOADING_MESSAGE",
    "FLEET_TABLE_COLUMNS",
]
