"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Display limits
# ============================================================================

MAX_ROWS_DISPLAY: Final = 1000
MAX_EVENTS_DISPLAY: Final = 100

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 5
EVENTS_PREVIEW_COUNT_MAX: Final = 50

# ============================================================================
# Remote API batch limits
# ============================================================================

DESCRIBE_SERVICES_BATCH_SIZE: Final = 10
DESCRIBE_TASKS_BATCH_SIZE: Final = 100

__all__ = [
    "DESCRIBE_SERVICES_BATCH_SIZE",
    "DESCRIBE_TASKS_BATCH_SIZE",
    "EVENTS_PREVIEW_COUNT_MAX",
    "MAX_EVENTS_DISPLAY",
    "MAX_ROWS_DISPLAY",
    "REFRESH_INTERVAL_MIN",
]
