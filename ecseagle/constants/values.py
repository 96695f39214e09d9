"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "EcsEagle"
FLEET_TITLE: Final = "ECS Services"

# ============================================================================
# Formatting
# ============================================================================

LAST_UPDATE_FORMAT: Final = "%H:%M:%S"
EVENT_TIMESTAMP_FORMAT: Final = "%Y-%m-%d %H:%M:%S"
EMPTY_VALUE: Final = "-"

# ============================================================================
# Task status arrows
# ============================================================================

ARROW_UP: Final = "↑"
ARROW_DOWN: Final = "↓"
ATTACHED_ARROW: Final = "→"

# ============================================================================
# Remote API values
# ============================================================================

SCALABLE_NAMESPACE_ECS: Final = "ecs"
SCALABLE_DIMENSION_DESIRED_COUNT: Final = "ecs:service:DesiredCount"
PRIMARY_STATUS: Final = "PRIMARY"
FORWARD_ACTION_TYPE: Final = "forward"

__all__ = [
    "APP_TITLE",
    "ARROW_DOWN",
    "ARROW_UP",
    "ATTACHED_ARROW",
    "EMPTY_VALUE",
    "EVENT_TIMESTAMP_FORMAT",
    "FLEET_TITLE",
    "FORWARD_ACTION_TYPE",
    "LAST_UPDATE_FORMAT",
    "PRIMARY_STATUS",
    "SCALABLE_DIMENSION_DESIRED_COUNT",
    "SCALABLE_NAMESPACE_ECS",
]
