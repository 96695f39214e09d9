"""Screen-specific constants subpackage.

Re-exports all screen-specific constants for convenient imports.
"""

from ecseagle.constants.screens.common import (
    DARK_THEME,
    FATAL_HELP_TEXT,
    LIGHT_THEME,
)
from ecseagle.constants.screens.fleet import (
    FLEET_EMPTY_MESSAGE,
    FLEET_FILTER_PLACEHOLDER,
    FLEET_HELP_TEXT,
    FLEET_LOADING_MESSAGE,
    FLEET_TABLE_COLUMNS,
)
from ecseagle.constants.screens.service import (
    EVENT_FILTER_PLACEHOLDER,
    EVENT_LOG_HELP_TEXT,
    NO_EVENTS_MESSAGE,
    SERVICE_HELP_TEXT,
    SERVICE_LOADING_MESSAGE,
    SERVICE_MISSING_MESSAGE,
    SERVICE_REFRESHING_LABEL,
    STALE_STATUS_LABEL,
    UNATTACHED_TITLE,
)

__all__ = [
    "DARK_THEME",
    "EVENT_FILTER_PLACEHOLDER",
    "EVENT_LOG_HELP_TEXT",
    "FATAL_HELP_TEXT",
    "FLEET_EMPTY_MESSAGE",
    "FLEET_FILTER_PLACEHOLDER",
    "FLEET_HELP_TEXT",
    "FLEET_LOADING_MESSAGE",
    "FLEET_TABLE_COLUMNS",
    "LIGHT_THEME",
    "NO_EVENTS_MESSAGE",
    "SERVICE_HELP_TEXT",
    "SERVICE_LOADING_MESSAGE",
    "SERVICE_MISSING_MESSAGE",
    "SERVICE_REFRESHING_LABEL",
    "STALE_STATUS_LABEL",
    "UNATTACHED_TITLE",
]
