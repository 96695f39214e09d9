"""Service detail screen constants."""

from typing import Final

# ============================================================================
# Labels
# ============================================================================

SERVICE_LOADING_MESSAGE: Final = "Fetching service status..."
SERVICE_MISSING_MESSAGE: Final = "Service no longer exists"
SERVICE_REFRESHING_LABEL: Final = "refreshing..."
STALE_STATUS_LABEL: Final = "stale"
UNATTACHED_TITLE: Final = "Not attached"
NO_EVENTS_MESSAGE: Final = "No events"
EVENT_FILTER_PLACEHOLDER: Final = "Filter events..."

SERVICE_HELP_TEXT: Final = (
    "ctrl+e events • ctrl+d task sets • ctrl+t auto refresh • "
    "ctrl+r refresh • esc back"
)
EVENT_LOG_HELP_TEXT: Final = "/ filter • ctrl+l clear filter • esc back"

__all__ = [
    "EVENT_FILTER_PLACEHOLDER",
    "EVENT_LOG_HELP_TEXT",
    "NO_EVENTS_MESSAGE",
    "SERVICE_HELP_TEXT",
    "SERVICE_LOADING_MESSAGE",
    "SERVICE_MISSING_MESSAGE",
    "SERVICE_REFRESHING_LABEL",
    "STALE_STATUS_LABEL",
    "UNATTACHED_TITLE",
]
