"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "EcsEagle-Dark"
AUTO_REFRESH_DEFAULT: Final = False
EVENTS_PREVIEW_COUNT_DEFAULT: Final = 7

# ============================================================================
# Refresh scheduling defaults (seconds)
# ============================================================================

REFRESH_INTERVAL_DEFAULT: Final = 30.0
# Slightly below the interval so a tick right after a manual refresh is skipped
REFRESH_DEBOUNCE_DEFAULT: Final = 28.0

# ============================================================================
# Routing defaults
# ============================================================================

HTTPS_LISTENER_PORT: Final = 443
DEFAULT_RULE_PRIORITY: Final = "default"
FORWARD_WEIGHT_DEFAULT: Final = 100

# ============================================================================
# Logging defaults
# ============================================================================

LOG_FILE_DEFAULT: Final = "ecseagle.log"
LOG_LEVEL_DEFAULT: Final = "INFO"

__all__ = [
    "AUTO_REFRESH_DEFAULT",
    "DEFAULT_RULE_PRIORITY",
    "EVENTS_PREVIEW_COUNT_DEFAULT",
    "FORWARD_WEIGHT_DEFAULT",
    "HTTPS_LISTENER_PORT",
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "REFRESH_DEBOUNCE_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "THEME_DEFAULT",
]
