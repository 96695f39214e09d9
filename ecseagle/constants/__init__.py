"""Constants module for EcsEagle TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, numbers with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min, API batch sizes)
- defaults.py: Default values for settings
- screens/: Screen-specific constants

Note: Keyboard bindings are defined in ecseagle.keyboard module.
"""

from ecseagle.constants.defaults import (
    AUTO_REFRESH_DEFAULT,
    HTTPS_LISTENER_PORT,
    REFRESH_DEBOUNCE_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    THEME_DEFAULT,
)
from ecseagle.constants.enums import (
    Action,
    DetailPanel,
    DetailState,
    EventLogMode,
    TargetHealthState,
    TaskStatus,
    ThemeMode,
    ViewState,
)
from ecseagle.constants.limits import (
    MAX_EVENTS_DISPLAY,
    MAX_ROWS_DISPLAY,
    REFRESH_INTERVAL_MIN,
)
from ecseagle.constants.screens.common import (
    DARK_THEME,
    LIGHT_THEME,
)
from ecseagle.constants.timeouts import (
    AWS_CONNECT_TIMEOUT,
    AWS_READ_TIMEOUT,
)
from ecseagle.constants.values import (
    APP_TITLE,
    FLEET_TITLE,
)

__all__ = [
    # Application
    "APP_TITLE",
    "AUTO_REFRESH_DEFAULT",
    # Timeouts
    "AWS_CONNECT_TIMEOUT",
    "AWS_READ_TIMEOUT",
    # Themes
    "DARK_THEME",
    "FLEET_TITLE",
    "HTTPS_LISTENER_PORT",
    "LIGHT_THEME",
    "MAX_EVENTS_DISPLAY",
    "MAX_ROWS_DISPLAY",
    "REFRESH_DEBOUNCE_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "REFRESH_INTERVAL_MIN",
    "THEME_DEFAULT",
    # Enums
    "Action",
    "DetailPanel",
    "DetailState",
    "EventLogMode",
    "TargetHealthState",
    "TaskStatus",
    "ThemeMode",
    "ViewState",
]
