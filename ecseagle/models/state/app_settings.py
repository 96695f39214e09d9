"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ecseagle.constants.defaults import (
    AUTO_REFRESH_DEFAULT,
    EVENTS_PREVIEW_COUNT_DEFAULT,
    HTTPS_LISTENER_PORT,
    LOG_FILE_DEFAULT,
    LOG_LEVEL_DEFAULT,
    REFRESH_DEBOUNCE_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    THEME_DEFAULT,
)
from ecseagle.constants.limits import EVENTS_PREVIEW_COUNT_MAX, REFRESH_INTERVAL_MIN


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # AWS session
    profile: str | None = None
    region: str | None = None

    # UI preferences
    theme: str = THEME_DEFAULT
    events_preview_count: int = Field(
        default=EVENTS_PREVIEW_COUNT_DEFAULT, ge=0, le=EVENTS_PREVIEW_COUNT_MAX
    )

    # Refresh scheduling (seconds)
    refresh_interval: float = Field(default=REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN)
    refresh_debounce: float = Field(default=REFRESH_DEBOUNCE_DEFAULT, gt=0)
    auto_refresh: bool = AUTO_REFRESH_DEFAULT

    # Routing
    listener_port: int = HTTPS_LISTENER_PORT

    # Logging
    log_file: str | None = LOG_FILE_DEFAULT
    log_level: str = LOG_LEVEL_DEFAULT

    @model_validator(mode="after")
    def _debounce_below_interval(self) -> "AppSettings":
        if self.refresh_debounce >= self.refresh_interval:
            raise ValueError("refresh_debounce must be lower than refresh_interval")
        return self


def derived_debounce(interval: float) -> float:
    """Debounce for an interval given without one, keeping the default gap."""
    return max(interval - 2, interval * 0.9)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
