"""Read-only settings loader backed by a YAML file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ecseagle.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    derived_debounce,
)

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ECSEAGLE_CONFIG"


class ConfigManager:
    """Locates and loads ``settings.yaml``.

    Settings are never written back; the dashboard keeps no state between runs.
    """

    DEFAULT_PATH = Path("~/.config/ecseagle/settings.yaml")

    @classmethod
    def config_path(cls, path: str | Path | None = None) -> Path:
        """Resolve the settings path: explicit path, env override, then default."""
        if path:
            return Path(path).expanduser()
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path).expanduser()
        return cls.DEFAULT_PATH.expanduser()

    @classmethod
    def load(
        cls,
        path: str | Path | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> AppSettings:
        """Load settings, applying non-None ``overrides`` on top of the file.

        A missing file yields defaults.

        Raises:
            ConfigLoadError: The file cannot be read, is not valid YAML, or
                holds values that fail validation.
        """
        config_file = cls.config_path(path)
        data: dict[str, Any] = {}
        if config_file.is_file():
            try:
                raw = yaml.safe_load(config_file.read_text(encoding="utf-8"))
            except (OSError, yaml.YAMLError) as exc:
                raise ConfigLoadError(f"Cannot read {config_file}: {exc}") from exc
            if raw is None:
                raw = {}
            if not isinstance(raw, dict):
                raise ConfigLoadError(f"{config_file} must contain a mapping")
            data.update(raw)
            logger.info("Loaded settings from %s", config_file)
        else:
            logger.debug("No settings file at %s, using defaults", config_file)

        given = {key: value for key, value in (overrides or {}).items() if value is not None}
        # an interval override without a debounce replaces the file debounce too
        if "refresh_interval" in given and "refresh_debounce" not in given:
            data.pop("refresh_debounce", None)
        data.update(given)
        interval = data.get("refresh_interval")
        numeric = isinstance(interval, (int, float)) and not isinstance(interval, bool)
        if numeric and "refresh_debounce" not in data:
            data["refresh_debounce"] = derived_debounce(interval)

        try:
            return AppSettings.model_validate(data)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {config_file}: {exc}") from exc


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
]
