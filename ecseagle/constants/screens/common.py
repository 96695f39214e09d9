"""Common screen constants."""

from typing import Final

# Registered custom theme names used by app/theme preference mapping.
DARK_THEME: Final = "EcsEagle-Dark"
LIGHT_THEME: Final = "EcsEagle-Light"

FATAL_HELP_TEXT: Final = "press any key to quit"

__all__ = [
    "DARK_THEME",
    "FATAL_HELP_TEXT",
    "LIGHT_THEME",
]
