"""Status screens: initial load and fatal error."""

from ecseagle.screens.status.error_screen import FatalErrorScreen
from ecseagle.screens.status.loading_screen import LoadingScreen

__all__ = [
    "FatalErrorScreen",
    "LoadingScreen",
]
