"""File logging for the TUI; the terminal itself belongs to Textual."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# boto3 and botocore log every request at DEBUG
_NOISY_LOGGERS = ("boto3", "botocore", "urllib3")


def configure_logging(path: str | Path | None, level: str = "INFO") -> logging.Handler:
    """Route ``ecseagle`` logs to ``path``, or drop them when ``path`` is None.

    Returns the installed handler.
    """
    root = logging.getLogger("ecseagle")
    root.setLevel(level.upper())
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    handler: logging.Handler
    if path is None:
        handler = logging.NullHandler()
    else:
        handler = logging.FileHandler(Path(path).expanduser(), encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.propagate = False

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler


__all__ = [
    "LOG_FORMAT",
    "configure_logging",
]
