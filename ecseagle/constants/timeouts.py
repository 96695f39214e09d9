"""Timeout constants for the TUI.

All timeout values for remote API requests (seconds).
"""

from typing import Final

# ============================================================================
# AWS client timeouts
# ============================================================================

AWS_CONNECT_TIMEOUT: Final = 10
AWS_READ_TIMEOUT: Final = 30
AWS_MAX_ATTEMPTS: Final = 3

__all__ = [
    "AWS_CONNECT_TIMEOUT",
    "AWS_MAX_ATTEMPTS",
    "AWS_READ_TIMEOUT",
]
