"""Exception hierarchy for remote data access and aggregation."""

from __future__ import annotations


class EcsEagleError(Exception):
    """Base exception for EcsEagle errors."""


class GatewayError(EcsEagleError):
    """A remote AWS API call failed.

    Attributes:
        operation: Name of the API operation that failed.
    """

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation


class AggregationError(EcsEagleError):
    """A service status aggregation pass failed."""


__all__ = [
    "AggregationError",
    "EcsEagleError",
    "GatewayError",
]
