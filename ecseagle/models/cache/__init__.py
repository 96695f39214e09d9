"""Caches scoped to a single aggregation pass."""

from ecseagle.models.cache.target_health_cache import TargetHealthCache

__all__ = ["TargetHealthCache"]
