"""Per-pass target health cache."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ecseagle.models.core.connection import TargetHealthEntry

logger = logging.getLogger(__name__)


class TargetHealthCache:
    """Target health keyed by target group ARN for one aggregation pass.

    A new instance is created at the start of every pass and dropped when the
    pass ends, so health is fetched at most once per target group per pass and
    never reused across passes.
    """

    def __init__(self) -> None:
        self._entries: dict[str, tuple[TargetHealthEntry, ...]] = {}
        self.hits = 0
        self.misses = 0

    def __contains__(self, target_group_arn: object) -> bool:
        return target_group_arn in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get_or_load(
        self,
        target_group_arn: str,
        loader: Callable[[str], list[TargetHealthEntry]],
    ) -> tuple[TargetHealthEntry, ...]:
        """Return cached health, calling ``loader`` on the first lookup only.

        Loader errors propagate and nothing is cached for the ARN.
        """
        cached = self._entries.get(target_group_arn)
        if cached is not None:
            self.hits += 1
            return cached
        self.misses += 1
        entries = tuple(loader(target_group_arn))
        self._entries[target_group_arn] = entries
        logger.debug(
            "Cached %d health entries for %s", len(entries), target_group_arn
        )
        return entries
