"""Utility functions for EcsEagle TUI."""

from ecseagle.utils.arn import (
    scalable_resource_id,
    short_name_from_arn,
    target_group_name_from_arn,
    task_definition_short_name,
)
from ecseagle.utils.formatting import (
    availability_zone_suffix,
    format_event_timestamp,
    format_last_update,
    format_relative_time,
)
from ecseagle.utils.images import (
    join_image_names,
    short_image_name,
    short_image_names,
)

__all__ = [
    "availability_zone_suffix",
    "format_event_timestamp",
    "format_last_update",
    "format_relative_time",
    "join_image_names",
    "scalable_resource_id",
    "short_image_name",
    "short_image_names",
    "short_name_from_arn",
    "target_group_name_from_arn",
    "task_definition_short_name",
]
