"""EcsEagle - terminal dashboard for Amazon ECS services."""

__version__ = "0.1.0"
