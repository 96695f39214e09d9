"""Models for EcsEagle TUI.

- core: pydantic models for ECS/ELB data and status snapshots
- cache: per-pass target health cache
- state: settings, navigation state machine, refresh scheduler
"""
