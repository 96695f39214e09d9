"""Controllers for EcsEagle TUI.

- base: BaseController contract used by the UI
- ecs: ECS/ELB/Auto Scaling data loading and status aggregation
"""

from ecseagle.controllers.base import BaseController
from ecseagle.controllers.ecs import EcsController

__all__ = [
    "BaseController",
    "EcsController",
]
