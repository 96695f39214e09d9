"""Display widgets for EcsEagle TUI.

- CustomStatic: Static text display widget
"""

from ecseagle.widgets.display.custom_static import CustomStatic

__all__ = [
    "CustomStatic",
]
