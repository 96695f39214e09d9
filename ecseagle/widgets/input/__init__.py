"""Input widgets for EcsEagle TUI.

- CustomInput: Text input widget
"""

from ecseagle.widgets.input.custom_input import CustomInput

__all__ = [
    "CustomInput",
]
