"""Structure widgets for EcsEagle TUI.

- CustomFooter: Footer widget
- CustomHeader: Header widget
"""

from ecseagle.widgets.structure.custom_footer import CustomFooter
from ecseagle.widgets.structure.custom_header import CustomHeader

__all__ = [
    "CustomFooter",
    "CustomHeader",
]
