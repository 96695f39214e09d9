"""Widgets module for the EcsEagle TUI.

- data: Data display widgets (CustomDataTable)
- display: Display widgets (CustomStatic)
- input: Input widgets (CustomInput)
- structure: Structure widgets (CustomFooter, CustomHeader)
"""

from ecseagle.widgets.data import CustomDataTable
from ecseagle.widgets.display import CustomStatic
from ecseagle.widgets.input import CustomInput
from ecseagle.widgets.structure import CustomFooter, CustomHeader

__all__ = [
    "CustomDataTable",
    "CustomFooter",
    "CustomHeader",
    "CustomInput",
    "CustomStatic",
]
