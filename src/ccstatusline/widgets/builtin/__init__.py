"""Built-in widgets for status line.

Importing this module registers all built-in widgets with the registry.
"""

from .context import ContextPercentageWidget
from .cost import CostWidget, LinesChangedWidget
from .custom import CustomCommandWidget, CustomTextWidget
from .directory import DirectoryWidget
from .git import GitBranchWidget, GitChangesWidget
from .model import ModelWidget
from .separator import FlexSeparatorWidget, SeparatorWidget
from .session import SessionIdWidget

__all__ = [
    "SeparatorWidget",
    "FlexSeparatorWidget",
    "ModelWidget",
    "DirectoryWidget",
    "ContextPercentageWidget",
    "CostWidget",
    "LinesChangedWidget",
    "SessionIdWidget",
    "GitBranchWidget",
    "GitChangesWidget",
    "CustomTextWidget",
    "CustomCommandWidget",
]
