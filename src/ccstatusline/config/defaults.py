"""Default configuration for ccstatusline."""

from .schema import StatusLineConfig, WidgetItemModel


def get_default_config() -> StatusLineConfig:
    """Generate the default status line configuration."""
    return StatusLineConfig(
        version=1,
        lines=[
            [
                WidgetItemModel(type="model", color="cyan"),
                WidgetItemModel(type="directory", color="blue"),
                WidgetItemModel(type="git-branch", color="magenta"),
                WidgetItemModel(type="git-changes", color="yellow"),
                WidgetItemModel(type="flex-separator"),
                WidgetItemModel(type="context-percentage"),
                WidgetItemModel(type="cost"),
            ],
            [
                WidgetItemModel(type="session-id"),
                WidgetItemModel(type="lines-changed"),
            ],
        ],
    )
