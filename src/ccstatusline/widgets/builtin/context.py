"""Context usage widget."""

from typing import Optional

from ...config.schema import WidgetItemModel
from ...types import RenderContext
from ...utils.colors import colorize, get_usage_color
from ..base import Widget
from ..registry import register_widget


@register_widget(
    "context-percentage",
    display_name="Context Percentage",
    default_color=None,
    description="Context window usage percentage",
    supports_raw_value=True,
    supports_colors=False,
)
class ContextPercentageWidget(Widget):
    """Display context window usage colored by threshold."""

    def render(
        self, config: WidgetItemModel, context: RenderContext
    ) -> Optional[str]:
        """Render context percentage."""
        percentage = context.context_percentage
        if percentage is None:
            return None

        value = colorize(f"{percentage:.1f}%", get_usage_color(percentage))
        return self.label(config, "Ctx", value)
