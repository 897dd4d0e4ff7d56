"""Layout marker widgets: explicit separators and flex separators."""

from typing import Optional

from ...config.schema import WidgetItemModel
from ...types import FLEX, SEPARATOR, RenderContext
from ..base import Widget
from ..registry import register_widget


@register_widget(
    "separator",
    display_name="Separator",
    default_color="dim",
    description="Visual divider between widgets",
    kind=SEPARATOR,
)
class SeparatorWidget(Widget):
    """Visual separator between widgets."""

    def render(
        self, config: WidgetItemModel, context: RenderContext
    ) -> Optional[str]:
        """Render separator from config or default."""
        # Get separator from metadata or use default
        separator = config.metadata.get("text", "|")
        return f" {separator} "


@register_widget(
    "flex-separator",
    display_name="Flex Separator",
    default_color=None,
    description="Expands to fill remaining terminal width",
    kind=FLEX,
)
class FlexSeparatorWidget(Widget):
    """Marker expanded by the renderer to absorb leftover width."""

    def render(
        self, config: WidgetItemModel, context: RenderContext
    ) -> Optional[str]:
        return ""
