"""Cost and line change widgets."""

from typing import Optional

from ...config.schema import WidgetItemModel
from ...types import RenderContext
from ...utils.colors import colorize, get_cost_color
from ..base import Widget
from ..registry import register_widget


@register_widget(
    "cost",
    display_name="Cost",
    default_color=None,
    description="Session cost in USD",
    supports_raw_value=True,
    supports_colors=False,
)
class CostWidget(Widget):
    """Display session cost in USD."""

    def render(
        self, config: WidgetItemModel, context: RenderContext
    ) -> Optional[str]:
        """Render cost in USD."""
        cost = context.data.get("cost", {})
        total_cost = cost.get("total_cost_usd")

        if total_cost is None:
            return None

        colored_amount = colorize(f"${total_cost:.2f}", get_cost_color(total_cost))

        return self.label(config, "Cost", colored_amount)


@register_widget(
    "lines-changed",
    display_name="Lines Changed",
    default_color=None,
    description="Lines added and removed in session (+X/-Y)",
    supports_colors=False,
)
class LinesChangedWidget(Widget):
    """Display lines added and removed in a single widget."""

    def render(
        self, config: WidgetItemModel, context: RenderContext
    ) -> Optional[str]:
        """Render lines changed."""
        cost = context.data.get("cost", {})
        lines_added = cost.get("total_lines_added", 0)
        lines_removed = cost.get("total_lines_removed", 0)

        parts = []
        if lines_added > 0:
            parts.append(colorize(f"+{lines_added}", "green"))
        if lines_removed > 0:
            parts.append(colorize(f"-{lines_removed}", "red"))

        if not parts:
            return None

        return "/".join(parts)
