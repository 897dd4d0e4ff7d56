"""Model name widget."""

from typing import Optional

from ...config.schema import WidgetItemModel
from ...types import RenderContext
from ..base import Widget
from ..registry import register_widget


@register_widget(
    "model",
    display_name="Model",
    default_color="cyan",
    description="Claude model name (e.g., Sonnet 4.5)",
    supports_raw_value=True,
)
class ModelWidget(Widget):
    """Display Claude model name."""

    def render(
        self, config: WidgetItemModel, context: RenderContext
    ) -> Optional[str]:
        """Render model display name."""
        model = context.data.get("model", {})
        display_name: str | None = model.get("display_name") or model.get("id")

        if not display_name:
            return None

        return self.label(config, "Model", display_name)
