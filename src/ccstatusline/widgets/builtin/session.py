"""Session-related widgets."""

from typing import Optional

from ...config.schema import WidgetItemModel
from ...types import RenderContext
from ..base import Widget
from ..registry import register_widget


@register_widget(
    "session-id",
    display_name="Session ID",
    default_color="grey",
    description="Claude Code session identifier",
    supports_raw_value=True,
)
class SessionIdWidget(Widget):
    """Display session ID."""

    def render(
        self, config: WidgetItemModel, context: RenderContext
    ) -> Optional[str]:
        """Render session ID."""
        session_id = context.data.get("session_id")

        if not session_id:
            return None

        return self.label(config, "Session", session_id)
