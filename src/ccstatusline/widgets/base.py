"""Base widget interface for status line components."""

from abc import ABC, abstractmethod
from typing import Optional

from ..config.schema import WidgetItemModel
from ..types import CONTENT, RenderContext


class Widget(ABC):
    """Base widget interface - all widgets must implement this.

    Widget metadata (display_name, description, default_color and capability
    flags) is set by the @register_widget decorator rather than requiring
    implementation of methods.
    """

    # Class attributes set by @register_widget decorator
    display_name: str = ""
    description: str = ""
    default_color: Optional[str] = "white"
    supports_raw_value: bool = False
    supports_colors: bool = True
    kind: str = CONTENT

    @abstractmethod
    def render(
        self, config: WidgetItemModel, context: RenderContext
    ) -> Optional[str]:
        """Render widget content.

        Args:
            config: Widget configuration including colors and metadata
            context: Rendering context with data

        Returns:
            Rendered string or None to hide widget
        """
        pass

    def label(self, config: WidgetItemModel, name: str, value: str) -> str:
        """Prefix value with a label unless raw value display is requested."""
        if config.raw_value and self.supports_raw_value:
            return value
        return f"{name}: {value}"
