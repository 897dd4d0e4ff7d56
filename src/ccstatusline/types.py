"""Data types for ccstatusline."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .config.schema import WidgetItemModel

# RenderedItem kinds
CONTENT = "content"
SEPARATOR = "separator"
FLEX = "flex"


@dataclass
class GitStatus:
    """Git repository status information."""

    branch: Optional[str] = None
    insertions: int = 0
    deletions: int = 0
    is_git_repo: bool = False


@dataclass
class ContextWindow:
    """Context window data from Claude Code status payload."""

    total_input_tokens: int = 0
    total_output_tokens: int = 0
    context_window_size: int = 0
    current_input_tokens: Optional[int] = None
    current_output_tokens: Optional[int] = None
    cache_creation_input_tokens: Optional[int] = None
    cache_read_input_tokens: Optional[int] = None

    @property
    def current_context_tokens(self) -> int:
        """Calculate current context tokens per official formula.

        Formula: input_tokens + cache_creation_input_tokens + cache_read_input_tokens
        """
        if self.current_input_tokens is None:
            return 0
        return (
            (self.current_input_tokens or 0)
            + (self.cache_creation_input_tokens or 0)
            + (self.cache_read_input_tokens or 0)
        )

    @property
    def has_current_usage(self) -> bool:
        """Check if current_usage data is available."""
        return self.current_input_tokens is not None

    @property
    def usage_percentage(self) -> Optional[float]:
        """Context usage as a percentage of the window, if known."""
        if not self.has_current_usage or self.context_window_size <= 0:
            return None
        return (self.current_context_tokens * 100) / self.context_window_size


@dataclass
class RenderContext:
    """Context passed to widgets during rendering.

    The rendering pipeline treats this as opaque; only widgets and the
    terminal width resolver look inside.
    """

    data: dict[str, Any]
    git_status: Optional[GitStatus] = None
    context_window: Optional[ContextWindow] = None

    @property
    def context_percentage(self) -> Optional[float]:
        """Context window usage percentage, or None when unavailable."""
        if self.context_window is None:
            return None
        return self.context_window.usage_percentage


@dataclass
class Style:
    """Resolved foreground, background and bold for one item."""

    fg: Optional[str] = None
    bg: Optional[str] = None
    bold: bool = False


@dataclass
class RenderedItem:
    """Output of one widget for the current refresh.

    `length` is the visible width of `text`, never its raw length.
    """

    item: "WidgetItemModel"
    text: str
    length: int
    kind: str = CONTENT
    default_color: Optional[str] = None
    supports_colors: bool = True

    @property
    def is_content(self) -> bool:
        return self.kind == CONTENT
