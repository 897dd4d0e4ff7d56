"""Git-related widgets."""

from typing import Optional

from ...config.schema import WidgetItemModel
from ...types import GitStatus, RenderContext
from ...utils.git import get_git_status
from ..base import Widget
from ..registry import register_widget


def _get_or_fetch_git_status(context: RenderContext) -> Optional[GitStatus]:
    """Get git status from context or fetch it once for this refresh."""
    if context.git_status is not None:
        return context.git_status

    workspace = context.data.get("workspace", {})
    cwd = workspace.get("current_dir")

    if cwd:
        context.git_status = get_git_status(cwd)

    return context.git_status


@register_widget(
    "git-branch",
    display_name="Git Branch",
    default_color="magenta",
    description="Current git branch name",
    supports_raw_value=True,
)
class GitBranchWidget(Widget):
    """Display current git branch name."""

    def render(
        self, config: WidgetItemModel, context: RenderContext
    ) -> Optional[str]:
        """Render git branch name."""
        status = _get_or_fetch_git_status(context)

        if not status or not status.is_git_repo or not status.branch:
            return None

        if config.raw_value:
            return status.branch
        return f"⎇ {status.branch}"


@register_widget(
    "git-changes",
    display_name="Git Changes",
    default_color="yellow",
    description="Uncommitted insertions and deletions",
)
class GitChangesWidget(Widget):
    """Display git insertions and deletions."""

    def render(
        self, config: WidgetItemModel, context: RenderContext
    ) -> Optional[str]:
        """Render git changes (+insertions,-deletions)."""
        status = _get_or_fetch_git_status(context)

        if not status or not status.is_git_repo:
            return None

        if status.insertions == 0 and status.deletions == 0:
            return None

        return f"(+{status.insertions},-{status.deletions})"
