"""User-defined text and shell command widgets."""

import json
import subprocess

from typing import Optional

from ...config.schema import WidgetItemModel
from ...types import RenderContext
from ..base import Widget
from ..registry import register_widget

DEFAULT_COMMAND_TIMEOUT = 5.0


@register_widget(
    "custom-text",
    display_name="Custom Text",
    default_color="white",
    description="Static text from metadata.text",
)
class CustomTextWidget(Widget):
    """Display static configured text."""

    def render(
        self, config: WidgetItemModel, context: RenderContext
    ) -> Optional[str]:
        return config.metadata.get("text") or None


@register_widget(
    "custom-command",
    display_name="Custom Command",
    default_color="white",
    description="First line of a shell command's output",
)
class CustomCommandWidget(Widget):
    """Run metadata.command with the status payload on stdin."""

    def render(
        self, config: WidgetItemModel, context: RenderContext
    ) -> Optional[str]:
        command = config.metadata.get("command")
        if not command:
            return None

        try:
            timeout = float(config.metadata.get("timeout", DEFAULT_COMMAND_TIMEOUT))
        except ValueError:
            timeout = DEFAULT_COMMAND_TIMEOUT

        try:
            result = subprocess.run(
                command,
                shell=True,
                input=json.dumps(context.data),
                capture_output=True,
                text=True,
                timeout=timeout,
            )
        except (subprocess.TimeoutExpired, OSError):
            return None

        if result.returncode != 0:
            return None

        lines = result.stdout.strip().splitlines()
        return lines[0] if lines else None
