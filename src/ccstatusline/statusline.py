#!/usr/bin/env python3

import argparse
import json
import sys

from pathlib import Path
from typing import Any, Optional, cast

from .config.loader import load_config
from .renderer import render_lines
from .types import ContextWindow, RenderContext
from .utils.ansi import RESET
from .utils.debug import debug_log
from .utils.terminal import detect_terminal_width


def parse_input_data() -> dict[str, Any]:
    """Parse JSON input from stdin and return as dict.

    Returns:
        Dictionary with Claude Code JSON payload
    """
    try:
        input_data = sys.stdin.read()
        data = json.loads(input_data)
    except (json.JSONDecodeError, ValueError):
        return {}
    return cast(dict[str, Any], data) if isinstance(data, dict) else {}


def extract_context_window(data: dict[str, Any]) -> Optional[ContextWindow]:
    """Extract context_window data from Claude Code payload.

    Args:
        data: JSON input data from Claude Code

    Returns:
        ContextWindow if data is present and valid, None otherwise
    """
    cw = data.get("context_window")
    if not cw or not isinstance(cw, dict):
        return None

    if "context_window_size" not in cw:
        return None

    current_usage = cw.get("current_usage") or {}

    return ContextWindow(
        total_input_tokens=cw.get("total_input_tokens", 0),
        total_output_tokens=cw.get("total_output_tokens", 0),
        context_window_size=cw.get("context_window_size", 0),
        current_input_tokens=current_usage.get("input_tokens"),
        current_output_tokens=current_usage.get("output_tokens"),
        cache_creation_input_tokens=current_usage.get("cache_creation_input_tokens"),
        cache_read_input_tokens=current_usage.get("cache_read_input_tokens"),
    )


def format_output(lines: list[str], color_level: str) -> str:
    """Join rendered lines for stdout, one per line.

    With colors enabled each line starts with a reset so the host's own
    styling does not carry into the status line.
    """
    prefix = RESET if color_level != "none" else ""
    return "".join(f"{prefix}{line}\n" if line else "\n" for line in lines)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        Configured argument parser
    """
    from . import __version__

    parser = argparse.ArgumentParser(
        prog="ccstatusline",
        description="Multi-line status line renderer for Claude Code",
        epilog="Reads the Claude Code JSON payload from stdin and prints the status lines.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to config.yaml (default: $XDG_CONFIG_HOME/ccstatusline/config.yaml)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point: read payload, render every line, print."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    data = parse_input_data()
    session_id = data.get("session_id", "")

    context = RenderContext(data=data, context_window=extract_context_window(data))
    config = load_config(args.config)
    terminal_width = detect_terminal_width()

    debug_log("=== REFRESH ===", session_id)
    debug_log(f"Terminal width: {terminal_width}", session_id)
    debug_log(f"Context percentage: {context.context_percentage}", session_id)

    lines = render_lines(config, context, terminal_width)
    sys.stdout.write(format_output(lines, config.color_level))


if __name__ == "__main__":
    main()
