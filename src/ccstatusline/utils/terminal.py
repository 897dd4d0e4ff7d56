"""Terminal width detection and flex-mode width resolution."""

import os
import sys

from typing import Optional

DEFAULT_TERMINAL_WIDTH = 80
COMPACT_MARGIN = 40


def _width_from_fd(fd: int) -> Optional[int]:
    try:
        columns = os.get_terminal_size(fd).columns
    except (OSError, ValueError):
        return None
    return columns if columns > 0 else None


def detect_terminal_width() -> Optional[int]:
    """Detect the terminal column count.

    The status line runs with stdin and stdout piped, so after COLUMNS and the
    standard streams the controlling terminal is queried directly.

    Returns:
        Column count, or None if it cannot be determined
    """
    columns = os.getenv("COLUMNS", "")
    if columns.isdigit() and int(columns) > 0:
        return int(columns)

    for stream in (sys.stderr, sys.stdout, sys.stdin):
        try:
            fd = stream.fileno()
        except (AttributeError, OSError, ValueError):
            continue
        width = _width_from_fd(fd)
        if width:
            return width

    try:
        fd = os.open(os.ctermid(), os.O_RDONLY)
    except (AttributeError, OSError):
        return None
    try:
        return _width_from_fd(fd)
    finally:
        os.close(fd)


def resolve_width(
    flex_mode: str,
    terminal_width: Optional[int],
    context_percentage: Optional[float] = None,
    compact_threshold: float = 60.0,
) -> int:
    """Resolve the usable width for this refresh.

    Args:
        flex_mode: "full", "full-minus-40" or "full-until-compact"
        terminal_width: Detected column count, None if unknown
        context_percentage: Context window usage, consulted by
            "full-until-compact"
        compact_threshold: Usage percentage at which "full-until-compact"
            switches to the reduced width

    Returns:
        Width every line is laid out and truncated to
    """
    width = terminal_width if terminal_width else DEFAULT_TERMINAL_WIDTH
    reduced = max(0, width - COMPACT_MARGIN)

    if flex_mode == "full-minus-40":
        return reduced

    if flex_mode == "full-until-compact":
        if context_percentage is not None and context_percentage >= compact_threshold:
            return reduced

    return width
