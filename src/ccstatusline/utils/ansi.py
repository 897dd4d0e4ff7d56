"""ANSI-aware width measurement and truncation."""

import re

# Only SGR sequences (ESC [ ... m) are recognized; anything else counts as text
ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

RESET = "\x1b[0m"
# Any reset form: ESC[m, ESC[0m, ESC[00m
RESET_PATTERN = re.compile(r"\x1b\[0*m")
_RESET_SEQUENCES = {"\x1b[0m", "\x1b[m"}


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences from text."""
    return ANSI_PATTERN.sub("", text)


def visible_length(text: str) -> int:
    """Count printable cells in text, ignoring color escape sequences.

    One code point is one cell; no wide-character adjustment is made.

    Args:
        text: String possibly containing ANSI color codes

    Returns:
        Number of visible characters
    """
    if not text:
        return 0
    return len(strip_ansi(text))


def truncate_to_width(text: str, width: int) -> str:
    """Truncate text to at most `width` visible cells.

    Escape sequences are carried along with the character they precede, so a
    cut never lands inside an escape. If a style is still active at the cut
    point a reset is appended. Text that already fits is returned unchanged.

    Args:
        text: String possibly containing ANSI color codes
        width: Maximum visible width

    Returns:
        Truncated string
    """
    if visible_length(text) <= max(width, 0):
        return text
    if width <= 0:
        return ""

    out = []
    visible = 0
    style_open = False
    i = 0

    while i < len(text):
        match = ANSI_PATTERN.match(text, i)
        if match:
            if visible >= width:
                break
            sequence = match.group(0)
            out.append(sequence)
            style_open = sequence not in _RESET_SEQUENCES
            i = match.end()
            continue

        if visible >= width:
            break
        out.append(text[i])
        visible += 1
        i += 1

    if style_open:
        out.append(RESET)

    return "".join(out)


def pad_to_width(text: str, width: int, fill: str = " ") -> str:
    """Right-pad text with `fill` up to `width` visible cells."""
    missing = width - visible_length(text)
    if missing <= 0:
        return text
    return text + fill * missing
