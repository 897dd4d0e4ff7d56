"""ANSI color codes, color-depth encoding and style resolution."""

import re

from typing import TYPE_CHECKING, Optional, Union

from ..types import Style
from .ansi import RESET, RESET_PATTERN, strip_ansi

if TYPE_CHECKING:
    from ..config.schema import StatusLineConfig, WidgetItemModel

# Color depth levels, lowest to highest
COLOR_LEVELS = ("none", "basic", "256", "truecolor")

# Basic ANSI 16 colors, by palette index
COLOR_INDEX = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "bright_black": 8,
    "bright_red": 9,
    "bright_green": 10,
    "bright_yellow": 11,
    "bright_blue": 12,
    "bright_magenta": 13,
    "bright_cyan": 14,
    "bright_white": 15,
}

# Color aliases
COLOR_INDEX["gray"] = COLOR_INDEX["bright_black"]
COLOR_INDEX["grey"] = COLOR_INDEX["bright_black"]

BOLD = "\x1b[1m"

# Explicit "no color" marker; stops precedence fallthrough
NO_COLOR = "none"

_HEX_PATTERN = re.compile(r"^(?:hex:|#)([0-9a-fA-F]{6})$")
_ANSI256_PATTERN = re.compile(r"^ansi256:(\d{1,3})$")

ParsedColor = Union[int, tuple[int, int, int], str]


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def rgb_to_ansi256(red: int, green: int, blue: int) -> int:
    """Map an RGB triple onto the xterm 256-color palette."""
    if red == green == blue:
        if red < 8:
            return 16
        if red > 248:
            return 231
        return _round_half_up(((red - 8) / 247) * 24) + 232

    return (
        16
        + 36 * _round_half_up(red / 255 * 5)
        + 6 * _round_half_up(green / 255 * 5)
        + _round_half_up(blue / 255 * 5)
    )


def ansi256_to_basic(code: int) -> int:
    """Map a 256-color palette index onto the 16-color palette index."""
    if code < 16:
        return code

    if code >= 232:
        red = green = blue = ((code - 232) * 10 + 8) / 255
    else:
        code -= 16
        remainder = code % 36
        red = (code // 36) / 5
        green = (remainder // 6) / 5
        blue = (remainder % 6) / 5

    value = max(red, green, blue) * 2
    if value == 0:
        return 0

    index = (
        (_round_half_up(blue) << 2)
        | (_round_half_up(green) << 1)
        | _round_half_up(red)
    )
    if value == 2:
        index += 8
    return index


def parse_color(color: Optional[str]) -> Optional[ParsedColor]:
    """Parse a configured color value.

    Accepted forms: a basic color name ("cyan", "bright_red"), "dim",
    "ansi256:N" and "hex:RRGGBB" / "#RRGGBB".

    Returns:
        Palette index as int (0-15 basic, 16-255 extended; "ansi256:N" with
        N < 16 maps onto the basic palette), RGB 3-tuple, the string "dim",
        or None when the value is unrecognized
    """
    if not color:
        return None

    name = color.strip().lower()

    if name in COLOR_INDEX:
        return COLOR_INDEX[name]
    if name == "dim":
        return "dim"

    match = _ANSI256_PATTERN.match(name)
    if match:
        code = int(match.group(1))
        return code if code <= 255 else None

    match = _HEX_PATTERN.match(name)
    if match:
        value = match.group(1)
        return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))

    return None


def _basic_param(index: int, background: bool) -> str:
    base = 40 if background else 30
    if index >= 8:
        return str(base + 60 + index - 8)
    return str(base + index)


def color_params(
    color: Optional[str], level: str, background: bool = False
) -> Optional[str]:
    """Get the SGR parameter string for one color channel.

    Args:
        color: Configured color value
        level: Color depth ("none", "basic", "256", "truecolor")
        background: Whether to encode as background

    Returns:
        SGR parameters (e.g. "31", "38;5;208") or None for no color
    """
    if level == "none":
        return None

    parsed = parse_color(color)
    if parsed is None:
        return None

    if parsed == "dim":
        return None if background else "2"

    prefix = "48" if background else "38"

    if isinstance(parsed, tuple):
        if level == "truecolor":
            red, green, blue = parsed
            return f"{prefix};2;{red};{green};{blue}"
        index = rgb_to_ansi256(*parsed)
    elif isinstance(parsed, int):
        index = parsed
    else:
        return None

    if index < 16:
        return _basic_param(index, background)
    if level == "basic":
        return _basic_param(ansi256_to_basic(index), background)
    return f"{prefix};5;{index}"


def fg_code(color: Optional[str], level: str) -> str:
    """Get the foreground escape sequence, or empty string."""
    params = color_params(color, level)
    return f"\x1b[{params}m" if params else ""


def bg_code(color: Optional[str], level: str) -> str:
    """Get the background escape sequence, or empty string."""
    params = color_params(color, level, background=True)
    return f"\x1b[{params}m" if params else ""


def _pick(*candidates: Optional[str]) -> Optional[str]:
    for candidate in candidates:
        if candidate:
            return None if candidate == NO_COLOR else candidate
    return None


def resolve_style(
    item: "WidgetItemModel",
    config: "StatusLineConfig",
    default_fg: Optional[str] = None,
    default_bg: Optional[str] = None,
) -> Style:
    """Resolve the effective style of an item.

    Precedence, highest first: item-level value, global override, widget (or
    theme) default, nothing. Each channel resolves independently; an explicit
    "none" at any level stops the fallthrough for that channel.
    """
    if item.bold is not None:
        bold = item.bold
    else:
        bold = config.global_bold

    return Style(
        fg=_pick(item.color, config.override_foreground_color, default_fg),
        bg=_pick(item.background_color, config.override_background_color, default_bg),
        bold=bold,
    )


def apply_style(text: str, style: Style, level: str) -> str:
    """Wrap text in the escape sequences for a style.

    At level "none" any escape sequences already in the text are removed so
    the output is plain.

    Args:
        text: Text to style
        style: Resolved style
        level: Color depth

    Returns:
        Styled text terminated by a reset, or text unchanged if unstyled
    """
    if level == "none":
        return strip_ansi(text)

    if not text:
        return text

    codes = []
    if style.bold:
        codes.append(BOLD)
    codes.append(fg_code(style.fg, level))
    codes.append(bg_code(style.bg, level))

    prefix = "".join(codes)
    if not prefix:
        return text

    # Re-open the style after every reset inside the text
    body = RESET_PATTERN.sub(lambda match: match.group(0) + prefix, text)
    return prefix + body + RESET


def colorize(text: str, color: Optional[str] = None, bold: bool = False) -> str:
    """Apply a basic color to text with ANSI codes.

    Used by widgets that color parts of their own output.

    Args:
        text: Text to colorize
        color: Color name, None, or "none" to skip colorization
        bold: Whether to apply bold formatting

    Returns:
        Colorized text with ANSI codes
    """
    if color == NO_COLOR:
        return text
    return apply_style(text, Style(fg=color, bold=bold), "basic")


def get_usage_color(percentage: float) -> str:
    """Get color based on usage percentage.

    Args:
        percentage: Usage percentage (0-100)

    Returns:
        Color name ("green", "yellow", or "red")
    """
    if percentage < 50:
        return "green"
    elif percentage < 80:
        return "yellow"
    else:
        return "red"


def get_cost_color(cost_usd: float) -> str:
    """Get color based on cost in USD.

    Args:
        cost_usd: Cost in USD

    Returns:
        Color name
    """
    if cost_usd == 0:
        return "grey"
    elif cost_usd < 5:
        return "green"
    elif cost_usd < 10:
        return "yellow"
    else:
        return "red"
