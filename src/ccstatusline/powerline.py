"""Powerline segment composition and cross-line column alignment."""

from typing import Optional, Union

from .config.schema import StatusLineConfig, ThemeColor
from .types import RenderedItem, Style
from .utils.ansi import RESET, pad_to_width, strip_ansi, truncate_to_width, visible_length
from .utils.colors import color_params, resolve_style

# Built-in themes: ordered (foreground, background) pairs cycled per segment
THEMES: dict[str, list[tuple[str, str]]] = {
    "default": [
        ("white", "blue"),
        ("black", "green"),
        ("white", "magenta"),
        ("black", "cyan"),
        ("black", "yellow"),
    ],
    "minimal": [
        ("bright_white", "bright_black"),
        ("white", "black"),
    ],
    "nord": [
        ("#2E3440", "#88C0D0"),
        ("#ECEFF4", "#5E81AC"),
        ("#2E3440", "#A3BE8C"),
        ("#2E3440", "#EBCB8B"),
    ],
    "tokyo-night": [
        ("#1A1B26", "#7AA2F7"),
        ("#1A1B26", "#BB9AF7"),
        ("#1A1B26", "#9ECE6A"),
        ("#C0CAF5", "#414868"),
    ],
    "monokai": [
        ("#272822", "#A6E22E"),
        ("#272822", "#66D9EF"),
        ("#272822", "#FD971F"),
        ("#F8F8F2", "#F92672"),
    ],
}

_DIM_PARAM = "2"


def get_theme(theme: Union[str, list[ThemeColor]]) -> list[tuple[str, str]]:
    """Resolve a theme name or explicit color list to color pairs.

    Unknown theme names fall back to the default theme.
    """
    if isinstance(theme, str):
        return THEMES.get(theme, THEMES["default"])
    return [(color.fg, color.bg) for color in theme]


def calculate_alignment(prerendered: list[list[RenderedItem]]) -> dict[int, int]:
    """Compute the widest item per column across all lines.

    Columns are the ordinal positions of content items within each line;
    separator and flex markers are not columns.

    Args:
        prerendered: Pre-rendered items for every configured line

    Returns:
        Mapping of column index to maximum visible width
    """
    table: dict[int, int] = {}
    for line in prerendered:
        contents = [entry for entry in line if entry.is_content]
        for column, entry in enumerate(contents):
            table[column] = max(table.get(column, 0), entry.length)
    return table


class _AnsiWriter:
    """Accumulates output, emitting only the SGR changes between states."""

    def __init__(self, level: str):
        self.level = level
        self.parts: list[str] = []
        self.fg: Optional[str] = None
        self.bg: Optional[str] = None
        self.bold = False
        self.styled = False

    def set(self, fg: Optional[str], bg: Optional[str], bold: bool = False) -> None:
        if self.level == "none":
            return

        fg_param = color_params(fg, self.level)
        bg_param = color_params(bg, self.level, background=True)

        # SGR 22 clears both bold and dim
        reset_intensity = (self.bold and not bold) or (
            self.fg == _DIM_PARAM and fg_param != _DIM_PARAM
        )

        codes = []
        if reset_intensity:
            codes.append("22")
        if bold and (reset_intensity or not self.bold):
            codes.append("1")
        if fg_param != self.fg or (reset_intensity and fg_param == _DIM_PARAM):
            codes.append(fg_param or "39")
        if bg_param != self.bg:
            codes.append(bg_param or "49")

        if codes:
            self.parts.append("\x1b[" + ";".join(codes) + "m")
            self.styled = True

        self.fg, self.bg, self.bold = fg_param, bg_param, bold

    def write(self, text: str) -> None:
        self.parts.append(text)

    def finish(self) -> str:
        if self.styled:
            self.parts.append(RESET)
        return "".join(self.parts)


def _build_segments(
    contents: list[RenderedItem],
) -> list[list[tuple[int, RenderedItem]]]:
    """Group content items into segments; merged items share a segment."""
    segments: list[list[tuple[int, RenderedItem]]] = []
    for column, entry in enumerate(contents):
        if segments:
            previous = segments[-1][-1][1]
            if previous.item.merge_next or entry.item.merge_prev:
                segments[-1].append((column, entry))
                continue
        segments.append([(column, entry)])
    return segments


def _segment_styles(
    segments: list[list[tuple[int, RenderedItem]]], config: StatusLineConfig
) -> list[list[Style]]:
    theme = get_theme(config.powerline.theme)
    styles = []
    for index, segment in enumerate(segments):
        theme_fg, theme_bg = theme[index % len(theme)]
        styles.append(
            [resolve_style(entry.item, config, theme_fg, theme_bg) for _, entry in segment]
        )
    return styles


def _render_segments(
    segments: list[list[tuple[int, RenderedItem]]],
    styles: list[list[Style]],
    config: StatusLineConfig,
    alignment: dict[int, int],
) -> str:
    powerline = config.powerline
    writer = _AnsiWriter(config.color_level)

    if powerline.start_cap:
        writer.set(styles[0][0].bg, None)
        writer.write(powerline.start_cap)

    for index, segment in enumerate(segments):
        for position, (column, entry) in enumerate(segment):
            style = styles[index][position]
            padding = (
                entry.item.padding
                if entry.item.padding is not None
                else config.default_padding
            )
            text = strip_ansi(entry.text)
            if powerline.auto_align:
                text = pad_to_width(text, alignment.get(column, entry.length))

            left = padding if position == 0 else ""
            right = padding if position == len(segment) - 1 else ""

            writer.set(style.fg, style.bg, style.bold)
            writer.write(left + text + right)

        current_bg = styles[index][-1].bg
        if index + 1 < len(segments):
            writer.set(current_bg, styles[index + 1][0].bg)
            writer.write(powerline.separator)
        else:
            writer.set(current_bg, None)
            writer.write(powerline.end_cap or powerline.separator)

    return writer.finish()


def compose_powerline(
    rendered: list[RenderedItem],
    config: StatusLineConfig,
    width: int,
    alignment: Optional[dict[int, int]] = None,
) -> str:
    """Render a line as Powerline segments of at most `width` cells.

    Each segment is colored from the theme by segment index and followed by
    the separator glyph, colored as a transition from its background to the
    next segment's background. The last segment ends with the end cap (or
    separator) transitioning to the default background. Escape sequences are
    emitted as deltas so no reset lands between segments.

    When the line is too wide, whole segments are dropped from the end; a
    single segment that is still too wide is truncated.

    Args:
        rendered: Pre-rendered items for the line
        config: Status line configuration
        width: Resolved terminal width
        alignment: Column widths from calculate_alignment

    Returns:
        Finished line, or empty string if the line has no content
    """
    contents = [entry for entry in rendered if entry.is_content]
    if not contents:
        return ""

    alignment = alignment or {}
    segments = _build_segments(contents)
    styles = _segment_styles(segments, config)

    for count in range(len(segments), 0, -1):
        line = _render_segments(segments[:count], styles[:count], config, alignment)
        if visible_length(line) <= width:
            return line

    return truncate_to_width(line, width)
