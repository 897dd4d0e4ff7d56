"""Main rendering pipeline for status line."""

from typing import Optional

from .config.schema import StatusLineConfig, WidgetItemModel
from .powerline import calculate_alignment, compose_powerline
from .types import FLEX, SEPARATOR, RenderContext, RenderedItem, Style
from .utils.ansi import truncate_to_width, visible_length
from .utils.colors import apply_style, resolve_style
from .utils.debug import debug_log
from .utils.flex import expand_flex
from .utils.terminal import resolve_width
from .widgets import builtin  # noqa: F401
from .widgets.registry import get_widget


def prerender_item(
    item: WidgetItemModel, context: RenderContext
) -> Optional[RenderedItem]:
    """Render a single widget once and measure its output.

    Any exception raised by the widget, or a result that is not a string, is
    logged and treated as no output.

    Args:
        item: Widget configuration
        context: Render context

    Returns:
        RenderedItem, or None to skip
    """
    widget = get_widget(item.type)
    if not widget:
        debug_log(f"Unknown widget type: {item.type}", context.data.get("session_id", ""))
        return None

    try:
        text = widget.render(item, context)
    except Exception as e:
        debug_log(
            f"Widget {item.type} failed: {type(e).__name__}: {e}",
            context.data.get("session_id", ""),
        )
        return None

    if widget.kind == FLEX:
        text = ""
    elif not isinstance(text, str):
        if text is not None:
            debug_log(
                f"Widget {item.type} returned {type(text).__name__}, expected str",
                context.data.get("session_id", ""),
            )
        return None
    elif not text:
        return None

    return RenderedItem(
        item=item,
        text=text,
        length=visible_length(text),
        kind=widget.kind,
        default_color=widget.default_color,
        supports_colors=widget.supports_colors,
    )


def prerender_line(
    line: list[WidgetItemModel], context: RenderContext
) -> list[RenderedItem]:
    """Pre-render every widget on a line, dropping those with no output."""
    rendered = []
    for item in line:
        result = prerender_item(item, context)
        if result is not None:
            rendered.append(result)
    return rendered


def prerender_lines(
    lines: list[list[WidgetItemModel]], context: RenderContext
) -> list[list[RenderedItem]]:
    """Pre-render all configured lines for this refresh."""
    return [prerender_line(line, context) for line in lines]


def _remove_orphaned_separators(rendered: list[RenderedItem]) -> list[RenderedItem]:
    """Remove explicit separators that have no content on both sides.

    A separator is orphaned if:
    - It's at the start (nothing visible before it)
    - It's at the end (nothing visible after it)
    - It's adjacent to another separator (no content between)

    Flex markers are kept and do not count as content.
    """
    result = []
    prev_was_separator = True  # Treat start as separator to skip leading separators

    for entry in rendered:
        if entry.kind == SEPARATOR:
            if not prev_was_separator:
                result.append(entry)
            prev_was_separator = True
        else:
            result.append(entry)
            if entry.is_content:
                prev_was_separator = False

    for index in range(len(result) - 1, -1, -1):
        if result[index].is_content:
            break
        if result[index].kind == SEPARATOR:
            del result[index]

    return result


def is_merged(left: RenderedItem, right: RenderedItem) -> bool:
    """Whether two adjacent items are merged into one visual group."""
    return left.item.merge_next or right.item.merge_prev


def style_item(entry: RenderedItem, config: StatusLineConfig, text: str) -> str:
    """Apply an item's resolved style to text.

    Widgets that color their own output are passed through unstyled.
    """
    if not entry.supports_colors:
        return apply_style(text, Style(), config.color_level)

    style = resolve_style(entry.item, config, entry.default_color)
    return apply_style(text, style, config.color_level)


def _item_padding(entry: RenderedItem, config: StatusLineConfig) -> str:
    if entry.item.padding is not None:
        return entry.item.padding
    return config.default_padding


def compose_regular(
    rendered: list[RenderedItem], config: StatusLineConfig, width: int
) -> str:
    """Join pre-rendered items into one line of at most `width` cells.

    Adjacent content items get the default separator between them unless
    merged; merged sides also drop their padding. Flex markers expand to fill
    the width and the result is truncated from the end.

    Args:
        rendered: Pre-rendered items for the line
        config: Status line configuration
        width: Resolved terminal width

    Returns:
        Finished line, or empty string if the line has no content
    """
    entries = _remove_orphaned_separators(rendered)
    if not any(entry.is_content for entry in entries):
        return ""

    separator = ""
    if config.default_separator:
        separator = apply_style(
            config.default_separator,
            Style(fg=config.separator_color or config.override_foreground_color),
            config.color_level,
        )

    parts: list[str] = []
    flex_positions: list[int] = []
    prev: Optional[RenderedItem] = None

    for index, entry in enumerate(entries):
        if entry.kind == FLEX:
            flex_positions.append(len(parts))
            parts.append("")
        elif entry.kind == SEPARATOR:
            parts.append(style_item(entry, config, entry.text))
        else:
            merged_left = prev is not None and prev.is_content and is_merged(prev, entry)
            following = entries[index + 1] if index + 1 < len(entries) else None
            merged_right = (
                following is not None
                and following.is_content
                and is_merged(entry, following)
            )

            if prev is not None and prev.is_content and not merged_left:
                parts.append(separator)

            padding = _item_padding(entry, config)
            body = (
                ("" if merged_left else padding)
                + entry.text
                + ("" if merged_right else padding)
            )
            parts.append(style_item(entry, config, body))

        prev = entry

    line = expand_flex(parts, flex_positions, width)
    return truncate_to_width(line, width)


def render_lines(
    config: StatusLineConfig,
    context: RenderContext,
    terminal_width: Optional[int] = None,
) -> list[str]:
    """Render every configured line for one refresh.

    Args:
        config: Status line configuration
        context: Render context with data
        terminal_width: Detected terminal columns, None if unknown

    Returns:
        One finished string per configured line
    """
    width = resolve_width(
        config.flex_mode,
        config.terminal_width or terminal_width,
        context.context_percentage,
        config.compact_threshold,
    )

    prerendered = prerender_lines(config.lines, context)

    debug_log(
        f"Resolved width {width} for {len(prerendered)} line(s)",
        context.data.get("session_id", ""),
    )

    if config.powerline.enabled:
        alignment = (
            calculate_alignment(prerendered) if config.powerline.auto_align else {}
        )
        return [
            compose_powerline(line, config, width, alignment) for line in prerendered
        ]

    return [compose_regular(line, config, width) for line in prerendered]
