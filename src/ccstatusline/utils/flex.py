"""Flex separator width distribution."""

from .ansi import visible_length

# Non-breaking space, so the host does not trim or collapse the padding
FLEX_FILL = "\u00a0"


def distribute_flex(remaining: int, flex_count: int) -> list[int]:
    """Split leftover width across flex markers.

    The remainder is clamped to zero and divided evenly; cells that do not
    divide evenly go to the last marker.

    Args:
        remaining: Resolved width minus the width of all fixed content
        flex_count: Number of flex markers on the line

    Returns:
        Width of each flex marker, in line order
    """
    if flex_count <= 0:
        return []

    share, leftover = divmod(max(remaining, 0), flex_count)
    widths = [share] * flex_count
    widths[-1] += leftover
    return widths


def expand_flex(parts: list[str], flex_positions: list[int], width: int) -> str:
    """Fill flex positions in `parts` so the joined line spans `width`.

    Args:
        parts: Rendered line pieces; entries at flex positions are ignored
        flex_positions: Indexes of flex markers within parts
        width: Resolved terminal width

    Returns:
        The joined line
    """
    if not flex_positions:
        return "".join(parts)

    flex_set = set(flex_positions)
    fixed_width = sum(
        visible_length(part) for i, part in enumerate(parts) if i not in flex_set
    )

    expanded = list(parts)
    for position, size in zip(
        flex_positions, distribute_flex(width - fixed_width, len(flex_positions))
    ):
        expanded[position] = FLEX_FILL * size

    return "".join(expanded)
