"""
Frame rendering.

frame() combines border, titles, formatted content and styling into one
string. Without a position the result is plain rows ending in the content's
line separator (flowed mode). With both top and left given, every row is
placed with a cursor move and no separators are emitted (positioned mode).
"""

import logging
from typing import Any, Optional

from ..colors import StyleFn, Styler, default_styler
from ..core.border import Border
from ..core.padding import Padding
from ..errors import InvalidStyleValue
from ..text.ansi import move_to, visible_width
from ..text.formatting import ALIGNMENTS, NEWLINE, detect_separator, split_lines
from .content import format_content, infer_dimensions
from .title import Title, bottom_border, bottom_space_taken, top_border, top_space_taken

logger = logging.getLogger(__name__)

# Space between tiled copies
GUTTER = "  "


def resolve_content(content: tuple) -> str:
    """
    Collapse frame() positional content into a single string.

    A lone callable is called for the text; a lone list/tuple stands for the
    individual values; several values are joined with newlines.
    """
    if len(content) == 1 and callable(content[0]):
        return str(content[0]())
    if len(content) == 1 and isinstance(content[0], (list, tuple)):
        content = tuple(content[0])
    return NEWLINE.join(str(part) for part in content)


def extract_style(style: dict, styler: Styler, prefix: str = "") -> tuple[StyleFn, StyleFn]:
    """Foreground and background callables for a {fg, bg} mapping."""
    return (
        styler.fg(style.get("fg"), key=f"{prefix}fg"),
        styler.bg(style.get("bg"), key=f"{prefix}bg"),
    )


def frame(
    *content: Any,
    top: Optional[int] = None,
    left: Optional[int] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    align: str = "left",
    padding: Any = 0,
    title: Optional[dict] = None,
    border: Any = "light",
    style: Optional[dict] = None,
    count: int = 1,
    styler: Optional[Styler] = None,
) -> str:
    """
    Draw a box around content.

    Args:
        *content: Text values joined by newlines, or one callable returning text
        top, left: Terminal row/column of the box; both switch on positioned mode
        width, height: Outer size, inferred from content when omitted
        align: "left", "center" or "right"
        padding: int or 1-4 item CSS-style shorthand
        title: Mapping of top_left/top_center/top_right/bottom_* to text
        border: Glyph set name or mapping (see Border.parse)
        style: {"fg", "bg", "border": {"fg", "bg"}} color names
        count: Number of identical copies drawn side by side
        styler: Color facility, defaults to the shared one

    Returns:
        The rendered box.

    Raises:
        BoxError: for any invalid border, padding, title or style value
        ValueError: for an unknown alignment or a count below 1
    """
    border = Border.parse(border)
    padding = Padding.parse(padding)
    title = Title.from_dict(title)
    style = style or {}
    if not isinstance(style, dict):
        raise InvalidStyleValue(style, "style")
    border_style = style.get("border") or {}
    if not isinstance(border_style, dict):
        raise InvalidStyleValue(border_style, "border")
    styler = styler or default_styler()

    if align not in ALIGNMENTS:
        raise ValueError(f"Unknown alignment: {align!r} (expected one of {', '.join(ALIGNMENTS)})")
    if not isinstance(count, int) or count < 1:
        raise ValueError(f"count must be a positive integer, got {count!r}")

    fg, bg = extract_style(style, styler)
    border_fg, border_bg = extract_style(border_style, styler, prefix="border.")

    text = resolve_content(content)
    sep = detect_separator(text)
    lines = split_lines(text, sep)

    top_size = border.thickness("top")
    bottom_size = border.thickness("bottom")
    left_size = border.thickness("left")
    right_size = border.thickness("right")

    inner_width, inner_height = infer_dimensions(lines, padding)
    if width is None:
        width = left_size + inner_width + right_size
    width = max(width, top_space_taken(title, border), bottom_space_taken(title, border))
    if height is None:
        height = top_size + inner_height + bottom_size

    rows = format_content(text, width, padding, align)
    positioned = top is not None and left is not None
    styled = bool(style.get("fg") or style.get("bg"))
    pipe = border_bg(border_fg(border.pipe))

    logger.debug(
        "frame %dx%d count=%d positioned=%s rows=%d",
        width, height, count, positioned, len(rows),
    )

    output = []

    if border.top:
        if positioned:
            output.append(move_to(left, top))
        line = top_border(title, width, border, border_fg, border_bg)
        output.append(GUTTER.join([line] * count))
        if not positioned:
            output.append(sep)

    for i in range(height - top_size - bottom_size):
        row = top + i + top_size if positioned else None
        if positioned:
            output.append(move_to(left, row))

        for x in range(count):
            tile_left = left + x * (width + len(GUTTER)) if positioned else None
            # Later tiles start at their own column
            if positioned and x > 0:
                output.append(move_to(tile_left, row))

            if left_size:
                output.append(pipe)

            content_size = width - left_size - right_size
            if i < len(rows):
                output.append(bg(fg(rows[i])))
                content_size -= visible_width(rows[i])

            # Positioned output leaves unstyled gaps to the terminal
            if styled or not positioned:
                output.append(bg(fg(" " * content_size)))

            if right_size:
                if positioned:
                    output.append(move_to(tile_left + width - right_size, row))
                output.append(pipe)

            if x < count - 1:
                output.append(GUTTER)

        if not positioned:
            output.append(sep)

    if border.bottom:
        if positioned:
            output.append(move_to(left, top + height - bottom_size))
        line = bottom_border(title, width, border, border_fg, border_bg)
        output.append(GUTTER.join([line] * count))
        if not positioned:
            output.append(sep)

    return "".join(output)
