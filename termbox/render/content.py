"""
Box content: inferred size and the wrap/align/pad pipeline.
"""

from ..core.padding import Padding
from ..text.ansi import visible_width
from ..text.formatting import align as align_lines, pad, wrap


def infer_dimensions(lines: list[str], padding) -> tuple[int, int]:
    """
    Interior size needed for lines plus padding (borders not included).

    Returns:
        (width, height). Width falls back to 1 column when there are no lines.
    """
    pad_spec = Padding.parse(padding)
    content_width = max((visible_width(line) for line in lines), default=1)
    width = pad_spec.left + content_width + pad_spec.right
    height = pad_spec.top + len(lines) + pad_spec.bottom
    return width, height


def format_content(content: str, width: int, padding, align: str = "left") -> list[str]:
    """
    Turn raw content into the interior rows of a box width columns wide.

    One column per side is reserved for the border whether or not that side
    is drawn, so toggling a side never reflows the text.
    """
    if not content:
        return []

    pad_spec = Padding.parse(padding)
    total_width = width - 2 - pad_spec.horizontal

    wrapped = wrap(content, total_width)
    aligned = align_lines(wrapped, total_width, align)
    return pad(aligned, pad_spec)
