"""
Side-by-side merging of rendered boxes.
"""

from ..text.ansi import visible_width
from ..text.formatting import NEWLINE, split_lines
from .frame import GUTTER


def merge_boxes(main: str, addition: str) -> str:
    """
    Place two flowed boxes next to each other, separated by a gutter.

    Each box's width is taken from its first row, so both boxes must have
    rows of equal width (true of anything frame() returns in flowed mode).
    The shorter box is filled out with blank rows.

    Returns:
        The merged rows joined by newlines, without a trailing newline.
    """
    first = split_lines(main, NEWLINE)
    second = split_lines(addition, NEWLINE)
    first_width = visible_width(first[0]) if first else 0
    second_width = visible_width(second[0]) if second else 0

    merged = []
    for i in range(max(len(first), len(second))):
        main_line = first[i] if i < len(first) else " " * first_width
        add_line = second[i] if i < len(second) else " " * second_width
        merged.append(main_line + GUTTER + add_line)

    return NEWLINE.join(merged)
