"""
Text measurement and layout helpers.
"""

from .ansi import strip_ansi, visible_width, move_to
from .formatting import (
    NEWLINE,
    ALIGNMENTS,
    detect_separator,
    split_lines,
    wrap,
    align,
    pad,
)

__all__ = [
    # ANSI
    "strip_ansi",
    "visible_width",
    "move_to",
    # Formatting
    "NEWLINE",
    "ALIGNMENTS",
    "detect_separator",
    "split_lines",
    "wrap",
    "align",
    "pad",
]
