"""
Border and padding value objects.
"""

from .glyphs import (
    BOX_CHARS,
    GLYPH_KINDS,
    GLYPH_SETS,
    DEFAULT_GLYPH_SET,
    corner_char,
    corner_bottom_right_char,
    corner_top_right_char,
    corner_top_left_char,
    corner_bottom_left_char,
    divider_left_char,
    divider_up_char,
    divider_down_char,
    divider_right_char,
    line_char,
    pipe_char,
    cross_char,
)
from .border import Border, BORDER_KEYS
from .padding import Padding

__all__ = [
    # Glyphs
    "BOX_CHARS",
    "GLYPH_KINDS",
    "GLYPH_SETS",
    "DEFAULT_GLYPH_SET",
    "corner_char",
    "corner_bottom_right_char",
    "corner_top_right_char",
    "corner_top_left_char",
    "corner_bottom_left_char",
    "divider_left_char",
    "divider_up_char",
    "divider_down_char",
    "divider_right_char",
    "line_char",
    "pipe_char",
    "cross_char",
    # Border
    "Border",
    "BORDER_KEYS",
    # Padding
    "Padding",
]
