"""
termbox - Draw bordered boxes of text in the terminal.

Boxes are returned as strings: plain rows for normal output, or rows placed
with cursor moves when a top/left position is given.

    from termbox import frame, merge_boxes
    print(frame("Hello", "world", padding=1, border="thick"))
"""

import logging

__version__ = "0.1.0"

from .colors import Colors, Styler, default_styler
from .config import BoxPreset, PresetsConfig, DEFAULT_PRESETS
from .core import (
    Border,
    Padding,
    BOX_CHARS,
    GLYPH_KINDS,
    GLYPH_SETS,
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
from .errors import (
    BoxError,
    InvalidBorderValue,
    InvalidBorderConfig,
    InvalidPaddingValue,
    InvalidStyleValue,
    InvalidTitleValue,
    TitleTooLongError,
)
from .render import (
    Title,
    frame,
    merge_boxes,
    preset,
    info,
    warn,
    success,
    error,
)
from .text import strip_ansi, visible_width, move_to

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Rendering
    "frame",
    "merge_boxes",
    "preset",
    "info",
    "warn",
    "success",
    "error",
    "Title",
    # Borders
    "Border",
    "Padding",
    "BOX_CHARS",
    "GLYPH_KINDS",
    "GLYPH_SETS",
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
    # Colors
    "Colors",
    "Styler",
    "default_styler",
    # Config
    "BoxPreset",
    "PresetsConfig",
    "DEFAULT_PRESETS",
    # Errors
    "BoxError",
    "InvalidBorderValue",
    "InvalidBorderConfig",
    "InvalidPaddingValue",
    "InvalidStyleValue",
    "InvalidTitleValue",
    "TitleTooLongError",
    # Text
    "strip_ansi",
    "visible_width",
    "move_to",
]
