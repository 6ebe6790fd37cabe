"""
Border glyph tables.

Every glyph drawn by termbox comes from BOX_CHARS. A glyph is addressed by
its kind (the role it plays, e.g. "corner_top_left") and the glyph set that
realizes it.
"""

from ..errors import InvalidBorderValue

# Glyph kinds, in table column order
CORNER_BOTTOM_RIGHT = "corner_bottom_right"
CORNER_TOP_RIGHT = "corner_top_right"
CORNER_TOP_LEFT = "corner_top_left"
CORNER_BOTTOM_LEFT = "corner_bottom_left"
DIVIDER_LEFT = "divider_left"
DIVIDER_UP = "divider_up"
DIVIDER_DOWN = "divider_down"
DIVIDER_RIGHT = "divider_right"
LINE = "line"
PIPE = "pipe"
CROSS = "cross"

GLYPH_KINDS = (
    CORNER_BOTTOM_RIGHT,
    CORNER_TOP_RIGHT,
    CORNER_TOP_LEFT,
    CORNER_BOTTOM_LEFT,
    DIVIDER_LEFT,
    DIVIDER_UP,
    DIVIDER_DOWN,
    DIVIDER_RIGHT,
    LINE,
    PIPE,
    CROSS,
)


def _glyph_row(chars: str) -> dict[str, str]:
    return dict(zip(GLYPH_KINDS, chars))


BOX_CHARS = {
    "ascii": _glyph_row("++++++++-|+"),
    "light": _glyph_row("┘┐┌└┤┴┬├─│┼"),
    "thick": _glyph_row("╝╗╔╚╣╩╦╠═║╬"),
    "round": _glyph_row("╯╮╭╰┤┴┬├─│┼"),
}

GLYPH_SETS = tuple(BOX_CHARS)
DEFAULT_GLYPH_SET = "light"


def corner_char(kind: str, glyph_set: str = DEFAULT_GLYPH_SET) -> str:
    """
    Look up the glyph for a kind in a glyph set.

    Args:
        kind: One of GLYPH_KINDS
        glyph_set: One of GLYPH_SETS

    Raises:
        InvalidBorderValue: if either name is unknown
    """
    try:
        glyphs = BOX_CHARS[glyph_set]
    except (KeyError, TypeError):
        raise InvalidBorderValue(glyph_set, "type") from None
    try:
        return glyphs[kind]
    except (KeyError, TypeError):
        raise InvalidBorderValue(kind, "kind") from None


def corner_bottom_right_char(glyph_set: str = DEFAULT_GLYPH_SET) -> str:
    return corner_char(CORNER_BOTTOM_RIGHT, glyph_set)


def corner_top_right_char(glyph_set: str = DEFAULT_GLYPH_SET) -> str:
    return corner_char(CORNER_TOP_RIGHT, glyph_set)


def corner_top_left_char(glyph_set: str = DEFAULT_GLYPH_SET) -> str:
    return corner_char(CORNER_TOP_LEFT, glyph_set)


def corner_bottom_left_char(glyph_set: str = DEFAULT_GLYPH_SET) -> str:
    return corner_char(CORNER_BOTTOM_LEFT, glyph_set)


def divider_left_char(glyph_set: str = DEFAULT_GLYPH_SET) -> str:
    return corner_char(DIVIDER_LEFT, glyph_set)


def divider_up_char(glyph_set: str = DEFAULT_GLYPH_SET) -> str:
    return corner_char(DIVIDER_UP, glyph_set)


def divider_down_char(glyph_set: str = DEFAULT_GLYPH_SET) -> str:
    return corner_char(DIVIDER_DOWN, glyph_set)


def divider_right_char(glyph_set: str = DEFAULT_GLYPH_SET) -> str:
    return corner_char(DIVIDER_RIGHT, glyph_set)


def line_char(glyph_set: str = DEFAULT_GLYPH_SET) -> str:
    return corner_char(LINE, glyph_set)


def pipe_char(glyph_set: str = DEFAULT_GLYPH_SET) -> str:
    return corner_char(PIPE, glyph_set)


def cross_char(glyph_set: str = DEFAULT_GLYPH_SET) -> str:
    return corner_char(CROSS, glyph_set)
