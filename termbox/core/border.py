"""
Border configuration.

Parses the raw `border` option (a glyph set name or a mapping of side and
corner overrides) into an immutable Border. All validation happens here so a
bad value is rejected before any drawing starts.
"""

from dataclasses import dataclass
from typing import Any, Optional

from ..errors import InvalidBorderConfig, InvalidBorderValue
from .glyphs import (
    CORNER_BOTTOM_LEFT,
    CORNER_BOTTOM_RIGHT,
    CORNER_TOP_LEFT,
    CORNER_TOP_RIGHT,
    DEFAULT_GLYPH_SET,
    GLYPH_KINDS,
    GLYPH_SETS,
    LINE,
    PIPE,
    corner_char,
)

# Natural glyph kind for each side and corner
DEFAULT_KINDS = {
    "top": LINE,
    "bottom": LINE,
    "left": PIPE,
    "right": PIPE,
    "top_left": CORNER_TOP_LEFT,
    "top_right": CORNER_TOP_RIGHT,
    "bottom_left": CORNER_BOTTOM_LEFT,
    "bottom_right": CORNER_BOTTOM_RIGHT,
}

BORDER_KEYS = ("type",) + tuple(DEFAULT_KINDS)


def _check_kind(key: str, value: Any) -> Optional[str]:
    """Resolve a side/corner value to a glyph kind, or None when hidden."""
    if isinstance(value, str):
        if value not in GLYPH_KINDS:
            raise InvalidBorderValue(value, key)
        return value
    if not value:
        return None
    return DEFAULT_KINDS[key]


@dataclass(frozen=True)
class Border:
    """
    Normalized border description.

    Each side/corner field holds the glyph kind to draw, or None when that
    part of the border is hidden. Sides always draw with the line/pipe glyph
    of the set; their kind only switches them on.
    """
    type: str = DEFAULT_GLYPH_SET
    top: Optional[str] = LINE
    bottom: Optional[str] = LINE
    left: Optional[str] = PIPE
    right: Optional[str] = PIPE
    top_left: Optional[str] = CORNER_TOP_LEFT
    top_right: Optional[str] = CORNER_TOP_RIGHT
    bottom_left: Optional[str] = CORNER_BOTTOM_LEFT
    bottom_right: Optional[str] = CORNER_BOTTOM_RIGHT

    @classmethod
    def parse(cls, border: Any) -> "Border":
        """
        Build a Border from a raw option value.

        Args:
            border: Glyph set name, Border, or mapping of BORDER_KEYS

        Raises:
            InvalidBorderConfig: value has the wrong shape, an unknown key,
                or an unknown glyph set
            InvalidBorderValue: a side or corner names an unknown glyph kind
        """
        if isinstance(border, Border):
            return border
        if isinstance(border, str):
            if border not in GLYPH_SETS:
                raise InvalidBorderConfig(border)
            return cls(type=border)
        if not isinstance(border, dict):
            raise InvalidBorderConfig(border)

        unknown = [key for key in border if key not in BORDER_KEYS]
        if unknown:
            raise InvalidBorderConfig(border)

        glyph_set = border.get("type") or DEFAULT_GLYPH_SET
        if glyph_set not in GLYPH_SETS:
            raise InvalidBorderConfig(border)

        kinds = {
            key: _check_kind(key, border.get(key, True))
            for key in DEFAULT_KINDS
        }
        return cls(type=glyph_set, **kinds)

    def thickness(self, side: str) -> int:
        """Columns/rows used by a side: 1 when drawn, 0 when hidden."""
        return 1 if getattr(self, side) else 0

    @property
    def line(self) -> str:
        return corner_char(LINE, self.type)

    @property
    def pipe(self) -> str:
        return corner_char(PIPE, self.type)

    def corner(self, name: str) -> str:
        """
        Glyph for a corner, or "" when it isn't drawn.

        A corner shows only when both it and its vertical side are visible.
        """
        kind = getattr(self, name)
        side = "left" if name.endswith("_left") else "right"
        if kind and getattr(self, side):
            return corner_char(kind, self.type)
        return ""
