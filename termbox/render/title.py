"""
Titles embedded in the top and bottom border lines.

A border line is laid out as:
    corner, left title, line run, center title, line run, right title, corner
with the spare width split between the two runs (odd column on the right).
"""

from dataclasses import dataclass, fields
from typing import Any, Optional

from ..colors import StyleFn, identity
from ..core.border import Border
from ..errors import InvalidTitleValue, TitleTooLongError
from ..text.ansi import visible_width

EDGES = ("top", "bottom")


@dataclass(frozen=True)
class Title:
    top_left: str = ""
    top_center: str = ""
    top_right: str = ""
    bottom_left: str = ""
    bottom_center: str = ""
    bottom_right: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Any]) -> "Title":
        """Build from a title mapping; unknown keys are ignored, None is empty."""
        if isinstance(data, Title):
            return data
        data = data or {}
        if not isinstance(data, dict):
            raise InvalidTitleValue(data)
        values = {}
        for f in fields(cls):
            value = data.get(f.name)
            values[f.name] = "" if value is None else str(value)
        return cls(**values)

    def edge(self, edge: str) -> tuple[str, str, str]:
        """Left, center and right titles of one edge."""
        return (
            getattr(self, f"{edge}_left"),
            getattr(self, f"{edge}_center"),
            getattr(self, f"{edge}_right"),
        )


def titles_size(title: Title, edge: str) -> int:
    return sum(visible_width(text) for text in title.edge(edge))


def edge_corners(border: Border, edge: str) -> tuple[str, str]:
    """Corner glyphs at each end of an edge ("" where not drawn)."""
    return border.corner(f"{edge}_left"), border.corner(f"{edge}_right")


def space_taken(title: Title, border: Border, edge: str) -> int:
    """Columns used on an edge by its titles and corners."""
    left, right = edge_corners(border, edge)
    return titles_size(title, edge) + visible_width(left) + visible_width(right)


def top_space_taken(title: Title, border: Border) -> int:
    return space_taken(title, border, "top")


def bottom_space_taken(title: Title, border: Border) -> int:
    return space_taken(title, border, "bottom")


def border_line(
    title: Title,
    width: int,
    border: Border,
    edge: str,
    fg: StyleFn = identity,
    bg: StyleFn = identity,
) -> str:
    """
    Draw one horizontal border line of a box width columns wide.

    Each segment is styled on its own, so hidden corners and missing titles
    collapse to nothing and the line runs absorb the space.

    Raises:
        TitleTooLongError: if titles and corners need more than width
    """
    taken = space_taken(title, border, edge)
    remaining = width - taken
    if remaining < 0:
        raise TitleTooLongError(taken, width)

    before = remaining // 2
    after = remaining - before
    left_corner, right_corner = edge_corners(border, edge)
    left_title, center_title, right_title = title.edge(edge)

    segments = [
        left_corner,
        left_title,
        border.line * before,
        center_title,
        border.line * after,
        right_title,
        right_corner,
    ]
    return "".join(bg(fg(segment)) for segment in segments)


def top_border(title: Title, width: int, border: Border,
               fg: StyleFn = identity, bg: StyleFn = identity) -> str:
    return border_line(title, width, border, "top", fg, bg)


def bottom_border(title: Title, width: int, border: Border,
                  fg: StyleFn = identity, bg: StyleFn = identity) -> str:
    return border_line(title, width, border, "bottom", fg, bg)
