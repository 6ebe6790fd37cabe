"""
Line-oriented text formatting: splitting, wrapping, aligning and padding.

All widths are visible widths, so text that already carries color codes
lines up the same as plain text.
"""

import re

from ..core.padding import Padding
from .ansi import ANSI_SPLIT_RE, visible_width

NEWLINE = "\n"
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

ALIGNMENTS = ("left", "center", "right")


def detect_separator(text: str) -> str:
    """Return the first line break found in text, or a plain newline."""
    match = LINE_BREAK_RE.search(text)
    return match.group() if match else NEWLINE


def split_lines(text: str, sep: str = NEWLINE) -> list[str]:
    """
    Split text on sep, dropping trailing empty lines.

    "" gives [] and "a\\n" gives ["a"], so a rendered box (which ends in a
    separator) splits into exactly its rows.
    """
    lines = text.split(sep)
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def _split_word(word: str, width: int) -> list[str]:
    """Hard-split a word wider than width, never breaking an escape code."""
    if visible_width(word) <= width:
        return [word]

    pieces = []
    current = ""
    count = 0
    for part in ANSI_SPLIT_RE.split(word):
        if ANSI_SPLIT_RE.fullmatch(part):
            current += part
            continue
        for ch in part:
            if count == width:
                pieces.append(current)
                current, count = "", 0
            current += ch
            if ch.isprintable():
                count += 1
    if current:
        pieces.append(current)
    return pieces


def _wrap_line(line: str, width: int) -> list[str]:
    if visible_width(line) <= width:
        return [line]

    rows = []
    current = None
    current_width = 0
    for word in line.split(" "):
        for piece in _split_word(word, width):
            piece_width = visible_width(piece)
            if current is None:
                current, current_width = piece, piece_width
            elif current_width + 1 + piece_width <= width:
                current += " " + piece
                current_width += 1 + piece_width
            else:
                rows.append(current)
                current, current_width = piece, piece_width
    if current is not None:
        rows.append(current)
    return rows


def wrap(text: str, width: int) -> list[str]:
    """
    Word-wrap text to width visible columns.

    Lines that already fit are returned untouched (inner spacing included).
    Longer lines break on spaces; words wider than width are split. A width
    below 1 turns wrapping off.
    """
    lines = split_lines(text, detect_separator(text))
    if width < 1:
        return lines

    wrapped = []
    for line in lines:
        wrapped.extend(_wrap_line(line, width))
    return wrapped


def align(lines: list[str], width: int, direction: str = "left") -> list[str]:
    """
    Fill each line with spaces up to width.

    Center puts the odd space on the right. Lines at or past width are
    left alone.
    """
    if direction not in ALIGNMENTS:
        raise ValueError(f"Unknown alignment: {direction!r} (expected one of {', '.join(ALIGNMENTS)})")

    aligned = []
    for line in lines:
        fill = width - visible_width(line)
        if fill <= 0:
            aligned.append(line)
        elif direction == "left":
            aligned.append(line + " " * fill)
        elif direction == "right":
            aligned.append(" " * fill + line)
        else:
            left = fill // 2
            aligned.append(" " * left + line + " " * (fill - left))
    return aligned


def pad(lines: list[str], padding) -> list[str]:
    """
    Surround lines with blank space.

    Empty lines are widened to the longest line first so every row of the
    block has the same width.
    """
    padding = Padding.parse(padding)
    line_width = max((visible_width(line) for line in lines), default=0)
    filler = " " * line_width
    left = " " * padding.left
    right = " " * padding.right

    def around(line: str) -> str:
        return f"{left}{line}{right}"

    rows = [around(filler) for _ in range(padding.top)]
    rows.extend(around(line or filler) for line in lines)
    rows.extend(around(filler) for _ in range(padding.bottom))
    return rows
