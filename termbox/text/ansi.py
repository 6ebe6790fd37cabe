"""
ANSI escape sequence helpers.

Measuring text that carries color codes, and building cursor moves for
absolutely positioned output.
"""

import re

ESC = "\x1b"
CSI = f"{ESC}["

# SGR colors and cursor movement alike: ESC [ params letter
ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")
ANSI_SPLIT_RE = re.compile(r"(\x1b\[[0-9;?]*[A-Za-z])")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_RE.sub("", text)


def visible_width(text: str) -> int:
    """Count the printable characters left once escape codes are removed."""
    return sum(1 for ch in strip_ansi(text) if ch.isprintable())


def move_to(col: int, row: int) -> str:
    """Cursor move to a 0-based column/row (terminals count from 1)."""
    return f"{CSI}{row + 1};{col + 1}H"
