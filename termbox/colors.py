"""
Shared color definitions for terminal output.

Styler turns color names from a box style into callables that wrap text in
SGR codes. One default Styler is built lazily and reused; callers that want
plain output (or different codes) pass their own to frame().
"""

import re
from typing import Callable, Optional

from .errors import InvalidStyleValue

StyleFn = Callable[[str], str]


class Colors:
    RESET = "\x1b[0m"


# SGR foreground codes; background is +10
FOREGROUND = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
    "bright_black": 90,
    "bright_red": 91,
    "bright_green": 92,
    "bright_yellow": 93,
    "bright_blue": 94,
    "bright_magenta": 95,
    "bright_cyan": 96,
    "bright_white": 97,
}

HEX_COLOR_RE = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def rgb(r: int, g: int, b: int) -> str:
    return f"\x1b[38;2;{r};{g};{b}m"


def on_rgb(r: int, g: int, b: int) -> str:
    return f"\x1b[48;2;{r};{g};{b}m"


def identity(text: str) -> str:
    return text


class Styler:
    """
    Applies foreground/background colors by name.

    Names are the keys of FOREGROUND or "#rrggbb". Background names may carry
    an "on_" prefix. Empty strings are never wrapped, so an absent corner or
    title stays empty after styling.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def _code(self, name: str, key: str, background: bool) -> str:
        if not isinstance(name, str):
            raise InvalidStyleValue(name, key)
        if background and name.startswith("on_"):
            name = name[3:]

        match = HEX_COLOR_RE.match(name)
        if match:
            r, g, b = (int(part, 16) for part in match.groups())
            return on_rgb(r, g, b) if background else rgb(r, g, b)

        if name not in FOREGROUND:
            raise InvalidStyleValue(name, key)
        code = FOREGROUND[name] + (10 if background else 0)
        return f"\x1b[{code}m"

    def _wrapper(self, code: str) -> StyleFn:
        def apply(text: str) -> str:
            if not text:
                return text
            return f"{code}{text}{Colors.RESET}"
        return apply

    def fg(self, name: Optional[str], key: str = "fg") -> StyleFn:
        """Callable coloring text with name, identity when name is unset."""
        if name is None:
            return identity
        code = self._code(name, key, background=False)
        return self._wrapper(code) if self.enabled else identity

    def bg(self, name: Optional[str], key: str = "bg") -> StyleFn:
        """Callable setting the background of text, identity when name is unset."""
        if name is None:
            return identity
        code = self._code(name, key, background=True)
        return self._wrapper(code) if self.enabled else identity

    def apply_fg(self, name: str, text: str) -> str:
        return self.fg(name)(text)

    def apply_bg(self, name: str, text: str) -> str:
        return self.bg(name)(text)


_default_styler: Optional[Styler] = None


def default_styler() -> Styler:
    """Process-wide Styler, created on first use."""
    global _default_styler
    if _default_styler is None:
        _default_styler = Styler()
    return _default_styler
