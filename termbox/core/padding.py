"""
Padding around box content, CSS shorthand style.
"""

from dataclasses import dataclass
from typing import Any

from ..errors import InvalidPaddingValue


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass(frozen=True)
class Padding:
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    @classmethod
    def parse(cls, value: Any) -> "Padding":
        """
        Normalize a padding option.

        Accepts:
        - None or 0: no padding
        - n: n on every side
        - [all], [vertical, horizontal], [top, horizontal, bottom],
          [top, right, bottom, left]

        Raises:
            InvalidPaddingValue: for negative numbers or any other shape
        """
        if isinstance(value, Padding):
            return value
        if value is None:
            return cls()
        if _is_count(value):
            return cls(value, value, value, value)
        if not isinstance(value, (list, tuple)) or not all(_is_count(v) for v in value):
            raise InvalidPaddingValue(value)

        if len(value) == 1:
            return cls(value[0], value[0], value[0], value[0])
        if len(value) == 2:
            vertical, horizontal = value
            return cls(vertical, horizontal, vertical, horizontal)
        if len(value) == 3:
            top, horizontal, bottom = value
            return cls(top, horizontal, bottom, horizontal)
        if len(value) == 4:
            return cls(*value)
        raise InvalidPaddingValue(value)

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom
