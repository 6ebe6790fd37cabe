"""
Exceptions raised while validating box options.

Everything here is raised before any output is produced, so a failed call
never leaves a half-drawn box behind.
"""


class BoxError(ValueError):
    """Base class for invalid box options."""
    pass


class InvalidBorderValue(BoxError):
    """Raised when a border side or corner names an unknown glyph kind."""

    def __init__(self, value, key: str):
        self.value = value
        self.key = key
        super().__init__(f"Invalid border value: '{value}' for '{key}'")


class InvalidBorderConfig(InvalidBorderValue):
    """Raised when the border option is neither a glyph set name nor a mapping."""

    def __init__(self, value):
        self.value = value
        self.key = "border"
        BoxError.__init__(
            self, f"Wrong value `{value!r}` for 'border' configuration option"
        )


class InvalidPaddingValue(BoxError):
    """Raised when padding isn't an int or a 1-4 item sequence of ints."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Wrong value `{value!r}` for 'padding' configuration option")


class InvalidStyleValue(BoxError):
    """Raised when a style names an unknown color."""

    def __init__(self, value, key: str):
        self.value = value
        self.key = key
        super().__init__(f"Invalid style value: '{value}' for '{key}'")


class TitleTooLongError(BoxError):
    """Raised when titles and corners don't fit on a border line."""

    def __init__(self, taken: int, width: int):
        self.taken = taken
        self.width = width
        super().__init__(
            f"Titles need {taken} columns but the border is only {width} wide"
        )


class InvalidTitleValue(BoxError):
    """Raised when the title option isn't a mapping."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Wrong value `{value!r}` for 'title' configuration option")
