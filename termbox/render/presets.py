"""
Message boxes built from named presets.
"""

from typing import Optional

from ..config import PresetsConfig
from .frame import frame


def preset(name: str, message: str, config: Optional[PresetsConfig] = None, **opts) -> str:
    """
    Frame a message with a named preset's defaults.

    Args:
        name: Preset name ("info", "warn", "success", "error" or a loaded one)
        message: Box content
        config: Where to look the preset up (built-ins when omitted)
        **opts: frame() options overriding the preset, top-level key by key

    Raises:
        KeyError: if the preset is unknown
    """
    box_preset = (config or PresetsConfig()).get(name)
    return frame(message, **box_preset.merge(opts))


def info(message: str, **opts) -> str:
    """A frame for an info message."""
    return preset("info", message, **opts)


def warn(message: str, **opts) -> str:
    """A frame for a warning message."""
    return preset("warn", message, **opts)


def success(message: str, **opts) -> str:
    """A frame for a success message."""
    return preset("success", message, **opts)


def error(message: str, **opts) -> str:
    """A frame for an error message."""
    return preset("error", message, **opts)
