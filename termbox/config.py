"""
Preset configuration.

A preset is a named set of frame() defaults (title, border, padding, style).
The four built-in presets back info()/warn()/success()/error(); more can be
loaded from a JSON file shaped like:

    {"presets": {"note": {"title": {"top_left": " NOTE "}, "padding": 1}}}
"""

import copy
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


@dataclass
class BoxPreset:
    """Frame defaults for one preset."""
    name: str
    title: dict = field(default_factory=dict)
    border: Any = "light"
    padding: Any = 0
    style: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "title": copy.deepcopy(self.title),
            "border": copy.deepcopy(self.border),
            "padding": copy.deepcopy(self.padding),
            "style": copy.deepcopy(self.style),
        }

    @classmethod
    def from_dict(cls, name: str, data: dict) -> "BoxPreset":
        return cls(
            name=name,
            title=data.get("title", {}),
            border=data.get("border", "light"),
            padding=data.get("padding", 0),
            style=data.get("style", {}),
        )

    def merge(self, overrides: dict) -> dict:
        """
        Frame options for this preset with caller overrides applied.

        Merging is shallow: an override replaces the whole top-level value,
        so passing style={"bg": ...} also drops the preset's border style.
        """
        return {**self.to_dict(), **overrides}


def _message_preset(name: str, label: str, fg: str, bg: str) -> BoxPreset:
    return BoxPreset(
        name=name,
        title={"top_left": label},
        border={"type": "thick"},
        padding=1,
        style={"fg": fg, "bg": bg, "border": {"fg": fg, "bg": bg}},
    )


DEFAULT_PRESETS = {
    "info": _message_preset("info", " ℹ INFO ", "black", "bright_blue"),
    "warn": _message_preset("warn", " ⚠ WARNING ", "black", "bright_yellow"),
    "success": _message_preset("success", " ✔ OK ", "black", "bright_green"),
    "error": _message_preset("error", " ⨯ ERROR ", "bright_white", "red"),
}


class PresetsConfig:
    """
    Named presets: the built-ins plus any loaded from a presets file.

    Presets from the file replace built-ins of the same name.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = path
        self.presets: dict[str, BoxPreset] = {
            name: BoxPreset.from_dict(name, p.to_dict())
            for name, p in DEFAULT_PRESETS.items()
        }

    @classmethod
    def load(cls, path: Path) -> "PresetsConfig":
        """Load presets from file, keeping only the built-ins if it can't be read."""
        path = Path(path)
        config = cls(path)

        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    data = json.load(f)

                loaded = {
                    name: BoxPreset.from_dict(name, preset_data)
                    for name, preset_data in data.get("presets", {}).items()
                }
                config.presets.update(loaded)
            except (json.JSONDecodeError, OSError, AttributeError) as e:
                logger.warning("Could not load presets from %s: %s", path, e)
        else:
            logger.debug("No presets file at %s, using built-ins", path)

        return config

    def save(self):
        """Write every preset (built-ins included) back to the presets file."""
        data = {
            "presets": {name: p.to_dict() for name, p in self.presets.items()}
        }
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def get(self, name: str) -> BoxPreset:
        """Look up a preset, raising KeyError for unknown names."""
        try:
            return self.presets[name]
        except KeyError:
            available = ", ".join(sorted(self.presets))
            raise KeyError(f"Unknown preset '{name}'. Available: {available}") from None

    def names(self) -> list[str]:
        return sorted(self.presets)
