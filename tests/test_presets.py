"""
Tests for preset message boxes.
"""

import pytest

from termbox import error, info, preset, success, warn
from termbox.config import DEFAULT_PRESETS, PresetsConfig
from termbox.text.ansi import strip_ansi


class TestMessagePresets:
    """Tests for info/warn/success/error."""

    def test_info(self):
        box = info("Deploy finished")
        rows = strip_ansi(box).splitlines()
        assert rows[0].startswith("╔ ℹ INFO ═")
        assert rows[0].endswith("╗")
        assert "Deploy finished" in rows[2]
        assert len(rows) == 5
        assert "\x1b[104m" in box
        assert "\x1b[30m" in box

    def test_warn_title(self):
        assert " ⚠ WARNING " in strip_ansi(warn("careful"))

    def test_success_title(self):
        assert " ✔ OK " in strip_ansi(success("done"))

    def test_error_colors(self):
        box = error("failed")
        assert " ⨯ ERROR " in strip_ansi(box)
        assert "\x1b[41m" in box
        assert "\x1b[97m" in box

    def test_override_replaces_title(self):
        rows = strip_ansi(warn("x", title={"bottom_right": " ! "})).splitlines()
        assert "WARNING" not in rows[0]
        assert rows[-1].endswith(" ! ╝")

    def test_style_override_is_shallow(self):
        """Overriding style drops the preset's border colors too."""
        first_row = info("x", style={"bg": "red"}).splitlines()[0]
        assert strip_ansi(first_row) == first_row

    def test_border_override(self):
        rows = info("x", border="ascii").splitlines()
        assert strip_ansi(rows[0]).startswith("+ ℹ INFO ")


class TestPreset:
    """Tests for preset()."""

    def test_named_preset_matches_helper(self):
        assert preset("success", "ok") == success("ok")

    def test_unknown_preset(self):
        with pytest.raises(KeyError, match="nope"):
            preset("nope", "x")

    def test_builtins_untouched_by_overrides(self):
        info("x", padding=0, title={})
        assert DEFAULT_PRESETS["info"].padding == 1
        assert DEFAULT_PRESETS["info"].title == {"top_left": " ℹ INFO "}

    def test_preset_mutation_does_not_leak(self):
        PresetsConfig().get("info").style["bg"] = "red"
        assert "\x1b[41m" not in info("x")
        assert "\x1b[104m" in info("x")
