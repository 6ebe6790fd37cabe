"""
Tests for border glyphs and border option parsing.
"""

import dataclasses
import re

import pytest

from termbox.core.border import Border
from termbox.core.glyphs import (
    BOX_CHARS,
    GLYPH_KINDS,
    corner_char,
    corner_top_left_char,
    cross_char,
    divider_down_char,
    line_char,
    pipe_char,
)
from termbox.errors import InvalidBorderConfig, InvalidBorderValue


class TestGlyphs:
    """Tests for the glyph lookup table."""

    def test_every_set_has_every_kind(self):
        for glyphs in BOX_CHARS.values():
            assert tuple(glyphs) == GLYPH_KINDS

    def test_light_cross(self):
        assert corner_char("cross", "light") == "┼"

    def test_thick_line_and_pipe(self):
        assert line_char("thick") == "═"
        assert pipe_char("thick") == "║"

    def test_ascii_glyphs(self):
        assert corner_top_left_char("ascii") == "+"
        assert line_char("ascii") == "-"
        assert pipe_char("ascii") == "|"

    def test_accessors_default_to_light(self):
        assert corner_top_left_char() == "┌"
        assert divider_down_char() == "┬"
        assert cross_char() == "┼"

    def test_round_corners(self):
        assert corner_char("corner_top_left", "round") == "╭"
        assert corner_char("corner_bottom_right", "round") == "╯"

    def test_unknown_kind_rejected(self):
        with pytest.raises(InvalidBorderValue, match="'dot'"):
            corner_char("dot", "light")

    def test_unknown_set_rejected(self):
        with pytest.raises(InvalidBorderValue, match="'dotted'"):
            corner_char("line", "dotted")


class TestBorderParse:
    """Tests for Border.parse()."""

    def test_glyph_set_name(self):
        border = Border.parse("thick")
        assert border.type == "thick"
        assert border.top == "line"
        assert border.left == "pipe"
        assert border.top_left == "corner_top_left"

    def test_mapping_defaults_to_light(self):
        border = Border.parse({"top": False})
        assert border.type == "light"
        assert border.top is None
        assert border.bottom == "line"

    def test_true_means_natural_kind(self):
        border = Border.parse({"left": True, "top_right": True})
        assert border.left == "pipe"
        assert border.top_right == "corner_top_right"

    def test_corner_override(self):
        border = Border.parse({"top_left": "cross", "bottom_right": "divider_up"})
        assert border.corner("top_left") == "┼"
        assert border.corner("bottom_right") == "┴"

    def test_corner_hidden_with_its_side(self):
        border = Border.parse({"left": False})
        assert border.corner("top_left") == ""
        assert border.corner("bottom_left") == ""
        assert border.corner("top_right") == "┐"

    def test_hidden_corner(self):
        border = Border.parse({"top_right": None})
        assert border.corner("top_right") == ""

    def test_border_passes_through(self):
        border = Border(type="ascii")
        assert Border.parse(border) is border

    def test_thickness(self):
        border = Border.parse({"top": False, "right": 0})
        assert border.thickness("top") == 0
        assert border.thickness("right") == 0
        assert border.thickness("bottom") == 1
        assert border.thickness("left") == 1

    def test_immutable(self):
        border = Border.parse("light")
        with pytest.raises(dataclasses.FrozenInstanceError):
            border.top = None


class TestBorderParseErrors:
    """Tests for rejected border options."""

    def test_unknown_side_value(self):
        with pytest.raises(InvalidBorderValue) as exc_info:
            Border.parse({"left": "unknown"})
        assert str(exc_info.value) == "Invalid border value: 'unknown' for 'left'"
        assert not isinstance(exc_info.value, InvalidBorderConfig)

    def test_unknown_corner_value(self):
        with pytest.raises(InvalidBorderValue, match="'diamond' for 'bottom_left'"):
            Border.parse({"bottom_left": "diamond"})

    def test_list_rejected(self):
        message = "Wrong value `['unknown']` for 'border' configuration option"
        with pytest.raises(InvalidBorderConfig, match=re.escape(message)):
            Border.parse(["unknown"])

    def test_unknown_name_rejected(self):
        with pytest.raises(InvalidBorderConfig):
            Border.parse("dotted")

    def test_unknown_key_rejected(self):
        with pytest.raises(InvalidBorderConfig, match="colour"):
            Border.parse({"colour": "red"})

    def test_unknown_type_rejected(self):
        with pytest.raises(InvalidBorderConfig):
            Border.parse({"type": "double"})

    def test_shape_error_is_a_border_value_error(self):
        """Callers catching InvalidBorderValue see both kinds of failure."""
        with pytest.raises(InvalidBorderValue):
            Border.parse(42)
