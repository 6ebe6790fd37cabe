"""
Tests for titles in border lines.
"""

import re

import pytest

from termbox.colors import Styler
from termbox.core.border import Border
from termbox.errors import InvalidTitleValue, TitleTooLongError
from termbox.render.title import (
    Title,
    bottom_border,
    bottom_space_taken,
    top_border,
    top_space_taken,
)
from termbox.text.ansi import strip_ansi


class TestTitle:
    """Tests for Title.from_dict()."""

    def test_none_is_empty(self):
        assert Title.from_dict(None) == Title()

    def test_unknown_keys_ignored(self):
        title = Title.from_dict({"top_left": "x", "middle": "y"})
        assert title.top_left == "x"
        assert title.edge("top") == ("x", "", "")

    def test_none_value_is_empty(self):
        assert Title.from_dict({"bottom_right": None}).bottom_right == ""

    def test_non_mapping_rejected(self):
        message = "Wrong value `['x']` for 'title' configuration option"
        with pytest.raises(InvalidTitleValue, match=re.escape(message)):
            Title.from_dict(["x"])


class TestSpaceTaken:
    """Tests for top_space_taken() / bottom_space_taken()."""

    def test_corners_only(self):
        assert top_space_taken(Title(), Border()) == 2

    def test_titles_counted(self):
        title = Title(top_left=" A ", top_right="BC")
        assert top_space_taken(title, Border()) == 7
        assert bottom_space_taken(title, Border()) == 2

    def test_hidden_side_drops_corner(self):
        border = Border.parse({"left": False})
        assert top_space_taken(Title(), border) == 1

    def test_hidden_corner(self):
        border = Border.parse({"bottom_left": False, "bottom_right": False})
        assert bottom_space_taken(Title(bottom_center="hi"), border) == 2


class TestBorderLines:
    """Tests for top_border() / bottom_border()."""

    def test_plain(self):
        assert top_border(Title(), 10, Border()) == "┌────────┐"

    def test_left_title(self):
        assert top_border(Title(top_left="ab"), 10, Border()) == "┌ab──────┐"

    def test_center_title(self):
        assert top_border(Title(top_center="ab"), 10, Border()) == "┌───ab───┐"

    def test_center_title_odd_space_after(self):
        assert top_border(Title(top_center="ab"), 11, Border()) == "┌───ab────┐"

    def test_right_title(self):
        assert top_border(Title(top_right="x"), 6, Border()) == "┌───x┐"

    def test_bottom_thick(self):
        line = bottom_border(Title(bottom_center="hi"), 8, Border(type="thick"))
        assert line == "╚══hi══╝"

    def test_hidden_left_side(self):
        assert top_border(Title(), 5, Border.parse({"left": False})) == "────┐"

    def test_too_long(self):
        with pytest.raises(TitleTooLongError):
            top_border(Title(top_left="abcdef"), 5, Border())

    def test_segments_styled(self):
        red = Styler().fg("red")
        line = top_border(Title(), 4, Border(), fg=red)
        assert line == "\x1b[31m┌\x1b[0m\x1b[31m─\x1b[0m\x1b[31m─\x1b[0m\x1b[31m┐\x1b[0m"
        assert strip_ansi(line) == "┌──┐"
