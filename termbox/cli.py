"""
Command line entry point: draw a box around text.

    termbox "Drawing a box in" "terminal emulator" --padding 3 --align center
    echo "done" | termbox --preset success
"""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import PresetsConfig
from .core.glyphs import GLYPH_SETS
from .render.frame import frame
from .render.presets import preset
from .text.formatting import ALIGNMENTS

TITLE_KEYS = (
    "top_left",
    "top_center",
    "top_right",
    "bottom_left",
    "bottom_center",
    "bottom_right",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termbox",
        description="Draw a bordered box around text in the terminal",
    )
    parser.add_argument("text", nargs="*", help="Lines of content (read from stdin when omitted)")
    parser.add_argument("--width", type=int, help="Box width including borders")
    parser.add_argument("--height", type=int, help="Box height including borders")
    parser.add_argument("--top", type=int, help="Terminal row (needs --left)")
    parser.add_argument("--left", type=int, help="Terminal column (needs --top)")
    parser.add_argument("--align", choices=ALIGNMENTS, default="left")
    parser.add_argument("--padding", type=int, nargs="+", metavar="N",
                        help="1-4 values, CSS shorthand order")
    parser.add_argument("--border", choices=GLYPH_SETS, help="Glyph set")
    for key in TITLE_KEYS:
        parser.add_argument(f"--title-{key.replace('_', '-')}", dest=f"title_{key}", metavar="TEXT")
    parser.add_argument("--fg", help="Content foreground color")
    parser.add_argument("--bg", help="Content background color")
    parser.add_argument("--border-fg", help="Border foreground color")
    parser.add_argument("--border-bg", help="Border background color")
    parser.add_argument("--count", type=int, default=1, help="Copies drawn side by side")
    parser.add_argument("--preset", help="Named preset (info, warn, success, error, ...)")
    parser.add_argument("--presets-file", type=Path, help="JSON file with extra presets")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def options_from_args(args: argparse.Namespace) -> dict:
    """frame() keyword options for the flags that were actually given."""
    opts = {"align": args.align, "count": args.count}
    for name in ("width", "height", "top", "left"):
        value = getattr(args, name)
        if value is not None:
            opts[name] = value
    if args.padding is not None:
        opts["padding"] = args.padding
    if args.border is not None:
        opts["border"] = args.border

    title = {key: getattr(args, f"title_{key}") for key in TITLE_KEYS}
    title = {key: value for key, value in title.items() if value is not None}
    if title:
        opts["title"] = title

    style = {}
    if args.fg:
        style["fg"] = args.fg
    if args.bg:
        style["bg"] = args.bg
    border_style = {}
    if args.border_fg:
        border_style["fg"] = args.border_fg
    if args.border_bg:
        border_style["bg"] = args.border_bg
    if border_style:
        style["border"] = border_style
    if style:
        opts["style"] = style
    return opts


def read_content(args: argparse.Namespace) -> list[str]:
    if args.text:
        return args.text
    if not sys.stdin.isatty():
        return [sys.stdin.read()]
    return []


def main(argv=None) -> int:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    if (args.top is None) != (args.left is None):
        parser.error("--top and --left must be given together")

    opts = options_from_args(args)
    content = read_content(args)

    try:
        if args.preset:
            config = PresetsConfig.load(args.presets_file) if args.presets_file else PresetsConfig()
            output = preset(args.preset, "\n".join(content), config=config, **opts)
        else:
            output = frame(*content, **opts)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    sys.stdout.write(output)
    if opts.get("top") is not None:
        sys.stdout.write("\n")
    sys.stdout.flush()
    return 0
