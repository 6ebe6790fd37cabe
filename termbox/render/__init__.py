"""
Box rendering: content layout, border lines, frames and merging.
"""

from .content import infer_dimensions, format_content
from .title import (
    Title,
    top_space_taken,
    bottom_space_taken,
    top_border,
    bottom_border,
)
from .frame import GUTTER, frame, extract_style, resolve_content
from .merge import merge_boxes
from .presets import preset, info, warn, success, error

__all__ = [
    # Content
    "infer_dimensions",
    "format_content",
    # Titles
    "Title",
    "top_space_taken",
    "bottom_space_taken",
    "top_border",
    "bottom_border",
    # Frame
    "GUTTER",
    "frame",
    "extract_style",
    "resolve_content",
    # Merge
    "merge_boxes",
    # Presets
    "preset",
    "info",
    "warn",
    "success",
    "error",
]
