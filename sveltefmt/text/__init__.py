"""Text offsets and ranges into parser input."""

from sveltefmt.text.text import (
    Located,
    TextRange,
    get_text,
    loc_end,
    loc_start,
    node_range,
    offset_to_line_col,
    slice_text_range,
)

__all__ = [
    "Located",
    "TextRange",
    "get_text",
    "loc_end",
    "loc_start",
    "node_range",
    "offset_to_line_col",
    "slice_text_range",
]
