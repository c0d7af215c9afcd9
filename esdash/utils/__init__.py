"""Utility functions and classes for ESDash TUI."""

from esdash.utils.document_renderer import (
    RenderedLine,
    Segment,
    flatten_lines,
    highlight_line,
    highlight_token,
    render_document_lines,
)
from esdash.utils.text import clamp, drawer_width, result_id_width, truncate_string

__all__ = [
    # Document rendering
    "RenderedLine",
    "Segment",
    # Text
    "clamp",
    "drawer_width",
    "flatten_lines",
    "highlight_line",
    "highlight_token",
    "render_document_lines",
    "result_id_width",
    "truncate_string",
]
