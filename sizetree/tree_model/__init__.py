"""Tree rendering helpers."""

from __future__ import annotations

from .rendering import (
    ANCESTOR_SEGMENT,
    CORNER_SEGMENT,
    TEE_SEGMENT,
    format_tree_line,
    iter_tree_lines,
    render_tree,
    write_tree,
)

__all__ = [
    "ANCESTOR_SEGMENT",
    "TEE_SEGMENT",
    "CORNER_SEGMENT",
    "format_tree_line",
    "iter_tree_lines",
    "write_tree",
    "render_tree",
]
