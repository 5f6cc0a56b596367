"""Text rendering for built trees using box-drawing connector segments."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

from ..file_tree_model import Entry

ANCESTOR_SEGMENT = " │"
TEE_SEGMENT = " ├"
CORNER_SEGMENT = " └"


def format_tree_line(entry: Entry, depth: int, is_last: bool) -> str:
    """Render one row (without line break) for ``entry`` at ``depth``."""
    if depth <= 0:
        return entry.display_name
    connector = CORNER_SEGMENT if is_last else TEE_SEGMENT
    return f"{ANCESTOR_SEGMENT * depth}{connector}{entry.display_name}"


def iter_tree_lines(entry: Entry) -> Iterator[str]:
    """Yield rendered rows depth-first, pre-order, in stored child order.

    Uses an explicit stack of ``(entry, depth, is_last)`` so deep trees do not
    hit the interpreter recursion limit.
    """
    stack: list[tuple[Entry, int, bool]] = [(entry, 0, True)]
    while stack:
        node, depth, is_last = stack.pop()
        yield format_tree_line(node, depth, is_last)
        children = node.children
        last_idx = len(children) - 1
        # Pushed in reverse so the first child pops first.
        for idx in range(last_idx, -1, -1):
            stack.append((children[idx], depth + 1, idx == last_idx))


def write_tree(entry: Entry, out: TextIO) -> None:
    """Stream rendered rows into ``out``, each terminated by a line break."""
    for line in iter_tree_lines(entry):
        out.write(line)
        out.write("\n")


def render_tree(entry: Entry) -> str:
    """Return the whole rendered tree as text ending in a line break."""
    return "".join(f"{line}\n" for line in iter_tree_lines(entry))


__all__ = [
    "ANCESTOR_SEGMENT",
    "TEE_SEGMENT",
    "CORNER_SEGMENT",
    "format_tree_line",
    "iter_tree_lines",
    "write_tree",
    "render_tree",
]
