"""Command-line front door for sizetree.

Parses the single directory argument, builds the size-annotated tree, and
prints its rendering. Filesystem failures exit non-zero without output.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .file_tree_model import build_file_tree
from .tree_model import render_tree


def _describe_os_error(exc: OSError, fallback: Path) -> str:
    """Format ``exc`` as ``<path>: <reason>`` for the exit message."""
    filename = exc.filename if exc.filename is not None else fallback
    reason = exc.strerror or str(exc)
    return f"{os.fsdecode(filename)}: {reason}"


def main() -> None:
    """Parse CLI arguments, build the tree for the given directory, print it."""
    parser = argparse.ArgumentParser(
        prog="sizetree",
        description="Print a directory tree with box-drawing connectors.",
    )
    parser.add_argument("dir", help="Directory to walk.")
    args = parser.parse_args()

    path = Path(args.dir)
    try:
        file_tree = build_file_tree(path)
    except OSError as exc:
        raise SystemExit(f"sizetree: {_describe_os_error(exc, path)}") from exc

    sys.stdout.write(render_tree(file_tree.root_entry))


if __name__ == "__main__":
    main()
