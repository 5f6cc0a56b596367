"""Filesystem scanning and size-aggregated tree construction.

Directories are listed with ``os.scandir`` over byte paths so entry names and
symlink targets stay raw. Any ``OSError`` aborts the whole build unchanged.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .types import DirectoryData, Entry, FileData, FileTree, SymlinkData, UnknownData


def root_entry_name(path: Path) -> bytes:
    """Return the raw last component of ``path``, or ``b""`` when it has none."""
    # ``..`` names a parent, not a component.
    if path.name == "..":
        return b""
    return os.fsencode(path.name)


@dataclass
class _PendingDirectory:
    """Directory whose listing is taken but whose children are not all built."""

    name: bytes
    remaining: Iterator[os.DirEntry[bytes]]
    entries: list[Entry] = field(default_factory=list)
    size: int = 0

    def add(self, entry: Entry) -> None:
        self.entries.append(entry)
        self.size += entry.size


def _scan_directory(directory: bytes | str | Path) -> Iterator[os.DirEntry[bytes]]:
    """List ``directory`` fully and close the handle before returning."""
    with os.scandir(os.fsencode(directory)) as listing:
        return iter(list(listing))


def leaf_entry_from_dir_entry(dir_entry: os.DirEntry[bytes]) -> Entry:
    """Build the entry for a child already known not to be a directory."""
    name = dir_entry.name

    if dir_entry.is_symlink():
        target = os.readlink(dir_entry.path)
        return Entry(name=name, size=0, data=SymlinkData(target=target))

    if dir_entry.is_file(follow_symlinks=False):
        stat = dir_entry.stat(follow_symlinks=False)
        return Entry(name=name, size=int(stat.st_size), data=FileData())

    return Entry(name=name, size=0, data=UnknownData())


def entry_from_dir_entry(dir_entry: os.DirEntry[bytes]) -> Entry:
    """Classify one listed child without following symlinks and build its entry."""
    if dir_entry.is_dir(follow_symlinks=False):
        children, size = list_child_entries(dir_entry.path)
        return Entry(name=dir_entry.name, size=size, data=DirectoryData(children=children))
    return leaf_entry_from_dir_entry(dir_entry)


def list_child_entries(directory: bytes | str | Path) -> tuple[tuple[Entry, ...], int]:
    """Build entries for every child of ``directory`` and their total size.

    Children keep ``os.scandir`` enumeration order. Nested directories are
    walked with an explicit stack, so depth is not limited by the interpreter
    recursion limit. Each listing handle is closed before its children are
    visited.
    """
    stack = [_PendingDirectory(name=b"", remaining=_scan_directory(directory))]
    while True:
        pending = stack[-1]
        dir_entry = next(pending.remaining, None)
        if dir_entry is not None:
            if dir_entry.is_dir(follow_symlinks=False):
                stack.append(_PendingDirectory(name=dir_entry.name, remaining=_scan_directory(dir_entry.path)))
            else:
                pending.add(leaf_entry_from_dir_entry(dir_entry))
            continue

        stack.pop()
        children = tuple(pending.entries)
        if not stack:
            return children, pending.size
        stack[-1].add(Entry(name=pending.name, size=pending.size, data=DirectoryData(children=children)))


def build_file_tree(root_path: str | os.PathLike[str]) -> FileTree:
    """Build a size-annotated tree rooted at ``root_path``.

    The root is always listed as a directory. Raises ``OSError`` on the first
    failing listing, link read, or stat call.
    """
    path = Path(root_path)
    children, size = list_child_entries(path)
    root_entry = Entry(
        name=root_entry_name(path),
        size=size,
        data=DirectoryData(children=children),
    )
    return FileTree(root_path=path, root_entry=root_entry)


__all__ = [
    "root_entry_name",
    "leaf_entry_from_dir_entry",
    "entry_from_dir_entry",
    "list_child_entries",
    "build_file_tree",
]
