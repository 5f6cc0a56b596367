"""Domain model for size-annotated filesystem trees.

This package contains the non-rendering tree primitives:
- entry datatypes with a closed set of kind payloads
- filesystem scanning/build helpers with size aggregation
"""

from __future__ import annotations

from .types import DirectoryData, Entry, EntryData, FileData, FileTree, SymlinkData, UnknownData
from .fs import (
    build_file_tree,
    entry_from_dir_entry,
    leaf_entry_from_dir_entry,
    list_child_entries,
    root_entry_name,
)

__all__ = [
    "Entry",
    "EntryData",
    "FileData",
    "SymlinkData",
    "DirectoryData",
    "UnknownData",
    "FileTree",
    "root_entry_name",
    "leaf_entry_from_dir_entry",
    "entry_from_dir_entry",
    "list_child_entries",
    "build_file_tree",
]
