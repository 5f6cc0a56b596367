"""Domain datatypes for size-annotated filesystem tree entries."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileData:
    """Regular file payload; the byte length lives on ``Entry.size``."""


@dataclass(frozen=True)
class SymlinkData:
    """Symbolic link payload holding the raw, unresolved link target."""

    target: bytes


@dataclass(frozen=True)
class DirectoryData:
    """Directory payload with children in filesystem enumeration order."""

    children: tuple["Entry", ...] = ()


@dataclass(frozen=True)
class UnknownData:
    """Any entry that is neither file, symlink, nor directory."""


EntryData = FileData | SymlinkData | DirectoryData | UnknownData


@dataclass(frozen=True)
class Entry:
    """One tree node: raw name, aggregated byte size, and kind payload."""

    name: bytes
    size: int
    data: EntryData

    @property
    def is_dir(self) -> bool:
        """Return whether this entry carries directory children."""
        return isinstance(self.data, DirectoryData)

    @property
    def children(self) -> tuple["Entry", ...]:
        """Return directory children, or an empty tuple for leaf kinds."""
        if isinstance(self.data, DirectoryData):
            return self.data.children
        return ()

    @property
    def display_name(self) -> str:
        """Lossy text form of ``name``; undecodable bytes become U+FFFD."""
        return self.name.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class FileTree:
    """Built tree plus the supplied root path as a ``Path`` (identity only)."""

    root_path: Path
    root_entry: Entry


__all__ = [
    "FileData",
    "SymlinkData",
    "DirectoryData",
    "UnknownData",
    "EntryData",
    "Entry",
    "FileTree",
]
