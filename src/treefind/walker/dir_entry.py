"""Metadata snapshot for a single entry encountered during traversal."""

import os
from dataclasses import dataclass

from treefind.types import FileType


@dataclass(frozen=True)
class DirEntry:
    """A file or directory visited by the walker.

    Attributes:
        path (str): Path of the entry, built from the root path as given.
        name (str): The entry's basename.
        depth (int): Containment steps from the search root (root is 0).
        is_dir (bool): True if the entry is traversed as a directory.
        is_symlink (bool): True if the entry itself is a symbolic link.
        is_file (bool): True if the entry is a regular file. Only regular files are
            ever reported as matches.
        size (int): Size in bytes. Only meaningful for non-directories.

    Example:
        >>> entry = DirEntry("root/sub/b.rs", "b.rs", 2, is_dir=False, size=20)
        >>> entry.file_type
        <FileType.FILE: 'file'>
    """

    path: str
    name: str
    depth: int
    is_dir: bool = False
    is_symlink: bool = False
    size: int = 0
    is_file: bool = True

    @property
    def file_type(self) -> FileType:
        if self.is_dir:
            return FileType.DIRECTORY
        if self.is_file:
            return FileType.FILE
        if self.is_symlink:
            return FileType.SYMLINK
        return FileType.OTHER

    @classmethod
    def from_os_entry(cls, entry: "os.DirEntry[str]", path: str, depth: int, follow_symlinks: bool = True) -> "DirEntry":
        """Build a DirEntry from an ``os.scandir`` result.

        Args:
            entry: The entry returned by ``os.scandir``.
            path: Path to record for the entry.
            depth: Depth of the entry relative to the search root.
            follow_symlinks: Whether symlinks are resolved to their targets.

        Returns:
            The populated DirEntry.

        Raises:
            OSError: If the entry's type or metadata cannot be read, including a
                symlink whose target no longer exists.
        """
        is_symlink = entry.is_symlink()
        is_dir = entry.is_dir(follow_symlinks=follow_symlinks)
        is_file = entry.is_file(follow_symlinks=follow_symlinks)
        size = 0 if is_dir else entry.stat(follow_symlinks=follow_symlinks).st_size
        return cls(path, entry.name, depth, is_dir=is_dir, is_symlink=is_symlink, size=size, is_file=is_file)
