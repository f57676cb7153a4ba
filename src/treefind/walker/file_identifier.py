"""Device/inode identity used to detect symlink loops."""

import os
from dataclasses import dataclass

from treefind.types import PathType


@dataclass(frozen=True)
class FileIdentifier:
    """Uniquely identifies a directory by device and inode number.

    Two paths reaching the same directory (for example through a symbolic link)
    produce equal identifiers, which is what the walker relies on to avoid
    re-entering a directory that is already being traversed.

    Attributes:
        device_id (int): The device ID from stat information.
        inode_number (int): The inode number from stat information.

    Example:
        >>> FileIdentifier(1, 42) == FileIdentifier(1, 42)
        True
        >>> len({FileIdentifier(1, 42), FileIdentifier(1, 42), FileIdentifier(2, 42)})
        2
    """

    device_id: int
    inode_number: int

    @classmethod
    def from_stat(cls, stat_result: os.stat_result) -> "FileIdentifier":
        return cls(stat_result.st_dev, stat_result.st_ino)

    @classmethod
    def from_path(cls, path: PathType) -> "FileIdentifier":
        """Identify the directory at path, following symlinks.

        Raises:
            OSError: If the path cannot be stat'ed.
        """
        return cls.from_stat(os.stat(path))
