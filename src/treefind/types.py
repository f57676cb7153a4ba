from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(Enum):
    """Enumeration of entry types encountered during traversal.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link that is not being followed
        OTHER: FIFO, socket, device node or other special file
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"
