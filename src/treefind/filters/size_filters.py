"""Size-bound filters for retaining files by byte size."""

from typing import Union

from humanfriendly import parse_size

from treefind.walker.dir_entry import DirEntry

from .base_filter import BaseFilter


def parse_file_size(size: Union[str, int]) -> int:
    """Parse a byte count or human-readable file size to bytes.

    Args:
        size: Size like ``1024``, ``'1024'``, ``'10K'``, ``'2.5MB'`` or ``'1 KiB'``.

    Returns:
        Size in bytes.

    Raises:
        ValueError: If size is negative or not a valid size format.

    Example:
        >>> parse_file_size("1KiB")
        1024
        >>> parse_file_size(20)
        20
    """
    if isinstance(size, bool) or not isinstance(size, (str, int)):
        raise ValueError(f"size must be string or int, got {type(size)}")

    if isinstance(size, int):
        size_bytes = size
    else:
        try:
            size_bytes = int(parse_size(size))
        except Exception as e:
            raise ValueError(f"Invalid size format '{size}': {e}") from e

    if size_bytes < 0:
        raise ValueError("Size cannot be negative")
    return size_bytes


class MinSizeFilter(BaseFilter):
    """Retains files whose size is greater than or equal to a threshold.

    Attributes:
        min_size_bytes (int): Inclusive lower bound in bytes.

    Example:
        >>> from treefind.walker.dir_entry import DirEntry
        >>> rule = MinSizeFilter(10)
        >>> rule.matches(DirEntry("b.rs", "b.rs", 1, size=10))
        True
        >>> rule.matches(DirEntry("c.rs", "c.rs", 1, size=2))
        False
    """

    def __init__(self, min_size: Union[str, int]):
        self.min_size_bytes = parse_file_size(min_size)

    def matches(self, entry: DirEntry) -> bool:
        return entry.size >= self.min_size_bytes


class MaxSizeFilter(BaseFilter):
    """Retains files whose size is less than or equal to a threshold.

    Attributes:
        max_size_bytes (int): Inclusive upper bound in bytes.

    Example:
        >>> from treefind.walker.dir_entry import DirEntry
        >>> rule = MaxSizeFilter("1KB")
        >>> rule.max_size_bytes
        1000
        >>> rule.matches(DirEntry("a.txt", "a.txt", 1, size=1000))
        True
    """

    def __init__(self, max_size: Union[str, int]):
        self.max_size_bytes = parse_file_size(max_size)

    def matches(self, entry: DirEntry) -> bool:
        return entry.size <= self.max_size_bytes
