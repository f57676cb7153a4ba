"""Search configuration shared by the library and the command-line interface."""

from dataclasses import dataclass
from typing import Optional

from treefind.types import PathType

# Default depth limit; deep enough to mean "unbounded" in practice
DEFAULT_MAX_DEPTH = 99999


@dataclass(frozen=True)
class SearchOptions:
    """Immutable description of a single search.

    Attributes:
        root: Directory where the search starts.
        max_depth: Deepest level whose entries are visited. The root is depth 0.
        extension: Required filename suffix, compared exactly as given.
        pattern: Regular expression searched for in each filename.
        size_greater_than: Inclusive lower bound on file size in bytes.
        size_less_than: Inclusive upper bound on file size in bytes.
        ignore_case: Compare the extension case-insensitively.
        follow_symlinks: Descend into symlinked directories.
        sort_entries: Visit siblings in name order instead of listing order.

    Note:
        A lower size bound above the upper bound is accepted and simply matches
        nothing.

    Example:
        >>> options = SearchOptions("src", extension=".py", max_depth=2)
        >>> options.extension
        '.py'
        >>> SearchOptions("src", max_depth=-1)
        Traceback (most recent call last):
            ...
        ValueError: max_depth cannot be negative
    """

    root: PathType
    max_depth: int = DEFAULT_MAX_DEPTH
    extension: Optional[str] = None
    pattern: Optional[str] = None
    size_greater_than: Optional[int] = None
    size_less_than: Optional[int] = None
    ignore_case: bool = False
    follow_symlinks: bool = True
    sort_entries: bool = True

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError("max_depth cannot be negative")
        for name in ("size_greater_than", "size_less_than"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} cannot be negative")
