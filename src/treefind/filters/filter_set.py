"""Conjunction of search filters."""

from typing import Iterable, List, Optional

from treefind.options import SearchOptions
from treefind.types import FileType
from treefind.walker.dir_entry import DirEntry

from .base_filter import BaseFilter
from .extension_filter import ExtensionFilter
from .pattern_filter import PatternFilter
from .size_filters import MaxSizeFilter, MinSizeFilter


class FilterSet:
    """The set of active filters for one search.

    An entry is a match when it is a regular file and every constituent filter
    accepts it (logical AND). With no filters at all, every regular file matches.
    Directories are traversed by the walker but never reported; special files
    (FIFOs, sockets, devices) and unfollowed symlinks are never reported either.

    Filters are evaluated in the order they were added and evaluation stops at the
    first rejecting filter. ``from_options`` orders them so that the cheap suffix
    and size comparisons run before the regular expression.

    Attributes:
        filters (List[BaseFilter]): The constituent filters.

    Example:
        >>> from treefind.walker.dir_entry import DirEntry
        >>> filter_set = FilterSet([ExtensionFilter(".rs"), MinSizeFilter(10)])
        >>> filter_set.matches(DirEntry("root/sub/b.rs", "b.rs", 2, size=20))
        True
        >>> filter_set.matches(DirEntry("root/sub/c.rs", "c.rs", 2, size=2))
        False
        >>> filter_set.matches(DirEntry("root/sub", "sub", 1, is_dir=True))
        False
    """

    def __init__(self, filters: Optional[Iterable[BaseFilter]] = None):
        """Initialize the filter set.

        Args:
            filters: Filters to combine. Defaults to none, which matches every file.

        Raises:
            TypeError: If any filter doesn't implement BaseFilter.
        """
        self.filters: List[BaseFilter] = []
        for rule in filters or ():
            self.add(rule)

    @classmethod
    def from_options(cls, options: SearchOptions) -> "FilterSet":
        """Build the filter set described by a SearchOptions.

        Args:
            options: The search configuration.

        Returns:
            A FilterSet with one filter per option that is set.

        Raises:
            InvalidPatternError: If options.pattern is not a valid regular expression.
        """
        filters: List[BaseFilter] = []
        if options.extension is not None:
            filters.append(ExtensionFilter(options.extension, case_sensitive=not options.ignore_case))
        if options.size_greater_than is not None:
            filters.append(MinSizeFilter(options.size_greater_than))
        if options.size_less_than is not None:
            filters.append(MaxSizeFilter(options.size_less_than))
        if options.pattern is not None:
            filters.append(PatternFilter(options.pattern))
        return cls(filters)

    def add(self, rule: BaseFilter) -> None:
        """Add another filter to the conjunction.

        Args:
            rule: The filter to add.

        Raises:
            TypeError: If rule doesn't implement BaseFilter.
        """
        if not isinstance(rule, BaseFilter):
            raise TypeError(f"Filter must implement BaseFilter, got {type(rule)}")
        self.filters.append(rule)

    def matches(self, entry: DirEntry) -> bool:
        """Check whether an entry should be reported.

        Args:
            entry: The entry to test.

        Returns:
            True if the entry is a regular file and passes every filter.
        """
        if entry.file_type is not FileType.FILE:
            return False
        return all(rule.matches(entry) for rule in self.filters)

    def is_empty(self) -> bool:
        return not self.filters

    def __len__(self) -> int:
        return len(self.filters)

    def __repr__(self) -> str:
        return f"FilterSet({self.filters!r})"
