from abc import ABC, abstractmethod

from treefind.walker.dir_entry import DirEntry


class BaseFilter(ABC):
    """
    Abstract base class defining the interface for a single search filter.

    A filter is one user-specified predicate (extension, pattern, size bound, ...)
    that a file must satisfy to be reported. Filters only look at metadata already
    present on the entry and have no side effects. Combining filters and excluding
    directories is the job of FilterSet.

    Example:
        >>> from treefind.walker.dir_entry import DirEntry
        >>> class NonEmptyFilter(BaseFilter):
        ...     def matches(self, entry: DirEntry) -> bool:
        ...         return entry.size > 0
        >>> NonEmptyFilter().matches(DirEntry("a.txt", "a.txt", 1, size=3))
        True
        >>> NonEmptyFilter().matches(DirEntry("b.txt", "b.txt", 1, size=0))
        False
    """

    @abstractmethod
    def matches(self, entry: DirEntry) -> bool:
        """
        Determine whether an entry satisfies this filter.

        Args:
            entry (DirEntry): The entry to check. Callers only pass regular
                files, but implementations must not rely on it.

        Returns:
            bool: True if the entry passes this filter, False otherwise.
        """
        pass
