"""Adapter turning an arbitrary callable into a filter."""

from typing import Callable

from treefind.walker.dir_entry import DirEntry

from .base_filter import BaseFilter


class PredicateFilter(BaseFilter):
    """Wraps a user-supplied predicate that receives the entry's path string.

    Example:
        >>> from treefind.walker.dir_entry import DirEntry
        >>> rule = PredicateFilter(lambda path: "n" in path)
        >>> rule.matches(DirEntry("src/main.rs", "main.rs", 1))
        True
    """

    def __init__(self, predicate: Callable[[str], bool]):
        if not callable(predicate):
            raise TypeError(f"predicate must be callable, got {type(predicate).__name__}")
        self.predicate = predicate

    def matches(self, entry: DirEntry) -> bool:
        return bool(self.predicate(entry.path))
