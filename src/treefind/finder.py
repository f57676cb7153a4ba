"""Builder-style API for finding files below a directory.

This module provides the Finder class, the main entry point for using treefind as a
library. Filters are added with chained builder methods and evaluated lazily by one
of the terminal operations.
"""

import sys
from typing import Callable, Iterator, List, Optional, TextIO

from treefind.exceptions import EntryReadError
from treefind.exclusion_rules.base_rules import BaseExclusionRules
from treefind.filters.extension_filter import ExtensionFilter
from treefind.filters.filter_set import FilterSet
from treefind.filters.pattern_filter import PatternFilter
from treefind.filters.predicate_filter import PredicateFilter
from treefind.filters.size_filters import MaxSizeFilter, MinSizeFilter
from treefind.options import DEFAULT_MAX_DEPTH, SearchOptions
from treefind.types import PathType
from treefind.walker.walker import WalkStats, Walker

# Label printed in front of every match by print_find()
MATCH_LABEL = "matching file: "


class Finder:
    """Finds files relative to a directory, narrowed down by filters.

    Builder methods add filters and return the Finder so calls can be chained.
    Nothing touches the filesystem until a terminal operation (``find``,
    ``iter_find`` or ``print_find``) runs. A pattern is compiled as soon as it is
    added, so an invalid one is reported before any traversal.

    Attributes:
        directory (PathType): Directory where searches start.
        filter_set (FilterSet): Filters added so far.
        max_depth (int): Depth used when a terminal operation is given none.
        exclusion_rules (Optional[BaseExclusionRules]): Rules pruning entries.
        follow_symlinks (bool): Whether symlinks are followed.
        sort_entries (bool): Whether siblings are visited in name order.

    Example:
        >>> finder = Finder("src").has_extension(".py").size_greater_than_or_eq(10)  # doctest: +SKIP
        >>> finder.find(depth=2)  # doctest: +SKIP
        ['src/treefind/finder.py', 'src/treefind/options.py']
    """

    def __init__(
        self,
        directory: PathType,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        follow_symlinks: bool = True,
        sort_entries: bool = True,
        on_error: Optional[Callable[[EntryReadError], None]] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.directory = directory
        self.filter_set = FilterSet()
        self.max_depth = max_depth
        self.exclusion_rules = exclusion_rules
        self.follow_symlinks = follow_symlinks
        self.sort_entries = sort_entries
        self.on_error = on_error
        self.should_stop = should_stop
        self._walker: Optional[Walker] = None

    @classmethod
    def from_options(
        cls,
        options: SearchOptions,
        *,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        on_error: Optional[Callable[[EntryReadError], None]] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> "Finder":
        """Create a Finder configured from a SearchOptions.

        Raises:
            InvalidPatternError: If options.pattern is not a valid regular expression.
        """
        finder = cls(
            options.root,
            max_depth=options.max_depth,
            exclusion_rules=exclusion_rules,
            follow_symlinks=options.follow_symlinks,
            sort_entries=options.sort_entries,
            on_error=on_error,
            should_stop=should_stop,
        )
        finder.filter_set = FilterSet.from_options(options)
        return finder

    def filter(self, predicate: Callable[[str], bool]) -> "Finder":
        """Retain files whose path string satisfies predicate."""
        self.filter_set.add(PredicateFilter(predicate))
        return self

    def has_extension(self, ext: str) -> "Finder":
        """Retain files whose name ends with ext (case sensitive)."""
        self.filter_set.add(ExtensionFilter(ext))
        return self

    def has_extension_case_insensitive(self, ext: str) -> "Finder":
        """Retain files whose name ends with ext, ignoring letter case."""
        self.filter_set.add(ExtensionFilter(ext, case_sensitive=False))
        return self

    def matches_regex(self, pattern: str) -> "Finder":
        """Retain files whose name contains a match for pattern.

        Raises:
            InvalidPatternError: If pattern is not a valid regular expression.
        """
        self.filter_set.add(PatternFilter(pattern))
        return self

    def size_greater_than_or_eq(self, size: int) -> "Finder":
        """Retain files of at least size bytes."""
        self.filter_set.add(MinSizeFilter(size))
        return self

    def size_less_than_or_eq(self, size: int) -> "Finder":
        """Retain files of at most size bytes."""
        self.filter_set.add(MaxSizeFilter(size))
        return self

    def exclude(self, rules: BaseExclusionRules) -> "Finder":
        """Prune entries matching rules from every subsequent search."""
        self.exclusion_rules = rules
        return self

    def iter_find(self, depth: Optional[int] = None) -> Iterator[str]:
        """Search lazily, yielding matching paths as they are found.

        Args:
            depth: Deepest level to visit. Defaults to the Finder's max_depth.

        Returns:
            Iterator over matching paths in depth-first pre-order.

        Raises:
            RootNotFoundError: If the directory does not exist.
            RootNotReadableError: If the directory is not a directory or cannot be listed.
        """
        self._walker = Walker(
            self.directory,
            self.filter_set,
            max_depth=self.max_depth if depth is None else depth,
            exclusion_rules=self.exclusion_rules,
            follow_symlinks=self.follow_symlinks,
            sort_entries=self.sort_entries,
            on_error=self.on_error,
            should_stop=self.should_stop,
        )
        return self._walker.walk()

    def find(self, depth: Optional[int] = None) -> List[str]:
        """Search and return every matching path.

        Args:
            depth: Deepest level to visit. Defaults to the Finder's max_depth.

        Raises:
            RootNotFoundError: If the directory does not exist.
            RootNotReadableError: If the directory is not a directory or cannot be listed.
        """
        return list(self.iter_find(depth))

    def print_find(self, depth: Optional[int] = None, file: Optional[TextIO] = None) -> int:
        """Search and print each match as it is found.

        Args:
            depth: Deepest level to visit. Defaults to the Finder's max_depth.
            file: Stream to print to. Defaults to sys.stdout.

        Returns:
            The number of matches printed.
        """
        out = file if file is not None else sys.stdout
        count = 0
        for path in self.iter_find(depth):
            print(f"{MATCH_LABEL}{path}", file=out)
            count += 1
        return count

    @property
    def stats(self) -> WalkStats:
        """Counters from the most recent search."""
        return self._walker.stats if self._walker is not None else WalkStats()

    @property
    def errors(self) -> List[EntryReadError]:
        """Entries skipped during the most recent search."""
        return list(self._walker.errors) if self._walker is not None else []
