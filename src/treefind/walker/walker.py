"""Depth-first traversal of a directory tree applying a FilterSet.

This module provides the Walker class, which enumerates the entries below a root
directory in pre-order, honours a depth limit and optional exclusion rules, and
yields the paths of the files accepted by a FilterSet.
"""

import os
import stat
from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterator, List, Optional, Tuple

from treefind.exceptions import EntryReadError, RootNotFoundError, RootNotReadableError
from treefind.exclusion_rules.base_rules import BaseExclusionRules
from treefind.filters.filter_set import FilterSet
from treefind.options import DEFAULT_MAX_DEPTH
from treefind.types import PathType
from treefind.walker.dir_entry import DirEntry
from treefind.walker.file_identifier import FileIdentifier

# (entry, root-relative path, identifiers of the directories containing the entry)
_Pending = Tuple[DirEntry, str, FrozenSet[FileIdentifier]]


@dataclass
class WalkStats:
    """Counters describing the most recent walk.

    Attributes:
        directories: Directories visited, including the root.
        files: Non-directory entries visited.
        matches: Entries reported as matches.
        errors: Entries or subtrees skipped because they could not be read.
    """

    directories: int = 0
    files: int = 0
    matches: int = 0
    errors: int = 0


class Walker:
    """Depth-first, pre-order search of a directory tree.

    Each visited entry is tested with the FilterSet; the paths of matching entries
    are yielded lazily in traversal order. Directories are descended into but never
    reported.

    Depth Accounting:
        The root is depth 0, its children depth 1, and so on. A directory at depth K
        is only listed when K + 1 <= max_depth, so entries deeper than max_depth are
        never visited at all.

    Error Handling:
        A root that does not exist, is not a directory, or cannot be listed raises
        immediately when walk() is called. Any other unreadable entry or subtree is
        recorded as an EntryReadError in ``errors``, passed to ``on_error`` if
        given, and skipped; the walk always continues.

    Symbolic Link Behavior:
        By default symlinks are followed like any other entry. While following, the
        walker tracks the (device, inode) of every directory on the current path and
        does not re-enter one, so symlink loops terminate. With follow_symlinks=False
        a symlink is visited as a plain entry and never descended into.

    Attributes:
        root_path (str): The root as given, used as the prefix of every yielded path.
        filter_set (FilterSet): Predicates deciding which entries are reported.
        max_depth (int): Deepest level visited.
        exclusion_rules (Optional[BaseExclusionRules]): Rules pruning entries and subtrees.
        follow_symlinks (bool): Whether symlinks are followed.
        sort_entries (bool): Whether siblings are visited in name order.
        errors (List[EntryReadError]): Entries skipped during the most recent walk.
        stats (WalkStats): Counters for the most recent walk.

    Example:
        >>> walker = Walker("src", FilterSet.from_options(SearchOptions("src", extension=".py")))  # doctest: +SKIP
        >>> for path in walker.walk():  # doctest: +SKIP
        ...     print(path)
        src/treefind/__init__.py
        src/treefind/finder.py
    """

    def __init__(
        self,
        root: PathType,
        filter_set: Optional[FilterSet] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        follow_symlinks: bool = True,
        sort_entries: bool = True,
        on_error: Optional[Callable[[EntryReadError], None]] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> None:
        """Initialize a Walker.

        Args:
            root: Directory where the search starts.
            filter_set: Filters to apply. Defaults to an empty set matching every file.
            max_depth: Deepest level to visit. Defaults to DEFAULT_MAX_DEPTH.
            exclusion_rules: Rules for pruning entries. Defaults to None.
            follow_symlinks: Whether to follow symbolic links. Defaults to True.
            sort_entries: Whether to visit siblings in name order. Defaults to True.
            on_error: Called with each EntryReadError as it is recorded.
            should_stop: Polled before each entry is visited; once it returns True the
                walk ends early, leaving stats describing the partial traversal.

        Raises:
            ValueError: If max_depth is negative.
        """
        if max_depth < 0:
            raise ValueError("max_depth cannot be negative")
        self.root_path = os.fspath(root)
        self.filter_set = filter_set if filter_set is not None else FilterSet()
        self.max_depth = max_depth
        self.exclusion_rules = exclusion_rules
        self.follow_symlinks = follow_symlinks
        self.sort_entries = sort_entries
        self.on_error = on_error
        self.should_stop = should_stop
        self.errors: List[EntryReadError] = []
        self.stats = WalkStats()

    def walk(self) -> Iterator[str]:
        """Start a walk and return an iterator over matching paths.

        The root is validated and listed before this method returns, so fatal errors
        surface here rather than on the first ``next()``. The returned iterator can
        only be consumed once; call walk() again for a fresh traversal.

        Returns:
            Iterator over the paths of matching entries, in pre-order.

        Raises:
            RootNotFoundError: If the root does not exist.
            RootNotReadableError: If the root is not a directory or cannot be listed.
        """
        self.errors = []
        self.stats = WalkStats()

        root_entry, root_id = self._resolve_root()
        ancestors: FrozenSet[FileIdentifier] = frozenset([root_id]) if self.follow_symlinks else frozenset()

        pending: List[_Pending] = []
        if self.max_depth >= 1:
            try:
                pending = self._list_children(root_entry, "", ancestors)
            except OSError as e:
                raise RootNotReadableError(self.root_path, e.strerror or str(e)) from e

        return self._traverse(root_entry, pending)

    def _resolve_root(self) -> Tuple[DirEntry, FileIdentifier]:
        try:
            stat_info = os.stat(self.root_path)
        except FileNotFoundError as e:
            raise RootNotFoundError(self.root_path) from e
        except OSError as e:
            raise RootNotReadableError(self.root_path, e.strerror or str(e)) from e

        if not stat.S_ISDIR(stat_info.st_mode):
            raise RootNotReadableError(self.root_path, "not a directory")

        name = os.path.basename(os.path.normpath(self.root_path))
        root_entry = DirEntry(self.root_path, name, 0, is_dir=True, is_symlink=os.path.islink(self.root_path))
        return root_entry, FileIdentifier.from_stat(stat_info)

    def _traverse(self, root_entry: DirEntry, pending: List[_Pending]) -> Iterator[str]:
        self._visit(root_entry)

        # Children are pushed in reverse so the first sibling is popped first
        stack = list(reversed(pending))
        while stack:
            if self.should_stop is not None and self.should_stop():
                return
            entry, relative_path, ancestors = stack.pop()
            if self._visit(entry):
                yield entry.path

            if entry.is_dir and entry.depth + 1 <= self.max_depth:
                try:
                    children = self._list_children(entry, relative_path, ancestors)
                except OSError as e:
                    self._record_error(entry.path, e)
                    continue
                stack.extend(reversed(children))

    def _visit(self, entry: DirEntry) -> bool:
        if entry.is_dir:
            self.stats.directories += 1
        else:
            self.stats.files += 1

        if self.filter_set.matches(entry):
            self.stats.matches += 1
            return True
        return False

    def _list_children(
        self, directory: DirEntry, relative_path: str, ancestors: FrozenSet[FileIdentifier]
    ) -> List[_Pending]:
        """Read the entries of a directory.

        Raises:
            OSError: If the directory itself cannot be identified or listed. Errors
                reading individual children are recorded and the child is skipped.
        """
        child_ancestors = ancestors
        if self.follow_symlinks and directory.depth > 0:
            file_id = FileIdentifier.from_path(directory.path)
            if file_id in ancestors:
                # Symlink loop: this directory is already being traversed
                return []
            child_ancestors = ancestors | {file_id}

        with os.scandir(directory.path) as it:
            os_entries = list(it)

        if self.sort_entries:
            os_entries.sort(key=lambda e: e.name)

        children: List[_Pending] = []
        for os_entry in os_entries:
            child_path = os.path.join(directory.path, os_entry.name)
            child_relative_path = f"{relative_path}/{os_entry.name}" if relative_path else os_entry.name
            try:
                child = DirEntry.from_os_entry(os_entry, child_path, directory.depth + 1, self.follow_symlinks)
            except OSError as e:
                self._record_error(child_path, e)
                continue

            if self._is_excluded(child, child_relative_path):
                continue
            children.append((child, child_relative_path, child_ancestors))
        return children

    def _is_excluded(self, entry: DirEntry, relative_path: str) -> bool:
        if self.exclusion_rules is None:
            return False
        if entry.is_dir:
            return self.exclusion_rules.exclude(relative_path + "/")
        return self.exclusion_rules.exclude(relative_path)

    def _record_error(self, path: str, error: OSError) -> None:
        entry_error = EntryReadError(path, error)
        self.errors.append(entry_error)
        self.stats.errors += 1
        if self.on_error is not None:
            self.on_error(entry_error)
