"""Regular-expression filter applied to filenames."""

import re
from typing import Pattern

from treefind.exceptions import InvalidPatternError
from treefind.walker.dir_entry import DirEntry

from .base_filter import BaseFilter


class PatternFilter(BaseFilter):
    """Retains files whose name contains a match for a regular expression.

    The expression is compiled once, when the filter is created, and searched for
    anywhere in the bare filename (not the full path). Anchors must be written
    explicitly by the caller.

    Attributes:
        pattern (str): The pattern as given by the user.
        regex (Pattern[str]): The compiled expression.

    Example:
        >>> from treefind.walker.dir_entry import DirEntry
        >>> rule = PatternFilter("^b")
        >>> rule.matches(DirEntry("root/sub/b.rs", "b.rs", 2))
        True
        >>> rule.matches(DirEntry("root/b/a.txt", "a.txt", 2))
        False
        >>> PatternFilter("[a-")
        Traceback (most recent call last):
            ...
        treefind.exceptions.InvalidPatternError: Invalid pattern '[a-': unterminated character set at position 0
    """

    def __init__(self, pattern: str):
        """Compile the pattern.

        Args:
            pattern: Regular expression in Python ``re`` syntax.

        Raises:
            InvalidPatternError: If the pattern is not a valid regular expression.
        """
        self.pattern = pattern
        try:
            self.regex: Pattern[str] = re.compile(pattern)
        except re.error as e:
            raise InvalidPatternError(pattern, str(e)) from e

    def matches(self, entry: DirEntry) -> bool:
        return self.regex.search(entry.name) is not None
