"""Exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec

from treefind.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules written in .gitignore syntax.

    Matching is delegated to the pathspec library, so globs, directory patterns
    ending in '/', negations starting with '!', '**' and comment lines behave as
    they do in Git. Rules from files and individually added patterns are kept in
    the order they were given; a later negation can re-include a path excluded by
    an earlier rule.

    Attributes:
        spec (PathSpec): Compiled matcher for the rules loaded so far.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("target/")
        >>> rules.exclude("target/")
        True
        >>> rules.exclude("src/main.rs")
        False
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("debug.log"), rules.exclude("keep.log")
        (True, False)
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize the rules, optionally loading them from files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns found in one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.is_file():
                raise FileNotFoundError(f"Rules file not found: {path}")
            with open(path, "r") as f:
                self._lines.extend(f.read().splitlines())

        self._compile()

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern, e.g. ``"*.pyc"`` or ``"!important.txt"``."""
        self._lines.append(rule)
        self._compile()

    def has_rules(self) -> bool:
        # Blank and comment lines compile to patterns with include=None
        return any(pattern.include is not None for pattern in self.spec.patterns)

    def _compile(self) -> None:
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)
