from abc import ABC, abstractmethod
from typing import Sequence, Union

from treefind.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class for rules that prune entries from a search.

    Unlike filters, which decide whether a file is reported, exclusion rules decide
    whether an entry is visited at all. An excluded directory is not descended into,
    so nothing below it can match.

    Paths passed to ``exclude`` are relative to the search root, use forward slashes,
    and carry a trailing slash for directories.

    Example:
        >>> class TmpExclusionRules(BaseExclusionRules):
        ...     def exclude(self, path: str) -> bool:
        ...         return path.endswith('.tmp')
        >>> rules = TmpExclusionRules()
        >>> rules.exclude("build/temp.tmp")
        True
        >>> rules.exclude("main.py")
        False
        >>> rules.add_rule("*.log")
        Traceback (most recent call last):
            ...
        NotImplementedError: TmpExclusionRules doesn't support adding individual rules.
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be skipped.

        Args:
            path (str): Root-relative path using '/' separators. Directories end
                with '/'.

        Returns:
            bool: True if the path should be excluded, False if it should be visited.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The rule to add. The format depends on the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
