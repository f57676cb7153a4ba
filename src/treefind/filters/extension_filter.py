"""Filename suffix filter."""

from treefind.walker.dir_entry import DirEntry

from .base_filter import BaseFilter


class ExtensionFilter(BaseFilter):
    """Retains files whose name ends with a given extension.

    The extension is compared exactly as typed: no leading dot is added or removed,
    so ``"rs"`` matches ``"bars"`` while ``".rs"`` does not match ``"a.rsx"``.

    Attributes:
        extension (str): The required suffix.
        case_sensitive (bool): Whether letter case must match.

    Example:
        >>> from treefind.walker.dir_entry import DirEntry
        >>> rule = ExtensionFilter(".rs")
        >>> rule.matches(DirEntry("src/lib.rs", "lib.rs", 1))
        True
        >>> rule.matches(DirEntry("src/a.rsx", "a.rsx", 1))
        False
        >>> ExtensionFilter(".RS", case_sensitive=False).matches(DirEntry("src/lib.rs", "lib.rs", 1))
        True
    """

    def __init__(self, extension: str, case_sensitive: bool = True):
        self.extension = extension
        self.case_sensitive = case_sensitive
        self._suffix = extension if case_sensitive else extension.lower()

    def matches(self, entry: DirEntry) -> bool:
        name = entry.name if self.case_sensitive else entry.name.lower()
        return name.endswith(self._suffix)
