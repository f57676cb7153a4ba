from typing import Optional


class InvalidPatternError(ValueError):
    """
    Exception raised when a filename pattern is not a valid regular expression.

    The pattern is compiled once, when the filter is built, so this error is always
    raised before any directory is traversed.

    Attributes:
        pattern (str): The pattern string that failed to compile.
        reason (str): The error message reported by the regular expression engine.

    Example:
        >>> error = InvalidPatternError("[a-", "unterminated character set at position 0")
        >>> str(error)
        "Invalid pattern '[a-': unterminated character set at position 0"
    """

    def __init__(self, pattern: str, reason: str) -> None:
        """
        Initialize the exception with the offending pattern.

        Args:
            pattern (str): The pattern string that failed to compile.
            reason (str): Why compilation failed.
        """
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern '{pattern}': {reason}")


class RootNotFoundError(FileNotFoundError):
    """
    Exception raised when the search root does not exist.

    Attributes:
        path (str): The root path that could not be found.

    Example:
        >>> error = RootNotFoundError("/no/such/dir")
        >>> str(error)
        'Root path does not exist: /no/such/dir'
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Root path does not exist: {path}")

    def __str__(self) -> str:
        return f"Root path does not exist: {self.path}"


class RootNotReadableError(OSError):
    """
    Exception raised when the search root exists but cannot be traversed.

    This covers a root that is not a directory as well as a root directory whose
    listing is denied.

    Attributes:
        path (str): The root path.
        reason (str): Human-readable description of the failure.

    Example:
        >>> error = RootNotReadableError("/etc/passwd", "not a directory")
        >>> str(error)
        'Root path is not readable: /etc/passwd (not a directory)'
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Root path is not readable: {path} ({reason})")

    def __str__(self) -> str:
        return f"Root path is not readable: {self.path} ({self.reason})"


class EntryReadError(OSError):
    """
    Exception describing an entry that was skipped during traversal.

    Entry errors are recoverable: the walker records them and continues with the
    next entry. They are never raised out of a walk.

    Attributes:
        path (str): Path of the entry that could not be read.
        cause (Optional[OSError]): The underlying operating system error, if any.

    Example:
        >>> error = EntryReadError("root/secret", PermissionError(13, "Permission denied"))
        >>> str(error)
        'Cannot read root/secret: [Errno 13] Permission denied'
    """

    def __init__(self, path: str, cause: Optional[OSError] = None) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read {path}: {cause}" if cause is not None else f"Cannot read {path}")

    def __str__(self) -> str:
        if self.cause is not None:
            return f"Cannot read {self.path}: {self.cause}"
        return f"Cannot read {self.path}"
