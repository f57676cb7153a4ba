"""Directory tree search utilities.

This package provides a small traversal-and-filter engine for finding files
below a directory by depth, extension, filename pattern and size, together
with a command-line front end.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("treefind")
except PackageNotFoundError:
    __version__ = "unknown"
