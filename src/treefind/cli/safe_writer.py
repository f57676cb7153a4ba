"""Signal-aware output writing for the treefind CLI."""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from treefind.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes search output to a file descriptor, stopping on SIGPIPE or SIGINT.

    Attributes:
        fd: The file descriptor being written to.
        lines_written: Number of lines written so far.
    """

    def __init__(self, file: Union[int, Path]):
        """Initialize the safe writer.

        Args:
            file: A file descriptor (e.g. ``sys.stdout.fileno()``) or a path to open
                for writing.

        Raises:
            TypeError: If file is neither an int nor path-like.
        """
        self._closed = False
        self.lines_written = 0

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write_line(self, line: str) -> None:
        """Write one line of output followed by a newline.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is closed.
            OSError: If another I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        data = (line + "\n").encode("utf-8", errors="surrogateescape")
        try:
            while data:
                written = os.write(self.fd, data)
                data = data[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise
        self.lines_written += 1

    def close(self) -> None:
        """Close the file if this writer opened it; broken pipes on close are ignored."""
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # Prioritize an exception already raised in the with block
            if exc_type is None:
                raise
