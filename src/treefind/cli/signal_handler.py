"""Signal handling utilities for the treefind CLI.

SIGPIPE (output pipe closed, e.g. when piping to `head`) and SIGINT (Ctrl+C) only
set flags here; the writer checks them and stops, and main() turns them into
exit codes.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Optional

# Shell convention: 128 + signal number
EXIT_SIGINT = 130
EXIT_SIGPIPE = 141


class SignalHandler:
    """Records SIGPIPE and SIGINT so a search can stop cleanly.

    Attributes:
        sigpipe_received: Event that is set when a SIGPIPE signal is received.
        sigint_received: Event that is set when a SIGINT signal is received.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(signal.SIGPIPE) if hasattr(signal, "SIGPIPE") else None
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        signal.signal(signal.SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    def interrupted(self) -> bool:
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Exit status owed to a received signal, SIGPIPE taking precedence, or None."""
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None

    def reset(self) -> None:
        self.sigpipe_received.clear()
        self.sigint_received.clear()


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the handlers. SIGPIPE only exists on Unix-like systems."""
    if hasattr(signal, "SIGPIPE"):
        signal.signal(signal.SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Silence stdout at exit after an interruption to avoid shutdown noise."""
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
