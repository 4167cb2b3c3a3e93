"""Signal handling for the rcscan CLI.

Tracks SIGPIPE (output pipe closed, e.g. when piping into ``head``) and SIGINT
(Ctrl+C) so the CLI can stop writing, clean up and exit with the conventional
status code instead of printing a traceback.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Dict, Optional

EXIT_SIGINT = 130
EXIT_SIGPIPE = 141


class SignalHandler:
    """Records interrupting signals and restores the previous handlers afterwards.

    Attributes:
        sigpipe_received: Set once SIGPIPE has been delivered.
        sigint_received: Set once SIGINT has been delivered.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self._previous: Dict[int, Any] = {}

    @property
    def interrupted(self) -> bool:
        """True once either SIGPIPE or SIGINT has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def install(self) -> None:
        """Route SIGPIPE (where the platform has it) and SIGINT to this handler."""
        if hasattr(signal, "SIGPIPE"):
            self._previous[signal.SIGPIPE] = signal.signal(signal.SIGPIPE, self._handle)
        self._previous[signal.SIGINT] = signal.signal(signal.SIGINT, self._handle)

    def _handle(self, signum: int, frame: Optional[FrameType]) -> None:
        if signum == signal.SIGINT:
            self.sigint_received.set()
        else:
            self.sigpipe_received.set()
        # A second delivery of the same signal gets the original behavior
        previous = self._previous.pop(signum, signal.SIG_DFL)
        signal.signal(signum, previous if previous is not None else signal.SIG_DFL)

    def exit_code(self) -> Optional[int]:
        """Exit status implied by the signals received, or None if none were."""
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None

    def reset(self) -> None:
        """Forget received signals. Used between CLI invocations in one process."""
        self.sigpipe_received.clear()
        self.sigint_received.clear()


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the application's signal handler."""
    signal_handler.install()


def cleanup() -> None:
    """Silence stdout at exit after an interruption so shutdown emits no further errors."""
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
