"""Signal-aware output writing for the rcscan CLI."""

import errno
import os
import types
from pathlib import Path
from typing import Iterable, Optional, Type, Union

from rcscan.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes text to a file descriptor or a file, stopping cleanly on interruption.

    Writes go straight to the descriptor with ``os.write`` so that output from
    several writers sharing stdout stays in call order. A closed pipe surfaces
    as BrokenPipeError, which callers treat as "stop writing".

    Attributes:
        fd: The file descriptor being written to.
    """

    def __init__(self, target: Union[int, str, os.PathLike]):
        """Initialize the writer.

        Args:
            target: A file descriptor (not closed by the writer) or a path to create or truncate.

        Raises:
            TypeError: If target is neither a descriptor nor a path.
        """
        self._file_obj = None
        self._closed = False

        if isinstance(target, bool) or not isinstance(target, (int, str, os.PathLike)):
            raise TypeError(f"Expected int, str, or PathLike, got {type(target).__name__}")
        if isinstance(target, int):
            self.fd = target
        else:
            self._file_obj = Path(target).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()

    def write(self, data: str) -> None:
        """Write data unless an interrupting signal has been received.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the pipe is closed.
            ValueError: If the writer is closed.
            OSError: For any other I/O failure.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")
        if signal_handler.interrupted:
            raise BrokenPipeError()

        payload = data.encode("utf-8")
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def write_all(self, chunks: Iterable[str]) -> None:
        """Write every chunk in order."""
        for chunk in chunks:
            self.write(chunk)

    def close(self) -> None:
        """Close the underlying file if this writer opened it. Idempotent."""
        if self._closed:
            return
        self._closed = True
        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

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
            # An exception from the with block takes priority over a close failure
            if exc_type is None:
                raise
