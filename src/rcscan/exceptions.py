from pathlib import Path
from typing import Optional

from rcscan.types import PathType


class RootNotFoundError(FileNotFoundError):
    """
    Exception raised when the root of a scan does not exist or cannot be resolved.

    This is the only fatal error a scan can produce. It is raised before any
    directory is listed, so no partial results are ever returned alongside it.

    Attributes:
        path (str): The root path exactly as it was supplied by the caller.

    Example:
        >>> error = RootNotFoundError("/no/such/dir")
        >>> str(error)
        'Root path does not exist: /no/such/dir'
        >>> isinstance(error, FileNotFoundError)
        True
    """

    def __init__(self, path: PathType) -> None:
        """
        Initialize the exception with the unresolvable root path.

        Args:
            path (PathType): The root path that could not be resolved.
        """
        self.path = str(path)
        super().__init__(f"Root path does not exist: {self.path}")

    def __str__(self) -> str:
        return self.args[0]


class EnumerationError(OSError):
    """
    Exception describing a failure to list the contents of a single directory.

    Enumeration errors are never fatal. The scanner wraps the underlying
    ``OSError`` in this type, hands it to the caller's error callback (if any),
    skips the directory's contents and continues the walk elsewhere.

    Attributes:
        path (str): The directory that could not be listed.
        original (OSError): The error raised by the directory listing call.

    Example:
        >>> error = EnumerationError("/r/private", PermissionError(13, "Permission denied"))
        >>> str(error)
        'Cannot list directory /r/private: Permission denied'
    """

    def __init__(self, path: PathType, original: OSError) -> None:
        """
        Initialize the exception from the failing directory and its original error.

        Args:
            path (PathType): The directory that could not be listed.
            original (OSError): The error raised while listing it.
        """
        self.path = str(path)
        self.original = original
        reason = original.strerror or str(original)
        super().__init__(original.errno, f"Cannot list directory {self.path}: {reason}")

    def __str__(self) -> str:
        return self.args[1]


class ArchiveError(Exception):
    """
    Exception raised when staging or compressing matched files fails.

    An archive failure aborts only the archive step; a match listing that was
    already produced is unaffected. The temporary staging area is always
    removed before this exception propagates.

    Attributes:
        destination (Optional[Path]): The archive path that was being written, if known.

    Example:
        >>> error = ArchiveError("Cannot stage a/.blinkmrc.json: No such file", destination=Path("out.zip"))
        >>> str(error)
        'Cannot stage a/.blinkmrc.json: No such file'
        >>> error.destination.name
        'out.zip'
    """

    def __init__(self, message: str, destination: Optional[Path] = None) -> None:
        self.destination = destination
        super().__init__(message)


class MatchesFoundError(Exception):
    """
    Exception raised when matches are found and the caller asked to fail on any match.

    Attributes:
        count (int): Number of matching files found.

    Example:
        >>> str(MatchesFoundError(2))
        'Found 2 matching file(s)'
    """

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Found {count} matching file(s)")
