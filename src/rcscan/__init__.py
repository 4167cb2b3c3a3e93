"""Configuration file discovery utilities.

This package provides tools for locating configuration files (such as
``.blinkmrc.json``) beneath a directory tree while pruning build-artifact
directories, and for bundling the files found into a single zip archive.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("rcscan")
except PackageNotFoundError:
    __version__ = "unknown"
