"""Tests for rcscan exception types."""

from pathlib import Path

from rcscan.exceptions import ArchiveError, EnumerationError, MatchesFoundError, RootNotFoundError


def test_root_not_found_error():
    error = RootNotFoundError(Path("/missing/root"))
    assert error.path == "/missing/root"
    assert str(error) == "Root path does not exist: /missing/root"
    assert isinstance(error, FileNotFoundError)


def test_enumeration_error_wraps_original():
    original = PermissionError(13, "Permission denied")
    error = EnumerationError("/r/locked", original)
    assert error.path == "/r/locked"
    assert error.original is original
    assert error.errno == 13
    assert str(error) == "Cannot list directory /r/locked: Permission denied"
    assert isinstance(error, OSError)


def test_enumeration_error_without_strerror():
    error = EnumerationError("/r/x", OSError("weird failure"))
    assert str(error) == "Cannot list directory /r/x: weird failure"


def test_archive_error():
    error = ArchiveError("Cannot create archive", destination=Path("out.zip"))
    assert str(error) == "Cannot create archive"
    assert error.destination == Path("out.zip")
    assert ArchiveError("no destination").destination is None


def test_matches_found_error():
    error = MatchesFoundError(3)
    assert error.count == 3
    assert str(error) == "Found 3 matching file(s)"
