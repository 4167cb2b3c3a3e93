"""Bundling of matched files into a zip archive that preserves their layout."""

import shutil
import tempfile
from pathlib import Path, PurePosixPath
from typing import Sequence

from rcscan.exceptions import ArchiveError
from rcscan.types import PathType

DEFAULT_ARCHIVE_NAME = "blinkmrc-files.zip"


def _archive_destination(destination: PathType) -> Path:
    """Return the absolute archive path, ending in a lowercase .zip suffix."""
    path = Path(destination)
    if path.suffix.lower() == ".zip":
        path = path.with_suffix(".zip")
    else:
        path = path.with_name(path.name + ".zip")
    return path.absolute()


def _staged_relative_path(relative_path: str) -> PurePosixPath:
    """Validate that a matched path stays inside the root it is relative to."""
    path = PurePosixPath(relative_path.replace("\\", "/"))
    if path.is_absolute() or ".." in path.parts or not path.parts:
        raise ArchiveError(f"Matched path is not relative to the scan root: {relative_path}")
    return path


def archive(root: PathType, matched_files: Sequence[str], destination: PathType) -> Path:
    """Stage matched files in a temporary directory and compress them into one zip file.

    Every file is copied into a fresh staging directory at its path relative to root,
    then the staged tree is compressed into destination, replacing any existing
    archive there. The staging directory is removed whether or not compression
    succeeds.

    Args:
        root: The directory the matched paths are relative to.
        matched_files: Relative paths produced by a prior scan.
        destination: Where to write the archive. ".zip" is appended if missing.

    Returns:
        The absolute path of the archive that was written.

    Raises:
        ValueError: If matched_files is empty.
        ArchiveError: If a path escapes root, or staging or compression fails.

    Example:
        >>> import tempfile
        >>> import zipfile
        >>> from pathlib import Path
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     root = Path(tmpdir) / "project"
        ...     (root / "app").mkdir(parents=True)
        ...     _ = (root / "app" / ".blinkmrc.json").write_text("{}")
        ...     written = archive(root, ["app/.blinkmrc.json"], Path(tmpdir) / "configs")
        ...     print(written.name, zipfile.ZipFile(written).read("app/.blinkmrc.json"))
        configs.zip b'{}'
    """
    if not matched_files:
        raise ValueError("At least one matched file is required to create an archive")

    root_path = Path(root)
    archive_path = _archive_destination(destination)
    relative_paths = [_staged_relative_path(f) for f in matched_files]

    with tempfile.TemporaryDirectory(prefix="rcscan-staging-") as staging_dir:
        staging = Path(staging_dir)
        for relative_path in relative_paths:
            source = root_path.joinpath(*relative_path.parts)
            target = staging.joinpath(*relative_path.parts)
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(source, target)
            except OSError as e:
                raise ArchiveError(f"Cannot stage {relative_path}: {e}", destination=archive_path) from e

        try:
            archive_path.parent.mkdir(parents=True, exist_ok=True)
            if archive_path.exists() or archive_path.is_symlink():
                archive_path.unlink()
            # make_archive appends the format's extension to base_name itself
            base_name = str(archive_path.with_suffix(""))
            created = shutil.make_archive(base_name, "zip", root_dir=staging)
        except (OSError, shutil.Error) as e:
            raise ArchiveError(f"Cannot create archive {archive_path}: {e}", destination=archive_path) from e

    return Path(created)
