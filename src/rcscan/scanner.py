"""Filtered directory walk that locates configuration files by name.

This module provides the FilteredTreeScanner class and the scan() convenience
function. A scan walks a directory tree iteratively, prunes directories whose
names appear in an exclusion set before they are ever opened, and returns the
relative paths of every file whose base name equals the target filename.
"""

import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set, Tuple

from rcscan.exceptions import EnumerationError, RootNotFoundError
from rcscan.exclusion_rules.base_rules import BaseExclusionRules
from rcscan.exclusion_rules.name_rules import DirectoryNameExclusionRules
from rcscan.types import PathType

DEFAULT_TARGET_FILENAME = ".blinkmrc.json"

ErrorCallback = Callable[[EnumerationError], None]


class FilteredTreeScanner:
    """Iterative depth-first scanner with exclusion pruning.

    The walk keeps an explicit LIFO frontier of directories waiting to be listed,
    seeded with the root. When a directory is listed, each child directory is
    checked against the exclusion rules and only pushed if it survives, so an
    excluded subtree is never opened. Symbolic links to directories are not
    followed; symbolic links to files are treated as files.

    Results are deduplicated and sorted lexicographically by their forward-slash
    relative path, so the output does not depend on the order in which the
    filesystem enumerates entries.

    Directory listing errors (permission denied, transient I/O failures) are not
    fatal: the failing directory's contents are skipped and, if an error callback
    was given, it receives an EnumerationError describing the failure.

    Attributes:
        root (Path): Absolute, normalized root directory of the scan.
        target_filename (str): Base name a file must have to match.
        name_rules (DirectoryNameExclusionRules): Directory names that are pruned.
        exclusion_rules (Optional[BaseExclusionRules]): Additional rules applied to
            directory paths (with a trailing slash) and candidate file paths.
        on_error (Optional[ErrorCallback]): Receives non-fatal enumeration errors.
        directories_visited (int): Directories listed during the last scan.
        directories_pruned (int): Directories skipped by exclusion during the last scan.

    Example:
        >>> scanner = FilteredTreeScanner(".", excluded_names=["vendor"])  # doctest: +SKIP
        >>> scanner.scan()  # doctest: +SKIP
        ['.blinkmrc.json', 'apps/web/.blinkmrc.json']
    """

    def __init__(
        self,
        root: PathType,
        target_filename: str = DEFAULT_TARGET_FILENAME,
        excluded_names: Optional[Iterable[str]] = None,
        include_default_excludes: bool = True,
        name_rules: Optional[DirectoryNameExclusionRules] = None,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        """Initialize a scanner and resolve its root.

        Args:
            root: Directory to scan. Relative paths are resolved against the current directory.
            target_filename: Base name a file must have to match.
            excluded_names: Directory names to exclude in addition to the defaults.
                Ignored when name_rules is given.
            include_default_excludes: Whether DEFAULT_EXCLUDED_DIRECTORIES are pruned.
                Ignored when name_rules is given.
            name_rules: A prepared exclusion set to use instead of building one.
            exclusion_rules: Optional further rules, such as gitignore-style patterns.
            on_error: Callback receiving non-fatal directory listing errors.

        Raises:
            RootNotFoundError: If the root does not exist or cannot be resolved.
            NotADirectoryError: If the root exists but is not a directory.
            ValueError: If target_filename is empty or contains a path separator.
        """
        if not target_filename or "/" in target_filename or os.sep in target_filename:
            raise ValueError(f"Target filename must be a base name: {target_filename!r}")

        try:
            resolved = Path(root).resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise RootNotFoundError(root) from e
        if not resolved.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {root}")

        self.root = resolved
        self.target_filename = target_filename
        if name_rules is None:
            name_rules = DirectoryNameExclusionRules(excluded_names, include_defaults=include_default_excludes)
        self.name_rules = name_rules
        self.exclusion_rules = exclusion_rules
        self.on_error = on_error
        self.directories_visited = 0
        self.directories_pruned = 0

    def scan(self) -> List[str]:
        """Walk the tree and collect the relative paths of matching files.

        Returns:
            Sorted, duplicate-free relative paths using forward slashes.

        Example:
            >>> import tempfile
            >>> from pathlib import Path
            >>> with tempfile.TemporaryDirectory() as tmpdir:
            ...     root = Path(tmpdir)
            ...     for d in ("a", "node_modules/b", "c"):
            ...         (root / d).mkdir(parents=True)
            ...         (root / d / ".cfg.json").touch()
            ...     FilteredTreeScanner(root, ".cfg.json", ["node_modules"]).scan()
            ['a/.cfg.json', 'c/.cfg.json']
        """
        self.directories_visited = 0
        self.directories_pruned = 0

        frontier: List[Tuple[Path, str]] = [(self.root, "")]
        matches: Set[str] = set()

        while frontier:
            directory, relative_dir = frontier.pop()
            entries = self._list_directory(directory)
            if entries is None:
                continue
            self.directories_visited += 1

            for entry in entries:
                relative_path = f"{relative_dir}/{entry.name}" if relative_dir else entry.name
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                    is_file = not is_dir and entry.is_file()
                except OSError:
                    continue

                if is_dir:
                    if self._is_pruned(entry.name, relative_path):
                        self.directories_pruned += 1
                        continue
                    frontier.append((Path(entry.path), relative_path))
                elif is_file and entry.name == self.target_filename:
                    if self.exclusion_rules is not None and self.exclusion_rules.exclude(relative_path):
                        continue
                    matches.add(relative_path)

        return sorted(matches)

    def _list_directory(self, directory: Path) -> Optional[List["os.DirEntry[str]"]]:
        """List a directory, reporting failures instead of raising them.

        Returns:
            The directory entries, or None if the directory could not be listed.
        """
        try:
            with os.scandir(directory) as it:
                return list(it)
        except OSError as e:
            if self.on_error is not None:
                self.on_error(EnumerationError(directory, e))
            return None

    def _is_pruned(self, name: str, relative_path: str) -> bool:
        # Ancestors were checked before being pushed, so only the new segment needs the name check.
        if self.name_rules.is_excluded_name(name):
            return True
        return self.exclusion_rules is not None and self.exclusion_rules.exclude(relative_path + "/")


def scan(
    root: PathType,
    excluded_names: Optional[Iterable[str]] = None,
    target_filename: str = DEFAULT_TARGET_FILENAME,
    *,
    include_default_excludes: bool = True,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    on_error: Optional[ErrorCallback] = None,
) -> List[str]:
    """Find files named target_filename under root, skipping excluded directories.

    Args:
        root: Directory to scan.
        excluded_names: Directory names to prune in addition to the defaults.
        target_filename: Base name a file must have to match.
        include_default_excludes: Whether DEFAULT_EXCLUDED_DIRECTORIES are pruned.
        exclusion_rules: Optional further rules, such as gitignore-style patterns.
        on_error: Callback receiving non-fatal directory listing errors.

    Returns:
        Sorted, duplicate-free relative paths of matching files.

    Raises:
        RootNotFoundError: If the root does not exist.
        NotADirectoryError: If the root is not a directory.
    """
    scanner = FilteredTreeScanner(
        root,
        target_filename=target_filename,
        excluded_names=excluded_names,
        include_default_excludes=include_default_excludes,
        exclusion_rules=exclusion_rules,
        on_error=on_error,
    )
    return scanner.scan()
