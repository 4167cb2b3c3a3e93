"""Exclusion of directories by name, regardless of where they sit in the tree."""

from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set, Union

from rcscan.types import PathType

from .base_rules import BaseExclusionRules

# Build-artifact and VCS directories that never hold project configuration
DEFAULT_EXCLUDED_DIRECTORIES = ("node_modules", "dist", "build", "out", ".git")


class DirectoryNameExclusionRules(BaseExclusionRules):
    """Exclusion rules matching individual path segments against a set of directory names.

    A path is excluded when ANY of its segments equals one of the configured names,
    compared case-insensitively. Matching is done per segment, so excluding ``dist``
    prunes ``pkg/dist/`` and ``pkg/DIST/`` but leaves ``pkg/redistribute/`` alone.

    The set starts from ``DEFAULT_EXCLUDED_DIRECTORIES`` (unless disabled) and grows
    with ``add_rule``/``load_rules``. Duplicates collapse because names are stored
    case-folded.

    Attributes:
        names (List[str]): The merged, case-folded exclusion names in sorted order.

    Example:
        >>> rules = DirectoryNameExclusionRules(["Vendor"])
        >>> rules.exclude("node_modules/")
        True
        >>> rules.exclude("a/VENDOR/b/")
        True
        >>> rules.exclude("redistribute/")
        False
        >>> DirectoryNameExclusionRules(include_defaults=False).has_rules()
        False
    """

    def __init__(self, names: Optional[Iterable[str]] = None, include_defaults: bool = True) -> None:
        """Initialize the rules with the default names and any additions.

        Args:
            names: Additional directory names to exclude.
            include_defaults: Whether to start from DEFAULT_EXCLUDED_DIRECTORIES.

        Raises:
            ValueError: If any name contains a path separator.
        """
        self._names: Set[str] = set()
        if include_defaults:
            for name in DEFAULT_EXCLUDED_DIRECTORIES:
                self.add_rule(name)
        for name in names or ():
            self.add_rule(name)

    @property
    def names(self) -> List[str]:
        return sorted(self._names)

    def exclude(self, path: str) -> bool:
        """Check if any segment of the path is an excluded directory name.

        Args:
            path: Relative path using forward slashes. A trailing slash is allowed.

        Returns:
            True if any segment case-insensitively equals an excluded name.
        """
        if not self._names:
            return False
        return any(segment.casefold() in self._names for segment in path.split("/") if segment)

    def is_excluded_name(self, name: str) -> bool:
        """Check a single directory name against the exclusion set.

        Args:
            name: A bare directory name (not a path).

        Returns:
            True if the name case-insensitively equals an excluded name.
        """
        return name.casefold() in self._names

    def has_rules(self) -> bool:
        return bool(self._names)

    def add_rule(self, rule: str) -> None:
        """Add a directory name to the exclusion set.

        Surrounding whitespace and trailing slashes are stripped; empty names are ignored.

        Args:
            rule: A directory name such as "coverage" or "tmp/".

        Raises:
            ValueError: If the name contains a path separator.
        """
        name = rule.strip().rstrip("/\\")
        if not name:
            return
        if "/" in name or "\\" in name:
            raise ValueError(f"Excluded directory must be a name, not a path: {rule}")
        self._names.add(name.casefold())

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load directory names from one or more files, one name per line.

        Blank lines and lines starting with "#" are skipped.

        Args:
            rules_files: Path(s) to file(s) listing directory names.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            ValueError: If any listed name contains a path separator.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                for line in f.read().splitlines():
                    if line.strip().startswith("#"):
                        continue
                    self.add_rule(line)
