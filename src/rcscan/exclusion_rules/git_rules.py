"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from rcscan.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    Patterns are matched with the pathspec library exactly as Git would match them,
    including globs, directory-only patterns (ending in /), negations (starting
    with !), double-asterisk matching and comment lines.

    Rules can be loaded from files or added one at a time. Rules from all sources
    are combined in the order they were given, with later rules potentially
    overriding earlier ones (particularly for negation patterns with !).

    Attributes:
        spec (GitIgnoreSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("fixtures/")
        >>> rules.exclude("tests/fixtures/")
        True
        >>> rules.exclude("tests/fixtures/.blinkmrc.json")
        True
        >>> rules.add_rule("*.bak.json")
        >>> rules.exclude("a/.blinkmrc.bak.json")
        True

    Note:
        Paths provided to exclude() should use forward slashes (/) as separators and
        directories should carry a trailing slash, to match Git's behavior.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules with patterns from the specified files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded based on the loaded patterns.

        Args:
            path: Relative path to check.

        Returns:
            True if the last matching pattern for the path is not a negation.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("*.json")
            >>> rules.add_rule("!.blinkmrc.json")
            >>> rules.exclude("package.json")
            True
            >>> rules.exclude("app/.blinkmrc.json")
            False
        """
        return self.spec.match_file(path)

    def has_rules(self) -> bool:
        return bool(self.spec.patterns)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self._lines.extend(f.read().splitlines())

        self.spec = GitIgnoreSpec.from_lines(self._lines)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern directly.

        Args:
            rule: A single .gitignore pattern (e.g., "fixtures/", "!keep.json").
        """
        self._lines.append(rule)
        self.spec = GitIgnoreSpec.from_lines(self._lines)
