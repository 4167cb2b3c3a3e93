from abc import ABC, abstractmethod
from typing import Sequence, Union

from rcscan.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for directory and file exclusion rules.

    This class serves as a contract for the rule types (directory names, gitignore-style
    patterns, combinations of both) that decide which parts of a tree a scan skips.
    All implementations must provide logic for checking if a given relative path should
    be excluded. File loading and individual rule addition are optional capabilities
    that depend on the rule type.

    Paths handed to ``exclude`` are relative to the scan root and use forward slashes.
    Directory paths carry a trailing slash so pattern-based rules can tell them apart
    from files.

    Example:
        >>> from rcscan.exclusion_rules.name_rules import DirectoryNameExclusionRules
        >>> rules = DirectoryNameExclusionRules()
        >>> rules.add_rule("vendor")
        >>> rules.exclude("lib/Vendor/")
        True
        >>> rules.exclude("lib/vendored/")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded based on the loaded rules.

        Args:
            path (str): The file or directory path to check, relative to the scan root.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def has_rules(self) -> bool:
        """
        Report whether any rule is configured.

        Returns:
            bool: True unless the subclass knows it holds no rules.
        """
        return True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Rule types that don't support file operations use this default implementation,
        which raises NotImplementedError.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add. The format depends on the specific
                implementation (e.g., a directory name like "node_modules" or a pattern like "*.bak").

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
