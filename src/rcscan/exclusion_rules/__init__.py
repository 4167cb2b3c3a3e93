"""Exclusion rules for pruning directories and filtering files."""

from .base_rules import BaseExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .name_rules import DEFAULT_EXCLUDED_DIRECTORIES, DirectoryNameExclusionRules

__all__ = [
    "BaseExclusionRules",
    "DEFAULT_EXCLUDED_DIRECTORIES",
    "DirectoryNameExclusionRules",
    "GitIgnoreExclusionRules",
]
