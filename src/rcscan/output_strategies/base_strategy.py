"""Output strategy base class defining the interface for match list formatting.

This module provides the abstract base class that defines how a scan's match
list is rendered. Each concrete strategy produces the complete output for one
OutputFormat as a stream of newline-terminated chunks, so the CLI can write it
incrementally through a signal-aware writer.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, Sequence


class OutputStrategy(ABC):
    """Abstract base class for match list output strategies.

    Example:
        >>> class UpperStrategy(OutputStrategy):
        ...     def format_matches(self, root, matches):
        ...         for match in matches:
        ...             yield match.upper() + "\\n"
        >>> list(UpperStrategy().format_matches(Path("/r"), ["a/.rc"]))
        ['A/.RC\\n']
    """

    @abstractmethod
    def format_matches(self, root: Path, matches: Sequence[str]) -> Iterator[str]:
        """Render a match list.

        Args:
            root: Absolute root directory the matches are relative to.
            matches: Sorted relative paths of the matching files.

        Yields:
            Output chunks, each ending with a newline.
        """
        pass
