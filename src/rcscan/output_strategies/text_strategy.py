"""Plain text output strategy: one relative path per line."""

from pathlib import Path
from typing import Iterator, Sequence

from .base_strategy import OutputStrategy


class TextOutputStrategy(OutputStrategy):
    """Output strategy that writes each matching relative path on its own line.

    Example:
        >>> strategy = TextOutputStrategy()
        >>> list(strategy.format_matches(Path("/r"), ["a/.blinkmrc.json", "c/.blinkmrc.json"]))
        ['a/.blinkmrc.json\\n', 'c/.blinkmrc.json\\n']
        >>> list(strategy.format_matches(Path("/r"), []))
        []
    """

    def format_matches(self, root: Path, matches: Sequence[str]) -> Iterator[str]:
        for match in matches:
            yield f"{match}\n"
