"""JSON output strategy for match lists.

This module provides a strategy for rendering the whole match list as a single
JSON array, suitable for consumption by other tools.
"""

import json
from pathlib import Path
from typing import Iterator, Sequence

from .base_strategy import OutputStrategy


class JSONOutputStrategy(OutputStrategy):
    """Output strategy that formats the match list as one JSON array of relative paths.

    The array is pretty-printed with a two-space indent. An empty match list is
    rendered as ``[]`` so the output is always valid JSON.

    Attributes:
        indent (int): Indentation passed to the JSON encoder.

    Example:
        >>> strategy = JSONOutputStrategy()
        >>> print("".join(strategy.format_matches(Path("/r"), ["a/.rc.json"])), end="")
        [
          "a/.rc.json"
        ]
        >>> "".join(strategy.format_matches(Path("/r"), []))
        '[]\\n'
    """

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def format_matches(self, root: Path, matches: Sequence[str]) -> Iterator[str]:
        yield json.dumps(list(matches), indent=self.indent) + "\n"
