"""Object list output strategy: one JSON object per matching file."""

import json
from pathlib import Path, PurePosixPath
from typing import Iterator, Sequence

from .base_strategy import OutputStrategy


class ObjectListOutputStrategy(OutputStrategy):
    """Output strategy that describes each match as a JSON object on its own line.

    Each line has the structure:
    {"path": "relative/path", "fullPath": "/absolute/path", "name": "base name"}

    Lines are independent JSON documents (JSON Lines), so the output can be
    filtered with line-oriented tools or loaded record by record.

    Example:
        >>> strategy = ObjectListOutputStrategy()
        >>> list(strategy.format_matches(Path("/r"), ["a/.rc.json"]))
        ['{"path": "a/.rc.json", "fullPath": "/r/a/.rc.json", "name": ".rc.json"}\\n']
    """

    def format_matches(self, root: Path, matches: Sequence[str]) -> Iterator[str]:
        for match in matches:
            relative = PurePosixPath(match)
            record = {
                "path": match,
                "fullPath": str(root.joinpath(*relative.parts)),
                "name": relative.name,
            }
            yield json.dumps(record) + "\n"
