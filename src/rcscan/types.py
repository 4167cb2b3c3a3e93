from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class OutputFormat(str, Enum):
    """Enumeration of the formats in which a match list can be rendered.

    Attributes:
        TEXT: One relative path per line
        JSON: A single JSON array of relative paths
        OBJECTS: One JSON object per line describing each match
    """

    TEXT = "text"
    JSON = "json"
    OBJECTS = "objects"
