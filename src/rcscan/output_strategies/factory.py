"""Lookup of the output strategy for a requested format."""

from typing import Dict, Type, Union

from rcscan.types import OutputFormat

from .base_strategy import OutputStrategy
from .json_strategy import JSONOutputStrategy
from .object_list_strategy import ObjectListOutputStrategy
from .text_strategy import TextOutputStrategy

_STRATEGIES: Dict[OutputFormat, Type[OutputStrategy]] = {
    OutputFormat.TEXT: TextOutputStrategy,
    OutputFormat.JSON: JSONOutputStrategy,
    OutputFormat.OBJECTS: ObjectListOutputStrategy,
}


def create_strategy(output_format: Union[str, OutputFormat]) -> OutputStrategy:
    """Create the strategy that renders output_format.

    Args:
        output_format: An OutputFormat or its string value ("text", "json", "objects").

    Returns:
        A new strategy instance.

    Raises:
        ValueError: If the format is not supported.

    Example:
        >>> type(create_strategy("json")).__name__
        'JSONOutputStrategy'
    """
    try:
        fmt = OutputFormat(output_format)
    except ValueError:
        raise ValueError(f"Unsupported output format: {output_format}") from None
    return _STRATEGIES[fmt]()
