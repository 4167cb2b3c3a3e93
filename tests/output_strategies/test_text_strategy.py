from pathlib import Path

import pytest

from rcscan.output_strategies.factory import create_strategy
from rcscan.output_strategies.json_strategy import JSONOutputStrategy
from rcscan.output_strategies.object_list_strategy import ObjectListOutputStrategy
from rcscan.output_strategies.text_strategy import TextOutputStrategy
from rcscan.types import OutputFormat


def test_one_path_per_line():
    strategy = TextOutputStrategy()
    output = "".join(strategy.format_matches(Path("/r"), ["a/.cfg.json", "c/.cfg.json"]))
    assert output == "a/.cfg.json\nc/.cfg.json\n"


def test_empty_matches_produce_no_output():
    assert list(TextOutputStrategy().format_matches(Path("/r"), [])) == []


@pytest.mark.parametrize(
    "fmt, expected",
    [
        ("text", TextOutputStrategy),
        ("json", JSONOutputStrategy),
        ("objects", ObjectListOutputStrategy),
        (OutputFormat.JSON, JSONOutputStrategy),
    ],
)
def test_factory_returns_matching_strategy(fmt, expected):
    assert type(create_strategy(fmt)) is expected


def test_factory_rejects_unknown_format():
    with pytest.raises(ValueError, match="Unsupported output format: xml"):
        create_strategy("xml")
