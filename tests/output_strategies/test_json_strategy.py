import json
from pathlib import Path

from rcscan.output_strategies.json_strategy import JSONOutputStrategy


def test_matches_rendered_as_json_array():
    matches = ["a/.cfg.json", 'we"ird/.cfg.json']
    output = "".join(JSONOutputStrategy().format_matches(Path("/r"), matches))
    assert output.endswith("\n")
    assert json.loads(output) == matches


def test_pretty_printed_with_indent():
    output = "".join(JSONOutputStrategy().format_matches(Path("/r"), ["a", "b"]))
    assert output == '[\n  "a",\n  "b"\n]\n'


def test_custom_indent():
    output = "".join(JSONOutputStrategy(indent=4).format_matches(Path("/r"), ["a"]))
    assert output == '[\n    "a"\n]\n'


def test_empty_matches_are_valid_json():
    output = "".join(JSONOutputStrategy().format_matches(Path("/r"), []))
    assert output == "[]\n"
