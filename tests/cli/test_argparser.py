"""Unit tests for the argument parser module in rcscan CLI."""

import argparse
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from rcscan.cli.argparser import create_exclusion_action, create_parser, validate_args
from rcscan.exclusion_rules.git_rules import GitIgnoreExclusionRules
from rcscan.exclusion_rules.name_rules import DirectoryNameExclusionRules


@pytest.fixture
def name_rules():
    return DirectoryNameExclusionRules(include_defaults=False)


@pytest.fixture
def pattern_rules():
    return GitIgnoreExclusionRules()


@pytest.fixture
def parser(name_rules, pattern_rules):
    return create_parser(name_rules, pattern_rules)


def test_defaults(parser):
    args = parser.parse_args([])
    assert args.root == Path(".")
    assert args.name == ".blinkmrc.json"
    assert args.format == "text"
    assert args.exclude_dir is None
    assert not args.archive
    assert args.archive_path is None
    assert not args.fail_on_match
    assert not args.no_default_excludes
    assert not args.warn_unreadable
    assert args.summary is None
    assert args.output is None


def test_exclude_dir_feeds_name_rules(parser, name_rules):
    args = parser.parse_args(["-x", "vendor", "--exclude-dir", "Tmp", "/src"])
    assert args.exclude_dir == ["vendor", "Tmp"]
    assert args.root == Path("/src")
    assert name_rules.names == ["tmp", "vendor"]


def test_patterns_feed_pattern_rules_in_order(parser, pattern_rules, tmp_path):
    rules_file = tmp_path / "rules"
    rules_file.write_text("!keep/\n")
    parser.parse_args(["-i", "*/", "-e", str(rules_file)])
    assert pattern_rules.exclude("drop/")
    assert not pattern_rules.exclude("keep/")


def test_exclusion_action_dispatch():
    name_rules = MagicMock()
    pattern_rules = MagicMock()
    ExclusionAction = create_exclusion_action(name_rules, pattern_rules)
    assert issubclass(ExclusionAction, argparse.Action)

    namespace = argparse.Namespace()
    ExclusionAction(option_strings=["-x", "--exclude-dir"], dest="exclude_dir")(None, namespace, "dist", "-x")
    ExclusionAction(option_strings=["-i", "--ignore"], dest="ignore")(None, namespace, "*.bak", "--ignore")
    ExclusionAction(option_strings=["-e", "--exclude-from"], dest="exclude_from")(
        None, namespace, Path("rules.txt"), "-e"
    )

    name_rules.add_rule.assert_called_once_with("dist")
    pattern_rules.add_rule.assert_called_once_with("*.bak")
    pattern_rules.load_rules.assert_called_once_with(Path("rules.txt"))
    assert namespace.exclude_dir == ["dist"]
    assert namespace.ignore == ["*.bak"]
    assert namespace.exclude_from == [Path("rules.txt")]


def test_invalid_excluded_name_is_usage_error(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-x", "a/b"])
    assert excinfo.value.code == 2
    assert "must be a name" in capsys.readouterr().err


def test_missing_rules_file_is_usage_error(parser, tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-e", str(tmp_path / "missing")])
    assert excinfo.value.code == 2
    assert "Rules file not found" in capsys.readouterr().err


def test_invalid_format_rejected(parser):
    with pytest.raises(SystemExit):
        parser.parse_args(["-f", "xml"])


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("rcscan ")


def test_validate_fills_default_archive_path(parser):
    args = parser.parse_args(["-a"])
    validate_args(args)
    assert args.archive_path == Path("blinkmrc-files.zip")


def test_validate_keeps_explicit_archive_path(parser):
    args = parser.parse_args(["-a", "-d", "out/configs.zip"])
    validate_args(args)
    assert args.archive_path == Path("out/configs.zip")


def test_validate_archive_path_requires_archive(parser):
    args = parser.parse_args(["-d", "configs.zip"])
    with pytest.raises(ValueError, match="requires -a/--archive"):
        validate_args(args)


@pytest.mark.parametrize("name", ["", "dir/.blinkmrc.json"])
def test_validate_rejects_bad_names(parser, name):
    args = parser.parse_args(["-n", name])
    with pytest.raises(ValueError, match="--name"):
        validate_args(args)


def test_validate_summary_stdout_with_output(parser):
    args = parser.parse_args(["-s", "stdout", "-o", "matches.txt"])
    with pytest.raises(ValueError, match="--summary=stdout"):
        validate_args(args)


def test_validate_summary_stderr_with_output(parser):
    args = parser.parse_args(["-s", "stderr", "-o", "matches.txt"])
    validate_args(args)
