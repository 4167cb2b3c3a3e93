"""Command-line argument parsing for rcscan.

This module defines the command-line interface for rcscan,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from rcscan import __version__
from rcscan.archiver import DEFAULT_ARCHIVE_NAME
from rcscan.exclusion_rules.base_rules import BaseExclusionRules
from rcscan.exclusion_rules.name_rules import DEFAULT_EXCLUDED_DIRECTORIES
from rcscan.scanner import DEFAULT_TARGET_FILENAME
from rcscan.types import OutputFormat


def create_exclusion_action(
    name_rules: BaseExclusionRules, pattern_rules: BaseExclusionRules
) -> Type[argparse.Action]:
    """Create a custom action class that feeds exclusions into rule objects during parsing.

    Directory names (-x) go to name_rules; patterns (-i) and pattern files (-e) go to
    pattern_rules in the exact order they appear on the command line, which matters
    for gitignore negations.

    Args:
        name_rules: Rules receiving excluded directory names.
        pattern_rules: Rules receiving gitignore-style patterns and pattern files.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action that records an exclusion in the matching rule object and the namespace."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            try:
                if option_string in ("-x", "--exclude-dir"):
                    name_rules.add_rule(str(values))
                elif option_string in ("-e", "--exclude-from"):
                    if isinstance(values, (str, os.PathLike)):
                        pattern_rules.load_rules(values)
                    else:
                        pattern_rules.load_rules(Path(str(values)))
                else:  # -i/--ignore
                    pattern_rules.add_rule(str(values))
            except (ValueError, FileNotFoundError) as e:
                raise argparse.ArgumentError(self, str(e))

            recorded = getattr(namespace, self.dest, None)
            if recorded is None:
                recorded = []
            setattr(namespace, self.dest, recorded + [values])

    return ExclusionRulesAction


def create_parser(name_rules: BaseExclusionRules, pattern_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        name_rules: Rules receiving excluded directory names during parsing.
        pattern_rules: Rules receiving gitignore-style patterns during parsing.

    Returns:
        An ArgumentParser instance configured with rcscan's options.
    """
    description = f"""
    rcscan: find configuration files in a directory tree and optionally archive them.

    The tree below ROOT is walked depth first. Directories whose name matches an
    excluded name (case-insensitively, at any depth) are skipped without being
    opened. Every file named exactly like the target is reported relative to ROOT,
    sorted and without duplicates.

    Default excluded directories: {", ".join(DEFAULT_EXCLUDED_DIRECTORIES)}
    """

    epilog = f"""
    Examples:
      # List every {DEFAULT_TARGET_FILENAME} below the current directory
      rcscan

      # Also skip "vendor" and "tmp" directories
      rcscan -x vendor -x tmp ~/projects

      # Skip directories matching gitignore-style patterns
      rcscan -i "fixtures/" -e .scanignore ~/projects

      # Look for a different file and print JSON
      rcscan -n .eslintrc.json -f json ~/projects

      # One JSON object per match, including absolute paths
      rcscan -f objects ~/projects

      # Bundle the matches into {DEFAULT_ARCHIVE_NAME}, or a chosen archive
      rcscan -a ~/projects
      rcscan -a -d /tmp/configs.zip ~/projects

      # Fail (exit status 1) if any file is found, e.g. in CI
      rcscan --fail-on-match .

      # Report unreadable directories and print counts to stderr
      rcscan -w -s stderr ~/projects
    """

    parser = argparse.ArgumentParser(
        prog="rcscan",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"rcscan {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(name_rules, pattern_rules)

    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=Path("."),
        help="The directory to scan (default: current directory). Output paths are relative to it.",
    )
    parser.add_argument(
        "-n",
        "--name",
        metavar="FILENAME",
        default=DEFAULT_TARGET_FILENAME,
        help=f"Base name of the files to find (default: {DEFAULT_TARGET_FILENAME}).",
    )
    parser.add_argument(
        "-x",
        "--exclude-dir",
        metavar="NAME",
        action=ExclusionAction,
        help="Additional directory name to skip at any depth (case-insensitive). Can be given multiple times.",
    )
    parser.add_argument(
        "--no-default-excludes",
        action="store_true",
        help="Do not skip the default excluded directories.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Gitignore-style pattern for paths to skip (e.g. 'fixtures/', '*.bak.json'). "
            "Can be given multiple times; patterns apply in command-line order, mixed with -e."
        ),
    )
    parser.add_argument(
        "-e",
        "--exclude-from",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="File of gitignore-style patterns for paths to skip. Can be given multiple times.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Output format for the match list (default: text).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Write the match list to FILE instead of stdout.",
    )
    parser.add_argument(
        "--fail-on-match",
        action="store_true",
        help="Exit with status 1 if any matching file is found (after any requested archive is written).",
    )
    parser.add_argument(
        "-a",
        "--archive",
        action="store_true",
        help="Bundle the matching files into a zip archive preserving their relative paths.",
    )
    parser.add_argument(
        "-d",
        "--archive-path",
        type=Path,
        metavar="PATH",
        help=f"Archive destination (default: {DEFAULT_ARCHIVE_NAME}). Requires -a/--archive.",
    )
    parser.add_argument(
        "-w",
        "--warn-unreadable",
        action="store_true",
        help="Print a warning for each directory that cannot be listed instead of skipping it silently.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout"],
        help="Print counts of matches and directories visited and skipped. Valid destinations: stderr, stdout.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle and fills in the
    archive destination default.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if not args.name or "/" in args.name or os.sep in args.name:
        raise ValueError(f"--name must be a file name, not a path: {args.name!r}")

    if args.archive_path is not None and not args.archive:
        raise ValueError("-d/--archive-path requires -a/--archive")
    if args.archive and args.archive_path is None:
        args.archive_path = Path(DEFAULT_ARCHIVE_NAME)

    if args.summary == "stdout" and args.output:
        raise ValueError("--summary=stdout cannot be combined with -o/--output; use --summary=stderr")
