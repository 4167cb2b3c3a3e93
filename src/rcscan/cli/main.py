"""Command-line interface for rcscan.

This module provides the command-line entry point that finds configuration files
below a directory, prints the match list in the requested format and optionally
bundles the matches into a zip archive.

Output Ordering:
    The match list is always written first. Summary counts (when sent to stdout)
    follow, and the archive confirmation line, when an archive was created, is
    always the last line written to stdout.

Exit Codes:
    0: Successful completion (matches or not)
    1: Runtime error, or matches found with --fail-on-match
    2: Command-line syntax error
    3: Root directory not found or not a directory
    4: Archive could not be created
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # List configuration files below a projects folder
    $ rcscan ~/projects

    # Archive them and fail if any exist
    $ rcscan -a --fail-on-match ~/projects
"""

import sys
from collections.abc import Mapping
from typing import List, Optional

from rcscan.archiver import archive
from rcscan.cli.argparser import create_parser, validate_args
from rcscan.cli.safe_writer import SafeWriter
from rcscan.cli.signal_handler import setup_signal_handling, signal_handler
from rcscan.exceptions import ArchiveError, EnumerationError, MatchesFoundError, RootNotFoundError
from rcscan.exclusion_rules.git_rules import GitIgnoreExclusionRules
from rcscan.exclusion_rules.name_rules import DEFAULT_EXCLUDED_DIRECTORIES, DirectoryNameExclusionRules
from rcscan.output_strategies.factory import create_strategy
from rcscan.scanner import FilteredTreeScanner

EXIT_ERROR = 1
EXIT_ROOT_NOT_FOUND = 3
EXIT_ARCHIVE_FAILED = 4


def format_summary(counts: Mapping[str, int]) -> str:
    """Format scan counts into a human-readable block.

    Args:
        counts: Mapping with "matches", "visited" and "pruned" counts.

    Returns:
        One labelled count per line.
    """
    return "\n".join(
        [
            f"Matches: {counts['matches']}",
            f"Directories visited: {counts['visited']}",
            f"Directories skipped: {counts['pruned']}",
        ]
    )


def warn_unreadable(error: EnumerationError) -> None:
    print(f"Warning: {error}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the rcscan command-line interface.

    Args:
        argv: Arguments to parse instead of sys.argv[1:].

    Exit codes are listed in the module docstring.
    """
    setup_signal_handling()

    try:
        name_rules = DirectoryNameExclusionRules(include_defaults=False)
        pattern_rules = GitIgnoreExclusionRules()

        parser = create_parser(name_rules, pattern_rules)
        args = parser.parse_args(argv)
        validate_args(args)

        if not args.no_default_excludes:
            for name in DEFAULT_EXCLUDED_DIRECTORIES:
                name_rules.add_rule(name)

        scanner = FilteredTreeScanner(
            args.root,
            target_filename=args.name,
            name_rules=name_rules,
            exclusion_rules=pattern_rules if pattern_rules.has_rules() else None,
            on_error=warn_unreadable if args.warn_unreadable else None,
        )
        matches = scanner.scan()
        strategy = create_strategy(args.format)

        output_target = args.output if args.output else sys.stdout.fileno()
        with SafeWriter(output_target) as writer, SafeWriter(sys.stdout.fileno()) as stdout_writer:
            try:
                writer.write_all(strategy.format_matches(scanner.root, matches))

                if args.summary:
                    summary = format_summary(
                        {
                            "matches": len(matches),
                            "visited": scanner.directories_visited,
                            "pruned": scanner.directories_pruned,
                        }
                    )
                    if args.summary == "stdout":
                        stdout_writer.write(summary + "\n")
                    else:
                        print(summary, file=sys.stderr)

            except BrokenPipeError:
                pass  # SafeWriter closes itself in the context manager

            # Runs even after a broken pipe; only the confirmation line needs stdout
            if args.archive:
                if matches:
                    archive_path = archive(scanner.root, matches, args.archive_path)
                    try:
                        stdout_writer.write(f"Archive created: {archive_path}\n")
                    except BrokenPipeError:
                        pass
                else:
                    print("No matching files found; archive not created.", file=sys.stderr)

        if args.fail_on_match and matches and not signal_handler.interrupted:
            raise MatchesFoundError(len(matches))

    except (RootNotFoundError, NotADirectoryError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_ROOT_NOT_FOUND)
    except ArchiveError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_ARCHIVE_FAILED)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
