"""Command-line interface for treefind.

This module provides the command-line entry point: it parses arguments into a
SearchOptions, runs the search and prints every match, one per line, prefixed with
"matching file: " (or as a tree with -t/--tree).

Signal Handling Notes:
    - SIGPIPE: Handled when output pipe is closed (e.g., when piping to `head`) on Unix-like systems
    - SIGINT: Handled for clean exit on Ctrl+C

Exit Codes:
    0: Search completed (including searches with no matches)
    1: Fatal error (invalid pattern, root missing or unreadable, bad rules file)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Rust sources of at least 10 bytes
    $ treefind -e .rs -g 10 src

    # Display version information
    $ treefind --version
"""

import sys
from typing import Callable, Optional

from treefind.cli.argparser import create_parser, validate_args
from treefind.cli.safe_writer import SafeWriter
from treefind.cli.signal_handler import setup_signal_handling, signal_handler
from treefind.exceptions import EntryReadError
from treefind.exclusion_rules.git_rules import GitIgnoreExclusionRules
from treefind.finder import MATCH_LABEL, Finder
from treefind.options import SearchOptions
from treefind.walker.match_tree import build_match_tree, render_match_tree
from treefind.walker.walker import WalkStats


def format_summary(stats: WalkStats) -> str:
    """Format walk counters into a human-readable string.

    Args:
        stats: Counters from a completed walk.

    Returns:
        One labelled count per line.

    Example:
        >>> print(format_summary(WalkStats(directories=2, files=3, matches=1, errors=0)))
        Directories: 2
        Files: 3
        Matches: 1
        Skipped: 0
    """
    return "\n".join(
        [
            f"Directories: {stats.directories}",
            f"Files: {stats.files}",
            f"Matches: {stats.matches}",
            f"Skipped: {stats.errors}",
        ]
    )


def warn_entry_error(error: EntryReadError) -> None:
    print(f"Warning: {error}", file=sys.stderr)


def main() -> None:
    """Main entry point for the treefind command-line interface.

    Exit codes:
        0: Search completed (including searches with no matches)
        1: Fatal error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        # Populated while the parser processes -x/--exclude and -i/--ignore
        exclusion_rules = GitIgnoreExclusionRules()

        parser = create_parser(exclusion_rules)
        args = parser.parse_args()
        validate_args(args)

        options = SearchOptions(
            root=args.path,
            max_depth=args.depth,
            extension=args.extension,
            pattern=args.pattern,
            size_greater_than=args.size_greater_than,
            size_less_than=args.size_less_than,
            ignore_case=args.ignore_case,
            follow_symlinks=not args.no_follow_symlinks,
        )

        on_error: Optional[Callable[[EntryReadError], None]] = None
        if args.permission_action == "warn":
            on_error = warn_entry_error

        finder = Finder.from_options(
            options,
            exclusion_rules=exclusion_rules if exclusion_rules.has_rules() else None,
            on_error=on_error,
            should_stop=signal_handler.interrupted,
        )
        # Fatal root errors are raised here, before any output
        matches = finder.iter_find()

        with SafeWriter(sys.stdout.fileno()) as safe_writer:
            try:
                if args.tree:
                    for line in render_match_tree(build_match_tree(options.root, matches)):
                        safe_writer.write_line(line)
                else:
                    for path in matches:
                        safe_writer.write_line(f"{MATCH_LABEL}{path}")
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

        if args.summary:
            print(format_summary(finder.stats), file=sys.stderr)

    except KeyboardInterrupt:
        # A second Ctrl+C arrives after the original handler was restored
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
