"""Command-line argument parsing for treefind.

This module defines the command-line interface for treefind,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from treefind import __version__
from treefind.exclusion_rules.base_rules import BaseExclusionRules
from treefind.filters.size_filters import parse_file_size
from treefind.options import DEFAULT_MAX_DEPTH


def non_negative_int(value: str) -> int:
    """argparse type for depth values."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"value cannot be negative: '{value}'")
    return number


def byte_size(value: str) -> int:
    """argparse type for size thresholds; accepts '1024' as well as '10K' or '2MiB'."""
    try:
        return parse_file_size(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create an action class that feeds exclusion options into a rules object.

    Rules files (-x/--exclude) and single patterns (-i/--ignore) are applied in the
    order they appear on the command line, so later negations override earlier rules.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
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

            if option_string in ("-x", "--exclude"):
                if isinstance(values, (str, os.PathLike)):
                    exclusion_rules.load_rules(values)
                else:
                    exclusion_rules.load_rules(Path(str(values)))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            recorded = getattr(namespace, self.dest, None) or []
            setattr(namespace, self.dest, recorded + [values])

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with treefind's options.
    """
    description = """
    treefind: finds files below a directory.

    The directory tree rooted at PATH is walked depth-first and every file that
    satisfies all of the given filters is printed, one per line. Directories are
    searched but never printed.

    Filters:
    - maximum depth (PATH itself is depth 0)
    - exact filename suffix
    - regular expression searched for in the filename
    - inclusive minimum and maximum size in bytes
    """

    epilog = """
    Examples:
      # All files below the current directory
      treefind .

      # Rust sources of at least 10 bytes
      treefind -e .rs -g 10 src

      # Files whose name starts with "test", at most two levels down
      treefind -p '^test' -d 2 .

      # Files between 1 KiB and 1 MB, skipping anything listed in .gitignore
      treefind -g 1KiB -l 1MB -x .gitignore .

      # Skip individual gitignore-style patterns
      treefind -i "target/" -i "*.lock" .

      # Show matches as a tree and report counts on stderr
      treefind -t -s .

      # Display version information and exit
      treefind -V
    """

    parser = argparse.ArgumentParser(
        prog="treefind",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"treefind {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "path",
        metavar="PATH",
        type=Path,
        help="Initial location to begin the search.",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=non_negative_int,
        metavar="DEPTH",
        default=DEFAULT_MAX_DEPTH,
        help=f"Configures the max depth this recursive search will explore (default: {DEFAULT_MAX_DEPTH}).",
    )
    parser.add_argument(
        "-e",
        "--extension",
        metavar="EXT",
        help="Looks for files whose name ends with EXT, exactly as typed.",
    )
    parser.add_argument(
        "-I",
        "--ignore-case",
        action="store_true",
        help="Compare the extension case-insensitively.",
    )
    parser.add_argument(
        "-p",
        "--pattern",
        metavar="REGEX",
        help="Looks for files whose name contains a match for REGEX.",
    )
    parser.add_argument(
        "-g",
        "--size-greater-than",
        type=byte_size,
        metavar="BYTES",
        help="Filters out files whose size is not >= BYTES (e.g. 1024, 10K, 2MiB).",
    )
    parser.add_argument(
        "-l",
        "--size-less-than",
        type=byte_size,
        metavar="BYTES",
        help="Filters out files whose size is not <= BYTES (e.g. 1024, 10K, 2MiB).",
    )
    parser.add_argument(
        "-x",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a gitignore-style file of entries to skip (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual gitignore-style pattern of entries to skip, e.g. '*.log' or 'target/'. "
            "Can be specified multiple times; processed in order together with -x/--exclude."
        ),
    )
    parser.add_argument(
        "-N",
        "--no-follow-symlinks",
        action="store_true",
        help="Do not follow symbolic links; links are neither descended into nor reported.",
    )
    parser.add_argument(
        "-t",
        "--tree",
        action="store_true",
        help="Print matches as a tree instead of one per line.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print a summary of visited directories, files, matches and skipped entries to stderr.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn"],
        default="ignore",
        help="How to report entries that cannot be read; they are always skipped (default: ignore).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.ignore_case and args.extension is None:
        raise ValueError("-I/--ignore-case requires -e/--extension to be specified")
