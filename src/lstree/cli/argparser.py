"""Command-line argument parsing for lstree.

This module defines the command-line interface for lstree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from lstree import __version__
from lstree.exclusion_rules.rule_stack import DEFAULT_IGNORE_FILE_NAME


def positive_int(value: str) -> int:
    """Argparse type accepting integers greater than zero."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid positive integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with lstree's options.
    """
    description = """
    lstree: list a directory as a version-control-aware tree.

    Directories and files are shown the way a git-aware listing would show them.
    Anything matched by a .gitignore file is collapsed rather than hidden: an ignored
    directory appears as a single "[ignored]" entry that is never descended into, while
    ignored files are left out. Each directory's .gitignore applies to that directory
    and everything below it, with its patterns resolved relative to that directory.
    Version-control metadata (.git, .hg, .svn) is always ignored, and symbolic links
    are never shown or followed.

    With -m/--max-leaf, any directory below the root holding more visible entries than
    the limit is collapsed into a single "[too many entries]" entry.
    """

    epilog = """
    Examples:
      # List the current directory
      lstree

      # Collapse directories with more than 20 visible entries
      lstree -m 20 /path/to/project

      # Ignore extra patterns at the root, in addition to .gitignore files
      lstree -i "*.log" -i "fixtures/" /path/to/project

      # Read per-directory rules from .dockerignore instead of .gitignore
      lstree --ignore-file .dockerignore /path/to/project

      # Emit the tree as JSON and save it to a file
      lstree --format json -o tree.json /path/to/project

      # Print file and folder counts after the tree, or to stderr
      lstree -s /path/to/project
      lstree -s --summary-dest stderr /path/to/project

      # Display version information and exit
      lstree -V
    """

    parser = argparse.ArgumentParser(
        prog="lstree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"lstree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The directory to list (default: the current directory).",
    )
    parser.add_argument(
        "-m",
        "--max-leaf",
        type=positive_int,
        metavar="N",
        help="Collapse any directory below the root that has more than N visible entries.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        action="append",
        default=[],
        metavar="PATTERN",
        help=(
            "Extra gitignore-style pattern applied at the root, in addition to the root's own "
            "ignore file (can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "--ignore-file",
        default=DEFAULT_IGNORE_FILE_NAME,
        metavar="NAME",
        help=f"Name of the per-directory ignore file (default: {DEFAULT_IGNORE_FILE_NAME}).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print file and folder counts after the tree.",
    )
    parser.add_argument(
        "--summary-dest",
        choices=["stdout", "stderr", "file"],
        default="stdout",
        metavar="DEST",
        help="Where -s/--summary prints: stdout (default), stderr, file (requires -o).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped paths and filesystem errors to stderr.",
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
    if args.summary and args.summary_dest == "file" and not args.output:
        raise ValueError("--summary-dest=file requires -o/--output to be specified")
    if not args.ignore_file or "/" in args.ignore_file:
        raise ValueError(f"--ignore-file must be a plain file name, got {args.ignore_file!r}")
