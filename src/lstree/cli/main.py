"""Command-line interface for lstree.

This module provides the ``lstree`` command: it parses arguments, builds the tree,
renders it as text or JSON and optionally reports file and folder counts.

Signal Handling Notes:
    SIGINT cancels the scan before the next directory is visited; SIGPIPE (e.g. when
    piping to ``head``) ends output quietly on Unix-like systems. Both set the exit code.

Exit Codes:
    0: Successful completion
    1: Runtime error (missing root, root not a directory, unwritable output)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Tree of a project with summary
    $ lstree -m 30 -s /path/to/project
"""

import logging
import sys

from lstree.cli.argparser import create_parser, validate_args
from lstree.cli.safe_writer import SafeWriter
from lstree.cli.signal_handler import setup_signal_handling, signal_handler
from lstree.exceptions import ScanCancelledError
from lstree.file_system_tree.file_system_tree import FileSystemTree
from lstree.file_system_tree.summary import format_summary
from lstree.file_system_tree.tree_options import TreeOptions
from lstree.tree_renderer import render_json

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> None:
    """Main entry point for the lstree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        parser = create_parser()
        args = parser.parse_args()

        # Perform additional validation beyond what argparse supports directly
        validate_args(args)
        configure_logging(args.verbose)

        options = TreeOptions(
            max_leaf=args.max_leaf,
            ignore_patterns=tuple(args.ignore),
            ignore_file_name=args.ignore_file,
        )
        fs_tree = FileSystemTree(args.directory, options, cancel_event=signal_handler.sigint_received)

        # Build before opening the output so a bad root does not truncate -o FILE
        fs_tree.get_tree()

        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            try:
                if args.format == "json":
                    safe_writer.write(render_json(fs_tree.get_tree()) + "\n")
                else:
                    safe_writer.write_lines(fs_tree.stream_tree_representation())

                if args.summary:
                    summary_text = format_summary(fs_tree.get_summary())
                    if args.summary_dest == "stderr":
                        print(summary_text, file=sys.stderr)
                    else:
                        # stdout and file both go to the main output
                        safe_writer.write("\n" + summary_text + "\n")

            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except ScanCancelledError as e:
        logger.debug("%s", e)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
