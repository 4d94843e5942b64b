"""Command-line interface for truffula.

This module provides the entry point of the `truffula` command, which prints a
directory as an indented, colorized tree. It parses arguments, builds the render
configuration, and manages output and signal handling.

Signal Handling Notes:
    - SIGPIPE: Handled when the output pipe is closed (e.g. when piping to `head`)
    - SIGINT: Handled for a clean exit on Ctrl+C
    In both cases output stops at the next line and the process exits with the
    conventional status code.

Exit Codes:
    0: Successful completion
    1: Runtime error, including a root that is missing or not a directory
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE)

Example:
    # Print a directory, including hidden entries
    $ truffula -a /path/to/dir

    # Plain output with counts
    $ truffula -n -s stdout /path/to/dir
"""

import sys
from typing import List

from truffula.cli.argparser import create_parser, validate_args
from truffula.cli.safe_writer import SafeWriter
from truffula.cli.signal_handler import setup_signal_handling, signal_handler
from truffula.color_printer import ColorPrinter
from truffula.exceptions import ListError
from truffula.exclusion_rules.git_rules import GitIgnoreExclusionRules
from truffula.tree_printer.permission_action import PermissionAction
from truffula.tree_printer.tree_printer import RenderConfig, TreePrinter, validate_root


def format_counts(directories: int, files: int) -> str:
    """Format the directory and file counts like the Unix 'tree' command.

    Example:
        >>> format_counts(3, 7)
        '3 directories, 7 files'
        >>> format_counts(1, 1)
        '1 directory, 1 file'
    """
    directory_label = "directory" if directories == 1 else "directories"
    file_label = "file" if files == 1 else "files"
    return f"{directories} {directory_label}, {files} {file_label}"


def main() -> None:
    """Main entry point for the truffula command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE)
    """
    setup_signal_handling()

    try:
        # Populated by the -e/-i actions while parsing
        exclusion_rules = GitIgnoreExclusionRules()

        parser = create_parser(exclusion_rules)
        args = parser.parse_args()
        validate_args(args)

        has_exclusions = bool(getattr(args, "exclude", None) or getattr(args, "ignore", None))
        config = RenderConfig(
            root=args.directory,
            show_hidden=args.show_hidden,
            use_color=not args.no_color,
            exclusion_rules=exclusion_rules if has_exclusions else None,
            permission_action=PermissionAction(args.permission_action),
        )

        # Reject a bad root before an output file is created
        validate_root(config.root)

        output_file = args.output if args.output else sys.stdout.fileno()
        list_errors: List[ListError] = []

        with SafeWriter(output_file) as safe_writer:
            printer = TreePrinter(config, ColorPrinter(safe_writer, ansi=config.use_color))
            try:
                printer.render()

                if args.summary:
                    counts = format_counts(printer.directory_count, printer.file_count)
                    if args.summary == "stdout":
                        safe_writer.write("\n" + counts + "\n")
                    elif args.summary == "stderr":
                        print(counts, file=sys.stderr)

            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager
            list_errors = printer.list_errors

        for error in list_errors:
            print(f"Warning: {error}", file=sys.stderr)

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
