"""Command-line argument parsing for truffula.

This module defines the command-line interface for truffula,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from truffula import __version__
from truffula.exclusion_rules.base_rules import BaseExclusionRules


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create an action class that feeds -e/-i options into exclusion rules.

    Rules are added as the options are parsed, so files and patterns are applied
    in the order they appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Adds each -e FILE or -i PATTERN to the exclusion rules as it is parsed."""

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

            if option_string in ("-e", "--exclude"):
                exclusion_rules.load_rules(Path(str(values)))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            # Keep the raw values on the namespace as well
            recorded = getattr(namespace, self.dest, None) or []
            recorded.append(values)
            setattr(namespace, self.dest, recorded)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with truffula's options.
    """
    description = """
    truffula: print a directory as an indented tree.

    Entries are indented three spaces per level and sorted case-insensitively at
    every level, with files and directories interleaved. Each depth is colored by
    cycling through white, purple and yellow; the root line is always white.
    Hidden entries (names starting with a dot) are skipped unless -a is given.
    Directories that cannot be read are shown without children.
    """

    epilog = """
    Examples:
      # Print the tree of a directory
      truffula /path/to/project

      # Include hidden files and directories
      truffula -a /path/to/project

      # Plain output without colors
      truffula -n /path/to/project

      # Hide entries using gitignore-style patterns or files
      truffula -i "*.pyc" -i "node_modules/" /path/to/project
      truffula -e .gitignore /path/to/project

      # Save to a file and print counts to stderr
      truffula -o tree.txt -s stderr /path/to/project

      # Report unreadable directories on stderr
      truffula -P warn /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="truffula",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"truffula {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directory",
        type=Path,
        help="The directory to print.",
    )
    parser.add_argument(
        "-a",
        "--all",
        dest="show_hidden",
        action="store_true",
        help="Show hidden files and directories.",
    )
    parser.add_argument(
        "-n",
        "--no-color",
        dest="no_color",
        action="store_true",
        help="Disable colored output. No ANSI escape sequences are written.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a .gitignore-style file of patterns to hide (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Gitignore-style pattern of entries to hide, e.g. '*.pyc', 'build/' or '!keep.log'. "
            "Can be specified multiple times; patterns apply in order, mixed with -e/--exclude."
        ),
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
        metavar="DEST",
        choices=["stdout", "stderr"],
        help="Print directory and file counts after the tree. Valid destinations: stdout, stderr",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn"],
        default="ignore",
        help="How to report directories that cannot be read (default: ignore).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse checks.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    for pattern in getattr(args, "ignore", None) or []:
        if not str(pattern).strip():
            raise ValueError("-i/--ignore requires a non-empty pattern")
