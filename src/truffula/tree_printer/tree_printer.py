"""Directory tree rendering with sorting, hidden-file filtering and color cycling.

This module provides the TreePrinter class, which writes a directory hierarchy as
an indented listing similar to the Unix 'tree' command:

    myFolder/
       Apple.txt
       banana.txt
       Documents/
          images/
             Cat.png
             cat.png
             Dog.png
          notes.txt
          README.md
       zebra.txt

Each level is indented by three spaces. Siblings are sorted case-insensitively,
with directories and files interleaved. When color is enabled, each depth is
colored by cycling through a color sequence; the root line is always white.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from truffula.color_printer import ColorPrinter, LineWriter
from truffula.exceptions import InvalidRootError, ListError
from truffula.exclusion_rules.base_rules import BaseExclusionRules
from truffula.tree_printer.color_cycle import DEFAULT_COLOR_SEQUENCE, ConsoleColor, color_for_depth
from truffula.tree_printer.directory_entry import DirectoryEntry
from truffula.tree_printer.directory_lister import DirectoryLister, FileSystemLister
from truffula.tree_printer.entry_sorter import sort_entries
from truffula.tree_printer.permission_action import PermissionAction
from truffula.types import PathType

INDENT = "   "


@dataclass(frozen=True)
class RenderConfig:
    """Immutable configuration for one render.

    Attributes:
        root (Path): The directory to render.
        show_hidden (bool): Whether hidden entries (and their subtrees) are shown.
        use_color (bool): Whether lines are colored per depth. When False every line is white.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for excluding entries by path.
        permission_action (PermissionAction): How unreadable directories are reported.
    """

    root: Path
    show_hidden: bool = False
    use_color: bool = True
    exclusion_rules: Optional[BaseExclusionRules] = None
    permission_action: PermissionAction = PermissionAction.IGNORE

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root))
        object.__setattr__(self, "permission_action", PermissionAction(self.permission_action))


def root_display_name(root: Path) -> str:
    """Get the root line text for a directory, including the trailing slash.

    Paths without a usable basename (".", "..", "./") are resolved to the real
    directory name. A filesystem root is shown as its path.

    Example:
        >>> root_display_name(Path("projects/myFolder"))
        'myFolder/'
        >>> root_display_name(Path("/"))
        '/'
    """
    name = root.name
    if name in ("", ".", ".."):
        resolved = root.resolve()
        name = resolved.name or str(resolved)
    if name.endswith(("/", "\\")):
        return name
    return f"{name}/"


def validate_root(root: Path) -> None:
    """Check that a render root exists and is a directory.

    Raises:
        InvalidRootError: If the root does not exist, is not a directory or cannot be checked.
    """
    try:
        exists = root.exists()
        is_dir = exists and root.is_dir()
    except OSError as e:
        raise InvalidRootError(root, "is not accessible") from e
    if not exists:
        raise InvalidRootError(root, "does not exist")
    if not is_dir:
        raise InvalidRootError(root, "is not a directory")


class TreePrinter:
    """Writes a directory tree one line at a time.

    The traversal is depth-first and pre-order: a directory's line is written before
    its children, and each level is listed, filtered and sorted before any of it is
    written. An explicit stack is used instead of recursion, so deep hierarchies do
    not hit the interpreter's recursion limit.

    Directories that cannot be listed are shown with no children. With
    PermissionAction.WARN the failures are collected in ``list_errors``.

    Symbolic links are not treated specially and loops are not detected: a link
    cycle recurses until the filesystem refuses to resolve the path.

    Attributes:
        config (RenderConfig): The render configuration.
        writer (LineWriter): Destination for the rendered lines.
        color_sequence (Tuple[ConsoleColor, ...]): Colors cycled through per depth.
        lister (DirectoryLister): Source of directory children.
        directory_count (int): Directories written by the last render (root excluded).
        file_count (int): Files written by the last render.
        list_errors (List[ListError]): Listing failures recorded by the last render.

    Example:
        >>> config = RenderConfig(Path("myFolder"), show_hidden=True)  # doctest: +SKIP
        >>> TreePrinter(config).render()  # doctest: +SKIP
        myFolder/
           Apple.txt
           Documents/
              notes.txt
    """

    def __init__(
        self,
        config: RenderConfig,
        writer: Optional[LineWriter] = None,
        color_sequence: Sequence[ConsoleColor] = DEFAULT_COLOR_SEQUENCE,
        lister: Optional[DirectoryLister] = None,
    ) -> None:
        """Initialize a TreePrinter.

        Args:
            config: The render configuration.
            writer: Line writer to emit lines to. Defaults to a ColorPrinter on stdout.
            color_sequence: Colors to cycle through per depth. Defaults to white, purple, yellow.
            lister: Directory lister. Defaults to a FileSystemLister.

        Raises:
            ValueError: If color_sequence is empty.
        """
        if not color_sequence:
            raise ValueError("Color sequence must not be empty")
        self.config = config
        self.writer: LineWriter = writer if writer is not None else ColorPrinter()
        self.color_sequence = tuple(color_sequence)
        self.lister: DirectoryLister = lister if lister is not None else FileSystemLister()
        self.directory_count = 0
        self.file_count = 0
        self.list_errors: List[ListError] = []

    def render(self) -> None:
        """Write the whole tree.

        Raises:
            InvalidRootError: If the root does not exist or is not a directory. Nothing
                is written in that case.
            OSError: If the writer fails. The error propagates immediately.
        """
        root = self.config.root
        validate_root(root)

        self.directory_count = 0
        self.file_count = 0
        self.list_errors = []

        self.writer.write_line(root_display_name(root), ConsoleColor.WHITE)

        stack: List[Tuple[Iterator[DirectoryEntry], int]] = [(iter(self._children(root)), 1)]
        while stack:
            entries, depth = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            self.writer.write_line(INDENT * depth + entry.display_name, self._color_for(depth))

            if entry.is_dir:
                self.directory_count += 1
                stack.append((iter(self._children(entry.path)), depth + 1))
            else:
                self.file_count += 1

    def _color_for(self, depth: int) -> ConsoleColor:
        if not self.config.use_color:
            return ConsoleColor.WHITE
        return color_for_depth(depth, self.color_sequence)

    def _children(self, directory: Path) -> List[DirectoryEntry]:
        """List, filter and sort the children of a directory."""
        try:
            entries = self.lister.list(directory)
        except ListError as e:
            if self.config.permission_action == PermissionAction.WARN:
                self.list_errors.append(e)
            return []

        if not self.config.show_hidden:
            entries = [entry for entry in entries if not entry.is_hidden]
        rules = self.config.exclusion_rules
        if rules is not None:
            entries = [entry for entry in entries if not self._is_excluded(entry, rules)]
        return sort_entries(entries)

    def _is_excluded(self, entry: DirectoryEntry, rules: BaseExclusionRules) -> bool:
        try:
            relative_path = entry.path.relative_to(self.config.root).as_posix()
        except ValueError:
            relative_path = entry.name
        # Directory patterns such as "build/" only match paths with a trailing slash
        if entry.is_dir:
            relative_path += "/"
        return rules.exclude(relative_path)


def render_tree(
    root: PathType,
    *,
    show_hidden: bool = False,
    use_color: bool = True,
    writer: Optional[LineWriter] = None,
) -> TreePrinter:
    """Render a directory tree with default settings.

    Args:
        root: Directory to render.
        show_hidden: Whether to show hidden entries. Defaults to False.
        use_color: Whether to color lines per depth. Defaults to True.
        writer: Line writer to use. Defaults to a ColorPrinter on stdout.

    Returns:
        The TreePrinter used, so that counts and listing errors can be inspected.

    Raises:
        InvalidRootError: If root does not exist or is not a directory.
    """
    printer = TreePrinter(RenderConfig(Path(root), show_hidden=show_hidden, use_color=use_color), writer)
    printer.render()
    return printer
