"""Colored line output for tree rendering.

This module provides the line writer used by the tree printer. Each line is
written together with its color in a single call, so there is no shared
"current color" state that could be set out of order.
"""

import sys
from typing import Optional, Protocol

from rich.color import ColorSystem
from rich.style import Style

from truffula.tree_printer.color_cycle import ConsoleColor


class TextSink(Protocol):
    """Anything with a ``write(str)`` method, such as a text stream or SafeWriter."""

    def write(self, data: str) -> object: ...


class LineWriter(Protocol):
    """Writes one line of text in a given color."""

    def write_line(self, text: str, color: ConsoleColor) -> None: ...


class ColorPrinter:
    """Line writer that renders colors as ANSI escape sequences.

    Colors are rendered with rich's standard 8-color system so the output is the
    same on any ANSI terminal. When ``ansi`` is False, lines are written as plain
    text and the color is ignored.

    Attributes:
        out (TextSink): Destination for the rendered lines.
        ansi (bool): Whether to emit ANSI color sequences.

    Example:
        >>> import io
        >>> buffer = io.StringIO()
        >>> printer = ColorPrinter(buffer)
        >>> printer.write_line("src/", ConsoleColor.PURPLE)
        >>> buffer.getvalue()
        '\\x1b[35msrc/\\x1b[0m\\n'
        >>> plain = io.StringIO()
        >>> ColorPrinter(plain, ansi=False).write_line("src/", ConsoleColor.PURPLE)
        >>> plain.getvalue()
        'src/\\n'
    """

    def __init__(self, out: Optional[TextSink] = None, ansi: bool = True) -> None:
        """Initialize the printer.

        Args:
            out: Destination for output. Defaults to sys.stdout.
            ansi: Whether to emit ANSI color sequences. Defaults to True.
        """
        self.out = out if out is not None else sys.stdout
        self.ansi = ansi

    def format_line(self, text: str, color: ConsoleColor) -> str:
        """Render a line, including its terminator, without writing it."""
        if not self.ansi:
            return f"{text}\n"
        return Style(color=color.value).render(text, color_system=ColorSystem.STANDARD) + "\n"

    def write_line(self, text: str, color: ConsoleColor) -> None:
        """Write one line in the given color.

        Args:
            text: The line without a terminator.
            color: The color to render the line in.

        Raises:
            OSError: If the destination cannot be written to.
        """
        self.out.write(self.format_line(text, color))
