"""Console colors and the per-depth color cycle."""

from enum import Enum
from typing import Sequence, Tuple


class ConsoleColor(str, Enum):
    """Colors available for tree lines.

    Each value is the name of the matching standard color in rich, which renders
    it as an ANSI escape sequence.

    Values:
        BLACK, RED, GREEN, YELLOW, BLUE, PURPLE, CYAN, WHITE
    """

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    PURPLE = "magenta"
    CYAN = "cyan"
    WHITE = "white"


DEFAULT_COLOR_SEQUENCE: Tuple[ConsoleColor, ...] = (
    ConsoleColor.WHITE,
    ConsoleColor.PURPLE,
    ConsoleColor.YELLOW,
)


def color_for_depth(depth: int, sequence: Sequence[ConsoleColor] = DEFAULT_COLOR_SEQUENCE) -> ConsoleColor:
    """Pick the color for lines at a given depth.

    The sequence is indexed with ``depth`` modulo its length, so with the default
    sequence depth 1 is purple, depth 2 yellow, depth 3 white, and so on.

    Args:
        depth: Nesting level, where the root is 0 and its children are 1.
        sequence: Non-empty sequence of colors to cycle through.

    Returns:
        The color for that depth.

    Raises:
        ValueError: If the sequence is empty.

    Example:
        >>> color_for_depth(1).name
        'PURPLE'
        >>> color_for_depth(4).name
        'PURPLE'
        >>> color_for_depth(2, [ConsoleColor.RED, ConsoleColor.BLUE]).name
        'RED'
    """
    if not sequence:
        raise ValueError("Color sequence must not be empty")
    return sequence[depth % len(sequence)]
