"""Case-insensitive ordering of directory entries.

Names are compared ignoring case first. Names that are equal ignoring case are
then ordered by exact code point, which puts uppercase before lowercase
("Cat.png" before "cat.png"). Directories and files are sorted together.
"""

from typing import Iterable, List, Tuple

from truffula.tree_printer.directory_entry import DirectoryEntry


def _cmp(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare_names(a: str, b: str) -> int:
    """Compare two names case-insensitively, breaking ties lexicographically.

    Args:
        a: First name.
        b: Second name.

    Returns:
        A negative number if ``a`` sorts first, a positive number if ``b`` sorts
        first, and zero only if the names are identical.

    Example:
        >>> compare_names("Apple.txt", "banana.txt") < 0
        True
        >>> compare_names("cat.png", "Cat.png") > 0
        True
        >>> compare_names("Dog.png", "Dog.png")
        0
    """
    ci = _cmp(a.lower(), b.lower())
    if ci != 0:
        return ci
    return _cmp(a, b)


def entry_sort_key(entry: DirectoryEntry) -> Tuple[str, str]:
    """Sort key equivalent to compare_names applied to entry names."""
    return (entry.name.lower(), entry.name)


def sort_entries(entries: Iterable[DirectoryEntry]) -> List[DirectoryEntry]:
    """Return the entries as a new list in case-insensitive-then-lexicographic order.

    Example:
        >>> from pathlib import Path
        >>> names = ["cat.png", "Cat.png", "Dog.png"]
        >>> [e.name for e in sort_entries(DirectoryEntry(n, Path(n)) for n in names)]
        ['Cat.png', 'cat.png', 'Dog.png']
    """
    return sorted(entries, key=entry_sort_key)
