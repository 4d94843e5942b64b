"""Directory listing backed by the local filesystem."""

import os
import stat
import sys
from pathlib import Path
from typing import List, Protocol

from truffula.exceptions import ListError
from truffula.tree_printer.directory_entry import DirectoryEntry
from truffula.types import PathType


class DirectoryLister(Protocol):
    """Anything that can list the immediate children of a directory.

    Implementations return entries in any order and raise ListError (or return an
    empty list) when the directory cannot be read.
    """

    def list(self, path: PathType) -> List[DirectoryEntry]: ...


def is_hidden(entry: os.DirEntry) -> bool:  # type: ignore[type-arg]
    """Check whether a directory entry is hidden by platform convention.

    Names starting with a dot are hidden everywhere. On Windows the hidden file
    attribute is honored as well.

    Args:
        entry: The entry returned by os.scandir.

    Returns:
        True if the entry should be treated as hidden.
    """
    if entry.name.startswith("."):
        return True
    if sys.platform == "win32":
        try:
            attributes = entry.stat(follow_symlinks=False).st_file_attributes
        except OSError:
            return False
        return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)
    return False


class FileSystemLister:
    """Lists directory children with os.scandir.

    Symbolic links get no special treatment: a link to a directory reports
    ``is_dir`` as True and is descended into like any other directory.

    Example:
        >>> lister = FileSystemLister()
        >>> entries = lister.list(".")  # doctest: +SKIP
        >>> sorted(e.name for e in entries)  # doctest: +SKIP
        ['README.md', 'src', 'tests']
    """

    def list(self, path: PathType) -> List[DirectoryEntry]:
        """List the immediate children of a directory.

        Args:
            path: The directory to list.

        Returns:
            One DirectoryEntry per child, in the order the operating system reports them.

        Raises:
            ListError: If the directory cannot be opened or read.
        """
        directory = Path(path)
        entries = []
        try:
            with os.scandir(directory) as it:
                for child in it:
                    try:
                        is_dir = child.is_dir()
                    except OSError:
                        # Broken or inaccessible entries are shown as files
                        is_dir = False
                    entries.append(
                        DirectoryEntry(
                            name=child.name,
                            path=directory / child.name,
                            is_dir=is_dir,
                            is_hidden=is_hidden(child),
                        )
                    )
        except OSError as e:
            raise ListError(directory, e) from e
        return entries
