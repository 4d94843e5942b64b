"""Record type for a single child of a listed directory."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DirectoryEntry:
    """An immediate child of a directory, as reported by a directory lister.

    Entries are read-only snapshots produced by a single listing call. The
    ``is_dir`` flag tells the printer whether to descend, so no runtime type
    inspection of the filesystem object is needed.

    Attributes:
        name (str): The basename of the file or directory.
        path (Path): Full path of the entry, used to descend into directories.
        is_dir (bool): True if the entry is a directory.
        is_hidden (bool): True if the entry is hidden by platform convention.

    Example:
        >>> entry = DirectoryEntry("notes.txt", Path("docs/notes.txt"))
        >>> entry.is_dir
        False
        >>> entry.display_name
        'notes.txt'
        >>> DirectoryEntry("images", Path("docs/images"), is_dir=True).display_name
        'images/'
    """

    name: str
    path: Path
    is_dir: bool = False
    is_hidden: bool = False

    @property
    def display_name(self) -> str:
        """The name as printed in the tree, with a trailing slash for directories."""
        return f"{self.name}/" if self.is_dir else self.name
