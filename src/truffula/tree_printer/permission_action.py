"""Permission action enum for handling unreadable directories during rendering."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be listed during rendering.

    In both cases the directory is shown with no children and rendering continues
    with its siblings.

    Values:
        IGNORE: Skip the directory's contents silently (default behavior)
        WARN: Skip the contents and record the failure for the caller to report
    """

    IGNORE = "ignore"
    WARN = "warn"
