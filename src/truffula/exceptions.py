from typing import Optional

from truffula.types import PathType


class InvalidRootError(Exception):
    """
    Exception raised when the root of a render does not exist or is not a directory.

    This error is fatal for a render: it is raised before any line is written, so a
    caller never sees partial output for an invalid root.

    Attributes:
        path (PathType): The root path that was rejected.
        reason (str): Short description of why the path was rejected.

    Example:
        >>> error = InvalidRootError("/no/such/dir", "does not exist")
        >>> str(error)
        'Root path does not exist: /no/such/dir'
    """

    def __init__(self, path: PathType, reason: str) -> None:
        """
        Initialize the exception with the rejected path and the reason.

        Args:
            path (PathType): The root path that was rejected.
            reason (str): Why it was rejected, e.g. "does not exist" or "is not a directory".
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Root path {reason}: {path}")


class ListError(Exception):
    """
    Exception raised when the children of a directory cannot be listed.

    The tree printer recovers from this error locally by treating the directory as
    having no children, so it never aborts a render.

    Attributes:
        path (PathType): The directory that could not be listed.
        cause (Optional[OSError]): The underlying operating system error, if any.

    Example:
        >>> error = ListError("/root/secret", PermissionError(13, "Permission denied"))
        >>> str(error)
        'Cannot list directory /root/secret: [Errno 13] Permission denied'
    """

    def __init__(self, path: PathType, cause: Optional[OSError] = None) -> None:
        self.path = path
        self.cause = cause
        message = f"Cannot list directory {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
