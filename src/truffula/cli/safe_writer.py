"""Signal-aware output for the truffula CLI.

Tree lines are written straight to a file descriptor so that a closed pipe or a
Ctrl+C stops the output at the next line instead of surfacing as an error from
Python's buffered stdout.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from truffula.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes text to a file descriptor or a file, stopping once a signal arrives.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The file descriptor being written to.
    """

    def __init__(self, file: Union[int, str, os.PathLike]):  # type: ignore[type-arg]
        """Initialize the writer.

        Args:
            file: An open file descriptor (e.g. ``sys.stdout.fileno()``) or a path to
                create or truncate.

        Raises:
            TypeError: If file is neither an int nor a path.
            OSError: If the output file cannot be opened.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write a string as UTF-8.

        Args:
            data: Text to write.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is closed.
            OSError: If another I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        payload = data.encode("utf-8")
        try:
            # os.write may accept fewer bytes than requested on pipes
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the output file if this writer opened it.

        Broken pipe errors during close are ignored; the writer is marked closed
        either way.
        """
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the writer, letting an exception from the with block take priority."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
