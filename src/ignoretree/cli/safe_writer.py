"""Signal-aware line output for the ignoretree CLI."""

import errno
import os
import types
from typing import Optional, Type

from ignoretree.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes lines straight to a file descriptor, stopping on interruption.

    Writing through the descriptor rather than a buffered stream means a closed
    pipe surfaces at the line that failed, as a BrokenPipeError.

    Attributes:
        fd: The file descriptor being written to.

    Example:
        >>> import sys
        >>> with SafeWriter(sys.stdout.fileno()) as writer:  # doctest: +SKIP
        ...     writer.write_line("project")
        project
    """

    def __init__(self, fd: int, encoding: str = "utf-8"):
        """Initialize the safe writer.

        Args:
            fd: File descriptor to write to; it is not closed by the writer.
            encoding: Encoding applied to written text. File names that are not valid
                in this encoding are written back as their original bytes.
        """
        if not isinstance(fd, int):
            raise TypeError(f"Expected a file descriptor, got {type(fd).__name__}")
        self.fd = fd
        self.encoding = encoding
        self._closed = False

    def write(self, data: str) -> None:
        """Write text unless a SIGPIPE or SIGINT has been received.

        Raises:
            BrokenPipeError: If a signal was received or the pipe is broken.
            OSError: If another I/O error occurs during writing.
            ValueError: If the writer has been closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        try:
            os.write(self.fd, data.encode(self.encoding, errors="surrogateescape"))
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def write_line(self, line: str) -> None:
        self.write(line + "\n")

    def close(self) -> None:
        """Mark the writer closed. The descriptor itself stays open."""
        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        self.close()
