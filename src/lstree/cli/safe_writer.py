"""Signal-aware output for the lstree CLI.

Tree listings of large repositories run to many thousands of lines, so lines are
written in batches. The signal handler is consulted before every batch, which keeps
Ctrl+C and a closed pipe responsive without paying a signal check per line.
"""

import errno
import os
import types
from pathlib import Path
from typing import Iterable, List, Optional, Type, Union

from lstree.cli.signal_handler import signal_handler
from lstree.types import PathType

DEFAULT_BATCH_SIZE = 256


class SafeWriter:
    """Writes output to a file descriptor or a file, stopping on SIGPIPE or SIGINT.

    A closed pipe (EPIPE) and a previously recorded SIGPIPE or SIGINT both surface as
    BrokenPipeError, which the CLI treats as the end of output rather than a failure.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The file descriptor actually written to.
        batch_size: Number of lines write_lines() joins into one write.
    """

    def __init__(self, file: Union[int, PathType], batch_size: int = DEFAULT_BATCH_SIZE):
        """Open the destination.

        Args:
            file: A file descriptor, or the path of a file to create or truncate.
            batch_size: Lines per write in write_lines(). Must be at least 1.

        Raises:
            TypeError: If ``file`` is neither an int nor path-like.
            ValueError: If ``batch_size`` is less than 1.
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {batch_size}")

        self.file = file
        self.batch_size = batch_size
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            # Connector characters are not ASCII; never depend on the locale
            self._file_obj = Path(file).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write a string in full.

        os.write() may accept only part of the buffer (a pipe whose reader is slow, or a
        write interrupted by a signal), so the remainder is written until nothing is left.

        Args:
            data: Text to write, encoded as UTF-8.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is closed.
            OSError: For any other I/O error.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        view = memoryview(data.encode("utf-8"))
        try:
            while view:
                written = os.write(self.fd, view)
                view = view[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def write_lines(self, lines: Iterable[str]) -> None:
        """Write each line followed by a newline, ``batch_size`` lines per write.

        Lines are consumed lazily, so a generator that renders the tree is never held in
        memory as a whole.

        Args:
            lines: Lines without trailing newlines.

        Raises:
            BrokenPipeError: As for write(); lines of an unwritten batch are dropped.
        """
        batch: List[str] = []
        for line in lines:
            batch.append(line)
            if len(batch) >= self.batch_size:
                self.write("\n".join(batch) + "\n")
                batch = []
        if batch:
            self.write("\n".join(batch) + "\n")

    def close(self) -> None:
        """Close the file if this writer opened it.

        The writer is marked closed even when closing fails with a broken pipe. A file
        descriptor passed in by the caller is left open.
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
        """Close the writer on leaving the with block.

        An exception raised inside the block takes priority over an error from close().
        """
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
