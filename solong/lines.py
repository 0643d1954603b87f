"""Line-by-line reading of map files through a fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from typing import TextIO

from .errors import InvalidFileError

BUFFER_SIZE = 1024


def iter_lines(stream: TextIO, buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield the lines of a text stream, each keeping its trailing newline.

    The stream is read ``buffer_size`` characters at a time; a last line
    without a newline is yielded as it is, and empty input yields nothing.
    """
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    pending = ""
    while chunk := stream.read(buffer_size):
        pending += chunk
        *complete, pending = pending.split("\n")
        for line in complete:
            yield line + "\n"
    if pending:
        yield pending


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Return every line of the file at ``path``.

    Raises :class:`InvalidFileError` when the file cannot be opened or read.
    """
    try:
        with open(path, encoding="latin-1", newline="") as stream:
            return list(iter_lines(stream))
    except OSError as exc:
        raise InvalidFileError() from exc