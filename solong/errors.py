"""Errors raised for bad arguments, files and maps, and argument checking."""

from __future__ import annotations

from collections.abc import Sequence

MAP_SUFFIX = ".ber"


class SoLongError(Exception):
    """Base class of every error the game reports before it starts."""

    message = "Error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidCharError(SoLongError):
    """The map holds an unknown tile or a wrong number of special tiles."""

    message = "Error, invalid characteres"


class InvalidMapError(SoLongError):
    """The map is empty, not walled in, not rectangular or not solvable."""

    message = "Error, invalid map"


class InvalidFileError(SoLongError):
    """The map file could not be opened."""

    message = "Error, invalid fd"


class InvalidArgumentError(SoLongError):
    """The command line does not name exactly one ``.ber`` file."""

    message = "Error, invalid argument"


def check_arg(argv: Sequence[str]) -> str:
    """Return the map path from a full argument vector (program name first).

    Raises :class:`InvalidArgumentError` unless exactly one non-empty
    argument ending in ``.ber`` follows the program name.
    """
    if len(argv) != 2 or not argv[1]:
        raise InvalidArgumentError()
    path = argv[1]
    if not path.endswith(MAP_SUFFIX):
        raise InvalidArgumentError()
    return path