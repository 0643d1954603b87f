"""Reading XPM images into 32-bit pixel values."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike

from .colors import text_to_rgb
from .wordtab import find, find_unquoted, split_words

TRANSPARENT = 0xFF000000
_DIRECT_CPP = 2
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: its size and row-major 32-bit pixel values."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def _blank_comments(text: str, opener: str, closer: str) -> str:
    while (start := find_unquoted(text, opener, len(text))) != -1:
        body_start = start + len(opener)
        body = find(text[body_start:], closer, len(text) - body_start)
        stop = len(text) if body == -1 else body_start + body + len(closer)
        text = text[:start] + " " * (stop - start) + text[stop:]
    return text


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces.

    Block comments are blanked first, then line comments together with
    their newline; the length of the text never changes.
    """
    text = _blank_comments(text, "/*", "*/")
    return _blank_comments(text, "//", "\n")


def quoted_strings(text: str) -> list[str]:
    """Return the contents of the double-quoted strings of ``text`` in order."""
    return _QUOTED.findall(text)


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(source: Iterator[str], part: str) -> str:
    line = next(source, None)
    if line is None:
        raise ValueError(f"XPM data ends before its {part}")
    return line


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM data given as its strings: header, colours, then pixel rows.

    Raises :class:`ValueError` when the data is malformed or incomplete.
    """
    source = iter(lines)
    words = split_words(_next_line(source, "header"))
    if len(words) < 4:
        raise ValueError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise ValueError("XPM header values must be positive")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour table")
        keys = split_words(line[cpp:])
        if "c" not in keys:
            raise ValueError(f"colour line has no 'c' key: {line!r}")
        at = keys.index("c") + 1
        if at >= len(keys):
            raise ValueError(f"colour line has no colour after 'c': {line!r}")
        end = keys[at + 1] if at + 1 < len(keys) else None
        rgb = text_to_rgb(keys[at], end)
        key = line[:cpp]
        if cpp <= _DIRECT_CPP:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    pixels: list[int] = []
    for _ in range(height):
        line = _next_line(source, "pixel rows")
        if len(line) < width * cpp:
            raise ValueError(f"pixel row is too short: {line!r}")
        for x in range(width):
            colour = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            pixels.append(TRANSPARENT if colour == -1 else colour)
    return XpmImage(width=width, height=height, pixels=tuple(pixels))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    with open(path, encoding="latin-1") as stream:
        text = stream.read()
    return parse_xpm(quoted_strings(strip_comments(text)))