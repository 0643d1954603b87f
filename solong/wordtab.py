"""Small string helpers used when scanning XPM text."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[ \t]+")


def _until_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def find(text: str, needle: str, limit: int) -> int:
    """Return the position of ``needle`` in ``text``, or -1.

    The search fails at once when ``needle`` is longer than ``limit``;
    ``text`` ends at its first NUL character.
    """
    if len(needle) > limit:
        return -1
    return _until_nul(text).find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skip matches that lie inside double quotes."""
    if len(needle) > limit:
        return -1
    text = _until_nul(text)
    quoted = False
    for pos in range(max(len(text) - len(needle) + 1, 0)):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _SEPARATORS.split(_until_nul(text)) if word]