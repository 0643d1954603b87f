"""The tree animation clock and the move counter label."""

from __future__ import annotations

from .printf import itoa

INT_MAX = 2**31 - 1
FRAME_LENGTH = 1000
TREE_FRAMES = 7

_RIPE_END = 2999
_RIPE_HOLD = 7000
_BARE_START = 6000
_BARE_END = 6999
_BARE_HOLD = 10000


class TreeAnimation:
    """Cycles the tree sprites: growth, a ripe pause, then every second
    cycle a dog visit, then a bare tree pause before starting again."""

    def __init__(self) -> None:
        self.anim = 0
        self._wait = 0
        self._dog_turn = False

    @property
    def frame(self) -> int:
        """Index of the tree sprite to show."""
        return self.anim // FRAME_LENGTH

    def tick(self) -> int:
        """Advance the clock by one step and return the frame to show."""
        self.anim += 1
        if self.anim == _RIPE_END:
            self.anim -= 1
            self._hold_ripe()
        if self.anim == _BARE_END:
            self.anim -= 1
            waited = self._wait
            self._wait += 1
            if waited == _BARE_HOLD:
                self._wait = 0
                self.anim = 0
        return self.frame

    def _hold_ripe(self) -> None:
        waited = self._wait
        self._wait += 1
        if waited != _RIPE_HOLD:
            return
        self.anim += 1
        self._wait = 0
        if not self._dog_turn:
            self.anim = _BARE_START
            self._dog_turn = True
        else:
            self._dog_turn = False


def moves_label(count: int) -> str:
    """Return the move counter text, or ``MAX`` once the count overflows."""
    if count >= INT_MAX or count < 0:
        return "MAX"
    return "Movements:" + itoa(count)