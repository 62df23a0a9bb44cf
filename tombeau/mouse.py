"""Mouse button decoding and bookkeeping of the optional media libraries."""

from __future__ import annotations

from enum import Enum, IntFlag
from typing import List


class Click(Enum):
    """Which mouse button is held."""

    LEFT = "gauche"
    MIDDLE = "mollette"
    RIGHT = "droit"
    UNKNOWN = "inconnu"


def _button(number: int) -> int:
    return 1 << (number - 1)


def click_from_buttons(mask: int) -> Click:
    """Decode a button-state mask; left wins over middle, middle over right."""
    if mask & _button(1):
        return Click.LEFT
    if mask & _button(2):
        return Click.MIDDLE
    if mask & _button(3):
        return Click.RIGHT
    return Click.UNKNOWN


class Library(IntFlag):
    """Optional media libraries, each on its own bit."""

    TTF = 1 << 0
    IMG = 1 << 1
    MIX = 1 << 2


def libraries_to_close(initialised: int) -> List[Library]:
    """Libraries among ``initialised`` in the order they must be shut down."""
    return [lib for lib in reversed(list(Library.__members__.values())) if initialised & lib]