"""Choosing a fixed number of items to add to, or remove from, an inventory."""

from __future__ import annotations

from typing import List, MutableSequence, Sequence

from .errors import ErrorCode, GameError
from .item import Item


class ItemSelection:
    """Track which of ``items`` are picked until exactly ``count`` are.

    A negative ``count`` means the picked positions are to be removed from
    the inventory rather than the picked items added to it.
    """

    def __init__(self, items: Sequence[Item], count: int) -> None:
        if items is None:
            raise GameError(ErrorCode.ARGUMENT, "Il n'y à pas de liste d'item")
        if not count:
            raise GameError(ErrorCode.ARGUMENT, "Le joueur ne peut pas séléctionner d'objet")
        self.items = list(items)
        self.remove = count < 0
        self.count = abs(count)
        self._active = [False] * len(self.items)

    @property
    def active_count(self) -> int:
        return sum(self._active)

    @property
    def complete(self) -> bool:
        """True once exactly the required number of items is picked."""
        return self.active_count == self.count

    def is_active(self, index: int) -> bool:
        return self._active[index]

    def toggle(self, index: int) -> bool:
        """Pick or unpick the item at ``index``; return whether it is now picked."""
        if not 0 <= index < len(self.items):
            raise GameError(ErrorCode.ARGUMENT, f"L'objet n°{index} n'existe pas")
        self._active[index] = not self._active[index]
        return self._active[index]

    def chosen(self) -> List[int]:
        """Positions of the picked items, in list order."""
        return [index for index, active in enumerate(self._active) if active]

    def apply(self, inventory: MutableSequence[Item]) -> None:
        """Add the picked items to ``inventory``, or remove those positions from it."""
        if not self.complete:
            raise GameError(
                ErrorCode.ARGUMENT,
                f"{self.active_count} objet(s) choisi(s) sur {self.count}",
            )
        for index in self.chosen():
            if self.remove:
                if index >= len(inventory):
                    raise GameError(ErrorCode.ARGUMENT, f"L'inventaire n'a pas d'objet n°{index}")
                del inventory[index]
            else:
                inventory.append(self.items[index])