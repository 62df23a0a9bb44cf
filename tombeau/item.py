"""Items that modify a character's statistics, and their text save format."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, TextIO

from .errors import ErrorCode, GameError


class Stat(IntEnum):
    """A character statistic an item can modify."""

    UNKNOWN = -1
    HP = 0
    STRENGTH = 1
    AGILITY = 2
    ARMOUR = 3
    CRITICAL = 4
    INTELLIGENCE = 5

    def label(self) -> str:
        """Return the display name of the statistic."""
        return _LABELS.get(self, "Stat inconnu")


_LABELS = {
    Stat.HP: "PV",
    Stat.STRENGTH: "Force",
    Stat.AGILITY: "Agilite",
    Stat.ARMOUR: "Armure",
    Stat.CRITICAL: "Critique",
    Stat.INTELLIGENCE: "Intelligence",
}


def _to_stat(stat) -> Stat:
    try:
        result = Stat(stat)
    except ValueError:
        raise GameError(ErrorCode.ARGUMENT, f"ce type de stat est inconnu ({stat})") from None
    if result is Stat.UNKNOWN:
        raise GameError(ErrorCode.ARGUMENT, "ce type de stat est inconnu")
    return result


@dataclass(frozen=True)
class Modifier:
    """A change of ``value`` applied to one statistic."""

    stat: Stat
    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "stat", _to_stat(self.stat))

    def __str__(self) -> str:
        return f"modif{{{self.stat.label()}:{self.value}}}"


@dataclass
class Item:
    """A named item holding a list of statistic modifiers."""

    name: str
    modifiers: List[Modifier] = field(default_factory=list)

    def add_modifier(self, stat, value: int) -> Modifier:
        """Append a modifier; raises GameError for an unknown statistic."""
        modifier = Modifier(stat, value)
        self.modifiers.append(modifier)
        return modifier

    def save(self, stream: TextIO) -> None:
        """Write the item in the game's text save format."""
        if stream is None:
            raise GameError(ErrorCode.ARGUMENT, "Il n'y as pas de fichier à lire")
        stream.write(f"{self.name} {len(self.modifiers)}\n")
        for modifier in self.modifiers:
            stream.write(f"\t{int(modifier.stat)} {modifier.value}\n")

    @classmethod
    def load(cls, stream: TextIO) -> "Item":
        """Read one item written by :meth:`save` from the stream."""
        if stream is None:
            raise GameError(ErrorCode.ARGUMENT, "Il n'y as pas de fichier à lire")
        header = stream.readline().split()
        try:
            name, count = header[0], int(header[1])
        except (IndexError, ValueError):
            raise GameError(
                ErrorCode.MISSING,
                "Une erreur c'est produite lors de la lecture du nom de l'item",
            ) from None
        item = cls(name)
        for number in range(count):
            parts = stream.readline().split()
            try:
                stat, value = int(parts[0]), int(parts[1])
            except (IndexError, ValueError):
                raise GameError(
                    ErrorCode.MISSING,
                    f"Le modificateur N°{number} n'à pas était entièrement lu.",
                ) from None
            item.add_modifier(stat, value)
        return item

    def __str__(self) -> str:
        mods = ", ".join(str(m) for m in self.modifiers)
        return f"item{{ Nom='{self.name}' modificateurs=[{mods}] }}"