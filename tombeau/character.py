"""Characters, their statistics, dice rolls and combat."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, ClassVar, Optional

from .errors import ErrorCode, GameError

MIN_LINE_WIDTH = 15
_SEPARATOR = " -"


def _clamp(value: int, maximum: int) -> int:
    return max(0, min(value, maximum))


@dataclass(frozen=True)
class StatLimits:
    """Maximum value of each statistic, and the trial scales derived from them."""

    strength: int = 10
    intelligence: int = 10
    hp: int = 20
    armour: int = 10
    critical: int = 10
    agility: int = 10

    def default(self, maximum: int) -> int:
        """Value given to a statistic left at zero."""
        return maximum // 5

    def normalise(self, value: int, maximum: int) -> int:
        """Bring a statistic within ``0..maximum``."""
        return _clamp(value, maximum)

    def easy(self, maximum: int) -> int:
        return maximum

    def medium(self, maximum: int) -> int:
        return maximum * 3 // 2

    def hard(self, maximum: int) -> int:
        return maximum * 2


def roll(stat: int, stat_max: int, rng=None) -> bool:
    """Roll a die of ``stat_max`` faces; succeed when it does not exceed ``stat``."""
    if stat_max < 1:
        raise GameError(ErrorCode.ARGUMENT, "Le dé doit avoir au moins une face")
    rng = rng or random
    return rng.randint(1, stat_max) <= _clamp(stat, stat_max)


def assemble_line(label: str, value: int, width: int, pattern: str = _SEPARATOR) -> str:
    """Build one ``\\t- label -.-.-> : value`` line padded to ``width - 10``."""
    if not pattern:
        raise GameError(ErrorCode.ARGUMENT, "Le motif de remplissage est vide")
    line = "\t- " + label[: max(width - 13, 0)]
    fill = []
    position = 0
    while len(line) + len(fill) < width - 10:
        fill.append(pattern[position % len(pattern)])
        position += 1
    return f"{line}{''.join(fill)}-> : {value}\n"


@dataclass
class Character:
    """A character of the game; statistics left at zero take their default."""

    DISPLAY_KIND: ClassVar[Optional[str]] = None

    name: str = ""
    strength: int = 0
    intelligence: int = 0
    hp: int = 0
    armour: int = 0
    critical: int = 0
    agility: int = 0
    limits: StatLimits = field(default_factory=StatLimits, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.assign(self.strength, self.intelligence, self.hp,
                    self.armour, self.critical, self.agility, None)

    def assign(self, strength, intelligence, hp, armour, critical, agility, name=None) -> None:
        """Set every statistic (zero means default) and, if given, the name."""
        lim = self.limits

        def pick(value: int, maximum: int) -> int:
            return lim.default(maximum) if value == 0 else value

        self.strength = pick(strength, lim.strength)
        self.intelligence = pick(intelligence, lim.intelligence)
        self.hp = pick(hp, lim.hp)
        self.armour = pick(armour, lim.armour)
        self.critical = pick(critical, lim.critical)
        self.agility = pick(agility, lim.agility)
        if name is not None:
            self.name = name

    def describe(self, kind: Optional[str] = None, line_width: int = 30) -> str:
        """Return a text sheet of the character's statistics."""
        width = max(line_width, MIN_LINE_WIDTH)
        lim = self.limits
        label = kind if kind else "personnage"
        rows = [
            ("PV", self.hp, lim.hp),
            ("Force", self.strength, lim.strength),
            ("Agilite", self.agility, lim.agility),
            ("Armure", self.armour, lim.armour),
            ("Critique", self.critical, lim.critical),
            ("Intelligence", self.intelligence, lim.intelligence),
        ]
        header = f"Le {label} {self.name} à comme statistique :\n"
        return header + "".join(
            assemble_line(text, lim.normalise(value, maximum), width, _SEPARATOR)
            for text, value, maximum in rows
        )

    def __str__(self) -> str:
        return self.describe(self.DISPLAY_KIND, 30)


def attack(attacker: Character, defender: Character,
           limits: Optional[StatLimits] = None, rng=None) -> Optional[int]:
    """Resolve one blow; return the damage dealt, or None if it was dodged."""
    limits = limits or attacker.limits
    if roll(defender.agility, limits.easy(limits.agility), rng):
        return None
    damage = attacker.strength
    if roll(attacker.critical, limits.hard(limits.critical), rng):
        damage *= 2
    damage = max(damage - defender.armour, 0)
    defender.hp -= damage
    return damage


def _combat_report(attacker: Character, defender: Character, damage: int) -> str:
    return (
        f"{attacker.name} a mis {damage} a {defender.name}\n"
        + attacker.describe("Attaquant", 28)
        + defender.describe("Defenseur", 28)
    )


def fight(player: Character, enemy: Character, limits: Optional[StatLimits] = None,
          rng=None, report: Optional[Callable[[str], None]] = None) -> bool:
    """Alternate blows until someone falls; return True if the player wins."""
    limits = limits or player.limits
    while True:
        for attacker, defender in ((player, enemy), (enemy, player)):
            damage = attack(attacker, defender, limits, rng)
            if damage is not None and report is not None:
                report(_combat_report(attacker, defender, damage))
            if defender.hp <= 0:
                return defender is enemy


def lockpick(character: Character, limits: Optional[StatLimits] = None, rng=None) -> bool:
    """Try to pick a lock with the character's agility; True on success."""
    limits = limits or character.limits
    return roll(character.agility, limits.easy(limits.agility), rng)