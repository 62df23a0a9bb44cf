"""Non-player characters and their one-line text description."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Optional

from .character import Character, StatLimits
from .errors import ErrorCode, GameError

_NUMBER = r"\s*([+-]?\d+)"
_STATS = re.compile(",".join([_NUMBER] * 5))


@dataclass
class NPC(Character):
    """A non-player character, shown as an enemy."""

    DISPLAY_KIND: ClassVar[Optional[str]] = "mechant"


def parse_npc(text: str, limits: Optional[StatLimits] = None) -> NPC:
    """Read ``name{strength,intelligence,critical,armour,hp}`` into an NPC."""
    if not text:
        raise GameError(ErrorCode.ARGUMENT, "Il n'y à pas de texte à lire")
    brace = text.find("{")
    if brace < 0:
        raise GameError(ErrorCode.FILE, "Il manque le '{' après le nom du PNJ")
    stats = _STATS.match(text, brace + 1)
    if stats is None:
        raise GameError(ErrorCode.FILE, "Les statistiques du PNJ sont incomplètes")
    strength, intelligence, critical, armour, hp = (int(v) for v in stats.groups())
    npc = NPC(text[:brace], limits=limits or StatLimits())
    npc.assign(strength, intelligence, hp, armour, critical, 0, None)
    return npc