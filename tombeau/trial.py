"""Trials the player must pass: an agility course or a combat."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .character import Character, StatLimits, fight
from .errors import ErrorCode, GameError
from .npc import parse_npc

MARGIN = 25
BASE_TOLERANCE = 100

Point = Tuple[int, int]


class TrialKind(Enum):
    """The kind of trial, keyed by its letter in a chapter file."""

    AGILITY = "A"
    COMBAT = "C"


def parse_trial(line: str) -> Tuple[TrialKind, str]:
    """Split a trial line into its kind and the text that follows the letter."""
    if not line:
        raise GameError(ErrorCode.FILE, "Le type d'épreuve est absent.")
    try:
        kind = TrialKind(line[0])
    except ValueError:
        raise GameError(
            ErrorCode.FILE, f"Le type d'épreuve '{line[0]}' est inconnue."
        ) from None
    return kind, line[1:]


def _c_div(value: int, divisor: int) -> int:
    quotient = abs(value) // abs(divisor)
    return quotient if (value >= 0) == (divisor > 0) else -quotient


def agility_difficulty(grade: str, agility: int, limits: Optional[StatLimits] = None) -> int:
    """Number of segments to trace for grade ``F``, ``M`` or ``D`` at this agility."""
    limits = limits or StatLimits()
    scales = {"F": limits.easy, "M": limits.medium, "D": limits.hard}
    letter = grade[:1] if grade else ""
    if letter not in scales:
        raise GameError(ErrorCode.FILE, "Ce type de difficulté est inconnue")
    difficulty = scales[letter](limits.agility) - agility + 2
    return _c_div(difficulty, 2)


def distance_to_line(point: Point, start: Point, end: Point) -> float:
    """Distance from ``point`` to the infinite line through ``start`` and ``end``."""
    delta_y = end[1] - start[1]
    delta_x = end[0] - start[0]
    norm = math.hypot(delta_x, delta_y)
    if norm == 0:
        return math.hypot(point[0] - start[0], point[1] - start[1])
    num = (delta_y * point[0] - delta_x * point[1]
           + end[0] * start[1] - end[1] * start[0])
    return abs(num) / norm


@dataclass
class _Zone:
    x: int
    y: int
    w: int
    h: int

    def contains(self, point: Point) -> bool:
        px, py = point
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h

    @property
    def centre(self) -> Point:
        return self.x + _c_div(self.w, 2), self.y + _c_div(self.h, 2)


class AgilityCourse:
    """The agility trial: follow a chain of segments without straying from them."""

    def __init__(self, width: int, height: int, difficulty: int, rng=None) -> None:
        if width - 2 * MARGIN <= 0 or height - 2 * MARGIN <= 0:
            raise GameError(ErrorCode.ARGUMENT, "La zone de l'épreuve est trop petite")
        self.width = width
        self.height = height
        self.difficulty = difficulty
        self.tolerance = BASE_TOLERANCE - difficulty
        self._rng = rng or random
        size = _c_div(self.tolerance, 2)
        self.start = _Zone(MARGIN, MARGIN, size, size)
        size = _c_div(self.tolerance, 4)
        self.end = _Zone(width, height, size, size)
        self.count = 0
        self.tracing = False
        self.failed = False

    @property
    def succeeded(self) -> bool:
        return not self.failed and self.count >= self.difficulty

    @property
    def finished(self) -> bool:
        return self.failed or self.succeeded

    @property
    def line(self) -> Tuple[Point, Point]:
        """Centres of the start and end zones, between which the line is drawn."""
        return self.start.centre, self.end.centre

    @property
    def counter(self) -> str:
        done = int(math.fmod(self.count, 1000))
        total = int(math.fmod(self.difficulty, 1000))
        return f"{done:03d}/{total:03d}"

    def _next_segment(self) -> None:
        self.start.x, self.start.y = self.end.x, self.end.y
        self.end.x = self._rng.randrange(self.width - 2 * MARGIN) + MARGIN
        self.end.y = self._rng.randrange(self.height - 2 * MARGIN) + MARGIN
        self.count += 1

    def move(self, point: Point) -> bool:
        """Follow the cursor to ``point``; return True when a segment is completed."""
        if self.finished:
            return False
        if self.tracing and not self.start.contains(point):
            distance = distance_to_line(
                point, (self.start.x, self.start.y), (self.end.x, self.end.y)
            )
            if distance > self.tolerance:
                self.failed = True
                return False
            if self.end.contains(point):
                self._next_segment()
                return True
        elif self.start.contains(point):
            self.tracing = True
        return False


def run_combat(line: str, player: Character, limits: Optional[StatLimits] = None,
               rng=None) -> bool:
    """Fight the NPC described by ``line``; return True if the player wins."""
    limits = limits or player.limits
    enemy = parse_npc(line, limits)
    return fight(player, enemy, limits, rng)