"""Error codes shared by the whole game and the exception that carries them."""

from __future__ import annotations

from enum import Enum, auto


class ErrorCode(Enum):
    """Kinds of failure the game can report."""

    OK = auto()
    INIT = auto()
    MEMORY = auto()
    ARGUMENT = auto()
    MISSING = auto()
    COLOR = auto()
    SOUND = auto()
    DISPLAY = auto()
    OTHER = auto()
    FILE = auto()


_DESCRIPTIONS = {
    ErrorCode.OK: "Tout c'est bien passé.",
    ErrorCode.INIT: "Erreur lors d'une initialisation de ",
    ErrorCode.MEMORY: "Débordement mémoire : ",
    ErrorCode.ARGUMENT: "Un argument est non-valide : ",
    ErrorCode.MISSING: "La donné n'est pas initialisé : ",
    ErrorCode.COLOR: "Les pinceaux se sont mélangé.",
    ErrorCode.SOUND: "Le son",
    ErrorCode.DISPLAY: "Erreur à l'affichage.",
    ErrorCode.OTHER: "Erreur sans précision.",
}

_UNKNOWN = "Code erreur inconnu, veuillez l'ajouter."


def describe(code: ErrorCode) -> str:
    """Return the human-readable text that introduces an error of this kind."""
    return _DESCRIPTIONS.get(code, _UNKNOWN)


class GameError(Exception):
    """An error raised by the game, tagged with an :class:`ErrorCode`."""

    def __init__(self, code: ErrorCode, message: str = "") -> None:
        self.code = code
        self.message = message
        super().__init__(f"{describe(code)}{message}")