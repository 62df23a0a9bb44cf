"""Question-and-answer prompts: a title followed by a set of action buttons."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .errors import ErrorCode, GameError

QUIT_CODE = "?"
QUIT_LABEL = "Quitter"


@dataclass(frozen=True)
class ActionButton:
    """A button of a question: its label, its action code and the action's text."""

    name: str
    code: str
    action: str

    def __str__(self) -> str:
        return f"aB{{{self.name}:{self.code}->{self.action}}}"


@dataclass
class Question:
    """A parsed question: its title and its answer buttons."""

    title: str
    buttons: List[ActionButton] = field(default_factory=list)

    @property
    def labels(self) -> List[str]:
        """Labels shown to the user, the quit button last."""
        return [button.name for button in self.buttons] + [QUIT_LABEL]

    def answer(self, index: int) -> Tuple[str, Optional[str]]:
        """Return ``(code, action)`` for the clicked button.

        Any index past the answer buttons is the quit button and gives
        ``(QUIT_CODE, None)``.
        """
        if index < 0:
            raise GameError(ErrorCode.ARGUMENT, "Le bouton n'existe pas")
        if index >= len(self.buttons):
            return QUIT_CODE, None
        button = self.buttons[index]
        return button.code, button.action


def parse_question(line: str, allowed_codes: str) -> Question:
    """Parse ``[title]{label:Caction}...`` where C is one of ``allowed_codes``."""
    if line is None:
        raise GameError(ErrorCode.ARGUMENT, "Il n'y à pas de ligne à traiter")
    if allowed_codes is None:
        raise GameError(ErrorCode.ARGUMENT, "Il n'y à pas de liste de code d'action authorisé")
    if not line.startswith("["):
        first = line[:1]
        raise GameError(
            ErrorCode.ARGUMENT,
            f"Mauvais format : '{first}' est le 1er caractère lu dans '{line}'",
        )
    close = line.find("]", 1)
    if close < 0:
        raise GameError(ErrorCode.FILE, "La question n'est pas compléte")
    title = line[1:close]
    rest = line[close + 1:]

    buttons: List[ActionButton] = []
    while rest.startswith("{"):
        name, sep, after = rest[1:].partition(":")
        if not sep:
            raise GameError(ErrorCode.FILE, "Le texte du bouton n'est pas complet")
        if not after:
            raise GameError(ErrorCode.FILE, "Il n'y à pas de code d'action")
        code = after[0]
        if code == QUIT_CODE:
            raise GameError(
                ErrorCode.FILE,
                "Le code d'action '?' sert pour quitter l'application.",
            )
        if code not in allowed_codes:
            raise GameError(ErrorCode.FILE, f"Le code d'action '{code}' est inconnue")
        action, sep, rest = after[1:].partition("}")
        if not sep:
            raise GameError(ErrorCode.FILE, "L'action du bouton n'est pas complet")
        buttons.append(ActionButton(name, code, action))
    return Question(title, buttons)