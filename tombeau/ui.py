"""Clickable buttons and the window that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

from .errors import ErrorCode, GameError
from .geometry import Point, Rect

DEFAULT_WINDOW_SIZE: Point = (500, 500)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise GameError(ErrorCode.COLOR, f"canal de couleur invalide : {channel!r}")

    def inverse(self) -> "Color":
        """The complementary colour, keeping the same opacity."""
        return Color(255 - self.r, 255 - self.g, 255 - self.b, self.a)


DEFAULT_BUTTON_COLOR = Color(122, 122, 122, 255)
DEFAULT_BACKGROUND = Color(255, 125, 0, 255)
BORDER_COLOR = Color(255, 0, 0, 255)


@dataclass(eq=False)
class Button:
    """A clickable area drawn over a widget, with an optional action."""

    rect: Rect
    action: Optional[Callable[..., Any]] = None
    color: Color = DEFAULT_BUTTON_COLOR
    visible: bool = True

    def __post_init__(self) -> None:
        if self.rect is None:
            raise GameError(ErrorCode.ARGUMENT, "Il n'y à pas de widget à rendre cliquable.")
        if self.color is None:
            self.color = DEFAULT_BUTTON_COLOR

    def show(self) -> None:
        """Make the button visible and clickable."""
        self.visible = True

    def hide(self) -> None:
        """Hide the button; a hidden button cannot be clicked."""
        self.visible = False

    def contains(self, point: Point) -> bool:
        """True when ``point`` lies over the button's area."""
        return self.rect.contains(point)


@dataclass
class Window:
    """A window holding plain widgets and buttons over a background colour."""

    title: Optional[str] = None
    size: Point = DEFAULT_WINDOW_SIZE
    background: Color = DEFAULT_BACKGROUND
    buttons: List[Button] = field(default_factory=list)
    widgets: List[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.size is None:
            self.size = DEFAULT_WINDOW_SIZE

    def add_button(self, rect: Rect, action: Optional[Callable[..., Any]] = None,
                   color: Optional[Color] = None) -> Button:
        """Make ``rect`` clickable and add it to the window's buttons."""
        button = Button(rect, action, color if color is not None else DEFAULT_BUTTON_COLOR)
        self.buttons.append(button)
        return button

    def add_widget(self, widget: Any) -> None:
        """Add a non-clickable widget to the window."""
        if widget is None:
            raise GameError(ErrorCode.ARGUMENT, "Il n'y à pas de widget à ajouter")
        self.widgets.append(widget)

    def set_background(self, color: Color) -> None:
        """Change the colour the window is cleared with."""
        if color is None:
            raise GameError(
                ErrorCode.ARGUMENT,
                "Il n'y à pas de pointeur sur la nouvelle couleur de fond",
            )
        self.background = color

    def clicked_button(self, point: Point) -> Optional[Tuple[int, Button]]:
        """Return ``(index, button)`` of the first visible button under ``point``."""
        for index, button in enumerate(self.buttons):
            if button.visible and button.contains(point):
                return index, button
        return None