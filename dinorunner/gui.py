"""On-screen buttons of the menu and the in-game bar."""

from __future__ import annotations

from dataclasses import dataclass

from dinorunner.game import Rect

NORMAL_FILL = (200, 200, 200)
HOVER_FILL = (150, 150, 255)


@dataclass
class Button:
    """A labelled rectangular button that tracks mouse hover."""

    label: str
    x: float
    y: float
    width: float
    height: float
    hovered: bool = False

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def fill(self) -> tuple[int, int, int]:
        return HOVER_FILL if self.hovered else NORMAL_FILL

    def contains(self, x: float, y: float) -> bool:
        return self.rect.contains(x, y)

    def update_hover(self, x: float, y: float) -> bool:
        """Record whether the pointer is over the button and return it."""
        self.hovered = self.contains(x, y)
        return self.hovered

    def is_clicked(self, x: float, y: float, click: bool) -> bool:
        return click and self.contains(x, y)


@dataclass
class Buttons:
    start: Button
    pause: Button
    restart: Button
    exit: Button


def create_buttons(width: int, height: int) -> Buttons:
    """Lay out the four buttons for a window of the given size."""
    cx, cy = width // 2, height // 2
    return Buttons(
        start=Button("START GAME", cx - 75, cy - 25, 150, 50),
        pause=Button("PAUSE", 10, 10, 80, 30),
        restart=Button("RESTART", 100, 10, 80, 30),
        exit=Button("EXIT", cx - 50, cy + 50, 100, 40),
    )