"""Title-screen buttons and the bookkeeping of which menu windows are open."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from hookfish.menus import Rect


class MainMenuAction(Enum):
    """The buttons on the title screen."""

    NEW_GAME = "New Game"
    HIGH_SCORES = "High Scores"
    SETTINGS = "Settings"
    EXIT = "Exit"


MAIN_MENU_BUTTONS = (
    (Rect(300, 250, 250, 80), MainMenuAction.NEW_GAME),
    (Rect(750, 300, 250, 80), MainMenuAction.HIGH_SCORES),
    (Rect(280, 450, 250, 80), MainMenuAction.SETTINGS),
    (Rect(730, 500, 250, 80), MainMenuAction.EXIT),
)


def main_menu_click(x: int, y: int) -> MainMenuAction | None:
    """The title-screen button under the point, or None."""
    return next(
        (action for rect, action in MAIN_MENU_BUTTONS if rect.contains(x, y)), None
    )


@dataclass
class MenuWindows:
    """Which of the title screen's sub-windows are currently open."""

    open_windows: set[MainMenuAction] = field(default_factory=set)

    def press(self, action: MainMenuAction) -> bool:
        """Handle a button press.

        Returns True when the window is newly opened, False when it was
        already open and should only be raised.
        """
        if action in self.open_windows:
            return False
        self.open_windows.add(action)
        return True