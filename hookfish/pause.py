"""Pause menu: paused-time bookkeeping, button hit-testing and objective images."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from hookfish.menus import Rect

RESUME_BUTTON = Rect(200, 145, 400, 50)
OBJECTIVES_BUTTON = Rect(200, 205, 400, 50)
SOUND_BUTTON = Rect(200, 265, 400, 50)
SOUND_TOGGLE = Rect(500, 275, 40, 30)
RULES_BUTTON = Rect(200, 325, 400, 50)
EXIT_BUTTON = Rect(200, 385, 400, 50)

YES_BUTTON = Rect(150, 350, 200, 80)
NO_BUTTON = Rect(450, 350, 200, 80)

OBJECTIVE_CONFIRM_BUTTON = Rect(300, 380, 200, 60)

_FISH_IMAGES = (
    "png/brown.png",
    "png/emerald.png",
    "png/green.png",
    "png/lavender.png",
    "png/olive.png",
    "png/orange.png",
    "png/purple.png",
    "png/red.png",
    "png/silver.png",
    "png/teal.png",
)

# Easy mode numbers its objective fish from 1, hard mode from 2.
_EASY_FIRST_TYPE = 1
_HARD_FIRST_TYPE = 2


@dataclass
class PauseClock:
    """Tracks whether the game is paused and how long it has spent paused, in ms."""

    paused: bool = False
    pause_start: int = 0
    total_paused: int = 0

    def pause(self, now: int) -> None:
        """Enter the paused state at time ``now``; a second call changes nothing."""
        if self.paused:
            return
        self.paused = True
        self.pause_start = now

    def resume(self, now: int) -> int:
        """Leave the paused state at time ``now`` and return the total paused time."""
        if self.paused:
            self.total_paused += now - self.pause_start
            self.paused = False
        return self.total_paused


class PauseAction(Enum):
    """What a click on the pause menu asks for."""

    RESUME = "resume"
    OBJECTIVES = "objectives"
    TOGGLE_SOUND = "toggle_sound"
    GAME_RULES = "game_rules"
    EXIT = "exit"


_PAUSE_TARGETS = (
    (RESUME_BUTTON, PauseAction.RESUME),
    (OBJECTIVES_BUTTON, PauseAction.OBJECTIVES),
    (SOUND_BUTTON, PauseAction.TOGGLE_SOUND),
    (RULES_BUTTON, PauseAction.GAME_RULES),
    (EXIT_BUTTON, PauseAction.EXIT),
)


def pause_menu_click(x: int, y: int) -> PauseAction | None:
    """The action for a click on the pause menu, or None."""
    return next(
        (action for rect, action in _PAUSE_TARGETS if rect.contains(x, y)), None
    )


def exit_confirm_click(x: int, y: int) -> bool | None:
    """Answer to the exit prompt: True for yes, False for no, None for a miss."""
    if NO_BUTTON.contains(x, y):
        return False
    if YES_BUTTON.contains(x, y):
        return True
    return None


def _image_for(fish_type: int, first_type: int) -> str | None:
    index = fish_type - first_type
    if 0 <= index < len(_FISH_IMAGES):
        return _FISH_IMAGES[index]
    return None


def easy_objective_image(fish_type: int) -> str | None:
    """Image path of an easy-mode objective fish, or None for an unknown type."""
    return _image_for(fish_type, _EASY_FIRST_TYPE)


def hard_objective_image(fish_type: int) -> str | None:
    """Image path of a hard-mode objective fish, or None for an unknown type."""
    return _image_for(fish_type, _HARD_FIRST_TYPE)