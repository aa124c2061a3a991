"""Hit-testing and timing for the difficulty, settings, weather and loading screens."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in window pixels."""

    x: int
    y: int
    w: int
    h: int

    def contains(self, x: int, y: int) -> bool:
        """Whether the point lies inside; the right and bottom edges are outside."""
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class NewGameAction(Enum):
    """What a click on the difficulty screen asks for."""

    START_EASY = "start_easy"
    START_MEDIUM = "start_medium"
    START_HARD = "start_hard"
    CLOSE = "close"

    @property
    def difficulty(self) -> Difficulty | None:
        """The difficulty this action starts, or None for closing."""
        return _ACTION_DIFFICULTY.get(self)


_ACTION_DIFFICULTY = {
    NewGameAction.START_EASY: Difficulty.EASY,
    NewGameAction.START_MEDIUM: Difficulty.MEDIUM,
    NewGameAction.START_HARD: Difficulty.HARD,
}


class SettingsAction(Enum):
    """What a click on the settings screen asks for."""

    CONTROLS = "controls"
    TOGGLE_SOUND = "toggle_sound"
    GAME_RULES = "game_rules"
    WEATHER = "weather"
    CLOSE = "close"


CLOSE_BUTTON = Rect(300, 380, 200, 60)

EASY_BUTTON = Rect(200, 140, 400, 60)
MEDIUM_BUTTON = Rect(200, 220, 400, 60)
HARD_BUTTON = Rect(200, 300, 400, 60)

CONTROLS_BUTTON = Rect(200, 130, 400, 50)
SOUND_BUTTON = Rect(200, 190, 400, 50)
RULES_BUTTON = Rect(200, 250, 400, 50)
WEATHER_BUTTON = Rect(200, 310, 400, 50)
SOUND_TOGGLE = Rect(500, 200, 40, 30)

SUNNY_BUTTON = Rect(150, 200, 200, 60)
RAINY_BUTTON = Rect(450, 200, 200, 60)

LOADING_MIN_MS = 5000
LOADING_SPREAD_MS = 10000
LOADING_CYCLE_MS = 5000

_NEW_GAME_TARGETS = (
    (MEDIUM_BUTTON, NewGameAction.START_MEDIUM),
    (HARD_BUTTON, NewGameAction.START_HARD),
    (EASY_BUTTON, NewGameAction.START_EASY),
    (CLOSE_BUTTON, NewGameAction.CLOSE),
)

_SETTINGS_TARGETS = (
    (SOUND_BUTTON, SettingsAction.TOGGLE_SOUND),
    (RULES_BUTTON, SettingsAction.GAME_RULES),
    (CONTROLS_BUTTON, SettingsAction.CONTROLS),
    (WEATHER_BUTTON, SettingsAction.WEATHER),
    (CLOSE_BUTTON, SettingsAction.CLOSE),
)


def new_game_click(x: int, y: int) -> NewGameAction | None:
    """The action for a click on the difficulty screen, or None."""
    return next(
        (action for rect, action in _NEW_GAME_TARGETS if rect.contains(x, y)), None
    )


def settings_click(x: int, y: int) -> SettingsAction | None:
    """The action for a click on the settings screen, or None."""
    return next(
        (action for rect, action in _SETTINGS_TARGETS if rect.contains(x, y)), None
    )


def weather_click(x: int, y: int, sunny: bool) -> tuple[bool, bool]:
    """Apply a click on the weather screen.

    Returns the new sunny setting and whether the screen should close.
    """
    close = CLOSE_BUTTON.contains(x, y)
    if SUNNY_BUTTON.contains(x, y) and not sunny:
        sunny = True
    elif RAINY_BUTTON.contains(x, y) and sunny:
        sunny = False
    return sunny, close


def loading_duration(rng: random.Random | None = None) -> int:
    """How long the loading screen stays up, in milliseconds."""
    rng = rng if rng is not None else random.Random()
    return LOADING_MIN_MS + rng.randrange(LOADING_SPREAD_MS + 1)


def loading_alpha(elapsed_ms: int) -> int:
    """Opacity of the flashing loading text after ``elapsed_ms``."""
    half = LOADING_CYCLE_MS / 2
    t = (elapsed_ms % LOADING_CYCLE_MS) / half
    fade = 250.0 * (1.0 - t) if t < 1.0 else 250.0 * (t - 1.0)
    return int(fade + 5.0)