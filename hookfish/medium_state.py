"""Objectives, countdown timer and scrolling background of the medium mode."""

from __future__ import annotations

import random
from dataclasses import dataclass

from hookfish.menus import Rect

TIMER_DURATION_MS = 120000
IDLE_TIME_TEXT = "02:00"

OBJECTIVE_COUNT = 5
NORMAL_FISH_TYPES = 10
MIN_OBJECTIVE_FISH = 4
OBJECTIVE_FISH_SPREAD = 6

POND_Y = 250
POND_WIDTH = 1280
POND_HEIGHT = 470
POND_WRAP_LIMIT = 1279


@dataclass
class Objective:
    """A fish type the player must catch, and how many are still wanted."""

    type: int
    count: int


def make_objectives(rng: random.Random | None = None) -> list[Objective]:
    """Pick five distinct normal fish types, each wanted four to nine times."""
    rng = rng if rng is not None else random.Random()
    types = list(range(NORMAL_FISH_TYPES))
    rng.shuffle(types)
    return [
        Objective(fish_type, rng.randrange(OBJECTIVE_FISH_SPREAD) + MIN_OBJECTIVE_FISH)
        for fish_type in types[:OBJECTIVE_COUNT]
    ]


@dataclass
class MediumTimer:
    """The two-minute countdown shown during a medium game, in milliseconds."""

    start_time: int = 0
    running: bool = False
    remaining: int = TIMER_DURATION_MS

    def start(self, now: int) -> None:
        """Start counting down from time ``now``."""
        self.start_time = now
        self.running = True
        self.remaining = TIMER_DURATION_MS

    def formatted(self, now: int, total_paused: int, paused: bool) -> str:
        """The remaining time as ``MM:SS``.

        Before the timer starts, after it has run out, and while paused, the
        full duration is shown. Reaching the end stops the timer.
        """
        if not self.running or paused:
            return IDLE_TIME_TEXT
        elapsed = max(now - self.start_time - total_paused, 0)
        self.remaining = max(TIMER_DURATION_MS - elapsed, 0)
        if elapsed >= TIMER_DURATION_MS:
            elapsed = TIMER_DURATION_MS
            self.running = False
        left = TIMER_DURATION_MS - elapsed
        minutes, rest = divmod(left, 60000)
        return f"{minutes:02d}:{rest // 1000:02d}"


@dataclass
class PondScroll:
    """Horizontal positions of the two pond images that scroll side by side."""

    pond_x: int = 0
    pond2_x: int = -POND_WRAP_LIMIT

    def step(self) -> tuple[int, int]:
        """Move both images one pixel right, wrapping at the edge."""
        self.pond_x += 1
        self.pond2_x += 1
        if self.pond_x > POND_WRAP_LIMIT:
            self.pond_x = -POND_WRAP_LIMIT
        if self.pond2_x > POND_WRAP_LIMIT:
            self.pond2_x = -POND_WRAP_LIMIT
        return self.pond_x, self.pond2_x

    @property
    def pond_rect(self) -> Rect:
        return Rect(self.pond_x, POND_Y, POND_WIDTH, POND_HEIGHT)

    @property
    def pond2_rect(self) -> Rect:
        return Rect(self.pond2_x, POND_Y, POND_WIDTH, POND_HEIGHT)