"""Leaping fish, scoring and lives of the medium-difficulty pond."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from hookfish.medium_state import Objective, make_objectives
from hookfish.menus import Rect

MAX_FISH = 10
NORMAL_SLOTS = 7
FISH_SIZE = 80
STARTING_LIVES = 3

GOLDEN_TYPE = 11
PIRANHA_TYPE = 10
NORMAL_FISH_TYPES = 10

SPAWN_ODDS = 150
GOLDEN_PERCENT = 10
PIRANHA_PERCENT = 20
GOLDEN_POINTS = 15
OBJECTIVE_POINTS = 2

MIN_BASE_X = 40
MAX_BASE_X = 1240
MIN_BASE_Y = 400
MAX_BASE_Y = 720
MIN_ARC = 70
ARC_SPREAD = 60

ARC_STEP = 0.080
RIPPLE_FRAMES = 10
RIPPLE_IMAGES = 4
RIPPLE_FRAMES_PER_IMAGE = 3

FISH_IMAGES = (
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
    "png/piranha.png",
    "png/golden.png",
)


@dataclass
class PondFish:
    """One fish slot: a fish leaping along a half-circle out of the water."""

    rect: Rect = field(default_factory=lambda: Rect(0, 0, 0, 0))
    arc_height: float = 0.0
    t: float = 0.0
    going_up: bool = False
    active: bool = False
    ripple_active: bool = False
    ripple_frame: int = 0
    direction: int = 1
    type: int = 0
    base_x: int = 0
    base_y: int = 0
    clicked: bool = False

    @property
    def flipped(self) -> bool:
        """Whether the image is drawn mirrored, for fish leaping leftwards."""
        return self.direction == -1

    @property
    def image(self) -> str:
        return FISH_IMAGES[self.type]

    @property
    def ripple_image_index(self) -> int | None:
        """Which ripple image to draw, or None when no ripple shows."""
        if not self.ripple_active:
            return None
        frame = self.ripple_frame // RIPPLE_FRAMES_PER_IMAGE
        return frame if frame < RIPPLE_IMAGES else None

    def _hit(self, x: int, y: int) -> bool:
        r = self.rect
        return r.x <= x <= r.x + r.w and r.y <= y <= r.y + r.h


class MediumGame:
    """The pond, its fish and the player's score, lives and remaining target."""

    def __init__(
        self,
        rng: random.Random | None = None,
        objectives: list[Objective] | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.objectives = (
            objectives if objectives is not None else make_objectives(self.rng)
        )
        self.target_score = sum(obj.count for obj in self.objectives)
        self.score = 0
        self.lives = STARTING_LIVES
        self.life_lost = False
        self.paused = False
        self.fishes = [PondFish() for _ in range(MAX_FISH)]

    def _launch(self, fish: PondFish, slot: int) -> None:
        rng = self.rng
        fish.base_x = rng.randrange(MAX_BASE_X - MIN_BASE_X + 1) + MIN_BASE_X
        fish.base_y = rng.randrange(MAX_BASE_Y - MIN_BASE_Y) + MIN_BASE_Y
        direction = 1 if rng.randrange(2) == 0 else -1
        if slot < NORMAL_SLOTS:
            fish_type = rng.randrange(NORMAL_FISH_TYPES)
            if rng.randrange(100) < GOLDEN_PERCENT:
                fish_type = GOLDEN_TYPE
            elif rng.randrange(100) < PIRANHA_PERCENT:
                fish_type = PIRANHA_TYPE
        else:
            fish_type = slot - NORMAL_SLOTS
        fish.arc_height = float(rng.randrange(ARC_SPREAD) + MIN_ARC)
        fish.rect = Rect(fish.base_x, fish.base_y, fish.rect.w, fish.rect.h)
        fish.t = 0.0
        fish.going_up = True
        fish.active = True
        fish.ripple_active = False
        fish.ripple_frame = 0
        fish.direction = direction
        fish.type = fish_type
        fish.clicked = False

    def spawn(self) -> None:
        """Give each idle slot a small chance to launch a new fish."""
        if self.paused:
            return
        for slot, fish in enumerate(self.fishes):
            if not fish.active and self.rng.randrange(SPAWN_ODDS) == 0:
                self._launch(fish, slot)

    def update_motion(self) -> None:
        """Move every leaping fish one step along its arc."""
        if self.paused:
            return
        for fish in self.fishes:
            if not fish.active:
                continue
            x = fish.base_x + fish.direction * fish.arc_height * math.cos(fish.t)
            y = fish.base_y - fish.arc_height * math.sin(fish.t)
            fish.rect = Rect(int(x), int(y), FISH_SIZE, FISH_SIZE)
            fish.t += ARC_STEP
            if fish.t >= math.pi:
                fish.active = False
                fish.ripple_active = True
                fish.ripple_frame = 0
            if fish.ripple_active:
                fish.ripple_frame += 1
                if fish.ripple_frame > RIPPLE_FRAMES:
                    fish.ripple_active = False

    def _catch_objective(self, fish: PondFish) -> None:
        for objective in self.objectives:
            if fish.type == objective.type:
                self.score += OBJECTIVE_POINTS
                self.target_score = max(self.target_score - 1, 0)
                if objective.count > 0:
                    objective.count -= 1
                else:
                    self.target_score = 0
                fish.clicked = True
                return

    def click(self, x: int, y: int) -> int:
        """Catch every fish under the point; returns how many were caught."""
        caught = 0
        for fish in self.fishes:
            if not fish.active or fish.clicked or not fish._hit(x, y):
                continue
            if fish.type == GOLDEN_TYPE:
                self.score += GOLDEN_POINTS
                fish.clicked = True
            elif fish.type == PIRANHA_TYPE:
                self.lives -= 1
                if self.lives == 0:
                    self.life_lost = True
                fish.clicked = True
            else:
                self._catch_objective(fish)
                if not fish.clicked:
                    if self.score == 0:
                        continue
                    if self.score > 0:
                        self.score -= 1
                    fish.clicked = True
            caught += 1
        return caught