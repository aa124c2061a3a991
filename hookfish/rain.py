"""Rain, splash and lightning simulation for the rainy pond."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
POND_TOP = 250
POND_HEIGHT = 470


@dataclass
class Raindrop:
    x: float
    y: float
    length: float
    speed: float
    tilt: float = -5.0


@dataclass
class Splash:
    x: float
    y: float
    life: int
    radius: float

    def points(self) -> list[tuple[int, int]]:
        """The ring of dots drawn for this splash, one every 30 degrees."""
        ring = []
        for angle in range(0, 360, 30):
            rad = math.radians(angle)
            ring.append(
                (
                    int(self.x + self.radius * math.cos(rad)),
                    int(self.y + self.radius * math.sin(rad)),
                )
            )
        return ring


@dataclass
class Lightning:
    points: list[tuple[int, int]] = field(default_factory=list)
    life: int = 5


class Rain:
    """Falling drops with splashes and occasional thunder."""

    def __init__(self, count: int, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.thunder_active = False
        self.thunder_duration = 0
        self.thunder_cooldown = 0
        self.splashes: list[Splash] = []
        self.lightnings: list[Lightning] = []
        self.drops = [self._new_drop() for _ in range(count)]

    def _new_drop(self) -> Raindrop:
        rng = self.rng
        return Raindrop(
            x=float(rng.randrange(SCREEN_WIDTH)),
            y=float(rng.randrange(SCREEN_HEIGHT)),
            length=10.0 + rng.randrange(10),
            speed=10.0 + rng.randrange(15),
        )

    def generate_lightning(self) -> Lightning:
        """Add a zigzag bolt from the top of the screen and return it."""
        x = self.rng.randrange(SCREEN_HEIGHT)
        y = 0
        bolt = Lightning(points=[(x, y)], life=5)
        for _ in range(10):
            x += self.rng.randrange(21) - 10
            y += SCREEN_WIDTH // 10
            x = min(max(x, 0), SCREEN_WIDTH)
            bolt.points.append((x, y))
        self.lightnings.append(bolt)
        return bolt

    def update(self) -> None:
        """Advance the simulation by one frame."""
        for drop in self.drops:
            drop.y += drop.speed
            drop.x += 0.2 * drop.tilt
            if drop.y > SCREEN_WIDTH:
                drop.y = -drop.length
                drop.x = float(self.rng.randrange(SCREEN_WIDTH))
                splash_y = float(POND_TOP + self.rng.randrange(POND_HEIGHT))
                self.splashes.append(Splash(drop.x, splash_y, 15, 1.0))

        for splash in self.splashes:
            splash.life -= 1
            splash.radius += 0.3
        self.splashes = [s for s in self.splashes if s.life > 0]

        for bolt in self.lightnings:
            bolt.life -= 1
        self.lightnings = [b for b in self.lightnings if b.life > 0]

        if (
            not self.thunder_active
            and self.thunder_cooldown <= 0
            and self.rng.randrange(1000) < 5
        ):
            self.thunder_active = True
            self.thunder_duration = 6
            self.thunder_cooldown = 300 + self.rng.randrange(200)
            self.generate_lightning()
        elif self.thunder_active:
            self.thunder_duration -= 1
            if self.thunder_duration <= 0:
                self.thunder_active = False
        else:
            self.thunder_cooldown -= 1

    def clear(self) -> None:
        """Remove all drops, splashes and bolts."""
        self.drops.clear()
        self.splashes.clear()
        self.lightnings.clear()