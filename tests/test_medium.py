import math
import random

import pytest

from hookfish.medium import (
    GOLDEN_TYPE,
    MAX_FISH,
    PIRANHA_TYPE,
    MediumGame,
    PondFish,
)
from hookfish.medium_state import Objective
from hookfish.menus import Rect


class ZeroRandom(random.Random):
    def randrange(self, *args, **kwargs):
        return 0


class NeverRandom(random.Random):
    def randrange(self, *args, **kwargs):
        return 1


def make_objectives():
    return [
        Objective(0, 4),
        Objective(1, 5),
        Objective(2, 6),
        Objective(3, 7),
        Objective(4, 8),
    ]


def make_game(rng=None):
    return MediumGame(rng or random.Random(7), make_objectives())


def place(game, slot, fish_type):
    game.fishes[slot] = PondFish(
        rect=Rect(100, 100, 80, 80), active=True, type=fish_type
    )
    return game.fishes[slot]


def test_initial_state():
    game = make_game()
    assert game.target_score == sum(o.count for o in game.objectives)
    assert game.lives == 3
    assert game.score == 0
    assert len(game.fishes) == MAX_FISH
    assert not any(f.active for f in game.fishes)


def test_default_objectives_are_distinct():
    game = MediumGame(random.Random(3))
    types = [o.type for o in game.objectives]
    assert len(set(types)) == len(types) == 5
    assert game.target_score == sum(o.count for o in game.objectives)


def test_spawn_fills_slots_with_source_bounds():
    game = make_game(ZeroRandom())
    game.spawn()
    assert all(f.active for f in game.fishes)
    assert [f.type for f in game.fishes[:7]] == [GOLDEN_TYPE] * 7
    assert [f.type for f in game.fishes[7:]] == [0, 1, 2]
    first = game.fishes[0]
    assert (first.base_x, first.base_y) == (40, 400)
    assert first.arc_height == 70
    assert first.direction == 1
    assert first.t == 0.0
    assert not first.clicked


def test_spawn_skips_when_odds_fail():
    game = make_game(NeverRandom())
    game.spawn()
    assert not any(f.active for f in game.fishes)


def test_spawn_does_nothing_while_paused():
    game = make_game(ZeroRandom())
    game.paused = True
    game.spawn()
    assert not any(f.active for f in game.fishes)


def test_spawned_positions_stay_in_range():
    game = make_game(random.Random(11))
    for _ in range(2000):
        game.spawn()
        for fish in game.fishes:
            if fish.active and fish.t == 0.0:
                assert 40 <= fish.base_x <= 1240
                assert 400 <= fish.base_y < 720
                assert 70 <= fish.arc_height < 130
                assert fish.direction in (1, -1)
        game.update_motion()


def test_first_motion_step_starts_at_arc_edge():
    game = make_game()
    fish = PondFish(active=True, base_x=100, base_y=500, arc_height=70.0, direction=1)
    game.fishes[0] = fish
    game.update_motion()
    assert fish.rect.x == fish.base_x + int(fish.arc_height)
    assert fish.rect.y == fish.base_y
    assert fish.rect.w == fish.rect.h == 80


def test_leap_ends_with_ripple():
    game = make_game()
    fish = PondFish(active=True, base_x=300, base_y=500, arc_height=90.0, direction=-1)
    game.fishes[0] = fish
    frames = 0
    while fish.active:
        game.update_motion()
        frames += 1
        assert frames < 100
    assert fish.t >= math.pi
    assert fish.ripple_active
    assert fish.ripple_image_index == 0
    assert fish.flipped


def test_motion_frozen_while_paused():
    game = make_game()
    fish = PondFish(active=True, base_x=100, base_y=500, arc_height=70.0)
    game.fishes[0] = fish
    game.paused = True
    game.update_motion()
    assert fish.t == 0.0


def test_golden_fish_scores():
    game = make_game()
    fish = place(game, 0, GOLDEN_TYPE)
    assert game.click(120, 120) == 1
    assert game.score == 15
    assert fish.clicked


def test_fish_cannot_be_clicked_twice():
    game = make_game()
    place(game, 0, GOLDEN_TYPE)
    game.click(120, 120)
    assert game.click(120, 120) == 0
    assert game.score == 15


def test_piranha_takes_lives():
    game = make_game()
    for _ in range(3):
        assert not game.life_lost
        place(game, 0, PIRANHA_TYPE)
        game.click(150, 150)
    assert game.lives == 0
    assert game.life_lost


def test_objective_fish_counts_down():
    game = make_game()
    target = game.target_score
    count = game.objectives[1].count
    place(game, 0, 1)
    game.click(180, 180)
    assert game.score == 2
    assert game.target_score == target - 1
    assert game.objectives[1].count == count - 1


def test_exhausted_objective_zeroes_target():
    game = make_game()
    game.objectives[2].count = 0
    place(game, 0, 2)
    game.click(100, 100)
    assert game.target_score == 0
    assert game.score == 2


def test_wrong_fish_with_zero_score_is_ignored():
    game = make_game()
    fish = place(game, 0, 9)
    assert game.click(120, 120) == 0
    assert game.score == 0
    assert not fish.clicked


def test_wrong_fish_costs_a_point():
    game = make_game()
    game.score = 5
    fish = place(game, 0, 9)
    game.click(120, 120)
    assert game.score == 4
    assert fish.clicked


def test_miss_changes_nothing():
    game = make_game()
    place(game, 0, GOLDEN_TYPE)
    assert game.click(500, 500) == 0
    assert game.score == 0


@pytest.mark.parametrize("point", [(100, 100), (180, 180), (100, 180)])
def test_click_edges_are_inclusive(point):
    game = make_game()
    place(game, 0, GOLDEN_TYPE)
    assert game.click(*point) == 1