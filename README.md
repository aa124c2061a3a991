# hookfish

The rules and state of a small pond fishing arcade game, kept apart from any
window or drawing library so they can be driven, tested and reused on their own.
It needs nothing beyond the Python standard library.

## Modules

### `hookfish.highscores`

High-score tables kept in plain text files, one `name score` pair per line.

- `load_scores(path)` returns a list of `ScoreEntry(name, score)`, best score
  first. A missing file gives an empty list. If the file holds more than five
  entries, the lowest one is dropped and the file is written back.
- `is_high_score(path, new_score)` is true when the table is empty or
  `new_score` is greater than its lowest score.
- `add_high_score(path, player_name, new_score)` enters the score when it
  beats the lowest entry (or the table is empty), keeps the best five and
  writes the file; it returns `True` when the table changed, `False`
  otherwise. A name longer than 18 characters raises `NameTooLongError`; a
  name holding anything but ASCII letters, digits and `_` raises
  `InvalidNameError`. Both are `ValueError`s.
- `ordinal(index)` gives the label for a zero-based position: `1st`, `2nd`,
  `3rd`, then `4th`, `5th`, ...

### `hookfish.rain`

`Rain(count, rng)` creates `count` falling `Raindrop`s. Each `update()`
advances one frame: drops fall and, once past the bottom, restart at the top
and leave a `Splash` on the pond; splashes grow and fade; and now and then
thunder starts and `generate_lightning()` adds a zigzag `Lightning` bolt.
`Splash.points()` gives the ring of dots drawn for a splash. `clear()` removes
all drops, splashes and bolts.

### `hookfish.menus`

- `Rect(x, y, w, h)` with `contains(x, y)`.
- `new_game_click(x, y)` returns a `NewGameAction` (start easy, medium or hard,
  or close) or `None`; `NewGameAction.difficulty` gives the `Difficulty`.
- `settings_click(x, y)` returns a `SettingsAction` or `None`.
- `weather_click(x, y, sunny)` returns the new sunny setting and whether the
  screen should close.
- `loading_duration(rng)` picks how long the loading screen stays up
  (5000 to 15000 ms); `loading_alpha(elapsed_ms)` gives the opacity of the
  flashing loading text.

### `hookfish.pause`

- `PauseClock` records when the game is paused; `pause(now)` and
  `resume(now)` add up the time spent paused so a game timer can leave it out.
- `pause_menu_click(x, y)` returns a `PauseAction` or `None`.
- `exit_confirm_click(x, y)` returns `True` for yes, `False` for no, `None`
  for a miss.
- `easy_objective_image(fish_type)` and `hard_objective_image(fish_type)` map
  objective fish types to image paths, or `None` for unknown types.

### `hookfish.mainmenu`

`main_menu_click(x, y)` returns the `MainMenuAction` under the point.
`MenuWindows.press(action)` returns `True` when that window is newly opened
and `False` when it was already open.

### `hookfish.medium_state` and `hookfish.medium`

- `make_objectives(rng)` picks five distinct normal fish types, each wanted
  four to nine times, as `Objective(type, count)`.
- `MediumTimer` counts down two minutes: `start(now)`, then
  `formatted(now, total_paused, paused)` gives `MM:SS`, showing `02:00` when
  not running or paused, and stopping once time runs out.
- `PondScroll.step()` moves the two pond images one pixel right, wrapping at
  the edge.
- `MediumGame(rng, objectives)` holds ten `PondFish` slots, the score, lives
  and remaining target. `spawn()` gives idle slots a chance to launch a fish,
  `update_motion()` moves fish along their arcs and starts ripples, and
  `click(x, y)` catches fish under the point and returns how many: golden
  fish score 15, piranhas cost a life, objective fish score 2 and lower the
  target, and other fish cost a point.

## Example

```python
import random

from hookfish.highscores import add_high_score, load_scores, ordinal
from hookfish.medium import MediumGame
from hookfish.medium_state import make_objectives

rng = random.Random(7)
game = MediumGame(rng, make_objectives(rng))
for _ in range(600):
    game.spawn()
    game.update_motion()

add_high_score("easy.txt", "player_one", 42)
for index, entry in enumerate(load_scores("easy.txt")):
    print(ordinal(index), entry.name, entry.score)
```

All randomness comes from the `random.Random` you pass in, so a fixed seed
gives a repeatable game.

## What it does not do

The package opens no windows, draws nothing, plays no sound and reads no
keyboard or mouse: a caller supplies click positions and clock times and
displays the results. It has no command to start a game, and it holds the
rules of the medium difficulty only; there is no easy or hard pond game.
Sound and weather choices are not stored anywhere.