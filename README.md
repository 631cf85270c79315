# superbowl

A small brick-breaker arcade game. Knock bricks out of a wall with a random
number of rows, keep the ball away from the strip at the bottom of the screen,
and spend the points you earn on making the ball stronger.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
superbowl
```

Progress is kept in `pilkaskills.txt` in the current directory. Another file
can be used instead:

```
superbowl --save-file my-progress.txt
```

The window is 800 by 600. The on-screen texts are in Polish. Use these keys:

| Screen     | Key     | Action                                      |
|------------|---------|---------------------------------------------|
| Main menu  | `1`     | Start a game                                |
| Main menu  | `2`     | Open the upgrade menu                       |
| Main menu  | `3`     | Save and quit                               |
| Upgrades   | `1`     | Spend 30 points to make the ball stronger   |
| Upgrades   | `3`     | Save and return to the main menu            |
| Playing    | `←` `→` | Move the paddle                             |
| Anywhere   | `P`     | Pause or resume                             |

Each brick starts with three lives and changes colour from yellow to orange to
red as it loses them. Every hit takes one life plus the ball's strength, and
earns one point. If the ball reaches the strip at the bottom of the screen,
the game saves your progress, prints `przegrales` and closes.

The upgrade key checks the points stored in the save file. When there are not
enough, the upgrade menu shows how many points are still missing.

## Saved progress

The save file holds two integers separated by a space: points and ball
strength. It is written when you quit (by key, by closing the window or by
losing), when you leave the upgrade menu and after each upgrade, and read when
the game starts. A missing or unreadable file starts you from zero.

## Using it as a library

The game logic does not need a window:

```python
import random

from superbowl.game import Game
from superbowl.settings import Progress

progress = Progress()
game = Game()
game.reset(random.Random(1))

for _ in range(20000):
    game.step(progress, left=False, right=False)
    if game.lost():
        break

print(progress.points)
```

- `superbowl.settings` — `Progress` (points and strength, with `upgrade()` and
  `missing_points()`) and the screen size.
- `superbowl.shapes` — `Paddle`, `Brick` and `DeathZone`.
- `superbowl.ball` — `Ball` and its collisions with walls, paddle, bricks and
  the death zone.
- `superbowl.game` — `Game`, with `reset(rng)`, `step(progress, left, right)`
  and `lost()`.
- `superbowl.savedata` — `save_progress`, `load_progress` and `read_points` for
  the save file, and `take_snapshot`, which records a `PauseSnapshot` of the
  paddle size, ball position and velocity, and a brick's position.
- `superbowl.menu` — `MainMenu` and `SkillsMenu`, drawn onto a pygame surface.
- `superbowl.app` — `App`, which tracks the current `Screen` and reacts to key
  presses and frames, and `main`, the command above.

## What it does not do

A round has no win condition: clearing every brick does not end it, and the
only way a round ends is the ball reaching the bottom strip, which also closes
the game. Pausing records a snapshot but the snapshot is not saved to disk or
used to restore a game. There is no sound.