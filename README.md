# pacmaze

A small tile-based maze game. Walk your character through a walled map,
pick up every collectible, then step onto the exit to win. In enemy mode
the map also holds enemies; touching one ends the game.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window. For the tests:

```
pip install .[test]
pytest
```

## Playing

```
pacmaze path/to/level.ber
pacmaze --bonus path/to/level.ber
```

`--bonus` must come before the path; it turns on enemy mode.

- The arrow keys move the player 5 pixels per frame (60 frames per
  second). Escape or the window's close button quits.
- Every move whose destination is not blocked by a wall counts as a step.
  In plain mode each step prints `steps: N` to standard output. In enemy
  mode the window shows `Steps` in its top-left corner with the current
  count below it.
- Walking over a collectible removes it. Once all are gone, touching the
  exit closes the window.
- In enemy mode the player's picture follows the direction of movement,
  the enemies switch between two frames every 50 frames, the exit shows
  as open once every collectible is taken, and touching an enemy closes
  the window.

Exit status: `1` when the arguments are wrong (nothing is printed) or the
map is rejected (a line `Error` and the reason are written to standard
error); `0` otherwise.

## Images

The package does not ship any pictures. The game loads them from paths
relative to the current directory, so run it from a directory that holds
them:

- plain mode: `mandatory/images/wall.png`, `player.png`, `collect.png`,
  `exit.png`
- enemy mode: `bonus/image_bonus/wall_bonus.png`, `collect_bonus.png`,
  `exit_bonus.png`, `exit_open_bonus.png`, `enemy_bonus.png`,
  `enemy_2_bonus.png`, and the player frames `p_right_bonus.png`,
  `p_left_bonus.png`, `p_up_bonus.png`, `p_down_bonus.png`

Each tile is 64×64 pixels. If an image cannot be loaded, the game writes
`Error` and `Fail to load (texture\image)` to standard error and stops.

## Map files

Maps are plain text files whose names end in `.ber`. Each line is one row
of tiles:

| Character | Meaning                 |
|-----------|-------------------------|
| `1`       | wall                    |
| `0`       | floor                   |
| `P`       | player start            |
| `C`       | collectible             |
| `E`       | exit                    |
| `X`       | enemy (enemy mode only) |

A map is accepted only if:

- every row has the same length,
- it is at most 40 tiles wide and 20 tiles high,
- it holds exactly one `P`, exactly one `E` and at least one `C`
  (and, in enemy mode, between one and three `X`),
- it contains no other characters (`X` counts as a wrong character in
  plain mode),
- it is completely surrounded by walls,
- every collectible and the exit can be reached from the start moving in
  four directions (enemies block the way in enemy mode).

Example:

```
1111111111
1P00C0001E
1111111111
```

would be rejected (the exit sits in the right wall), while this is
accepted:

```
1111111111
1P00C00E01
1111111111
```

## Using it as a library

The map checks can be used on their own:

```python
from pacmaze.mapfile import MapError, load_map, parse_map

try:
    info = load_map("level.ber", with_enemies=False)
except MapError as exc:
    print(exc)  # e.g. "Not surrounded by walls."

info = parse_map("11111\n1PCE1\n11111\n", with_enemies=False)
print(info.player, info.rows, info.lines, info.collectibles)
```

`MapInfo` holds the rows (`grid`), the player's `(x, y)` start,
`collectibles`, `exits` and `enemies`. Lower-level helpers live in
`pacmaze.mapfile` (`has_ber_extension`, `count_characters`,
`find_player`, `reachable_targets`), `pacmaze.walls` (`is_closed`,
`check_window` and the single-side checks) and `pacmaze.physics`
(`collision_check`, `collision_collect`, `Instance`).

`pacmaze.game.Game` holds the game state and can be stepped without a
window:

```python
import io
from pacmaze.game import Direction, Game

out = io.StringIO()
game = Game.from_map(info, with_enemies=False)
game.out = out
game.update(Direction.RIGHT)   # one frame with the right arrow held
game.update()                  # one frame with no key held
print(out.getvalue(), game.collect_left, game.closed)
```

`pacmaze.app.validate(path, with_enemies)` and
`pacmaze.app.run(info, with_enemies)` are the two halves of the
`pacmaze` command.