# jogo

A small game played in the terminal. You walk a smiling character (`☺`) through
a maze read from a text file. You pick up coins that appear for a short while
and stay away from the enemies that hunt you.

The screen is drawn with the standard `curses` module, so the game needs a
terminal where Python ships `curses` (Linux, macOS and other POSIX systems).

## Installing

```
pip install .
```

## Playing

```
jogo              # loads mapa.txt from the current directory
jogo meu_mapa.txt
```

If the map file cannot be read, `jogo` prints an error and exits with status 1.

Controls:

| Key     | Action                                           |
|---------|--------------------------------------------------|
| W A S D | move up, left, down, right                       |
| E       | interact (shows your position in the status bar) |
| Esc     | quit                                             |

Other keys do nothing. Below the map the screen shows the latest status message
and a line with your score and these controls. The game's messages are in
Portuguese.

## Map files

A map is a plain UTF-8 text file, with one row of the maze per line:

| Symbol | Meaning                                           |
|--------|---------------------------------------------------|
| `▤`    | wall, blocks movement                             |
| `♣`    | vegetation, can be walked through                 |
| `☺`    | the player's starting position                    |
| `☠`    | a chaser that heads straight for the player       |
| `☣`    | a tactical enemy that patrols the area around it  |
| space  | empty floor                                       |

Any other character is read as empty floor.

## Coins

Coins appear at random spots of empty floor, each kind every 2 to 5 seconds:

- `¤` yellow: +1 point. It vanishes after 9 seconds.
- `◎` orange: +5 points. When you come within two steps of it (counting
  rows and columns), it runs away from you for 5 seconds and then vanishes.
  Left alone, it vanishes after 15 seconds.
- `★` green: +2 points. While a chaser stands on any of the eight cells around
  it, it turns into `✬` and costs 2 points. It vanishes after 15 seconds.

## Enemies

- The chaser (`☠`) takes one step towards you, diagonals included, every 0.3
  seconds. After every 14 seconds of pursuit it rests for 3 seconds.
- The tactical enemy (`☣`) stays inside the square zone that reaches up to five
  cells from where it was placed, so the zone is at most 11×11. It starts on the
  first free cell of that zone. It chases you while you are inside the zone and
  goes after coins that land in it. Otherwise it wanders at random.

An enemy standing on your cell sets your score back to zero.

## Using it as a library

The game state and rules do not depend on the terminal:

- `jogo.game.load_game(path)` reads a map file and returns a `Game`. `Game` holds
  the `grid` of `Element`s, the player's `pos_x` and `pos_y`, `points` and
  `status`. It offers `can_move_to(x, y)`, `load_map(path)` and
  `move_element(x, y, dx, dy)`.
- `jogo.player.execute_action(game, event)` applies a `KeyEvent` (an `EventKind`
  and a key) to a game. It returns `False` for a quit event. `move(game, key)`
  and `interact(game)` do one action each.
- `jogo.screen.key_to_event(key)` turns a key from `curses`' `get_wch` into a
  `KeyEvent`. `status_lines(game)` gives the rows and texts of the status bar.
  `Screen` draws a game and reads keys. Use it as a context manager to take over
  the terminal, or give it an existing `curses` window.
- `jogo.coins` has `YellowCoin`, `OrangeCoin` and `RedCoin`, and
  `jogo.enemies` has `Chaser` and `TacticalEnemy`. Each of them advances one
  tick per `step` call. `start_coin_generators`, `start_chaser` and
  `start_tactical` run them in background threads. The threads share a lock,
  call a redraw function and stop when a `threading.Event` is set.

## What it does not do

The game has no goal to reach, no levels and no end other than quitting with
Esc. Scores are not saved between games.