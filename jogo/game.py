"""Map elements, game state and map loading."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path


class Color(enum.Enum):
    """Colours the screen knows how to render."""

    DEFAULT = "default"
    DARK_GRAY = "dark_gray"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    MAGENTA = "magenta"
    WALL = "wall"


TEXT_COLOR = Color.DARK_GRAY


@dataclass(frozen=True)
class Element:
    """Anything that can occupy a map cell."""

    symbol: str
    color: Color = Color.DEFAULT
    background: Color = Color.DEFAULT
    solid: bool = False


PLAYER = Element("☺", Color.DARK_GRAY, Color.DEFAULT, True)
ENEMY = Element("☠", Color.RED, Color.DEFAULT, True)
TACTICAL_ENEMY = Element("☣", Color.RED, Color.DEFAULT, True)
WALL = Element("▤", Color.WALL, Color.DARK_GRAY, True)
VEGETATION = Element("♣", Color.GREEN, Color.DEFAULT, False)
EMPTY = Element(" ", Color.DEFAULT, Color.DEFAULT, False)
YELLOW_COIN = Element("¤", Color.YELLOW, Color.DEFAULT, False)
ORANGE_COIN = Element("◎", Color.MAGENTA, Color.DEFAULT, False)
GREEN_COIN = Element("★", Color.GREEN, Color.DEFAULT, False)
NEGATIVE_COIN = Element("✬", Color.RED, Color.DEFAULT, False)

COINS = (YELLOW_COIN, ORANGE_COIN, GREEN_COIN, NEGATIVE_COIN)

_MAP_ELEMENTS = {e.symbol: e for e in (WALL, ENEMY, TACTICAL_ENEMY, VEGETATION)}


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class Game:
    """The whole mutable state of a running game."""

    grid: list[list[Element]] = field(default_factory=list)
    pos_x: int = 0
    pos_y: int = 0
    last_visited: Element = EMPTY
    status: str = ""
    points: int = 0

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def load_map(self, path: str | Path) -> None:
        """Append the rows of a text map file to the grid.

        The player symbol marks the starting position and leaves an empty
        cell behind; unknown characters become empty cells.
        """
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
        first_row = len(self.grid)
        for offset, line in enumerate(_split_lines(text)):
            y = first_row + offset
            row = []
            for x, ch in enumerate(line):
                if ch == PLAYER.symbol:
                    self.pos_x, self.pos_y = x, y
                row.append(_MAP_ELEMENTS.get(ch, EMPTY))
            self.grid.append(row)

    def can_move_to(self, x: int, y: int) -> bool:
        """Whether (x, y) lies on the map and is not blocked."""
        if not 0 <= y < len(self.grid):
            return False
        if not 0 <= x < len(self.grid[y]):
            return False
        return not self.grid[y][x].solid

    def move_element(self, x: int, y: int, dx: int, dy: int) -> None:
        """Move the element at (x, y) by (dx, dy), restoring what it covered."""
        nx, ny = x + dx, y + dy
        element = self.grid[y][x]
        self.grid[y][x] = self.last_visited
        self.last_visited = self.grid[ny][nx]
        self.grid[ny][nx] = element


def load_game(path: str | Path) -> Game:
    """Create a new game from a map file."""
    game = Game()
    game.load_map(path)
    return game