"""Player movement and actions."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from jogo.game import EMPTY, PLAYER, Game

_DIRECTIONS = {
    "w": (0, -1),
    "a": (-1, 0),
    "s": (0, 1),
    "d": (1, 0),
}


class EventKind(enum.Enum):
    NONE = "none"
    QUIT = "quit"
    INTERACT = "interact"
    MOVE = "move"


@dataclass(frozen=True)
class KeyEvent:
    """An action read from the keyboard."""

    kind: EventKind = EventKind.NONE
    key: str = ""


def move(game: Game, key: str) -> None:
    """Move the player one cell according to a WASD key, if the way is free."""
    dx, dy = _DIRECTIONS.get(key, (0, 0))
    nx, ny = game.pos_x + dx, game.pos_y + dy
    if game.can_move_to(nx, ny):
        if game.grid[game.pos_y][game.pos_x] != PLAYER:
            game.grid[game.pos_y][game.pos_x] = EMPTY
        game.last_visited = EMPTY
        game.pos_x, game.pos_y = nx, ny


def interact(game: Game) -> None:
    """Report the player's position in the status line."""
    game.status = f"Interagindo em ({game.pos_x}, {game.pos_y})"


def execute_action(game: Game, event: KeyEvent) -> bool:
    """Apply an event to the game; return False when the game should end."""
    if event.kind is EventKind.QUIT:
        return False
    if event.kind is EventKind.INTERACT:
        interact(game)
    elif event.kind is EventKind.MOVE:
        move(game, event.key)
    return True