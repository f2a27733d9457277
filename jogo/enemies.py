"""Enemies: a chaser that hunts the player and a tactical patroller."""

from __future__ import annotations

import random
import threading
import time
from typing import Callable, Iterator

from jogo.game import COINS, EMPTY, ENEMY, TACTICAL_ENEMY, Element, Game

Redraw = Callable[[], None]

CAUGHT_MESSAGE = "Você foi pego pelo inimigo! Pontos zerados."
TACTICAL_CAUGHT_MESSAGE = "Inimigo tático capturou você!"

STEP_INTERVAL = 0.3
SENSE_INTERVAL = 0.2
ZONE_RADIUS = 5
WANDER_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _cell(grid: list[list[Element]], x: int, y: int) -> Element | None:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return None


class Chaser:
    """An enemy that walks straight at the player, resting now and then."""

    active_time = 14.0
    rest_time = 3.0

    def __init__(self, game: Game, x: int, y: int, start: float | None = None):
        self.game = game
        self.x = x
        self.y = y
        self.active = True
        self.phase_start = time.monotonic() if start is None else start
        self.last = EMPTY

    def step(self, now: float) -> bool:
        """Advance one tick; return True when the game changed."""
        elapsed = now - self.phase_start
        if self.active and elapsed > self.active_time:
            self.active = False
            self.phase_start = now
        elif not self.active and elapsed > self.rest_time:
            self.active = True
            self.phase_start = now
        if not self.active:
            return False

        game = self.game
        if (self.x, self.y) == (game.pos_x, game.pos_y):
            game.points = 0
            game.status = CAUGHT_MESSAGE
            return True

        tx = self.x + _sign(game.pos_x - self.x)
        ty = self.y + _sign(game.pos_y - self.y)
        if game.can_move_to(tx, ty) and game.grid[ty][tx] != ENEMY:
            game.grid[self.y][self.x] = self.last
            self.last = game.grid[ty][tx]
            game.grid[ty][tx] = ENEMY
            self.x, self.y = tx, ty
            return True
        return False


class TacticalEnemy:
    """An enemy that guards a square zone around where it was placed.

    Creating one takes the first tactical marker off the map and puts the
    enemy on the first free cell of its zone; ValueError is raised when
    there is no marker or no free cell.
    """

    def __init__(self, game: Game):
        origin = next(
            (
                (x, y)
                for y, row in enumerate(game.grid)
                for x, cell in enumerate(row)
                if cell == TACTICAL_ENEMY
            ),
            None,
        )
        if origin is None:
            raise ValueError("no tactical enemy on the map")
        zx, zy = origin
        game.grid[zy][zx] = EMPTY

        self.game = game
        self.min_x = max(0, zx - ZONE_RADIUS)
        self.max_x = min(game.width - 1, zx + ZONE_RADIUS)
        self.min_y = max(0, zy - ZONE_RADIUS)
        self.max_y = min(game.height - 1, zy + ZONE_RADIUS)

        spot = next(
            ((x, y) for x, y in self._zone_cells() if _cell(game.grid, x, y) == EMPTY),
            None,
        )
        if spot is None:
            raise ValueError("no free cell in the patrol zone")
        self.x, self.y = spot
        game.grid[self.y][self.x] = TACTICAL_ENEMY

        self.last = EMPTY
        self.chasing = False
        self.target: tuple[int, int] | None = None

    def _zone_cells(self) -> Iterator[tuple[int, int]]:
        for y in range(self.min_y, self.max_y + 1):
            for x in range(self.min_x, self.max_x + 1):
                yield x, y

    def _in_zone(self, x: int, y: int) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def player_in_zone(self) -> bool:
        """Whether the player stands inside the patrol zone."""
        return self._in_zone(self.game.pos_x, self.game.pos_y)

    def coin_in_zone(self) -> tuple[int, int] | None:
        """Position of the first coin in the zone, if any."""
        return next(
            (
                (x, y)
                for x, y in self._zone_cells()
                if _cell(self.game.grid, x, y) in COINS
            ),
            None,
        )

    def step(self, direction: tuple[int, int]) -> bool:
        """Advance one tick, wandering by ``direction`` when there is no goal.

        Returns True when the game changed.
        """
        game = self.game
        if (self.x, self.y) == (game.pos_x, game.pos_y):
            game.points = 0
            game.status = TACTICAL_CAUGHT_MESSAGE
            return True

        if self.chasing:
            dx, dy = _sign(game.pos_x - self.x), _sign(game.pos_y - self.y)
        elif self.target is not None:
            dx, dy = _sign(self.target[0] - self.x), _sign(self.target[1] - self.y)
        else:
            dx, dy = direction

        tx, ty = self.x + dx, self.y + dy
        if (
            self._in_zone(tx, ty)
            and game.can_move_to(tx, ty)
            and game.grid[ty][tx] not in (ENEMY, TACTICAL_ENEMY)
        ):
            game.grid[self.y][self.x] = self.last
            self.last = game.grid[ty][tx]
            game.grid[ty][tx] = TACTICAL_ENEMY
            self.x, self.y = tx, ty
            if (tx, ty) == self.target:
                self.target = None
            return True
        return False


def _chase(
    chaser: Chaser,
    lock: threading.Lock,
    redraw: Redraw,
    stop_event: threading.Event,
) -> None:
    while not stop_event.is_set():
        with lock:
            if chaser.step(time.monotonic()):
                redraw()
        if stop_event.wait(STEP_INTERVAL):
            return


def start_chaser(
    game: Game,
    x: int,
    y: int,
    lock: threading.Lock,
    redraw: Redraw,
    stop_event: threading.Event,
) -> threading.Thread:
    """Run a chaser standing at (x, y) in a background thread."""
    chaser = Chaser(game, x, y)
    thread = threading.Thread(
        target=_chase,
        args=(chaser, lock, redraw, stop_event),
        name="chaser",
        daemon=True,
    )
    thread.start()
    return thread


def _patrol(
    enemy: TacticalEnemy,
    lock: threading.Lock,
    redraw: Redraw,
    stop_event: threading.Event,
) -> None:
    while not stop_event.wait(SENSE_INTERVAL):
        with lock:
            enemy.chasing = enemy.player_in_zone()
            coin = enemy.coin_in_zone()
            if coin is not None:
                enemy.target = coin
            if enemy.step(random.choice(WANDER_DIRECTIONS)):
                redraw()
        if stop_event.wait(STEP_INTERVAL):
            return


def start_tactical(
    game: Game,
    lock: threading.Lock,
    redraw: Redraw,
    stop_event: threading.Event,
) -> threading.Thread | None:
    """Place a tactical enemy and run it in a background thread.

    Returns None when the map has no room for one.
    """
    with lock:
        try:
            enemy = TacticalEnemy(game)
        except ValueError:
            return None
        redraw()
    thread = threading.Thread(
        target=_patrol,
        args=(enemy, lock, redraw, stop_event),
        name="tactical-enemy",
        daemon=True,
    )
    thread.start()
    return thread