"""Coins that appear on the map, wait to be collected and then vanish."""

from __future__ import annotations

import random
import threading
import time
from typing import Callable, Union

from jogo.game import (
    EMPTY,
    ENEMY,
    GREEN_COIN,
    NEGATIVE_COIN,
    ORANGE_COIN,
    YELLOW_COIN,
    Game,
)

Redraw = Callable[[], None]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class _Coin:
    """Position and clock shared by every kind of coin."""

    interval = 0.1
    lifetime = 15.0

    def __init__(self, game: Game, x: int, y: int, start: float | None = None):
        self.game = game
        self.x = x
        self.y = y
        self.start = time.monotonic() if start is None else start

    def _player_here(self) -> bool:
        return self.game.pos_x == self.x and self.game.pos_y == self.y

    def _clear(self) -> None:
        self.game.grid[self.y][self.x] = EMPTY

    def _collect(self, value: int, message: str) -> None:
        self.game.points += value
        self._clear()
        self.game.status = message


class YellowCoin(_Coin):
    """Worth one point; disappears after nine seconds."""

    lifetime = 9.0

    def __init__(self, game: Game, x: int, y: int, start: float | None = None):
        super().__init__(game, x, y, start)
        game.grid[y][x] = YELLOW_COIN

    def step(self, now: float) -> bool:
        """Advance the coin; return True once it has left the map."""
        if self._player_here():
            self._collect(1, "Coletou moeda amarela (+1)")
            return True
        if now - self.start > self.lifetime:
            self._clear()
            return True
        return False


class OrangeCoin(_Coin):
    """Worth five points; runs from a player who comes close, then vanishes."""

    interval = 0.2
    lifetime = 15.0
    flee_time = 5.0
    alert_distance = 2

    def __init__(self, game: Game, x: int, y: int, start: float | None = None):
        super().__init__(game, x, y, start)
        self.activated = False
        self.flee_until: float | None = None
        game.grid[y][x] = ORANGE_COIN

    def step(self, now: float) -> bool:
        """Advance the coin; return True once it has left the map."""
        game = self.game
        distance = abs(game.pos_x - self.x) + abs(game.pos_y - self.y)
        if not self.activated and distance <= self.alert_distance:
            self.activated = True
            self.flee_until = now + self.flee_time

        fleeing = self.activated and now < self.flee_until
        if fleeing:
            nx = self.x + _sign(self.x - game.pos_x)
            ny = self.y + _sign(self.y - game.pos_y)
            if game.can_move_to(nx, ny):
                self._clear()
                self.x, self.y = nx, ny
                game.grid[ny][nx] = ORANGE_COIN

        if self._player_here():
            self._collect(5, "Coletou moeda laranja (+5)")
            return True
        if not self.activated and now - self.start > self.lifetime:
            self._clear()
            return True
        if self.activated and now > self.flee_until:
            self._clear()
            return True
        return False


class RedCoin(_Coin):
    """Worth two points, or minus two while an enemy stands next to it."""

    lifetime = 15.0

    def __init__(self, game: Game, x: int, y: int, start: float | None = None):
        super().__init__(game, x, y, start)
        self.negative = False

    def _enemy_nearby(self) -> bool:
        grid = self.game.grid
        for ny in range(self.y - 1, self.y + 2):
            if not 0 <= ny < len(grid):
                continue
            row = grid[ny]
            if any(
                0 <= nx < len(row) and row[nx] == ENEMY
                for nx in range(self.x - 1, self.x + 2)
            ):
                return True
        return False

    def step(self, now: float) -> bool:
        """Advance the coin; return True once it has left the map."""
        self.negative = self._enemy_nearby()
        self.game.grid[self.y][self.x] = NEGATIVE_COIN if self.negative else GREEN_COIN

        if self._player_here():
            if self.negative:
                self._collect(-2, "Coletou moeda vermelha (-2)")
            else:
                self._collect(2, "Coletou moeda verde (+2)")
            return True
        if now - self.start > self.lifetime:
            self._clear()
            return True
        return False


Coin = Union[YellowCoin, OrangeCoin, RedCoin]

_COIN_KINDS = (YellowCoin, OrangeCoin, RedCoin)


def run_coin(
    coin: Coin,
    lock: threading.Lock,
    redraw: Redraw,
    stop_event: threading.Event,
) -> None:
    """Step a coin at its own pace until it leaves the map or the game stops."""
    while not stop_event.wait(coin.interval):
        with lock:
            done = coin.step(time.monotonic())
            redraw()
        if done:
            return


def _generate(
    kind: type,
    game: Game,
    lock: threading.Lock,
    redraw: Redraw,
    stop_event: threading.Event,
) -> None:
    while not stop_event.wait(random.randint(2, 5)):
        with lock:
            if not game.grid or not game.grid[0]:
                continue
            x = random.randrange(len(game.grid[0]))
            y = random.randrange(len(game.grid))
            row = game.grid[y]
            if x >= len(row) or row[x] != EMPTY:
                continue
            coin = kind(game, x, y)
            redraw()
        threading.Thread(
            target=run_coin,
            args=(coin, lock, redraw, stop_event),
            daemon=True,
        ).start()


def start_coin_generators(
    game: Game,
    lock: threading.Lock,
    redraw: Redraw,
    stop_event: threading.Event,
) -> list[threading.Thread]:
    """Start one background spawner per coin kind and return their threads."""
    threads = []
    for kind in _COIN_KINDS:
        thread = threading.Thread(
            target=_generate,
            args=(kind, game, lock, redraw, stop_event),
            name=f"{kind.__name__}-spawner",
            daemon=True,
        )
        thread.start()
        threads.append(thread)
    return threads