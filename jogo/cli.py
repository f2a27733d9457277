"""Command line entry point: load a map and play it in the terminal."""

from __future__ import annotations

import sys
import threading

from jogo.coins import start_coin_generators
from jogo.enemies import start_chaser, start_tactical
from jogo.game import ENEMY, TACTICAL_ENEMY, Game, load_game
from jogo.player import execute_action
from jogo.screen import Screen

DEFAULT_MAP = "mapa.txt"


def _start_enemies(
    game: Game,
    lock: threading.Lock,
    redraw,
    stop_event: threading.Event,
) -> None:
    with lock:
        chasers = [
            (x, y)
            for y, row in enumerate(game.grid)
            for x, cell in enumerate(row)
            if cell == ENEMY
        ]
        tactical_count = sum(row.count(TACTICAL_ENEMY) for row in game.grid)
    for x, y in chasers:
        start_chaser(game, x, y, lock, redraw, stop_event)
    for _ in range(tactical_count):
        start_tactical(game, lock, redraw, stop_event)


def _play(game: Game, screen) -> None:
    lock = threading.Lock()
    stop_event = threading.Event()

    def redraw() -> None:
        screen.draw(game)

    try:
        start_coin_generators(game, lock, redraw, stop_event)
        _start_enemies(game, lock, redraw, stop_event)
        with lock:
            screen.draw(game)
        while True:
            event = screen.read_event()
            with lock:
                if not execute_action(game, event):
                    break
                screen.draw(game)
    finally:
        stop_event.set()


def main(argv=None) -> int:
    """Play the map named by the first argument, or the default map."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else DEFAULT_MAP
    try:
        game = load_game(path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"jogo: cannot load map {path}: {exc}", file=sys.stderr)
        return 1
    with Screen() as screen:
        _play(game, screen)
    return 0


if __name__ == "__main__":
    sys.exit(main())