import threading

from jogo.coins import (
    OrangeCoin,
    RedCoin,
    YellowCoin,
    run_coin,
    start_coin_generators,
)
from jogo.game import (
    EMPTY,
    ENEMY,
    GREEN_COIN,
    NEGATIVE_COIN,
    ORANGE_COIN,
    WALL,
    YELLOW_COIN,
    Game,
)


def _open_game(width=5, height=5, px=0, py=0):
    return Game(grid=[[EMPTY] * width for _ in range(height)], pos_x=px, pos_y=py)


def test_yellow_coin_is_placed_on_creation():
    game = _open_game()
    YellowCoin(game, 3, 1, start=0.0)
    assert game.grid[1][3] == YELLOW_COIN


def test_yellow_coin_collected():
    game = _open_game(px=3, py=1)
    coin = YellowCoin(game, 3, 1, start=0.0)
    assert coin.step(0.1) is True
    assert game.points == 1
    assert game.grid[1][3] == EMPTY
    assert game.status == "Coletou moeda amarela (+1)"


def test_yellow_coin_expires_after_nine_seconds():
    game = _open_game()
    coin = YellowCoin(game, 3, 1, start=0.0)
    assert coin.step(5.0) is False
    assert game.grid[1][3] == YELLOW_COIN
    assert coin.step(9.5) is True
    assert game.grid[1][3] == EMPTY
    assert game.points == 0


def test_orange_coin_flees_from_close_player():
    game = _open_game(px=1, py=2)
    coin = OrangeCoin(game, 2, 2, start=0.0)
    assert coin.step(0.0) is False
    assert coin.activated
    assert (coin.x, coin.y) == (3, 2)
    assert game.grid[2][3] == ORANGE_COIN
    assert game.grid[2][2] == EMPTY


def test_orange_coin_blocked_by_map_edge_stays():
    game = _open_game(px=3, py=2)
    coin = OrangeCoin(game, 4, 2, start=0.0)
    coin.step(0.0)
    assert (coin.x, coin.y) == (4, 2)
    assert game.grid[2][4] == ORANGE_COIN


def test_orange_coin_blocked_by_wall_stays():
    game = _open_game(px=1, py=2)
    game.grid[2][3] = WALL
    coin = OrangeCoin(game, 2, 2, start=0.0)
    coin.step(0.0)
    assert (coin.x, coin.y) == (2, 2)
    assert game.grid[2][3] == WALL


def test_orange_coin_vanishes_after_flight():
    game = _open_game(px=1, py=2)
    coin = OrangeCoin(game, 2, 2, start=0.0)
    coin.step(0.0)
    assert coin.step(5.5) is True
    assert game.grid[2][3] == EMPTY
    assert game.points == 0


def test_orange_coin_untouched_vanishes_after_fifteen_seconds():
    game = _open_game(px=0, py=0)
    coin = OrangeCoin(game, 4, 4, start=0.0)
    assert coin.step(10.0) is False
    assert not coin.activated
    assert coin.step(15.5) is True
    assert game.grid[4][4] == EMPTY


def test_orange_coin_collected():
    game = _open_game(px=2, py=2)
    coin = OrangeCoin(game, 2, 2, start=0.0)
    assert coin.step(0.0) is True
    assert game.points == 5
    assert game.status == "Coletou moeda laranja (+5)"
    assert game.grid[2][2] == EMPTY


def test_red_coin_shows_green_without_enemy():
    game = _open_game()
    coin = RedCoin(game, 2, 2, start=0.0)
    assert game.grid[2][2] == EMPTY
    assert coin.step(0.1) is False
    assert game.grid[2][2] == GREEN_COIN
    assert not coin.negative


def test_red_coin_collected_as_green():
    game = _open_game(px=2, py=2)
    coin = RedCoin(game, 2, 2, start=0.0)
    assert coin.step(0.1) is True
    assert game.points == 2
    assert game.status == "Coletou moeda verde (+2)"
    assert game.grid[2][2] == EMPTY


def test_red_coin_turns_negative_near_enemy():
    game = _open_game()
    game.grid[3][3] = ENEMY
    coin = RedCoin(game, 2, 2, start=0.0)
    assert coin.step(0.1) is False
    assert coin.negative
    assert game.grid[2][2] == NEGATIVE_COIN


def test_red_coin_collected_near_enemy_costs_points():
    game = _open_game(px=2, py=2)
    game.grid[1][1] = ENEMY
    coin = RedCoin(game, 2, 2, start=0.0)
    assert coin.step(0.1) is True
    assert game.points == -2
    assert game.status == "Coletou moeda vermelha (-2)"
    assert game.grid[2][2] == EMPTY


def test_red_coin_at_corner_checks_only_existing_cells():
    game = _open_game(px=4, py=4)
    coin = RedCoin(game, 0, 0, start=0.0)
    coin.step(0.1)
    assert game.grid[0][0] == GREEN_COIN


def test_red_coin_expires_after_fifteen_seconds():
    game = _open_game(px=4, py=4)
    coin = RedCoin(game, 1, 1, start=0.0)
    assert coin.step(14.0) is False
    assert coin.step(15.5) is True
    assert game.grid[1][1] == EMPTY


def test_run_coin_returns_at_once_when_stopped():
    game = _open_game(px=1, py=1)
    coin = YellowCoin(game, 1, 1)
    stop = threading.Event()
    stop.set()
    calls = []
    run_coin(coin, threading.Lock(), lambda: calls.append(1), stop)
    assert calls == []
    assert game.grid[1][1] == YELLOW_COIN
    assert game.points == 0


def test_run_coin_steps_until_collected():
    game = _open_game(px=1, py=1)
    coin = YellowCoin(game, 1, 1)
    calls = []
    run_coin(coin, threading.Lock(), lambda: calls.append(1), threading.Event())
    assert game.points == 1
    assert len(calls) == 1
    assert game.grid[1][1] == EMPTY


def test_generators_end_when_stopped():
    game = _open_game()
    stop = threading.Event()
    stop.set()
    threads = start_coin_generators(game, threading.Lock(), lambda: None, stop)
    for thread in threads:
        thread.join(timeout=2)
    assert len(threads) == 3
    assert not any(thread.is_alive() for thread in threads)
    assert all(cell == EMPTY for row in game.grid for cell in row)