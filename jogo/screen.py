"""Terminal rendering and keyboard input."""

from __future__ import annotations

import curses

from jogo.game import PLAYER, TEXT_COLOR, Color, Element, Game, COINS, EMPTY
from jogo.game import ENEMY, TACTICAL_ENEMY, VEGETATION, WALL
from jogo.player import EventKind, KeyEvent

_ESC = "\x1b"

_CURSES_COLORS = {
    Color.DEFAULT: -1,
    Color.DARK_GRAY: curses.COLOR_BLACK,
    Color.RED: curses.COLOR_RED,
    Color.GREEN: curses.COLOR_GREEN,
    Color.YELLOW: curses.COLOR_YELLOW,
    Color.MAGENTA: curses.COLOR_MAGENTA,
    Color.WALL: curses.COLOR_BLACK,
}

_EXTRA_ATTRS = {
    Color.DARK_GRAY: curses.A_BOLD,
    Color.WALL: curses.A_BOLD | curses.A_DIM,
}

_ELEMENTS = (PLAYER, ENEMY, TACTICAL_ENEMY, WALL, VEGETATION, EMPTY, *COINS)


def key_to_event(key: str | int) -> KeyEvent:
    """Translate a key as returned by ``get_wch`` into a game event."""
    if key == _ESC or key == 27:
        return KeyEvent(EventKind.QUIT)
    if isinstance(key, str):
        if key == "e":
            return KeyEvent(EventKind.INTERACT)
        return KeyEvent(EventKind.MOVE, key)
    if key == curses.KEY_RESIZE:
        return KeyEvent(EventKind.NONE)
    # Special keys carry no character and move nowhere.
    return KeyEvent(EventKind.MOVE)


def status_lines(game: Game) -> list[tuple[int, str]]:
    """Rows and texts of the status bar drawn below the map."""
    rows = len(game.grid)
    help_text = (
        f"Pontos: {game.points} | "
        "Use WASD para mover e E para interagir. ESC para sair."
    )
    return [(rows + 1, game.status), (rows + 3, help_text)]


class Screen:
    """A curses window that draws the game and reads keys.

    Given a window, it uses it as is; otherwise ``open`` takes over the
    terminal and ``close`` gives it back.
    """

    def __init__(self, window=None):
        self._window = window
        self._owns_terminal = False
        self._attrs: dict[tuple[Color, Color], int] = {}

    def __enter__(self) -> Screen:
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def window(self):
        if self._window is None:
            raise RuntimeError("screen is not open")
        return self._window

    def open(self) -> None:
        if self._window is not None:
            return
        window = curses.initscr()
        self._owns_terminal = True
        curses.noecho()
        curses.cbreak()
        window.keypad(True)
        try:
            curses.set_escdelay(25)
        except (AttributeError, curses.error):
            pass
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        self._setup_colors()
        self._window = window

    def close(self) -> None:
        if not self._owns_terminal:
            return
        window, self._window = self._window, None
        self._owns_terminal = False
        if window is not None:
            window.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()

    def _setup_colors(self) -> None:
        if not curses.has_colors():
            return
        curses.start_color()
        try:
            curses.use_default_colors()
            default = -1
        except curses.error:
            default = curses.COLOR_BLACK
        styles = {(e.color, e.background) for e in _ELEMENTS}
        styles.add((TEXT_COLOR, Color.DEFAULT))
        for pair, (fg, bg) in enumerate(sorted(styles, key=lambda s: (s[0].value, s[1].value)), 1):
            fg_code = _CURSES_COLORS[fg]
            bg_code = _CURSES_COLORS[bg]
            try:
                curses.init_pair(
                    pair,
                    default if fg_code == -1 else fg_code,
                    default if bg_code == -1 else bg_code,
                )
            except curses.error:
                continue
            self._attrs[(fg, bg)] = curses.color_pair(pair) | _EXTRA_ATTRS.get(fg, 0)

    def _attr(self, fg: Color, bg: Color) -> int:
        return self._attrs.get((fg, bg), 0)

    def _put(self, y: int, x: int, text: str, attr: int) -> None:
        try:
            self.window.addstr(y, x, text, attr)
        except curses.error:
            pass  # drawing past the terminal's edge

    def _put_element(self, x: int, y: int, element: Element) -> None:
        self._put(y, x, element.symbol, self._attr(element.color, element.background))

    def read_event(self) -> KeyEvent:
        """Block until a key is pressed and return it as a game event."""
        return key_to_event(self.window.get_wch())

    def draw(self, game: Game) -> None:
        """Render the map, the player and the status bar."""
        window = self.window
        window.erase()
        for y, row in enumerate(game.grid):
            for x, element in enumerate(row):
                self._put_element(x, y, element)
        self._put_element(game.pos_x, game.pos_y, PLAYER)
        text_attr = self._attr(TEXT_COLOR, Color.DEFAULT)
        for row, text in status_lines(game):
            if text:
                self._put(row, 0, text, text_attr)
        window.refresh()