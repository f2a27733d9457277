"""Terminal maze game: map loading, player actions, coins, enemies and a curses screen."""

__version__ = "0.1.0"