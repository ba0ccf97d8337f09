"""
Console interface for playing Reversi in a terminal.
"""
from .builder import build_game, build_player
from .console import ConsoleIO

__all__ = ['ConsoleIO', 'build_game', 'build_player']
