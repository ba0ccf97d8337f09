"""
Assembles a ReversiGame from configuration.
"""
from typing import Optional

from ..config import PLAYER_KINDS, Config
from ..game.board import Board
from ..game.game import ReversiGame
from ..game.player import HumanPlayer, Player, ScriptedPlayer
from .console import ConsoleIO


def build_player(kind: str, moves: str, console: ConsoleIO) -> Player:
    """
    Create a player of the given kind.

    Args:
        kind: 'human' or 'scripted'
        moves: One-based "c,r" pairs for a scripted player
        console: Input source for a human player
    """
    if kind == 'human':
        return HumanPlayer(console)
    if kind == 'scripted':
        return ScriptedPlayer.from_text(moves)
    raise ValueError(f"Unknown player kind {kind!r}, expected one of {PLAYER_KINDS}")


def build_game(config: Config, console: Optional[ConsoleIO] = None) -> ReversiGame:
    """Create a game with the configured board, players and console."""
    console = console if console is not None else ConsoleIO()
    board = Board.from_str(config.game.initial_layout)
    player_dark = build_player(config.players.dark, config.players.dark_moves, console)
    player_light = build_player(config.players.light, config.players.light_moves, console)
    return ReversiGame(
        player_dark,
        player_light,
        board=board,
        io=console,
        max_illegal_attempts=config.game.max_illegal_attempts,
    )
