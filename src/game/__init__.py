"""
Reversi game module.
This package contains the core game logic for Reversi.
"""

from .board import Board
from .disk import Disk
from .errors import (
    BoardLayoutError,
    IllegalMove,
    InvalidCoordinate,
    LayoutCharacterError,
    LayoutLengthError,
    NoDiskToFlip,
    OccupiedCell,
    OffBoard,
    ReversiError,
    ScriptExhausted,
)
from .game import GameIO, GameResult, ReversiGame
from .player import HumanPlayer, Player, ScriptedPlayer
from .position import Direction, Position

__all__ = [
    'Board', 'Disk', 'Direction', 'Position',
    'ReversiGame', 'GameIO', 'GameResult',
    'Player', 'HumanPlayer', 'ScriptedPlayer',
    'ReversiError', 'InvalidCoordinate', 'OffBoard', 'IllegalMove',
    'OccupiedCell', 'NoDiskToFlip', 'BoardLayoutError', 'LayoutLengthError',
    'LayoutCharacterError', 'ScriptExhausted',
]
