"""
Player module for Reversi.
Defines the interface the game loop uses to obtain moves, plus the
human-driven and scripted implementations.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from .board import Board
from .disk import Disk
from .errors import ScriptExhausted
from .position import Position


class Player(ABC):
    """Source of moves for one color."""

    @abstractmethod
    def init(self, board: Board) -> None:
        """Receive a snapshot of the board before the first turn."""

    @abstractmethod
    def update(self, pos: Position, disk: Disk) -> None:
        """Be notified that `disk` was placed at `pos`."""

    @abstractmethod
    def move(self) -> Position:
        """Produce the next candidate position."""


class HumanPlayer(Player):
    """
    Player whose moves come from an input source, typically the console.

    Args:
        input_source: object exposing ``input_position() -> Position``
    """

    def __init__(self, input_source):
        self.input_source = input_source

    def init(self, board: Board) -> None:
        pass

    def update(self, pos: Position, disk: Disk) -> None:
        pass

    def move(self) -> Position:
        return self.input_source.input_position()


class ScriptedPlayer(Player):
    """
    Player that replays a fixed sequence of positions.

    Keeps its own copy of the board, updated from the game's notifications,
    so a script can be checked against the position it was played on.
    """

    def __init__(self, moves: Iterable[Position]):
        self.moves: List[Position] = list(moves)
        self.board: Optional[Board] = None
        self._next = 0

    @classmethod
    def from_text(cls, text: str) -> 'ScriptedPlayer':
        """Build from one-based "c,r" pairs separated by whitespace."""
        return cls(Position.parse(token) for token in text.split())

    @property
    def remaining(self) -> int:
        return len(self.moves) - self._next

    def init(self, board: Board) -> None:
        self.board = board.copy()

    def update(self, pos: Position, disk: Disk) -> None:
        if self.board is not None:
            self.board.place(pos, disk)

    def move(self) -> Position:
        if self._next >= len(self.moves):
            raise ScriptExhausted(f"Script ran out of moves after {len(self.moves)}")
        pos = self.moves[self._next]
        self._next += 1
        return pos
