"""
Exceptions raised by the Reversi rule engine.
"""


class ReversiError(Exception):
    """Base class for all rule engine errors."""


class InvalidCoordinate(ReversiError, ValueError):
    """A coordinate outside the 8x8 grid was used to build a Position."""


class OffBoard(InvalidCoordinate):
    """Stepping from a Position left the grid."""


class IllegalMove(ReversiError):
    """A disk cannot be placed at the requested position."""

    def __init__(self, message: str, position=None, disk=None):
        super().__init__(message)
        self.position = position
        self.disk = disk


class OccupiedCell(IllegalMove):
    """The target cell already holds a disk."""


class NoDiskToFlip(IllegalMove):
    """No run of opposite disks is sandwiched in any direction."""


class BoardLayoutError(ReversiError, ValueError):
    """A textual board layout could not be parsed."""


class LayoutLengthError(BoardLayoutError):
    pass


class LayoutCharacterError(BoardLayoutError):
    pass


class ScriptExhausted(ReversiError):
    """A scripted player was asked for more moves than it was given."""
