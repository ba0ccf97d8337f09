"""
Position module for Reversi.
Validated board coordinates and the eight scan directions.
"""
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

from .errors import InvalidCoordinate, OffBoard

SIZE = 8


class Direction(Enum):
    """Unit vectors in board coordinates, where "up" increases y."""

    UP = (0, 1)
    UP_RIGHT = (1, 1)
    RIGHT = (1, 0)
    DOWN_RIGHT = (1, -1)
    DOWN = (0, -1)
    DOWN_LEFT = (-1, -1)
    LEFT = (-1, 0)
    UP_LEFT = (-1, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class Position:
    """
    A zero-based (column, row) coordinate on the board.

    Construction validates both coordinates, so a Position instance is
    always inside the grid.
    """
    x: int
    y: int

    def __post_init__(self):
        for axis in ('x', 'y'):
            value = getattr(self, axis)
            if not isinstance(value, numbers.Integral) or isinstance(value, bool):
                raise InvalidCoordinate(f"{axis} must be an integer, got {type(value).__name__}")
            if not 0 <= value < SIZE:
                raise InvalidCoordinate(f"{axis} must be in 0 to {SIZE - 1}")
            object.__setattr__(self, axis, int(value))

    @classmethod
    def create(cls, x: int, y: int) -> 'Position':
        """Build a Position, raising InvalidCoordinate when out of range."""
        return cls(x, y)

    @classmethod
    def from_index(cls, index: int) -> 'Position':
        """Inverse of `index`."""
        if not 0 <= index < SIZE * SIZE:
            raise InvalidCoordinate(f"index must be in 0 to {SIZE * SIZE - 1}")
        y, x = divmod(index, SIZE)
        return cls(x, y)

    @classmethod
    def all(cls) -> Iterator['Position']:
        """Iterate over every cell in index order."""
        for index in range(SIZE * SIZE):
            yield cls.from_index(index)

    @classmethod
    def parse(cls, text: str) -> 'Position':
        """
        Parse one-based user input such as "4,3" or "4 3".

        Args:
            text: column and row, one-based, separated by a comma or spaces

        Returns:
            The zero-based Position
        """
        sep = ',' if ',' in text else None
        parts = [t for t in text.strip().split(sep) if t.strip() != '']
        if len(parts) != 2:
            raise InvalidCoordinate(f"Could not parse position: {text!r}")
        try:
            col, row = (int(p) for p in parts)
        except ValueError:
            raise InvalidCoordinate(f"Could not parse position: {text!r}") from None
        return cls(col - 1, row - 1)

    @property
    def index(self) -> int:
        """Row-major index into the 64-cell backing array."""
        return SIZE * self.y + self.x

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def step(self, direction: Direction) -> 'Position':
        """
        Move one cell in the given direction.

        Raises:
            OffBoard: the neighbouring cell is outside the grid
        """
        try:
            return Position(self.x + direction.dx, self.y + direction.dy)
        except InvalidCoordinate as e:
            raise OffBoard(str(e)) from None

    def to_human(self) -> str:
        """One-based rendering for user-facing text."""
        return f"({self.x + 1}, {self.y + 1})"

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
