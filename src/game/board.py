"""
Board module for Reversi.
Handles cell storage, move validation and disk flipping.

Cells live in a flat numpy vector of 64 entries indexed ``8 * y + x``;
0 marks an empty cell, otherwise the entry holds ``Disk.value``.
"""
import logging
from itertools import islice
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .disk import Disk
from .errors import (
    LayoutCharacterError,
    LayoutLengthError,
    NoDiskToFlip,
    OccupiedCell,
    OffBoard,
)
from .position import SIZE, Direction, Position

logger = logging.getLogger(__name__)

EMPTY = 0
EMPTY_SYMBOL = '_'


class Board:
    """
    Represents the 8x8 Reversi board.
    The board holds no turn state; callers pass the mover's color explicitly.
    """

    SIZE = SIZE
    BOARD_SIZE = SIZE * SIZE

    def __init__(self):
        """Initialize an empty board."""
        self._cells = np.zeros(self.BOARD_SIZE, dtype=np.int8)

    @classmethod
    def initial(cls) -> 'Board':
        """Board with the standard four-disk starting position."""
        return cls.from_str(
            "________"
            "________"
            "________"
            "___ox___"
            "___xo___"
            "________"
            "________"
            "________"
        )

    @classmethod
    def from_str(cls, source: str) -> 'Board':
        """
        Build a board from a row-major textual layout.

        Args:
            source: 64 cell symbols, 'o' (Light), 'x' (Dark) or '_' (empty),
                with no separators. Characters past the 64th are ignored.

        Returns:
            The parsed board

        Raises:
            LayoutLengthError: fewer than 64 cells were supplied
            LayoutCharacterError: a symbol other than 'o', 'x' or '_' was found
        """
        board = cls()
        for index in range(cls.BOARD_SIZE):
            if index >= len(source):
                raise LayoutLengthError("the length of source is not enough")
            ch = source[index]
            if ch == EMPTY_SYMBOL:
                continue
            if ch not in ('o', 'x'):
                raise LayoutCharacterError("character must be 'x', 'o', or '_'")
            board._cells[index] = Disk.from_symbol(ch).value
        return board

    @classmethod
    def from_rows(cls, *rows: str) -> 'Board':
        """Build a board from eight row strings, top row first."""
        return cls.from_str(''.join(rows))

    @classmethod
    def from_disks(cls, disks: Iterable[Tuple[Position, Disk]]) -> 'Board':
        """Build a board by seeding the given (position, disk) pairs."""
        board = cls()
        for pos, disk in disks:
            board.set(pos, disk)
        return board

    def copy(self) -> 'Board':
        """Create an independent copy of the board."""
        new_board = Board()
        new_board._cells = self._cells.copy()
        return new_board

    def to_str(self) -> str:
        """Serialize to the 64-character layout accepted by `from_str`."""
        return ''.join(self._symbol_at(i) for i in range(self.BOARD_SIZE))

    # Cell access

    def get(self, pos: Position) -> Optional[Disk]:
        """Return the disk at `pos`, or None when the cell is empty."""
        value = int(self._cells[pos.index])
        return None if value == EMPTY else Disk(value)

    def set(self, pos: Position, disk: Disk) -> None:
        """Overwrite a cell without any legality check. For board setup only."""
        self._cells[pos.index] = disk.value

    def is_empty(self, pos: Position) -> bool:
        return bool(self._cells[pos.index] == EMPTY)

    def count_disks(self, disk: Disk) -> int:
        """Number of cells currently holding `disk`."""
        return int(np.count_nonzero(self._cells == disk.value))

    def count_empty(self) -> int:
        return int(np.count_nonzero(self._cells == EMPTY))

    def is_full(self) -> bool:
        return self.count_empty() == 0

    # Line scan

    def _line_indices(self, pos: Position, direction: Direction) -> Iterator[int]:
        """Yield the cell indices walked from `pos` (exclusive) to the edge."""
        for _ in range(SIZE - 1):
            try:
                pos = pos.step(direction)
            except OffBoard:
                return
            yield pos.index

    def _count_line(self, pos: Position, direction: Direction, disk: Disk) -> int:
        """
        Count opposite disks sandwiched between `pos` and a `disk` terminator.

        Returns 0 when the ray hits the edge or an empty cell first, or when
        the first neighbour already holds `disk`.
        """
        opponent = disk.reverse().value
        count = 0
        for index in self._line_indices(pos, direction):
            cell = self._cells[index]
            if cell == opponent:
                count += 1
            elif cell == disk.value:
                return count
            else:
                break
        return 0

    def _turn_line(self, pos: Position, direction: Direction, disk: Disk, count: int) -> None:
        """Flip the first `count` cells of the ray to `disk`."""
        for index in islice(self._line_indices(pos, direction), count):
            self._cells[index] = disk.value

    def _line_counts(self, pos: Position, disk: Disk) -> List[Tuple[Direction, int]]:
        """Per-direction flip counts for placing `disk` at `pos`."""
        if not self.is_empty(pos):
            raise OccupiedCell("Exists disks already in the position.", pos, disk)

        counts = [(d, self._count_line(pos, d, disk)) for d in Direction]
        if sum(c for _, c in counts) == 0:
            raise NoDiskToFlip("There is no disk to turn.", pos, disk)
        return counts

    # Queries

    def count_turn_disks(self, pos: Position, disk: Disk) -> int:
        """
        Number of disks that placing `disk` at `pos` would flip.

        Raises:
            OccupiedCell: `pos` already holds a disk
            NoDiskToFlip: no direction sandwiches an opposite run
        """
        return sum(c for _, c in self._line_counts(pos, disk))

    def flips_for(self, pos: Position, disk: Disk) -> List[Position]:
        """Positions that placing `disk` at `pos` would flip, grouped by direction."""
        flipped = []
        for direction, count in self._line_counts(pos, disk):
            for index in islice(self._line_indices(pos, direction), count):
                flipped.append(Position.from_index(index))
        return flipped

    def can_place(self, pos: Position, disk: Disk) -> bool:
        """Check if placing `disk` at `pos` is a legal move."""
        try:
            self.count_turn_disks(pos, disk)
        except (OccupiedCell, NoDiskToFlip):
            return False
        return True

    def legal_moves(self, disk: Disk) -> List[Position]:
        """All legal positions for `disk` in index order."""
        return [pos for pos in Position.all() if self.can_place(pos, disk)]

    def count_legal_movs(self, disk: Disk) -> int:
        return sum(1 for pos in Position.all() if self.can_place(pos, disk))

    def exists_legal_mov(self, disk: Disk) -> bool:
        return self.count_legal_movs(disk) > 0

    # Mutation

    def turn_disks(self, pos: Position, disk: Disk) -> int:
        """
        Flip every sandwiched run around `pos` to `disk`.

        The target cell itself is left untouched. All counting happens before
        any write, so a failing call leaves the board unchanged.

        Returns:
            Total number of flipped disks
        """
        counts = self._line_counts(pos, disk)
        for direction, count in counts:
            if count:
                self._turn_line(pos, direction, disk, count)
        return sum(c for _, c in counts)

    def place(self, pos: Position, disk: Disk) -> int:
        """
        Place `disk` at `pos` and flip the captured disks.

        Returns:
            Number of flipped disks

        Raises:
            OccupiedCell: `pos` already holds a disk
            NoDiskToFlip: the move captures nothing
        """
        try:
            flips = self.turn_disks(pos, disk)
        except (OccupiedCell, NoDiskToFlip) as e:
            logger.debug("Rejected %s disk at %s: %s", disk.label, pos, e)
            raise
        self._cells[pos.index] = disk.value
        return flips

    # Export

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            (8, 8) array indexed [y, x] with 0 (empty), 1 (Dark) or 2 (Light)
        """
        return self._cells.reshape(SIZE, SIZE).copy()

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current disk counts.

        Returns:
            Tuple of (dark_count, light_count)
        """
        return (self.count_disks(Disk.DARK), self.count_disks(Disk.LIGHT))

    def _symbol_at(self, index: int) -> str:
        value = int(self._cells[index])
        return EMPTY_SYMBOL if value == EMPTY else Disk(value).symbol

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Board.from_str({self.to_str()!r})"

    def __str__(self) -> str:
        """Human-readable board with one-based column and row labels."""
        lines = ["  x " + ' '.join(str(i + 1) for i in range(SIZE)), "y", ""]
        for y in range(SIZE):
            cells = ''.join(' ' + self._symbol_at(SIZE * y + x) for x in range(SIZE))
            lines.append(f"{y + 1}  {cells}")
        return "\n".join(lines)
