"""
Disk module for Reversi.
Defines the two disk colors that can occupy a board cell.
"""
from enum import Enum


class Disk(Enum):
    """Color of a disk placed on the board. Dark moves first."""

    DARK = 1
    LIGHT = 2

    def reverse(self) -> 'Disk':
        """Return the opposite color."""
        return Disk.LIGHT if self is Disk.DARK else Disk.DARK

    @property
    def symbol(self) -> str:
        """Single-character symbol used in layouts and board display."""
        return 'x' if self is Disk.DARK else 'o'

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Disk':
        """
        Parse a layout symbol.

        Args:
            symbol: 'x' for Dark or 'o' for Light

        Returns:
            The matching Disk
        """
        if symbol == 'x':
            return cls.DARK
        if symbol == 'o':
            return cls.LIGHT
        raise ValueError(f"Unknown disk symbol: {symbol!r}")

    def __str__(self) -> str:
        return self.symbol
