"""
Console presentation and move input for Reversi.
"""
from typing import Callable, Optional

from ..game.board import Board
from ..game.disk import Disk
from ..game.errors import IllegalMove
from ..game.game import GameIO, GameResult
from ..game.position import SIZE, Position


class ConsoleIO(GameIO):
    """
    Prints game events and reads positions from the terminal.
    Coordinates shown to and read from the user are one-based.
    """

    def __init__(self, input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        """
        Args:
            input_fn: Called with a prompt, returns one line of user text
            output_fn: Called with each line to display
        """
        self.input_fn = input_fn
        self.output_fn = output_fn

    def game_start(self, board: Board) -> None:
        self.output_fn("Game Start")
        self.output_fn(str(board))

    def skip_turn(self, disk: Disk) -> None:
        self.output_fn(f"There is no place to put a {disk.label} disk.")

    def start_turn(self, disk: Disk) -> None:
        self.output_fn(f"{disk.label} turn:")

    def before_move(self, board: Board, disk: Disk) -> None:
        self.output_fn(f"{disk.label} move")

    def after_illegal_move(self, pos: Position, disk: Disk, error: IllegalMove) -> None:
        self.output_fn(f"A disk cannot be placed on {pos.to_human()}: {error}")

    def after_move(self, pos: Position, disk: Disk) -> None:
        self.output_fn(f"A {disk.label} disk was placed on {pos.to_human()}")

    def after_update(self, board: Board) -> None:
        self.output_fn(str(board))

    def game_end(self, board: Board, result: GameResult) -> None:
        self.output_fn("Result")
        self.output_fn(str(board))
        self.output_fn("Dark vs Light")
        self.output_fn(f"{result.dark_disks} : {result.light_disks}")
        winner = result.winner
        self.output_fn("Draw" if winner is None else f"{winner.label} WIN")

    def read_num(self, prompt: str) -> Optional[int]:
        """Read one integer, or report the parse failure and return None."""
        text = self.input_fn(prompt)
        try:
            return int(text.strip())
        except ValueError:
            self.output_fn("parse error")
            return None

    def input_num(self, prompt: str) -> int:
        """Prompt until the user enters a number from 1 to 8."""
        while True:
            num = self.read_num(prompt)
            if num is None:
                continue
            if 1 <= num <= SIZE:
                return num
            self.output_fn(f"{num} is not valid.")

    def input_position(self) -> Position:
        col = self.input_num("input column >> ")
        row = self.input_num("input row >> ")
        return Position(col - 1, row - 1)
