"""
Reversi game module.
Handles turn sequencing, player notification and game end detection.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .board import Board
from .disk import Disk
from .errors import IllegalMove
from .player import Player
from .position import Position

logger = logging.getLogger(__name__)

DEFAULT_MAX_ILLEGAL_ATTEMPTS = 100


@dataclass(frozen=True)
class GameResult:
    """Final disk counts. The color with more disks wins; equal counts draw."""
    dark_disks: int
    light_disks: int

    @property
    def winner(self) -> Optional[Disk]:
        if self.dark_disks > self.light_disks:
            return Disk.DARK
        if self.light_disks > self.dark_disks:
            return Disk.LIGHT
        return None

    @property
    def is_draw(self) -> bool:
        return self.winner is None


class GameIO:
    """
    Presentation hooks called by the game loop.
    Every hook is a no-op here; subclasses override what they display.
    """

    def game_start(self, board: Board) -> None:
        pass

    def skip_turn(self, disk: Disk) -> None:
        pass

    def start_turn(self, disk: Disk) -> None:
        pass

    def before_move(self, board: Board, disk: Disk) -> None:
        pass

    def after_illegal_move(self, pos: Position, disk: Disk, error: IllegalMove) -> None:
        pass

    def after_move(self, pos: Position, disk: Disk) -> None:
        pass

    def after_update(self, board: Board) -> None:
        pass

    def game_end(self, board: Board, result: GameResult) -> None:
        pass


class ReversiGame:
    """
    Main game class that alternates turns between two players.
    Dark moves first; a color without a legal move passes.
    """

    def __init__(self, player_dark: Player, player_light: Player,
                 board: Optional[Board] = None, io: Optional[GameIO] = None,
                 max_illegal_attempts: int = DEFAULT_MAX_ILLEGAL_ATTEMPTS):
        """
        Initialize a new game.

        Args:
            player_dark: Player supplying Dark's moves
            player_light: Player supplying Light's moves
            board: Starting board (default: the standard opening)
            io: Presentation hooks (default: silent)
            max_illegal_attempts: Illegal moves tolerated per turn before giving up
        """
        self.board = board if board is not None else Board.initial()
        self.players: Dict[Disk, Player] = {Disk.DARK: player_dark, Disk.LIGHT: player_light}
        self.io = io if io is not None else GameIO()
        self.max_illegal_attempts = max_illegal_attempts
        self.current_player = Disk.DARK
        self.skip_count = 0
        self.started = False
        self.game_over = False
        self.move_history: List[Dict[str, Any]] = []

    def _distinct_players(self) -> List[Player]:
        distinct = []
        for player in self.players.values():
            if all(player is not p for p in distinct):
                distinct.append(player)
        return distinct

    def start(self) -> None:
        """Announce the game and hand each player a snapshot of the board."""
        self.io.game_start(self.board)
        for player in self._distinct_players():
            player.init(self.board.copy())
        self.started = True

    def ends_game(self) -> bool:
        """The game ends when both colors pass in a row or no cell is left."""
        return self.skip_count >= 2 or self.board.is_full()

    def step(self) -> bool:
        """
        Advance the game by one turn.

        Returns:
            bool: False once the game is over, True otherwise
        """
        if not self.started:
            self.start()
        if self.game_over:
            return False
        if self.ends_game():
            self.game_over = True
            return False

        disk = self.current_player
        if self.board.exists_legal_mov(disk):
            self.io.start_turn(disk)
            self.play_turn()
            self.skip_count = 0
        else:
            logger.debug("%s has no legal move and passes", disk.label)
            self.io.skip_turn(disk)
            self.skip_count += 1

        self.current_player = disk.reverse()
        return True

    def play_turn(self) -> int:
        """
        Ask the current player for moves until one is legal, then apply it.

        Returns:
            Number of flipped disks
        """
        disk = self.current_player
        player = self.players[disk]
        self.io.before_move(self.board, disk)

        for _ in range(self.max_illegal_attempts):
            pos = player.move()
            try:
                flips = self.board.place(pos, disk)
            except IllegalMove as e:
                logger.info("Illegal move by %s at %s: %s", disk.label, pos.to_human(), e)
                self.io.after_illegal_move(pos, disk, e)
                continue

            logger.debug("%s placed at %s flipping %d", disk.label, pos.to_human(), flips)
            self.io.after_move(pos, disk)
            for p in self._distinct_players():
                p.update(pos, disk)
            self.move_history.append({'player': disk, 'move': pos, 'flips': flips})
            self.io.after_update(self.board)
            return flips

        raise RuntimeError(
            f"{disk.label} made {self.max_illegal_attempts} illegal moves in a row"
        )

    def run(self) -> GameResult:
        """Play the game to the end and return the result."""
        while self.step():
            pass
        result = self.result()
        logger.info("Game over: Dark %d - Light %d", result.dark_disks, result.light_disks)
        self.io.game_end(self.board, result)
        return result

    def result(self) -> GameResult:
        dark, light = self.board.get_score()
        return GameResult(dark_disks=dark, light_disks=light)

    def is_game_over(self) -> bool:
        return self.game_over

    def get_winner(self) -> Optional[Disk]:
        """
        Get the winner of the game.

        Returns:
            Disk.DARK, Disk.LIGHT, or None for a draw or an unfinished game
        """
        return self.result().winner if self.game_over else None

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (dark, light).

        Returns:
            Tuple of (dark_score, light_score)
        """
        return self.board.get_score()

    def get_current_player(self) -> Disk:
        return self.current_player

    def get_move_history(self) -> List[Dict[str, Any]]:
        return self.move_history.copy()

    def __str__(self) -> str:
        dark, light = self.get_score()
        lines = [str(self.board), f"Score - Dark: {dark}, Light: {light}"]
        if self.game_over:
            winner = self.get_winner()
            lines.append("Game over! It's a draw!" if winner is None else f"Game over! {winner.label} wins!")
        else:
            lines.append(f"Current player: {self.current_player.label}")
        return "\n".join(lines)
