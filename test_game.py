"""
Test script for the Reversi game loop.
"""
import pytest

from src.game import (
    Board,
    Disk,
    GameIO,
    GameResult,
    NoDiskToFlip,
    OccupiedCell,
    Position,
    ReversiGame,
    ScriptExhausted,
    ScriptedPlayer,
)

# Dark at (0,0) and Light at (1,0): Dark captures with (2,0), then nobody can move.
SHORT_GAME = "xo" + "_" * 62

# Adds Light (0,7) and Dark (1,7), so Light answers with (2,7) for a 3 : 3 draw.
DRAW_GAME = "xo" + "_" * 54 + "ox" + "_" * 6


class RecordingIO(GameIO):
    """Collects the hooks the game loop calls, in order."""

    def __init__(self):
        self.events = []

    def game_start(self, board):
        self.events.append(('game_start',))

    def skip_turn(self, disk):
        self.events.append(('skip_turn', disk))

    def start_turn(self, disk):
        self.events.append(('start_turn', disk))

    def before_move(self, board, disk):
        self.events.append(('before_move', disk))

    def after_illegal_move(self, pos, disk, error):
        self.events.append(('after_illegal_move', pos, type(error)))

    def after_move(self, pos, disk):
        self.events.append(('after_move', pos, disk))

    def after_update(self, board):
        self.events.append(('after_update',))

    def game_end(self, board, result):
        self.events.append(('game_end', result))


def test_game_result_winner():
    assert GameResult(10, 5).winner == Disk.DARK
    assert GameResult(5, 10).winner == Disk.LIGHT
    assert GameResult(7, 7).winner is None
    assert GameResult(7, 7).is_draw


def test_initial_game():
    """A default game starts from the opening with Dark to move."""
    game = ReversiGame(ScriptedPlayer([]), ScriptedPlayer([]))
    assert game.board == Board.initial()
    assert game.get_current_player() == Disk.DARK
    assert game.get_score() == (2, 2)
    assert not game.is_game_over()
    assert game.get_winner() is None


def test_first_move():
    """One step applies Dark's move, flips a disk and hands the turn to Light."""
    game = ReversiGame(ScriptedPlayer([Position(3, 2)]), ScriptedPlayer([]))
    assert game.step()
    assert game.board.get(Position(3, 3)) == Disk.DARK, "Should capture the Light disk"
    assert game.get_score() == (4, 1)
    assert game.get_current_player() == Disk.LIGHT
    assert game.get_move_history() == [
        {'player': Disk.DARK, 'move': Position(3, 2), 'flips': 1}
    ]


def test_short_game_runs_to_end():
    io = RecordingIO()
    game = ReversiGame(
        ScriptedPlayer([Position(2, 0)]),
        ScriptedPlayer([]),
        board=Board.from_str(SHORT_GAME),
        io=io,
    )
    result = game.run()

    assert result == GameResult(dark_disks=3, light_disks=0)
    assert game.is_game_over()
    assert game.get_winner() == Disk.DARK
    assert io.events == [
        ('game_start',),
        ('start_turn', Disk.DARK),
        ('before_move', Disk.DARK),
        ('after_move', Position(2, 0), Disk.DARK),
        ('after_update',),
        ('skip_turn', Disk.LIGHT),
        ('skip_turn', Disk.DARK),
        ('game_end', result),
    ]
    assert "Game over! Dark wins!" in str(game)


def test_illegal_moves_are_retried():
    """Occupied and non-capturing moves are reported and the player is asked again."""
    io = RecordingIO()
    dark = ScriptedPlayer([Position(0, 0), Position(5, 5), Position(2, 0)])
    game = ReversiGame(dark, ScriptedPlayer([]), board=Board.from_str(SHORT_GAME), io=io)
    game.run()

    illegal = [e for e in io.events if e[0] == 'after_illegal_move']
    assert illegal == [
        ('after_illegal_move', Position(0, 0), OccupiedCell),
        ('after_illegal_move', Position(5, 5), NoDiskToFlip),
    ]
    assert dark.remaining == 0
    assert len(game.move_history) == 1


def test_too_many_illegal_moves():
    dark = ScriptedPlayer([Position(0, 0)] * 3)
    game = ReversiGame(dark, ScriptedPlayer([]), board=Board.from_str(SHORT_GAME),
                       max_illegal_attempts=2)
    with pytest.raises(RuntimeError):
        game.run()
    assert game.board == Board.from_str(SHORT_GAME)


def test_script_exhausted():
    game = ReversiGame(ScriptedPlayer([]), ScriptedPlayer([]))
    with pytest.raises(ScriptExhausted):
        game.run()


def test_draw():
    dark = ScriptedPlayer([Position(2, 0)])
    light = ScriptedPlayer([Position(2, 7)])
    game = ReversiGame(dark, light, board=Board.from_str(DRAW_GAME))
    result = game.run()

    assert result == GameResult(3, 3)
    assert game.get_winner() is None
    assert "draw" in str(game)


def test_players_track_board():
    """Players get a snapshot at start and every placement afterwards."""
    dark = ScriptedPlayer([Position(2, 0)])
    light = ScriptedPlayer([Position(2, 7)])
    game = ReversiGame(dark, light, board=Board.from_str(DRAW_GAME))
    game.run()

    assert dark.board == game.board
    assert light.board == game.board
    assert dark.board is not game.board


def test_one_player_for_both_colors():
    """A player shared by both colors is notified once per placement."""
    shared = ScriptedPlayer([Position(2, 0), Position(2, 7)])
    game = ReversiGame(shared, shared, board=Board.from_str(DRAW_GAME))
    game.run()

    assert shared.board == game.board
    assert [h['player'] for h in game.move_history] == [Disk.DARK, Disk.LIGHT]


def test_full_board_ends_game():
    board = Board.from_str("x" * 63 + "o")
    game = ReversiGame(ScriptedPlayer([]), ScriptedPlayer([]), board=board)
    assert game.run() == GameResult(63, 1)
    assert game.skip_count == 0


def test_step_after_game_over():
    game = ReversiGame(ScriptedPlayer([Position(2, 0)]), ScriptedPlayer([]),
                       board=Board.from_str(SHORT_GAME))
    game.run()
    assert not game.step()
