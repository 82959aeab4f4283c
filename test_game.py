"""
Test script for the Othello game engine.
"""
import numpy as np
import pytest

from othello import (
    DiskColor,
    GameConfig,
    GameStatus,
    IllegalMoveError,
    InvalidStateError,
    OthelloGame,
    OutOfBoundsError,
    Player,
    Position,
    RejectReason,
)
from conftest import make_board

# Black moves (0,2) and leaves White without a reply while Black can still play (2,2)
STUCK_WHITE = ("BW......", "........", "BW......")


def new_game(**kwargs):
    return OthelloGame.from_config(GameConfig(**kwargs))


def assert_conserved(game):
    total = game.score(DiskColor.BLACK) + game.score(DiskColor.WHITE) + game.board.empty_count()
    assert total == game.size * game.size


def assert_sandwiched(before, position, flipped, color):
    """Every flipped disk lies on a straight run of opponent disks closed by our own disk."""
    own = 1 if color is DiskColor.BLACK else 2
    opp = 3 - own
    size = before.shape[0]
    flipped = set(flipped)
    for p in flipped:
        dr = (p.row > position.row) - (p.row < position.row)
        dc = (p.col > position.col) - (p.col < position.col)
        assert dr or dc
        # Must be on a straight or diagonal line from the placed disk
        assert dr == 0 or dc == 0 or abs(p.row - position.row) == abs(p.col - position.col)

        r, c = position.row + dr, position.col + dc
        seen = False
        while 0 <= r < size and 0 <= c < size and (r, c) in flipped:
            assert before[r, c] == opp
            seen = seen or (r, c) == tuple(p)
            r, c = r + dr, c + dc
        assert seen
        assert 0 <= r < size and 0 <= c < size
        assert before[r, c] == own


def test_initial_board(game):
    """Test the initial board setup."""
    board = game.get_board_state()

    assert board.shape == (8, 8), "Board should be 8x8"
    assert board[3][3] == 2  # White
    assert board[4][4] == 2  # White
    assert board[3][4] == 1  # Black
    assert board[4][3] == 1  # Black
    assert np.sum(board == 0) == 60, "Should have 60 empty squares initially"

    assert game.status() is GameStatus.IN_PROGRESS
    assert game.current_player().color is DiskColor.BLACK


def test_valid_moves(game):
    """Test legal move generation in the opening."""
    assert game.legal_moves() == [(2, 3), (3, 2), (4, 5), (5, 4)]
    white = game.player_by_color(DiskColor.WHITE)
    assert game.legal_moves(white) == [(2, 4), (3, 5), (4, 2), (5, 3)]


def test_make_move(game):
    """Test making a move and capturing a disk."""
    outcome = game.submit_move(2, 3)

    assert outcome.accepted
    assert outcome.position == Position(2, 3)
    assert outcome.flipped == (Position(3, 3),)
    assert game.board.cell_at(Position(3, 3)).color is DiskColor.BLACK
    assert game.score(DiskColor.BLACK) == 4
    assert game.score(DiskColor.WHITE) == 1
    assert game.current_player().color is DiskColor.WHITE
    assert outcome.next_player == game.current_player()


def test_flipped_disk_keeps_identity(game):
    disk = game.board.cell_at(Position(3, 3)).disk
    game.submit_move(2, 3)
    assert game.board.cell_at(Position(3, 3)).disk is disk
    assert disk.color is DiskColor.BLACK


@pytest.mark.parametrize("row, col, reason", [
    (3, 3, RejectReason.CELL_OCCUPIED),
    (0, 0, RejectReason.NO_FLIPS),
    (2, 4, RejectReason.NO_FLIPS),
    (8, 0, RejectReason.OUT_OF_BOUNDS),
    (-1, 3, RejectReason.OUT_OF_BOUNDS),
])
def test_rejected_moves_do_not_mutate(game, row, col, reason):
    before = game.get_board_state()
    player = game.current_player()

    outcome = game.submit_move(row, col)

    assert not outcome
    assert outcome.reason is reason
    assert np.array_equal(game.get_board_state(), before)
    assert game.current_player() == player
    assert game.status() is GameStatus.IN_PROGRESS


def test_rejection_maps_to_errors(game):
    with pytest.raises(IllegalMoveError):
        game.submit_move(0, 0).raise_for_rejection()
    with pytest.raises(OutOfBoundsError):
        game.submit_move(9, 9).raise_for_rejection()
    with pytest.raises(InvalidStateError):
        game.skip_turn().raise_for_rejection()
    assert game.submit_move(2, 3).raise_for_rejection().accepted


def test_skip_rejected_while_moves_available(game):
    outcome = game.skip_turn()
    assert not outcome.accepted
    assert outcome.reason is RejectReason.MOVES_AVAILABLE
    assert outcome.message == "moves still available"
    assert game.current_player().color is DiskColor.BLACK


def test_queries_are_idempotent(game):
    game.submit_move(2, 3)
    moves = game.legal_moves()
    scores = game.scores()
    for _ in range(3):
        assert game.legal_moves() == moves
        assert game.scores() == scores
        assert game.score(game.current_player()) == scores[DiskColor.WHITE]


def test_before_start():
    game = new_game()
    assert game.status() is GameStatus.NOT_STARTED
    assert game.legal_moves() == []
    assert game.score(DiskColor.BLACK) == 0
    assert game.winner() is None

    outcome = game.submit_move(2, 3)
    assert outcome.reason is RejectReason.NOT_IN_PROGRESS
    assert game.skip_turn().reason is RejectReason.NOT_IN_PROGRESS
    with pytest.raises(InvalidStateError):
        game.finish_game()


def test_start_twice_is_rejected(game):
    game.submit_move(2, 3)
    before = game.get_board_state()

    outcome = game.start_game()

    assert not outcome
    assert outcome.reason is RejectReason.ALREADY_STARTED
    assert outcome.status is GameStatus.IN_PROGRESS
    # Nothing was reinitialized
    assert np.array_equal(game.get_board_state(), before)
    assert game.score(DiskColor.BLACK) == 4
    assert game.current_player().color is DiskColor.WHITE
    with pytest.raises(InvalidStateError):
        outcome.raise_for_rejection()


def test_start_after_game_over_is_rejected():
    game = new_game()
    game.start_game(make_board("B"))
    outcome = game.start_game()
    assert outcome.reason is RejectReason.ALREADY_STARTED
    assert game.status() is GameStatus.WON


def test_start_with_wrong_board_size():
    with pytest.raises(ValueError):
        new_game().start_game(make_board(size=6))


def test_lockout_at_start_is_won():
    game = new_game()
    outcome = game.start_game(make_board("B"))

    assert outcome.status is GameStatus.WON
    assert game.is_game_over()
    assert game.winner() == game.player_by_color(DiskColor.BLACK)
    assert game.legal_moves() == []


def test_lockout_at_start_is_drawn():
    game = new_game()
    game.start_game(make_board("B", "", "", "", "", "", "", ".......W"))

    assert game.status() is GameStatus.DRAWN
    assert game.winner() is None


def test_final_move_ends_game():
    """A move that removes every opponent disk locks both sides out."""
    game = new_game()
    game.start_game(make_board("BW"))

    outcome = game.submit_move(0, 2)

    assert outcome.accepted
    assert outcome.status is GameStatus.WON
    assert game.score(DiskColor.BLACK) == 3
    assert game.score(DiskColor.WHITE) == 0
    assert game.winner().color is DiskColor.BLACK

    # Terminal states reject further commands
    assert game.submit_move(1, 1).reason is RejectReason.NOT_IN_PROGRESS
    assert game.skip_turn().reason is RejectReason.NOT_IN_PROGRESS
    with pytest.raises(InvalidStateError):
        game.finish_game()


def test_forced_skip():
    game = new_game()
    game.start_game(make_board(*STUCK_WHITE))

    outcome = game.submit_move(0, 2)
    assert outcome.accepted
    assert outcome.passed == ()
    assert game.status() is GameStatus.IN_PROGRESS
    assert game.current_player().color is DiskColor.WHITE
    assert game.legal_moves() == []

    skip = game.skip_turn()
    assert skip.accepted
    assert skip.next_player.color is DiskColor.BLACK
    assert game.current_player().color is DiskColor.BLACK
    assert game.legal_moves() == [(2, 2)]

    assert game.submit_move(2, 2).status is GameStatus.WON
    assert game.winner().color is DiskColor.BLACK


def test_auto_pass():
    game = new_game(auto_pass=True)
    game.start_game(make_board(*STUCK_WHITE))

    outcome = game.submit_move(0, 2)

    assert outcome.passed == (game.player_by_color(DiskColor.WHITE),)
    assert outcome.next_player.color is DiskColor.BLACK
    assert game.current_player().color is DiskColor.BLACK
    assert game.status() is GameStatus.IN_PROGRESS


def test_white_moves_first():
    game = new_game(first_color="white")
    game.start_game()
    assert game.current_player().color is DiskColor.WHITE
    assert game.legal_moves() == [(2, 4), (3, 5), (4, 2), (5, 3)]


def test_smaller_board():
    game = new_game(board_size=6)
    game.start_game()
    board = game.get_board_state()
    assert board[2][2] == 2 and board[3][3] == 2
    assert board[2][3] == 1 and board[3][2] == 1
    assert game.legal_moves() == [(1, 2), (2, 1), (3, 4), (4, 3)]


def test_full_game_invariants():
    """Play a whole game taking the first legal move, checking invariants on the way."""
    game = new_game()
    game.start_game()

    for _ in range(200):
        if game.is_game_over():
            break
        moves = game.legal_moves()
        if not moves:
            player = game.current_player()
            outcome = game.skip_turn()
            assert outcome.accepted
            assert game.is_game_over() or game.current_player() != player
        else:
            before = game.get_board_state()
            color = game.current_player().color
            outcome = game.submit_move(*moves[0])
            assert outcome.accepted
            assert outcome.flipped
            assert_sandwiched(before, outcome.position, outcome.flipped, color)
        assert_conserved(game)

    assert game.is_game_over()
    black, white = game.score(DiskColor.BLACK), game.score(DiskColor.WHITE)
    if black == white:
        assert game.status() is GameStatus.DRAWN
        assert game.winner() is None
    else:
        assert game.status() is GameStatus.WON
        expected = DiskColor.BLACK if black > white else DiskColor.WHITE
        assert game.winner().color is expected


def test_player_validation():
    black = Player("Ann", DiskColor.BLACK)
    with pytest.raises(ValueError):
        OthelloGame([black])
    with pytest.raises(ValueError):
        OthelloGame([black, Player("Bo", DiskColor.BLACK)])
    with pytest.raises(ValueError):
        OthelloGame([black, Player("Bo", DiskColor.WHITE)], GameConfig(board_size=7))


def test_string_representation(game):
    text = str(game)
    assert "W B" in text
    assert "Score - Black: 2, White: 2" in text


if __name__ == "__main__":
    pytest.main([__file__])
