"""
Shared helpers for the Othello tests.
"""
import pytest

from othello import Board, GameConfig, OthelloGame


def make_board(*rows, size=8):
    """Build a board from the given top rows, padding the rest with empty cells."""
    padded = [row.ljust(size, '.') for row in rows]
    padded += ['.' * size] * (size - len(padded))
    return Board.from_rows(padded)


@pytest.fixture
def game():
    """A started standard game."""
    g = OthelloGame.from_config(GameConfig())
    g.start_game()
    return g
