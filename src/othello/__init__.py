"""
Othello rules engine.
This package contains the board model, move rules and game state machine.
"""

from .board import Board, Cell, Disk, DiskColor, Position
from .config import Config, GameConfig, LoggingConfig, get_default_config
from .errors import IllegalMoveError, InvalidStateError, OthelloError, OutOfBoundsError
from .game import GameStatus, OthelloGame, Player
from .outcome import Outcome, RejectReason
from .rules import DIRECTIONS

__all__ = [
    'Board', 'Cell', 'Disk', 'DiskColor', 'Position',
    'Config', 'GameConfig', 'LoggingConfig', 'get_default_config',
    'IllegalMoveError', 'InvalidStateError', 'OthelloError', 'OutOfBoundsError',
    'GameStatus', 'OthelloGame', 'Player',
    'Outcome', 'RejectReason',
    'DIRECTIONS',
]
